"""
Donation ledger business logic.

Rules:
- netid, donationType and amount are all required (falsy counts as missing)
- donationType is "points" or "flexPass"
- the balance credit and the ledger row are written together or not at all
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import InvalidRequestError, StudentNotFoundError

from . import repository, schemas

DONATION_TYPES = frozenset(repository.BALANCE_COLUMNS)

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_donation(payload: schemas.DonationRequest) -> tuple[str, str, int]:
    netid = payload.netid
    donation_type = payload.donation_type
    raw_amount = payload.amount
    if not netid or not donation_type or not raw_amount:
        raise InvalidRequestError("Missing required fields")
    # str check first: unhashable values never reach the set lookup.
    if not isinstance(donation_type, str) or donation_type not in DONATION_TYPES:
        raise InvalidRequestError("Invalid donation type")
    if isinstance(netid, int) and not isinstance(netid, bool):
        netid = str(netid)
    if not isinstance(netid, str):
        raise InvalidRequestError("Invalid netid")
    amount = _as_int(raw_amount)
    if amount is None or amount < 0:
        raise InvalidRequestError("Invalid donation amount")
    return netid, donation_type, amount


async def process_donation(db: Database, payload: schemas.DonationRequest) -> dict[str, Any]:
    try:
        netid, donation_type, amount = validate_donation(payload)
    except InvalidRequestError as exc:
        logger.info("donation_rejected netid=%s reason=%s", payload.netid, exc.message)
        raise

    row = await repository.record_donation(
        db,
        netid=netid,
        donation_type=donation_type,
        amount=amount,
    )
    if row is None:
        logger.info("donation_rejected netid=%s reason=student_not_found", netid)
        raise StudentNotFoundError()

    logger.info("donation_processed netid=%s type=%s amount=%s", netid, donation_type, amount)
    return row


async def donation_history(db: Database, netid: str) -> list[dict[str, Any]]:
    return await repository.list_transactions(db, netid)
