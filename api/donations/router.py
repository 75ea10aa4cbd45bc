"""
Donation API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database
from core.dependencies import get_db

from . import schemas, service

router = APIRouter()


@router.post("/donations", status_code=status.HTTP_201_CREATED)
async def process_donation(
    request: schemas.DonationRequest,
    db: Database = Depends(get_db),
) -> dict:
    await service.process_donation(db, request)
    return {"message": "Donation successful"}


@router.get("/donations/{netid}")
async def donation_history(netid: str, db: Database = Depends(get_db)) -> list[dict]:
    return await service.donation_history(db, netid)
