"""
Donation ledger persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

# donationType -> students column credited by it.
BALANCE_COLUMNS: dict[str, str] = {
    "points": "points",
    "flexPass": "flex_passes",
}


async def record_donation(
    db: Database,
    *,
    netid: str,
    donation_type: str,
    amount: int,
) -> dict[str, Any] | None:
    """
    Credit a student's balance and log the donation in a single transaction.

    Returns the inserted transaction row, or None when no student has `netid`
    (nothing is written in that case).
    """
    column = BALANCE_COLUMNS.get(donation_type)
    if column is None:
        raise ValueError(f"Unknown donation type: {donation_type!r}")

    async with db.transaction() as conn:
        credited = await conn.fetchrow(
            f"""
            UPDATE students
            SET {column} = {column} + $1
            WHERE netid = $2
            RETURNING peoplesoft
            """,
            amount,
            netid,
        )
        if credited is None:
            return None

        row = await conn.fetchrow(
            """
            INSERT INTO transactions (netid, transaction_type, amount)
            VALUES ($1, $2, $3)
            RETURNING netid, transaction_type, amount, transaction_date
            """,
            netid,
            donation_type,
            amount,
        )
        if row is None:
            raise RuntimeError("Failed to insert transaction.")
        return dict(row)


async def list_transactions(db: Database, netid: str) -> list[dict[str, Any]]:
    """
    Donation history for a netid, most recent first.
    """
    return await db.fetch_all(
        """
        SELECT transaction_type, amount, transaction_date
        FROM transactions
        WHERE netid = $1
        ORDER BY transaction_date DESC
        """,
        netid,
    )
