"""
Pydantic schemas for donation endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DonationRequest(BaseModel):
    # Raw values on purpose: presence and type are checked by the service so
    # a falsy or mistyped field maps to the ledger's own 400 messages.
    netid: Any = None
    donation_type: Any = Field(default=None, alias="donationType")
    amount: Any = None
