"""
Pydantic schemas for student endpoints.

Fields are optional on purpose: the database schema is the only validator for
student rows.
"""

from __future__ import annotations

from pydantic import BaseModel


class StudentCreateRequest(BaseModel):
    netid: str | None = None
    name: str | None = None
    points: int | None = None
    flex_passes: int | None = None


class StudentUpdateRequest(BaseModel):
    points: int | None = None
    flex_passes: int | None = None
