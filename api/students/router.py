"""
Student API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database
from core.dependencies import get_db

from . import schemas, service

router = APIRouter()


@router.get("/students")
async def list_students(db: Database = Depends(get_db)) -> list[dict]:
    return await service.list_students(db)


@router.get("/students/{peoplesoft}")
async def get_student(peoplesoft: int, db: Database = Depends(get_db)) -> dict | None:
    return await service.get_student(db, peoplesoft)


@router.post("/students", status_code=status.HTTP_201_CREATED)
async def add_student(
    request: schemas.StudentCreateRequest,
    db: Database = Depends(get_db),
) -> dict:
    peoplesoft = await service.add_student(db, request)
    return {"message": "Student added successfully", "id": peoplesoft}


@router.put("/students/{peoplesoft}")
async def update_student(
    peoplesoft: int,
    request: schemas.StudentUpdateRequest,
    db: Database = Depends(get_db),
) -> dict:
    await service.update_student(db, peoplesoft, request)
    return {"message": "Student updated successfully"}


@router.delete("/students/{peoplesoft}")
async def delete_student(peoplesoft: int, db: Database = Depends(get_db)) -> dict:
    await service.delete_student(db, peoplesoft)
    return {"message": "Student deleted successfully"}
