"""
Student business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import StudentNotFoundError

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_students(db: Database) -> list[dict[str, Any]]:
    return await repository.list_students(db)


async def get_student(db: Database, peoplesoft: int) -> dict[str, Any] | None:
    # No 404 here: callers get None and decide.
    return await repository.get_student(db, peoplesoft)


async def add_student(db: Database, payload: schemas.StudentCreateRequest) -> int:
    peoplesoft = await repository.insert_student(
        db,
        netid=payload.netid,
        name=payload.name,
        points=payload.points,
        flex_passes=payload.flex_passes,
    )
    logger.info("student_added peoplesoft=%s netid=%s", peoplesoft, payload.netid)
    return peoplesoft


async def update_student(
    db: Database,
    peoplesoft: int,
    payload: schemas.StudentUpdateRequest,
) -> None:
    affected = await repository.update_student(
        db,
        peoplesoft,
        points=payload.points,
        flex_passes=payload.flex_passes,
    )
    if not affected:
        logger.info("student_update_missed peoplesoft=%s", peoplesoft)
        raise StudentNotFoundError()
    logger.info("student_updated peoplesoft=%s", peoplesoft)


async def delete_student(db: Database, peoplesoft: int) -> None:
    affected = await repository.delete_student(db, peoplesoft)
    if not affected:
        logger.info("student_delete_missed peoplesoft=%s", peoplesoft)
        raise StudentNotFoundError()
    logger.info("student_deleted peoplesoft=%s", peoplesoft)
