"""
Student persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database

_STUDENT_COLUMNS = "peoplesoft, netid, name, points, flex_passes"


async def list_students(db: Database) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_STUDENT_COLUMNS}
        FROM students
        """
    )


async def get_student(db: Database, peoplesoft: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_STUDENT_COLUMNS}
        FROM students
        WHERE peoplesoft = $1
        """,
        peoplesoft,
    )


async def insert_student(
    db: Database,
    *,
    netid: str | None,
    name: str | None,
    points: int | None,
    flex_passes: int | None,
) -> int:
    """
    Insert a student and return its generated peoplesoft id.
    """
    row = await db.fetch_one(
        """
        INSERT INTO students (netid, name, points, flex_passes)
        VALUES ($1, $2, $3, $4)
        RETURNING peoplesoft
        """,
        netid,
        name,
        points,
        flex_passes,
    )
    if row is None or "peoplesoft" not in row:
        raise RuntimeError("Failed to insert student.")
    return int(row["peoplesoft"])


async def update_student(
    db: Database,
    peoplesoft: int,
    *,
    points: int | None,
    flex_passes: int | None,
) -> int:
    """
    Overwrite a student's balances. Returns the affected row count.
    """
    return await db.execute(
        """
        UPDATE students
        SET points = $2,
            flex_passes = $3
        WHERE peoplesoft = $1
        """,
        peoplesoft,
        points,
        flex_passes,
    )


async def delete_student(db: Database, peoplesoft: int) -> int:
    return await db.execute(
        """
        DELETE FROM students
        WHERE peoplesoft = $1
        """,
        peoplesoft,
    )
