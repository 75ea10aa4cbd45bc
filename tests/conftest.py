from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from core.dependencies import get_db
from donations import repository as donations_repository
from main import app
from students import repository as students_repository


class InMemoryLedger:
    """
    Stand-in for the two repositories, backed by dicts instead of Postgres.
    """

    def __init__(self) -> None:
        self.students: dict[int, dict] = {}
        self.transactions: list[dict] = []
        self._next_id = 1000
        self._clock = datetime(2024, 9, 1, 12, 0, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    def _by_netid(self, netid: str) -> dict | None:
        for student in self.students.values():
            if student["netid"] == netid:
                return student
        return None

    async def list_students(self, db) -> list[dict]:
        return [dict(s) for s in self.students.values()]

    async def get_student(self, db, peoplesoft: int) -> dict | None:
        student = self.students.get(peoplesoft)
        return dict(student) if student is not None else None

    async def insert_student(self, db, *, netid, name, points, flex_passes) -> int:
        if self._by_netid(netid) is not None:
            raise RuntimeError('duplicate key value violates unique constraint "students_netid_key"')
        peoplesoft = self._next_id
        self._next_id += 1
        self.students[peoplesoft] = {
            "peoplesoft": peoplesoft,
            "netid": netid,
            "name": name,
            "points": points,
            "flex_passes": flex_passes,
        }
        return peoplesoft

    async def update_student(self, db, peoplesoft: int, *, points, flex_passes) -> int:
        student = self.students.get(peoplesoft)
        if student is None:
            return 0
        student["points"] = points
        student["flex_passes"] = flex_passes
        return 1

    async def delete_student(self, db, peoplesoft: int) -> int:
        return 1 if self.students.pop(peoplesoft, None) is not None else 0

    async def record_donation(self, db, *, netid, donation_type, amount) -> dict | None:
        student = self._by_netid(netid)
        if student is None:
            return None
        column = donations_repository.BALANCE_COLUMNS[donation_type]
        student[column] += amount
        row = {
            "netid": netid,
            "transaction_type": donation_type,
            "amount": amount,
            "transaction_date": self._tick(),
        }
        self.transactions.append(row)
        return dict(row)

    async def list_transactions(self, db, netid: str) -> list[dict]:
        rows = [
            {k: t[k] for k in ("transaction_type", "amount", "transaction_date")}
            for t in self.transactions
            if t["netid"] == netid
        ]
        return sorted(rows, key=lambda r: r["transaction_date"], reverse=True)


@pytest.fixture
def ledger(monkeypatch: pytest.MonkeyPatch) -> InMemoryLedger:
    store = InMemoryLedger()
    for name in ("list_students", "get_student", "insert_student", "update_student", "delete_student"):
        monkeypatch.setattr(students_repository, name, getattr(store, name))
    for name in ("record_donation", "list_transactions"):
        monkeypatch.setattr(donations_repository, name, getattr(store, name))
    return store


@pytest.fixture
def client(ledger: InMemoryLedger):
    # The repositories are patched, so the handle itself is never used.
    app.dependency_overrides[get_db] = lambda: object()
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
