"""
Error kinds raised by feature services.

Each kind carries the HTTP status it maps to; `main.py` translates them into
JSON responses. Anything that is not a `ServiceError` is treated as an
internal failure (500).
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class StudentNotFoundError(NotFoundError):
    def __init__(self, message: str = "Student not found") -> None:
        super().__init__(message)
