# app/exceptions.py
from typing import Any, Optional


class StoreError(Exception):
    """Raised by a store accessor when the underlying document store fails"""


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict:
        """Convert to the JSON error body"""
        response = {"error": self.message, "statusCode": self.status_code}
        if self.details:
            response["details"] = self.details
        return response


class BadRequestError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500


def validation_details(errors) -> list[dict]:
    # pydantic error ctx may hold exception instances, keep only what serializes
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
        for error in errors
    ]
