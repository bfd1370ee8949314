from fastapi import HTTPException


class ExpenseError(HTTPException):
    """Base class of all domain errors. Each subclass maps to one HTTP status."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(status_code=type(self).status_code, detail=detail)


class NotFoundError(ExpenseError):
    status_code = 404


class ForbiddenError(ExpenseError):
    status_code = 403


class ConflictError(ExpenseError):
    status_code = 409


class LockedError(ExpenseError):
    """The resource is locked, most likely because its pot is archived."""

    status_code = 423


class InternalError(ExpenseError):
    status_code = 500
