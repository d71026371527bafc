# ruff: noqa
from fastapi import HTTPException, status
from fastcrud.exceptions.http_exceptions import NotFoundException


class DuplicateValueException(HTTPException):
    """A unique value (e.g. a username) is already stored."""

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
