"""Failure taxonomy shared by the record store, the views and the API.

Validation failures never reach this module: pydantic rejects them before
any store call. Everything the store raises is a ``StoreError`` tagged with
one of ``STORE_ERROR_KINDS``.
"""
from __future__ import annotations

from google.api_core import exceptions as gexc

PERMISSION_DENIED = "permission-denied"
UNAVAILABLE = "unavailable"
NOT_FOUND = "not-found"
UNKNOWN = "unknown"

STORE_ERROR_KINDS = (PERMISSION_DENIED, UNAVAILABLE, NOT_FOUND, UNKNOWN)

HTTP_STATUS = {
    PERMISSION_DENIED: 403,
    NOT_FOUND: 404,
    UNAVAILABLE: 503,
    UNKNOWN: 500,
}


class StoreError(Exception):
    """A failed record store call."""

    def __init__(self, kind: str, message: str):
        if kind not in STORE_ERROR_KINDS:
            kind = UNKNOWN
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return HTTP_STATUS[self.kind]

    def user_message(self) -> str:
        if self.kind == PERMISSION_DENIED:
            return f"Permission denied: {self.message}"
        if self.kind == UNAVAILABLE:
            return "The journal database is unreachable, try again later"
        if self.kind == NOT_FOUND:
            return self.message
        return f"Unexpected error: {self.message}"


def from_exception(exc: Exception) -> StoreError:
    """Map a Firestore / google-api-core exception onto the taxonomy."""
    if isinstance(exc, StoreError):
        return exc
    if isinstance(exc, (gexc.PermissionDenied, gexc.Unauthenticated, gexc.Forbidden)):
        return StoreError(PERMISSION_DENIED, getattr(exc, "message", None) or str(exc))
    if isinstance(exc, gexc.NotFound):
        return StoreError(NOT_FOUND, getattr(exc, "message", None) or str(exc))
    if isinstance(exc, (gexc.ServiceUnavailable, gexc.DeadlineExceeded, gexc.RetryError)):
        return StoreError(UNAVAILABLE, str(exc))
    return StoreError(UNKNOWN, str(exc))
