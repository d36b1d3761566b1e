"""
API dependencies (Firebase auth verification, record store, view errors).
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from meditrack.core.firebase import get_db
from meditrack.models.user import UserIdentity
from meditrack.services.auth_bridge import AuthBridge
from meditrack.services.record_store import RecordStore
from meditrack.views.base import BaseView, ViewState

log = logging.getLogger(__name__)

security = HTTPBearer(auto_error=True)
optional_security = HTTPBearer(auto_error=False)


def _verify(id_token: str) -> UserIdentity:
    try:
        return AuthBridge.identity_from_token(id_token)
    except Exception as exc:
        log.info("Rejected ID token: %s", exc)
        raise HTTPException(
            status_code=401,
            detail="Invalid ID token",
        ) from exc


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UserIdentity:
    """
    Verify Firebase ID token from Authorization header.

    Expects:
        Authorization: Bearer <id_token>
    """
    return _verify(credentials.credentials)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[UserIdentity]:
    if credentials is None:
        return None
    return _verify(credentials.credentials)


def get_store() -> RecordStore:
    return RecordStore(get_db())


def raise_for_view(view: BaseView):
    """Turn a failed view operation into the matching HTTP error."""
    if view.state is not ViewState.ERROR:
        return
    status = view.error.status_code if view.error else 500
    detail = view.notification.message if view.notification else "Request failed"
    raise HTTPException(status_code=status, detail=detail)

