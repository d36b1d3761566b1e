"""Authentication-related routes.

The frontend performs authentication with Firebase; the backend verifies
the resulting ID tokens, reports who is signed in and can revoke a
user's sessions on sign-out.
"""
from fastapi import APIRouter, Body, Depends, HTTPException

from meditrack.api.deps import get_current_user
from meditrack.models.base import JournalModel
from meditrack.services.auth_bridge import AuthBridge

router = APIRouter(prefix="/auth", tags=["auth"])


class SessionIn(JournalModel):
    id_token: str


@router.post("/session")
def sign_in(payload: SessionIn = Body(...)):
    bridge = AuthBridge()
    try:
        identity = bridge.sign_in(payload.id_token)
    except Exception as exc:
        raise HTTPException(status_code=401, detail="Invalid ID token") from exc
    return {"message": "Signed in", "user": identity.to_document()}


@router.post("/signout")
def sign_out(user=Depends(get_current_user)):
    AuthBridge(user).sign_out()
    return {"message": "Signed out"}


@router.get("/me")
def get_me(user=Depends(get_current_user)):
    return user.to_document()
