"""
Bridge to Firebase Authentication.

The frontend performs the actual sign-in with Firebase and hands the
backend an ID token. The bridge verifies tokens with the Firebase Admin
SDK, keeps track of the signed-in identity and tells subscribers when it
changes.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from firebase_admin import auth

from meditrack.models.user import UserIdentity

log = logging.getLogger(__name__)

IdentityListener = Callable[[Optional[UserIdentity]], None]


class AuthBridge:
    def __init__(self, identity: Optional[UserIdentity] = None):
        self._identity = identity
        self._listeners: List[IdentityListener] = []

    @staticmethod
    def identity_from_token(id_token: str) -> UserIdentity:
        """Verify a Firebase ID token; raises on an invalid or revoked token."""
        decoded = auth.verify_id_token(id_token, check_revoked=True)
        return UserIdentity.from_claims(decoded)

    def get_current_identity(self) -> Optional[UserIdentity]:
        return self._identity

    def on_identity_changed(self, callback: IdentityListener) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _set_identity(self, identity: Optional[UserIdentity]):
        self._identity = identity
        for listener in list(self._listeners):
            listener(identity)

    def sign_in(self, id_token: str) -> UserIdentity:
        identity = self.identity_from_token(id_token)
        log.info("Signed in %s", identity.id)
        self._set_identity(identity)
        return identity

    def sign_out(self) -> None:
        identity = self._identity
        if identity is None:
            return

        try:
            # Invalidate every session of this user, not just the current one
            auth.revoke_refresh_tokens(identity.id)
        except Exception as exc:
            log.error("Could not revoke tokens for %s: %s", identity.id, exc)

        log.info("Signed out %s", identity.id)
        self._set_identity(None)
