"""
Firebase admin initialization and helpers.

The web frontend signs clinicians in with Firebase Authentication and
sends the resulting ID token with every request. The backend verifies
those tokens with the Firebase Admin SDK and reads/writes the journal
collections in Firestore on the clinician's behalf.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore

from meditrack.core.config import settings

log = logging.getLogger(__name__)

# Global references to avoid re-initialization
_firebase_app = None
db = None


def init_firebase():
    """
    Initialize Firebase Admin SDK if not already initialized.

    Priority:
    1. FIREBASE_CREDENTIALS environment variable / .env entry
    2. Local dev file: meditrack/core/firebase_key.json
    """
    global _firebase_app, db

    # Uvicorn reload imports the app twice
    if firebase_admin._apps:
        if db is None:
            db = firestore.client()
        return

    cred_path = os.environ.get("FIREBASE_CREDENTIALS", settings.FIREBASE_CREDENTIALS)

    if not os.path.exists(cred_path):
        raise RuntimeError(
            f"Firebase credentials not found at: {cred_path}\n"
            "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
        )

    cred = credentials.Certificate(cred_path)
    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    _firebase_app = firebase_admin.initialize_app(cred, options)

    db = firestore.client()

    log.info("Firebase Admin initialized (credentials: %s)", cred_path)


def get_db():
    """Return the Firestore client, initializing Firebase on first use."""
    if db is None:
        init_firebase()
    return db
