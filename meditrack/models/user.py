"""Signed-in identity, read from verified Firebase ID token claims."""
from typing import Optional

from meditrack.models.base import JournalModel


class UserIdentity(JournalModel):
    id: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: dict) -> "UserIdentity":
        return cls(
            id=claims.get("uid") or claims.get("user_id") or claims["sub"],
            display_name=claims.get("name"),
            email=claims.get("email"),
            avatar=claims.get("picture"),
        )

    @property
    def initial(self) -> str:
        name = (self.display_name or "").strip()
        return name[0].upper() if name else "D"
