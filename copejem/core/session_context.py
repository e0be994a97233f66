"""Session Context: the authenticated member, threaded explicitly to rule checks.

Invariants:
    - Built once at login from the stored Member; never refreshed, never expires
    - The marker form never contains the credential
    - from_marker(to_marker(ctx)) reproduces user and timestamp

Design Decisions:
    - Frozen dataclass passed as an argument instead of ambient global state
"""

from dataclasses import dataclass
from datetime import datetime

from copejem.core.domain_types import MemberId
from copejem.schemas.member import Member


@dataclass(frozen=True)
class SessionContext:
    """Who is acting, as established at login."""
    user: Member
    authenticated_at: datetime

    @property
    def user_id(self) -> MemberId:
        return MemberId(self.user.id)

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin

    def to_marker(self) -> dict:
        """Serialized session marker for the presentation layer."""
        return {
            "isAuthenticated": True,
            "authenticatedAt": self.authenticated_at.isoformat(),
            "currentUser": self.user.model_dump(
                mode="json", by_alias=True, exclude={"password"},
            ),
        }

    @classmethod
    def from_marker(cls, marker: dict) -> "SessionContext | None":
        """Rebuild a context; None when the marker is not authenticated."""
        if not marker.get("isAuthenticated") or "currentUser" not in marker:
            return None
        return cls(
            user=Member.model_validate(marker["currentUser"]),
            authenticated_at=datetime.fromisoformat(marker["authenticatedAt"]),
        )
