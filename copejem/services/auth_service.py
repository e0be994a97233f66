"""Auth Service: credential login producing an explicit SessionContext.

Invariants:
    - authenticate() scans all members and delegates matching to core/authenticate
    - A failed login returns None; it never raises
    - No lockout, rate limiting or hashing at this layer
"""

import logging

from copejem.core.authenticate import find_member_by_credentials
from copejem.core.session_context import SessionContext
from copejem.schemas.member import Member
from copejem.services.entity_repository import Clock, EntityRepository, utc_now

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, members: EntityRepository[Member], clock: Clock = utc_now):
        self.members = members
        self._clock = clock

    async def authenticate(self, identifier: str, secret: str) -> Member | None:
        members = await self.members.get_all()
        return find_member_by_credentials(members, identifier, secret)

    async def login(self, identifier: str, secret: str) -> SessionContext | None:
        """Authenticate and build the session context, or None on no match."""
        member = await self.authenticate(identifier, secret)
        if member is None:
            logger.warning("Login rejected: no credential match")
            return None
        logger.info(
            f"Member {member.id} logged in",
            extra={"actor_id": member.id},
        )
        return SessionContext(user=member, authenticated_at=self._clock())
