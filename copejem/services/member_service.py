"""Member Service: member writes with denormalization sync and the access gate.

Invariants:
    - company_id and company_name are written together in the same update
    - Inline company creation goes through the company repository's create path;
      the new company's id/name are what the member gets
    - Company-then-member is two independent writes: a failing member write
      leaves the new company in place (no rollback)
    - New members require a password; an omitted/empty password on update
      keeps the stored one
    - Password and admin-flag changes are gated by core/enforce_access

Design Decisions:
    - The gate runs before any write, so a denied request never creates a company
    - company_name is never accepted from callers; it is always derived
"""

import logging

from copejem.core.denormalize import (
    company_link_fields, default_avatar_url, is_generated_avatar,
)
from copejem.core.domain_types import MemberId, Patch
from copejem.core.enforce_access import check_member_write, editable_member_fields
from copejem.core.errors import ResourceNotFoundError, ValidationFailedError
from copejem.core.session_context import SessionContext
from copejem.schemas.company import Company
from copejem.schemas.member import Member
from copejem.services.entity_repository import EntityRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Business rules for creating and editing members."""

    def __init__(
        self,
        members: EntityRepository[Member],
        companies: EntityRepository[Company],
    ):
        self.members = members
        self.companies = companies

    async def create_member(
        self,
        fields: Patch,
        ctx: SessionContext | None = None,
        new_company: Patch | None = None,
    ) -> Member:
        fields = dict(fields)
        if not fields.get("password"):
            raise ValidationFailedError(
                "Password is required for new members", "password",
            )
        self._reject_derived_fields(fields)
        error = check_member_write(ctx, None, fields)
        if error:
            raise error

        fields.update(await self._company_link(fields, new_company))
        if not fields.get("avatar_url") and fields.get("name"):
            fields["avatar_url"] = default_avatar_url(fields["name"])
        return await self.members.create(fields)

    async def update_member(
        self,
        member_id: MemberId,
        patch: Patch,
        ctx: SessionContext | None = None,
        new_company: Patch | None = None,
    ) -> Member:
        existing = await self.members.get_or_raise(member_id)
        patch = dict(patch)
        if not patch.get("password"):
            patch.pop("password", None)
        self._reject_derived_fields(patch)
        error = check_member_write(ctx, existing, patch)
        if error:
            raise error

        patch.update(await self._company_link(patch, new_company))
        renamed = "name" in patch and patch["name"] != existing.name
        if renamed and "avatar_url" not in patch and is_generated_avatar(existing.avatar_url):
            patch["avatar_url"] = default_avatar_url(patch["name"])
        return await self.members.update(member_id, patch)

    async def delete_member(self, member_id: MemberId) -> None:
        await self.members.delete(member_id)

    def editable_fields(
        self, ctx: SessionContext | None, member_id: MemberId | None,
    ) -> frozenset[str]:
        return editable_member_fields(ctx, member_id)

    @staticmethod
    def _reject_derived_fields(fields: dict) -> None:
        if "company_name" in fields:
            raise ValidationFailedError(
                "company_name is derived from company_id", "company_name",
            )

    async def _company_link(self, fields: dict, new_company: Patch | None) -> dict:
        """Resolve the member's company link fields for this write, if it changes."""
        if new_company is not None:
            company = await self.companies.create(new_company)
            logger.info(
                f"Created company {company.id} inline from member form",
                extra={"entity_kind": "companies", "entity_id": company.id},
            )
            return company_link_fields(company)
        if "company_id" not in fields:
            return {}
        company_id = fields["company_id"]
        if not company_id:
            return company_link_fields(None)
        company = await self.companies.get_by_id(company_id)
        if company is None:
            raise ResourceNotFoundError(self.companies.kind.value, company_id)
        return company_link_fields(company)
