"""Company Service: company writes that keep member copies of the name in sync.

Invariants:
    - Companies are created and edited, never deleted through this service
    - A rename rewrites company_name on every member referencing the company;
      each member write is independent (non-atomic)
"""

import logging

from copejem.core.apply_patch import changed_fields
from copejem.core.domain_types import CompanyId, Patch
from copejem.schemas.company import Company
from copejem.schemas.member import Member
from copejem.services.entity_repository import EntityRepository

logger = logging.getLogger(__name__)


class CompanyService:

    def __init__(
        self,
        companies: EntityRepository[Company],
        members: EntityRepository[Member],
    ):
        self.companies = companies
        self.members = members

    async def create_company(self, fields: Patch) -> Company:
        return await self.companies.create(fields)

    async def update_company(self, company_id: CompanyId, patch: Patch) -> Company:
        before = await self.companies.get_or_raise(company_id)
        updated = await self.companies.update(company_id, patch)
        if "name" in changed_fields(before, updated):
            synced = await self._propagate_name(updated)
            logger.info(
                f"Company {company_id} renamed; synced {synced} member(s)",
                extra={"entity_kind": "companies", "entity_id": company_id},
            )
        return updated

    async def _propagate_name(self, company: Company) -> int:
        synced = 0
        for member in await self.members.get_all():
            if member.company_id == company.id and member.company_name != company.name:
                await self.members.update(member.id, {"company_name": company.name})
                synced += 1
        return synced
