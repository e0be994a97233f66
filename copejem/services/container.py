"""Service Container: wires repositories and rule services onto one backend.

Invariants:
    - All services share the same RecordStores, clock and id factory
    - Nothing here knows which backend is active
"""

from dataclasses import dataclass
from typing import Callable

from copejem.core.domain_types import EntityKind
from copejem.infrastructure.store_factory import RecordStores
from copejem.schemas.company import Company
from copejem.schemas.member import Member
from copejem.services.auth_service import AuthService
from copejem.services.company_service import CompanyService
from copejem.services.entity_repository import (
    Clock, EntityRepository, new_record_id, utc_now,
)
from copejem.services.member_service import MemberService
from copejem.services.project_repository import ProjectRepository


@dataclass
class Services:
    companies: CompanyService
    members: MemberService
    projects: ProjectRepository
    auth: AuthService
    stores: RecordStores
    clock: Clock


def build_services(
    stores: RecordStores,
    clock: Clock = utc_now,
    id_factory: Callable[[], str] = new_record_id,
) -> Services:
    company_repo = EntityRepository(
        stores.companies, Company, EntityKind.COMPANY, clock, id_factory,
    )
    member_repo = EntityRepository(
        stores.members, Member, EntityKind.MEMBER, clock, id_factory,
    )
    return Services(
        companies=CompanyService(company_repo, member_repo),
        members=MemberService(member_repo, company_repo),
        projects=ProjectRepository(stores.projects, member_repo, clock, id_factory),
        auth=AuthService(member_repo, clock),
        stores=stores,
        clock=clock,
    )
