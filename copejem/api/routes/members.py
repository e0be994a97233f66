"""Member Routes: list/filter, read, create (with inline company), edit, delete.

Invariants:
    - Responses never include the password
    - The acting SessionContext is passed to every write for the access gate
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from copejem.api.dependencies import get_services, get_session_context
from copejem.core.domain_types import MemberId, MemberStatus
from copejem.core.errors import ResourceNotFoundError
from copejem.core.filter_records import filter_members
from copejem.core.session_context import SessionContext
from copejem.schemas.member import MemberCreate, MemberUpdate
from copejem.services.container import Services

router = APIRouter(prefix="/api/v1/members", tags=["members"])


@router.get("")
async def list_members(
    search: str = Query("", max_length=200),
    company_id: str | None = Query(None),
    status_filter: MemberStatus | None = Query(None, alias="status"),
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    members = await services.members.members.get_all()
    selected = filter_members(
        members, search, company_id,
        status_filter.value if status_filter else None,
    )
    return {"members": [m.public() for m in selected]}


@router.get("/editable-fields")
async def editable_fields(
    member_id: str | None = Query(None),
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    """Which member form fields this session may edit (member_id None = new member)."""
    return {"fields": sorted(services.members.editable_fields(
        ctx, MemberId(member_id) if member_id else None,
    ))}


@router.get("/{member_id}")
async def get_member(
    member_id: str,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    member = await services.members.members.get_by_id(member_id)
    if member is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=ResourceNotFoundError("members", member_id).to_response(),
        )
    return member.public()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_member(
    body: MemberCreate,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    new_company = body.new_company.model_dump() if body.new_company else None
    member = await services.members.create_member(
        body.model_dump(exclude={"new_company"}), ctx, new_company,
    )
    return member.public()


@router.patch("/{member_id}")
async def update_member(
    member_id: str,
    body: MemberUpdate,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    patch = body.model_dump(exclude_unset=True, exclude={"new_company"})
    new_company = body.new_company.model_dump() if body.new_company else None
    member = await services.members.update_member(
        MemberId(member_id), patch, ctx, new_company,
    )
    return member.public()


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    member_id: str,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    await services.members.delete_member(MemberId(member_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
