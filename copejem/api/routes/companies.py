"""Company Routes: list/search, read, create, and edit companies."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from copejem.api.dependencies import get_services, get_session_context
from copejem.core.domain_types import CompanyId
from copejem.core.errors import ResourceNotFoundError
from copejem.core.filter_records import filter_companies, list_industries
from copejem.schemas.company import Company, CompanyCreate, CompanyUpdate
from copejem.services.container import Services

router = APIRouter(
    prefix="/api/v1/companies", tags=["companies"],
    dependencies=[Depends(get_session_context)],
)


async def get_company_or_404(company_id: str, services: Services) -> Company:
    company = await services.companies.companies.get_by_id(company_id)
    if company is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=ResourceNotFoundError("companies", company_id).to_response(),
        )
    return company


@router.get("")
async def list_companies(
    search: str = Query("", max_length=200),
    industry: str | None = Query(None),
    services: Services = Depends(get_services),
):
    companies = await services.companies.companies.get_all()
    return {
        "companies": [
            c.model_dump(mode="json")
            for c in filter_companies(companies, search, industry)
        ],
        "industries": list_industries(companies),
    }


@router.get("/{company_id}")
async def get_company(company_id: str, services: Services = Depends(get_services)):
    company = await get_company_or_404(company_id, services)
    return company.model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    body: CompanyCreate, services: Services = Depends(get_services),
):
    company = await services.companies.create_company(body.model_dump())
    return company.model_dump(mode="json")


@router.patch("/{company_id}")
async def update_company(
    company_id: str, body: CompanyUpdate, services: Services = Depends(get_services),
):
    company = await services.companies.update_company(
        CompanyId(company_id), body.model_dump(exclude_unset=True),
    )
    return company.model_dump(mode="json")
