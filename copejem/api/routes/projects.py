"""Project Routes: list by year/search, read, create, edit, delete.

Invariants:
    - DELETE of a past-year project answers 409 (ImmutableRecordError) and
      changes nothing
    - PATCH of a past-year project succeeds; the repository emits the audit log
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from copejem.api.dependencies import get_services, get_session_context
from copejem.core.errors import ResourceNotFoundError
from copejem.core.filter_records import filter_projects, project_years
from copejem.core.session_context import SessionContext
from copejem.schemas.project import ProjectCreate, ProjectUpdate
from copejem.services.container import Services

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("")
async def list_projects(
    year: int | None = Query(None),
    search: str = Query("", max_length=200),
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    projects = await services.projects.get_all()
    return {
        "projects": [
            p.model_dump(mode="json") for p in filter_projects(projects, year, search)
        ],
    }


@router.get("/years")
async def list_project_years(
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    current_year = services.clock().year
    projects = await services.projects.get_all()
    return {"years": project_years(projects, current_year), "current_year": current_year}


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    project = await services.projects.get_by_id(project_id)
    if project is None:
        raise HTTPException(
            status.HTTP_404_NOT_FOUND,
            detail=ResourceNotFoundError("projects", project_id).to_response(),
        )
    return project.model_dump(mode="json")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    project = await services.projects.create(body.model_dump(), ctx)
    return project.model_dump(mode="json")


@router.patch("/{project_id}")
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    project = await services.projects.update(
        project_id, body.model_dump(exclude_unset=True), ctx,
    )
    return project.model_dump(mode="json")


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    services: Services = Depends(get_services),
    ctx: SessionContext = Depends(get_session_context),
):
    await services.projects.delete(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
