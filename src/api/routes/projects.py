"""Project API routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from src.api.deps import AppSettings, IdentityResolverDep, ProjectServiceDep
from src.api.middleware.error_handler import unwrap
from src.schemas.project import (
    FeaturedProjectResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])

MAX_FEATURED_LIMIT = 50


@router.get(
    "/featured",
    response_model=list[FeaturedProjectResponse],
    summary="List featured projects",
    description="Returns published, featured projects with their owners, newest first.",
)
async def list_featured_projects(
    service: ProjectServiceDep,
    resolver: IdentityResolverDep,
    settings: AppSettings,
    limit: int | None = Query(default=None, ge=1, le=MAX_FEATURED_LIMIT, description="Maximum number of projects"),
) -> list[FeaturedProjectResponse]:
    """List featured projects for the landing page.

    Each project carries ``profile_slug``, the route parameter of its owner's
    profile page under the configured identity strategy.

    Args:
        service: Project data access service.
        resolver: Active identity resolver.
        settings: Application settings.
        limit: Maximum number of projects. Defaults to the configured limit.

    Returns:
        list[FeaturedProjectResponse]: Featured projects.
    """
    rows = unwrap(
        await service.get_featured_projects(
            limit=limit or settings.featured_projects_limit,
            owner_fields=resolver.owner_fields,
        )
    )

    featured = []
    for row in rows:
        owner = row.get("users")
        featured.append(
            FeaturedProjectResponse(
                **row,
                owner=owner,
                profile_slug=resolver.public_identifier(owner) if owner else None,
            )
        )
    return featured


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Get project",
    description="Returns a project by ID, whatever its status.",
)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ProjectResponse:
    """Get a project by ID.

    Raises:
        NotFoundError: 404 if the project does not exist.
    """
    project = unwrap(await service.get_project(project_id))
    return ProjectResponse(**project)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    description="Creates a project. New projects are drafts unless a status is given.",
)
async def create_project(data: ProjectCreate, service: ProjectServiceDep) -> ProjectResponse:
    """Create a project.

    Args:
        data: Project creation data.
        service: Project data access service.

    Returns:
        ProjectResponse: The persisted project.
    """
    project = unwrap(await service.create_project(data))
    return ProjectResponse(**project)


@router.patch(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    description="Applies a partial update, including publishing and featuring.",
)
async def update_project(project_id: UUID, data: ProjectUpdate, service: ProjectServiceDep) -> ProjectResponse:
    """Update a project.

    Raises:
        NotFoundError: 404 if the project does not exist.
    """
    project = unwrap(await service.update_project(project_id, data))
    return ProjectResponse(**project)
