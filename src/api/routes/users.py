"""User API routes."""

from uuid import UUID

from fastapi import APIRouter, Query

from src.api.deps import ProjectServiceDep, RecommendationServiceDep, UserServiceDep
from src.api.middleware.error_handler import unwrap
from src.models.project import ProjectStatus
from src.models.recommendation import RecommendationStatus
from src.schemas.project import ProjectResponse
from src.schemas.recommendation import RecommendationResponse
from src.schemas.user import UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/by-email",
    response_model=UserResponse,
    summary="Get user by email",
    description="Returns the user with the given email address.",
)
async def get_user_by_email(
    service: UserServiceDep,
    email: str = Query(..., min_length=3, description="Exact email address"),
) -> UserResponse:
    """Get a user by email.

    Raises:
        NotFoundError: 404 if no user has this email.
    """
    user = unwrap(await service.get_user_by_email(email))
    return UserResponse(**user)


@router.get(
    "/by-username/{username}",
    response_model=UserResponse,
    summary="Get user by username",
    description="Returns the user whose email is the username at the configured placeholder domain.",
)
async def get_user_by_username(username: str, service: UserServiceDep) -> UserResponse:
    """Get a user by email-derived username.

    Raises:
        NotFoundError: 404 if no user matches.
    """
    user = unwrap(await service.get_user_by_username(username))
    return UserResponse(**user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
    description="Returns a user by ID.",
)
async def get_user(user_id: UUID, service: UserServiceDep) -> UserResponse:
    """Get a user by ID.

    Args:
        user_id: The user's UUID.
        service: User data access service.

    Returns:
        UserResponse: The user.

    Raises:
        NotFoundError: 404 if the user does not exist.
    """
    user = unwrap(await service.get_user(user_id))
    return UserResponse(**user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Applies a partial update to a user's profile fields.",
)
async def update_user(user_id: UUID, data: UserUpdate, service: UserServiceDep) -> UserResponse:
    """Update a user.

    Raises:
        NotFoundError: 404 if the user does not exist.
    """
    user = unwrap(await service.update_user(user_id, data))
    return UserResponse(**user)


@router.get(
    "/{user_id}/projects",
    response_model=list[ProjectResponse],
    summary="List user's projects",
    description="Returns the user's projects, newest first. Defaults to published projects.",
)
async def list_user_projects(
    user_id: UUID,
    service: ProjectServiceDep,
    status: ProjectStatus | None = Query(default=ProjectStatus.PUBLISHED, description="Status filter"),
) -> list[ProjectResponse]:
    """List a user's projects."""
    rows = unwrap(await service.get_user_projects(user_id, status=status))
    return [ProjectResponse(**row) for row in rows]


@router.get(
    "/{user_id}/recommendations",
    response_model=list[RecommendationResponse],
    summary="List user's recommendations",
    description="Returns recommendations for the user, newest first. Defaults to approved recommendations.",
)
async def list_user_recommendations(
    user_id: UUID,
    service: RecommendationServiceDep,
    status: RecommendationStatus | None = Query(default=RecommendationStatus.APPROVED, description="Status filter"),
    include_project: bool = Query(default=False, description="Embed the linked project's id and title"),
) -> list[RecommendationResponse]:
    """List a user's recommendations."""
    rows = unwrap(
        await service.get_user_recommendations(user_id, status=status, include_project=include_project)
    )
    return [RecommendationResponse(**row) for row in rows]
