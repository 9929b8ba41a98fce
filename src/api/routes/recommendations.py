"""Recommendation API routes."""

from uuid import UUID

from fastapi import APIRouter, status

from src.api.deps import RecommendationServiceDep
from src.api.middleware.error_handler import unwrap
from src.schemas.recommendation import (
    RecommendationCreate,
    RecommendationResponse,
    RecommendationUpdate,
)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post(
    "",
    response_model=RecommendationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a recommendation",
    description="Creates a recommendation. It stays pending until approved.",
)
async def create_recommendation(
    data: RecommendationCreate,
    service: RecommendationServiceDep,
) -> RecommendationResponse:
    """Submit a recommendation for a user."""
    recommendation = unwrap(await service.create_recommendation(data))
    return RecommendationResponse(**recommendation)


@router.patch(
    "/{recommendation_id}",
    response_model=RecommendationResponse,
    summary="Update a recommendation",
    description="Applies a partial update. Moderation is a status change to approved or rejected.",
)
async def update_recommendation(
    recommendation_id: UUID,
    data: RecommendationUpdate,
    service: RecommendationServiceDep,
) -> RecommendationResponse:
    """Update a recommendation.

    Raises:
        NotFoundError: 404 if the recommendation does not exist.
    """
    recommendation = unwrap(await service.update_recommendation(recommendation_id, data))
    return RecommendationResponse(**recommendation)
