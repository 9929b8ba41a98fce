"""Recommendation model type definitions for database operations."""

from datetime import datetime
from enum import Enum
from typing import TypedDict
from uuid import UUID


class RecommendationStatus(str, Enum):
    """Moderation status of a recommendation."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Recommendation(TypedDict):
    """Recommendations table row representation.

    Belongs to one user and optionally references one of their projects.
    """

    id: UUID
    user_id: UUID
    project_id: UUID | None
    recommender_name: str
    recommender_title: str | None
    recommender_company: str | None
    recommender_linkedin: str | None
    recommendation_text: str
    skills_highlighted: list[str] | None
    status: RecommendationStatus
    created_at: datetime
    updated_at: datetime | None
