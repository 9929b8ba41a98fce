"""Recommendation Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.models.recommendation import RecommendationStatus


class RecommendationCreate(BaseModel):
    """Schema for submitting a recommendation.

    New recommendations start as pending until moderated.
    """

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID = Field(description="Recommended user ID")
    project_id: UUID | None = Field(default=None, description="Linked project ID")
    recommender_name: str = Field(..., min_length=1, max_length=255, description="Recommender's name")
    recommender_title: str | None = Field(default=None, max_length=255)
    recommender_company: str | None = Field(default=None, max_length=255)
    recommender_linkedin: str | None = Field(default=None)
    recommendation_text: str = Field(..., min_length=1, description="Testimonial text")
    skills_highlighted: list[str] = Field(default_factory=list, description="Skills called out")
    status: RecommendationStatus = Field(default=RecommendationStatus.PENDING)


class RecommendationUpdate(BaseModel):
    """Schema for updating a recommendation, including its moderation status."""

    model_config = ConfigDict(from_attributes=True)

    project_id: UUID | None = None
    recommender_name: str | None = Field(default=None, min_length=1, max_length=255)
    recommender_title: str | None = Field(default=None, max_length=255)
    recommender_company: str | None = Field(default=None, max_length=255)
    recommender_linkedin: str | None = None
    recommendation_text: str | None = Field(default=None, min_length=1)
    skills_highlighted: list[str] | None = None
    status: RecommendationStatus | None = None

    @field_validator("recommender_name", "recommendation_text", "status")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class LinkedProject(BaseModel):
    """Linked project fields embedded in a recommendation."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str


class RecommendationResponse(BaseModel):
    """Schema for recommendation API responses."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID = Field(description="Recommendation unique identifier")
    user_id: UUID = Field(description="Recommended user ID")
    project_id: UUID | None = None
    recommender_name: str
    recommender_title: str | None = None
    recommender_company: str | None = None
    recommender_linkedin: str | None = None
    recommendation_text: str
    skills_highlighted: list[str] = Field(default_factory=list)
    status: RecommendationStatus
    created_at: datetime
    updated_at: datetime | None = None
    project: LinkedProject | None = Field(
        default=None,
        validation_alias="projects",
        description="Linked project, when requested",
    )

    @field_validator("skills_highlighted", mode="before")
    @classmethod
    def null_skills_is_empty(cls, value: list[str] | None) -> list[str]:
        return [] if value is None else value
