"""Project Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from src.models.project import ProjectStatus


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID = Field(description="Owning user ID")
    title: str = Field(..., min_length=1, max_length=255, description="Project title")
    description: str | None = Field(default=None, description="Short description")
    problem_statement: str | None = Field(default=None, description="Problem the project addressed")
    solution: str | None = Field(default=None, description="Approach taken")
    results: str | None = Field(default=None, description="Measured outcome")
    technologies_used: list[str] = Field(default_factory=list, description="Technologies and tools")
    company: str | None = Field(default=None, max_length=255, description="Company the work was done for")
    duration_months: int | None = Field(default=None, ge=0, description="Duration in months")
    project_url: str | None = Field(default=None, description="Public project URL")
    image_urls: list[str] = Field(default_factory=list, description="Image references")
    status: ProjectStatus = Field(default=ProjectStatus.DRAFT, description="Publication status")
    featured: bool = Field(default=False, description="Promote on the landing page")


class ProjectUpdate(BaseModel):
    """Schema for updating a project.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(from_attributes=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    problem_statement: str | None = None
    solution: str | None = None
    results: str | None = None
    technologies_used: list[str] | None = None
    company: str | None = Field(default=None, max_length=255)
    duration_months: int | None = Field(default=None, ge=0)
    project_url: str | None = None
    image_urls: list[str] | None = None
    status: ProjectStatus | None = None
    featured: bool | None = None

    @field_validator("title", "status", "featured")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class ProjectResponse(BaseModel):
    """Schema for project API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Project unique identifier")
    user_id: UUID = Field(description="Owning user ID")
    title: str = Field(description="Project title")
    description: str | None = None
    problem_statement: str | None = None
    solution: str | None = None
    results: str | None = None
    technologies_used: list[str] = Field(default_factory=list)
    company: str | None = None
    duration_months: int | None = None
    project_url: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    status: ProjectStatus = Field(description="Publication status")
    featured: bool = Field(default=False)
    created_at: datetime = Field(description="Project creation timestamp")
    updated_at: datetime | None = None

    @field_validator("technologies_used", "image_urls", mode="before")
    @classmethod
    def null_list_is_empty(cls, value: list[str] | None) -> list[str]:
        return [] if value is None else value

    @field_validator("featured", mode="before")
    @classmethod
    def null_featured_is_false(cls, value: bool | None) -> bool:
        return False if value is None else value


class ProjectOwnerSummary(BaseModel):
    """Owner info embedded in featured project responses."""

    model_config = ConfigDict(from_attributes=True)

    full_name: str | None = Field(default=None, description="Owner display name")
    title: str | None = Field(default=None, description="Owner professional title")
    avatar_url: str | None = Field(default=None, description="Owner avatar URL")


class FeaturedProjectResponse(ProjectResponse):
    """Featured project with its owner and a link target for the owner's profile."""

    owner: ProjectOwnerSummary | None = Field(default=None, description="Owning user's public fields")
    profile_slug: str | None = Field(default=None, description="Route parameter of the owner's profile page")
