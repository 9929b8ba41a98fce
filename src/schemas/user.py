"""User Pydantic schemas for API request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class UserBase(BaseModel):
    """Public profile fields shared across schemas."""

    full_name: str | None = Field(default=None, description="Display name")
    title: str | None = Field(default=None, description="Professional title")
    bio: str | None = Field(default=None, description="Short biography")
    location: str | None = Field(default=None, description="Location shown on the profile")
    years_experience: int = Field(default=0, ge=0, description="Years of professional experience")
    linkedin_url: str | None = Field(default=None, description="LinkedIn profile URL")
    portfolio_url: str | None = Field(default=None, description="External portfolio URL")
    avatar_url: str | None = Field(default=None, description="URL to user's avatar image")

    @field_validator("years_experience", mode="before")
    @classmethod
    def null_experience_is_zero(cls, value: int | None) -> int:
        return 0 if value is None else value


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional for partial updates.
    """

    model_config = ConfigDict(from_attributes=True)

    username: str | None = Field(default=None, min_length=1, max_length=64, description="New username")
    full_name: str | None = Field(default=None, min_length=1, max_length=255, description="New display name")
    title: str | None = Field(default=None, max_length=255, description="New professional title")
    bio: str | None = Field(default=None, description="New biography")
    location: str | None = Field(default=None, max_length=255, description="New location")
    years_experience: int | None = Field(default=None, ge=0, description="New years of experience")
    linkedin_url: str | None = Field(default=None, description="New LinkedIn URL")
    portfolio_url: str | None = Field(default=None, description="New portfolio URL")
    avatar_url: str | None = Field(default=None, description="New avatar URL")

    @field_validator("full_name", "years_experience")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class UserResponse(UserBase):
    """Schema for user API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="User unique identifier")
    email: str = Field(description="User email address")
    username: str | None = Field(default=None, description="Explicit username, when set")
    created_at: datetime = Field(description="User creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")
