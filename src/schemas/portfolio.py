"""Profile page view model schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.project import ProjectResponse
from src.schemas.recommendation import RecommendationResponse
from src.schemas.user import UserResponse


class PageState(str, Enum):
    """Lifecycle of a single profile page load."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ProfilePage(BaseModel):
    """Assembled profile view model.

    Only the ready state carries data. not_found and error pages never
    expose a partially loaded profile.
    """

    model_config = ConfigDict(from_attributes=True)

    state: PageState = Field(description="Page load state")
    user: UserResponse | None = Field(default=None, description="Profile owner")
    projects: list[ProjectResponse] = Field(default_factory=list, description="Published projects, newest first")
    recommendations: list[RecommendationResponse] = Field(
        default_factory=list, description="Approved recommendations, newest first"
    )
    message: str | None = Field(default=None, description="Human-readable message for non-ready states")

    @classmethod
    def not_found(cls, message: str = "User not found") -> "ProfilePage":
        return cls(state=PageState.NOT_FOUND, message=message)

    @classmethod
    def failed(cls, message: str = "Failed to load user profile") -> "ProfilePage":
        return cls(state=PageState.ERROR, message=message)
