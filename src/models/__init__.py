"""Database model type definitions."""

from src.models.project import Project, ProjectStatus
from src.models.recommendation import Recommendation, RecommendationStatus
from src.models.user import User

__all__ = [
    "User",
    "Project",
    "ProjectStatus",
    "Recommendation",
    "RecommendationStatus",
]
