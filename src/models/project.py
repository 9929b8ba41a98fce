"""Project model type definitions for database operations."""

from datetime import datetime
from enum import Enum
from typing import TypedDict
from uuid import UUID


class ProjectStatus(str, Enum):
    """Publication status of a project."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Project(TypedDict):
    """Projects table row representation.

    Every project belongs to exactly one user through user_id.
    """

    id: UUID
    user_id: UUID
    title: str
    description: str | None
    problem_statement: str | None
    solution: str | None
    results: str | None
    technologies_used: list[str] | None
    company: str | None
    duration_months: int | None
    project_url: str | None
    image_urls: list[str] | None
    status: ProjectStatus
    featured: bool
    created_at: datetime
    updated_at: datetime | None

