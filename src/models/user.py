"""User model type definitions for database operations."""

from datetime import datetime
from typing import TypedDict
from uuid import UUID


class User(TypedDict):
    """Users table row representation.

    Represents a portfolio owner stored in the users table.
    Maps directly to the database schema.
    """

    id: UUID
    email: str
    username: str | None
    full_name: str | None
    title: str | None
    bio: str | None
    location: str | None
    years_experience: int | None
    linkedin_url: str | None
    portfolio_url: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime | None

