"""User data access service."""

from uuid import UUID

from supabase import Client

from src.core.config import get_settings
from src.core.result import Result
from src.core.supabase import execute_query, single_row
from src.models.user import User
from src.schemas.user import UserUpdate


class UserService:
    """Service for reading and updating portfolio owners."""

    def __init__(self, client: Client, username_email_domain: str | None = None) -> None:
        """Initialize user service.

        Args:
            client: Supabase client used for all queries.
            username_email_domain: Domain used to derive lookup emails from
                usernames. Defaults to the configured domain.
        """
        self.client = client
        self.username_email_domain = username_email_domain or get_settings().username_email_domain

    async def _get_by(self, column: str, value: str) -> Result[User]:
        query = (
            self.client.table("users")
            .select("*")
            .eq(column, value)
            .maybe_single()
        )
        return single_row(await execute_query(query), "User")

    async def get_user(self, user_id: UUID | str) -> Result[User]:
        """Get a user by ID.

        Args:
            user_id: The user's UUID.

        Returns:
            Result: The user row, or a not-found error if no row matches.
        """
        return await self._get_by("id", str(user_id))

    async def get_user_by_email(self, email: str) -> Result[User]:
        """Get a user by email address.

        Args:
            email: Exact email address.

        Returns:
            Result: The user row, or a not-found error if no row matches.
        """
        return await self._get_by("email", email)

    def email_for_username(self, username: str) -> str:
        """Derive the lookup email for a username (``{username}@{domain}``)."""
        return f"{username}@{self.username_email_domain}"

    async def get_user_by_username(self, username: str) -> Result[User]:
        """Get a user whose email local part is the given username.

        Usernames are not stored; the email is derived from the configured
        placeholder domain.

        Args:
            username: Email local part.

        Returns:
            Result: The user row, or a not-found error if no row matches.
        """
        return await self.get_user_by_email(self.email_for_username(username))

    async def get_user_by_handle(self, username: str) -> Result[User]:
        """Get a user by the explicit ``username`` column."""
        return await self._get_by("username", username)

    async def update_user(self, user_id: UUID | str, data: UserUpdate) -> Result[User]:
        """Apply a partial update to a user.

        Args:
            user_id: The user's UUID.
            data: The fields to update. Fields sent as null are cleared.

        Returns:
            Result: The updated user row, or a not-found error if no row matches.
        """
        update_data = data.model_dump(mode="json", exclude_unset=True)

        if not update_data:
            # No changes, return current user
            return await self.get_user(user_id)

        query = (
            self.client.table("users")
            .update(update_data)
            .eq("id", str(user_id))
        )
        return single_row(await execute_query(query), "User")
