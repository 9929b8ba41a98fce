"""Resolution of public profile identifiers to user rows."""

from abc import ABC, abstractmethod
from uuid import UUID

from src.core.config import IdentityStrategy
from src.core.result import Err, Result, StoreError
from src.models.user import User
from src.services.project_service import OWNER_FIELDS
from src.services.user_service import UserService


class IdentityResolver(ABC):
    """Maps the profile route parameter to a user and back.

    One strategy is active per deployment; every profile link and lookup
    goes through it.
    """

    strategy: IdentityStrategy

    # Owner columns needed to compute public_identifier on embedded rows
    owner_fields: tuple[str, ...] = OWNER_FIELDS

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    @abstractmethod
    async def resolve(self, identifier: str) -> Result[User]:
        """Look up the user behind a route parameter."""

    @abstractmethod
    def public_identifier(self, user: User) -> str | None:
        """Return the route parameter that resolves back to ``user``."""


class IdResolver(IdentityResolver):
    """Route parameter is the user's UUID."""

    strategy = IdentityStrategy.ID
    owner_fields = (*OWNER_FIELDS, "id")

    async def resolve(self, identifier: str) -> Result[User]:
        try:
            user_id = UUID(identifier)
        except ValueError:
            return Err(StoreError.not_found("User not found"))
        return await self.user_service.get_user(user_id)

    def public_identifier(self, user: User) -> str | None:
        user_id = user.get("id")
        return str(user_id) if user_id else None


class EmailSlugResolver(IdentityResolver):
    """Route parameter is the local part of the user's email."""

    strategy = IdentityStrategy.EMAIL_SLUG

    async def resolve(self, identifier: str) -> Result[User]:
        return await self.user_service.get_user_by_username(identifier)

    def public_identifier(self, user: User) -> str | None:
        email = user.get("email")
        if not email or "@" not in email:
            return None
        local_part, domain = email.rsplit("@", 1)
        # resolve() only looks up addresses at the placeholder domain
        if domain.lower() != self.user_service.username_email_domain.lower():
            return None
        return local_part


class UsernameResolver(IdentityResolver):
    """Route parameter is the explicit ``username`` column."""

    strategy = IdentityStrategy.USERNAME
    owner_fields = (*OWNER_FIELDS, "username")

    async def resolve(self, identifier: str) -> Result[User]:
        return await self.user_service.get_user_by_handle(identifier)

    def public_identifier(self, user: User) -> str | None:
        return user.get("username") or None


_RESOLVERS: dict[IdentityStrategy, type[IdentityResolver]] = {
    IdentityStrategy.ID: IdResolver,
    IdentityStrategy.EMAIL_SLUG: EmailSlugResolver,
    IdentityStrategy.USERNAME: UsernameResolver,
}


def create_identity_resolver(strategy: IdentityStrategy | str, user_service: UserService) -> IdentityResolver:
    """Build the resolver for a configured strategy.

    Args:
        strategy: One of ``id``, ``email_slug`` or ``username``.
        user_service: User data access service the resolver queries.

    Returns:
        IdentityResolver: Resolver instance.

    Raises:
        ValueError: If the strategy is unknown.
    """
    return _RESOLVERS[IdentityStrategy(strategy)](user_service)
