"""Profile page assembly."""

import asyncio
import logging

from pydantic import ValidationError

from src.core.config import get_settings
from src.core.result import Err, StoreError
from src.models.project import ProjectStatus
from src.models.recommendation import RecommendationStatus
from src.models.user import User
from src.schemas.portfolio import PageState, ProfilePage
from src.schemas.project import ProjectResponse
from src.schemas.recommendation import RecommendationResponse
from src.schemas.user import UserResponse
from src.services.identity_resolver import IdentityResolver
from src.services.project_service import ProjectService
from src.services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)


class PortfolioService:
    """Builds the public profile view model for one route parameter."""

    def __init__(
        self,
        resolver: IdentityResolver,
        project_service: ProjectService,
        recommendation_service: RecommendationService,
        timeout_seconds: float | None = None,
        include_linked_projects: bool = True,
    ) -> None:
        self.resolver = resolver
        self.project_service = project_service
        self.recommendation_service = recommendation_service
        self.timeout_seconds = timeout_seconds or get_settings().profile_load_timeout_seconds
        self.include_linked_projects = include_linked_projects

    async def load_profile(self, identifier: str | None) -> ProfilePage:
        """Resolve a profile identifier and assemble the page.

        The user is resolved first. Published projects and approved
        recommendations are then fetched concurrently. Any failure after the
        user is found discards everything fetched so far.

        Args:
            identifier: Route parameter naming the profile.

        Returns:
            ProfilePage: ``ready`` with data, ``not_found``, ``error``, or
            ``idle`` when no identifier was given.
        """
        if not identifier or not identifier.strip():
            return ProfilePage(state=PageState.IDLE)

        identifier = identifier.strip()
        logger.debug("Loading profile %r (%s)", identifier, PageState.LOADING.value)

        try:
            page = await asyncio.wait_for(self._assemble(identifier), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("Profile load for %r timed out after %.1fs", identifier, self.timeout_seconds)
            return ProfilePage.failed()

        logger.info("Profile %r loaded: %s", identifier, page.state.value)
        return page

    async def _assemble(self, identifier: str) -> ProfilePage:
        user_result = await self.resolver.resolve(identifier)
        if isinstance(user_result, Err):
            if user_result.error.is_not_found:
                return ProfilePage.not_found()
            self._log_failure("user", identifier, user_result.error)
            return ProfilePage.failed()

        user: User = user_result.data

        projects_result, recommendations_result = await asyncio.gather(
            self.project_service.get_user_projects(user["id"], status=ProjectStatus.PUBLISHED),
            self.recommendation_service.get_user_recommendations(
                user["id"],
                status=RecommendationStatus.APPROVED,
                include_project=self.include_linked_projects,
            ),
        )

        for name, result in (("projects", projects_result), ("recommendations", recommendations_result)):
            if isinstance(result, Err):
                self._log_failure(name, identifier, result.error)
                return ProfilePage.failed()

        try:
            return ProfilePage(
                state=PageState.READY,
                user=UserResponse(**user),
                projects=[ProjectResponse(**row) for row in projects_result.data],
                recommendations=[RecommendationResponse(**row) for row in recommendations_result.data],
            )
        except ValidationError as e:
            logger.error("Malformed row while building profile %r: %s", identifier, e)
            return ProfilePage.failed()

    @staticmethod
    def _log_failure(stage: str, identifier: str, error: StoreError) -> None:
        logger.error(
            "Failed to fetch %s for profile %r: %s (%s) %s",
            stage,
            identifier,
            error.kind.value,
            error.code,
            error.message,
        )
