"""Recommendation data access service."""

from uuid import UUID

from supabase import Client

from src.core.result import Result
from src.core.supabase import execute_query, row_list, single_row
from src.models.recommendation import Recommendation, RecommendationStatus
from src.schemas.recommendation import RecommendationCreate, RecommendationUpdate

LINKED_PROJECT_COLUMNS = "*, projects(id, title)"


class RecommendationService:
    """Service for reading, submitting and moderating recommendations."""

    def __init__(self, client: Client) -> None:
        """Initialize recommendation service with a Supabase client."""
        self.client = client

    async def get_recommendation(self, recommendation_id: UUID | str) -> Result[Recommendation]:
        """Get a recommendation by ID."""
        query = (
            self.client.table("recommendations")
            .select("*")
            .eq("id", str(recommendation_id))
            .maybe_single()
        )
        return single_row(await execute_query(query), "Recommendation")

    async def get_user_recommendations(
        self,
        user_id: UUID | str,
        status: RecommendationStatus | None = RecommendationStatus.APPROVED,
        include_project: bool = False,
    ) -> Result[list[Recommendation]]:
        """Get recommendations written for a user, newest first.

        Args:
            user_id: The recommended user's UUID.
            status: Only return recommendations with this status. None returns all.
            include_project: Embed the linked project's id and title under ``projects``.

        Returns:
            Result: List of recommendation rows.
        """
        columns = LINKED_PROJECT_COLUMNS if include_project else "*"
        query = (
            self.client.table("recommendations")
            .select(columns)
            .eq("user_id", str(user_id))
        )
        if status:
            query = query.eq("status", RecommendationStatus(status).value)
        query = query.order("created_at", desc=True)

        return row_list(await execute_query(query))

    async def create_recommendation(self, data: RecommendationCreate) -> Result[Recommendation]:
        """Insert a recommendation.

        Returns:
            Result: The persisted row including server-assigned id and timestamps.
        """
        recommendation_data = data.model_dump(mode="json", exclude_none=True)
        query = self.client.table("recommendations").insert(recommendation_data)
        return single_row(await execute_query(query), "Recommendation")

    async def update_recommendation(
        self,
        recommendation_id: UUID | str,
        data: RecommendationUpdate,
    ) -> Result[Recommendation]:
        """Apply a partial update to a recommendation.

        Moderation (approve/reject) is a status patch through this method.

        Returns:
            Result: The updated row, or a not-found error if no row matches.
        """
        update_data = data.model_dump(mode="json", exclude_unset=True)

        if not update_data:
            return await self.get_recommendation(recommendation_id)

        query = (
            self.client.table("recommendations")
            .update(update_data)
            .eq("id", str(recommendation_id))
        )
        return single_row(await execute_query(query), "Recommendation")
