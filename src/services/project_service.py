"""Project data access service."""

from uuid import UUID

from supabase import Client

from src.core.result import Result
from src.core.supabase import execute_query, row_list, single_row
from src.models.project import Project, ProjectStatus
from src.schemas.project import ProjectCreate, ProjectUpdate

DEFAULT_FEATURED_LIMIT = 6

# Owner columns embedded in featured project rows
OWNER_FIELDS: tuple[str, ...] = ("full_name", "title", "avatar_url", "email")


class ProjectService:
    """Service for reading and writing projects."""

    def __init__(self, client: Client) -> None:
        """Initialize project service with a Supabase client."""
        self.client = client

    async def get_project(self, project_id: UUID | str) -> Result[Project]:
        """Get a project by ID.

        Args:
            project_id: The project's UUID.

        Returns:
            Result: The project row, or a not-found error if no row matches.
        """
        query = (
            self.client.table("projects")
            .select("*")
            .eq("id", str(project_id))
            .maybe_single()
        )
        return single_row(await execute_query(query), "Project")

    async def get_user_projects(
        self,
        user_id: UUID | str,
        status: ProjectStatus | None = ProjectStatus.PUBLISHED,
    ) -> Result[list[Project]]:
        """Get a user's projects, newest first.

        Args:
            user_id: The owning user's UUID.
            status: Only return projects with this status. None returns all.

        Returns:
            Result: List of project rows.
        """
        query = (
            self.client.table("projects")
            .select("*")
            .eq("user_id", str(user_id))
        )
        if status:
            query = query.eq("status", ProjectStatus(status).value)
        query = query.order("created_at", desc=True)

        return row_list(await execute_query(query))

    async def get_featured_projects(
        self,
        limit: int = DEFAULT_FEATURED_LIMIT,
        owner_fields: tuple[str, ...] = OWNER_FIELDS,
    ) -> Result[list[Project]]:
        """Get published, featured projects with their owner's public fields.

        Args:
            limit: Maximum number of projects to return.
            owner_fields: Columns of the owning user to embed under ``users``.

        Returns:
            Result: Up to ``limit`` project rows, newest first.
        """
        columns = f"*, users({', '.join(owner_fields)})"
        query = (
            self.client.table("projects")
            .select(columns)
            .eq("status", ProjectStatus.PUBLISHED.value)
            .eq("featured", True)
            .order("created_at", desc=True)
            .limit(limit)
        )
        return row_list(await execute_query(query))

    async def create_project(self, data: ProjectCreate) -> Result[Project]:
        """Insert a project.

        Args:
            data: Project creation data.

        Returns:
            Result: The persisted row including server-assigned id and timestamps.
        """
        project_data = data.model_dump(mode="json", exclude_none=True)
        query = self.client.table("projects").insert(project_data)
        return single_row(await execute_query(query), "Project")

    async def update_project(self, project_id: UUID | str, data: ProjectUpdate) -> Result[Project]:
        """Apply a partial update to a project.

        Args:
            project_id: The project's UUID.
            data: The fields to update. Fields sent as null are cleared.

        Returns:
            Result: The updated row, or a not-found error if no row matches.
        """
        update_data = data.model_dump(mode="json", exclude_unset=True)

        if not update_data:
            return await self.get_project(project_id)

        query = (
            self.client.table("projects")
            .update(update_data)
            .eq("id", str(project_id))
        )
        return single_row(await execute_query(query), "Project")
