"""Unit tests for RecommendationService."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.core.result import Err
from src.models.recommendation import RecommendationStatus
from src.schemas.recommendation import RecommendationCreate, RecommendationUpdate
from src.services.recommendation_service import RecommendationService
from tests.fakes import FakeSupabaseClient


@pytest.fixture
def recommendation_service(fake_supabase: FakeSupabaseClient) -> RecommendationService:
    """Create RecommendationService over the in-memory store."""
    return RecommendationService(fake_supabase)


@pytest.fixture
def alice(fake_supabase: FakeSupabaseClient) -> dict:
    return fake_supabase.seed("users", email="alice@example.com", full_name="Alice")


def _seed_recommendation(store: FakeSupabaseClient, user: dict, name: str, status: str = "approved", **fields) -> dict:
    return store.seed(
        "recommendations",
        user_id=user["id"],
        recommender_name=name,
        recommendation_text=f"{name} recommends Alice",
        status=status,
        **fields,
    )


class TestGetUserRecommendations:
    """Tests for get_user_recommendations method."""

    @pytest.mark.asyncio
    async def test_returns_only_approved_newest_first(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        """Test owner filter, approved filter and descending creation order."""
        other = fake_supabase.seed("users", email="carol@example.com", full_name="Carol")
        older = _seed_recommendation(fake_supabase, alice, "Dana")
        _seed_recommendation(fake_supabase, alice, "Eve", status="pending")
        _seed_recommendation(fake_supabase, alice, "Frank", status="rejected")
        _seed_recommendation(fake_supabase, other, "Gus")
        newer = _seed_recommendation(fake_supabase, alice, "Hana")

        result = await recommendation_service.get_user_recommendations(alice["id"])

        assert [r["id"] for r in result.data] == [newer["id"], older["id"]]
        assert all(r["status"] == "approved" and r["user_id"] == alice["id"] for r in result.data)

    @pytest.mark.asyncio
    async def test_pending_filter_for_moderation(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        _seed_recommendation(fake_supabase, alice, "Dana")
        _seed_recommendation(fake_supabase, alice, "Eve", status="pending")

        result = await recommendation_service.get_user_recommendations(
            alice["id"], status=RecommendationStatus.PENDING
        )

        assert [r["recommender_name"] for r in result.data] == ["Eve"]

    @pytest.mark.asyncio
    async def test_include_project_embeds_linked_project(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        """Test that the linked project's id and title are embedded on request."""
        project = fake_supabase.seed("projects", user_id=alice["id"], title="Checkout", status="published")
        _seed_recommendation(fake_supabase, alice, "Dana", project_id=project["id"])
        _seed_recommendation(fake_supabase, alice, "Eve")

        result = await recommendation_service.get_user_recommendations(alice["id"], include_project=True)

        by_name = {r["recommender_name"]: r for r in result.data}
        assert by_name["Dana"]["projects"] == {"id": project["id"], "title": "Checkout"}
        assert by_name["Eve"]["projects"] is None

    @pytest.mark.asyncio
    async def test_without_include_project_no_embed(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        _seed_recommendation(fake_supabase, alice, "Dana")

        result = await recommendation_service.get_user_recommendations(alice["id"])

        assert "projects" not in result.data[0]


class TestWriteRecommendations:
    """Tests for create_recommendation and update_recommendation."""

    @pytest.mark.asyncio
    async def test_create_starts_pending(
        self, recommendation_service: RecommendationService, alice: dict
    ) -> None:
        """Test that submitted recommendations wait for moderation."""
        created = await recommendation_service.create_recommendation(
            RecommendationCreate(
                user_id=alice["id"],
                recommender_name="Ivan",
                recommendation_text="Great partner to engineering.",
                skills_highlighted=["Roadmapping"],
            )
        )

        assert created.data["status"] == "pending"
        assert created.data["id"]
        assert (await recommendation_service.get_user_recommendations(alice["id"])).data == []

    @pytest.mark.asyncio
    async def test_approve_makes_it_public(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        pending = _seed_recommendation(fake_supabase, alice, "Eve", status="pending")

        updated = await recommendation_service.update_recommendation(
            pending["id"], RecommendationUpdate(status=RecommendationStatus.APPROVED)
        )

        assert updated.data["status"] == "approved"
        listed = await recommendation_service.get_user_recommendations(alice["id"])
        assert [r["id"] for r in listed.data] == [pending["id"]]

    @pytest.mark.asyncio
    async def test_empty_patch_reads_current_row(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        row = _seed_recommendation(fake_supabase, alice, "Eve")

        result = await recommendation_service.update_recommendation(row["id"], RecommendationUpdate())

        assert result.data == row

    @pytest.mark.asyncio
    async def test_update_unknown_is_not_found(self, recommendation_service: RecommendationService) -> None:
        result = await recommendation_service.update_recommendation(
            uuid4(), RecommendationUpdate(status=RecommendationStatus.REJECTED)
        )

        assert isinstance(result, Err)
        assert result.error.is_not_found

    @pytest.mark.asyncio
    async def test_null_project_id_unlinks_project(
        self, recommendation_service: RecommendationService, fake_supabase: FakeSupabaseClient, alice: dict
    ) -> None:
        """Test that an explicit null is sent to the store rather than dropped."""
        project = fake_supabase.seed("projects", user_id=alice["id"], title="Search", status="published")
        row = _seed_recommendation(fake_supabase, alice, "Eve", project_id=project["id"])

        result = await recommendation_service.update_recommendation(
            row["id"], RecommendationUpdate(project_id=None)
        )

        assert result.data["project_id"] is None
        assert fake_supabase.queries_for("recommendations")[-1].payload == {"project_id": None}

    def test_null_text_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RecommendationUpdate(recommendation_text=None)
