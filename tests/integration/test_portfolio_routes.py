"""Integration tests for public profile pages."""

from typing import Any

from fastapi.testclient import TestClient
from postgrest.exceptions import APIError as PostgrestError

from src.core.config import Settings, get_settings
from tests.fakes import FakeSupabaseClient


def _seed_alice(store: FakeSupabaseClient) -> dict:
    """Alice with two published projects and one draft."""
    alice = store.seed(
        "users",
        email="alice@example.com",
        username="alice-pm",
        full_name="Alice Smith",
        title="Senior PM",
    )
    store.seed("projects", user_id=alice["id"], title="Checkout revamp", status="published", featured=True)
    store.seed("projects", user_id=alice["id"], title="Roadmap draft", status="draft", featured=False)
    store.seed("projects", user_id=alice["id"], title="Pricing experiment", status="published", featured=False)
    store.seed(
        "recommendations",
        user_id=alice["id"],
        recommender_name="Dana",
        recommendation_text="Alice ships.",
        status="approved",
    )
    return alice


class TestGetProfilePage:
    """Tests for GET /api/v1/portfolios/{identifier}."""

    def test_ready_profile(self, client: TestClient, fake_supabase: FakeSupabaseClient) -> None:
        """Test that alice resolves with exactly her two published projects, newest first."""
        _seed_alice(fake_supabase)

        response = client.get("/api/v1/portfolios/alice")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "ready"
        assert data["user"]["full_name"] == "Alice Smith"
        assert [p["title"] for p in data["projects"]] == ["Pricing experiment", "Checkout revamp"]
        assert [r["recommender_name"] for r in data["recommendations"]] == ["Dana"]

    def test_unknown_user_is_not_found(self, client: TestClient, fake_supabase: FakeSupabaseClient) -> None:
        _seed_alice(fake_supabase)

        response = client.get("/api/v1/portfolios/nobody")

        assert response.status_code == 404
        data = response.json()
        assert data == {
            "state": "not_found",
            "user": None,
            "projects": [],
            "recommendations": [],
            "message": "User not found",
        }

    def test_recommendations_failure_renders_error_without_projects(
        self, client: TestClient, fake_supabase: FakeSupabaseClient
    ) -> None:
        """Test that the page is an error with no partial projects."""
        _seed_alice(fake_supabase)
        fake_supabase.fail("recommendations", PostgrestError({"message": "timeout", "code": "57014"}))

        response = client.get("/api/v1/portfolios/alice")

        assert response.status_code == 502
        data = response.json()
        assert data["state"] == "error"
        assert data["message"] == "Failed to load user profile"
        assert data["user"] is None
        assert data["projects"] == []

    def test_username_strategy(
        self, client: TestClient, app_factory: Any, fake_supabase: FakeSupabaseClient
    ) -> None:
        app_factory.dependency_overrides[get_settings] = lambda: Settings(identity_strategy="username")
        _seed_alice(fake_supabase)

        assert client.get("/api/v1/portfolios/alice-pm").json()["state"] == "ready"
        assert client.get("/api/v1/portfolios/alice").status_code == 404

    def test_id_strategy(self, client: TestClient, app_factory: Any, fake_supabase: FakeSupabaseClient) -> None:
        app_factory.dependency_overrides[get_settings] = lambda: Settings(identity_strategy="id")
        alice = _seed_alice(fake_supabase)

        assert client.get(f"/api/v1/portfolios/{alice['id']}").json()["user"]["id"] == alice["id"]
        assert client.get("/api/v1/portfolios/alice").json()["state"] == "not_found"

    def test_null_skills_still_render(self, client: TestClient, fake_supabase: FakeSupabaseClient) -> None:
        alice = _seed_alice(fake_supabase)
        fake_supabase.seed(
            "recommendations",
            user_id=alice["id"],
            recommender_name="Finn",
            recommendation_text="Calm under pressure.",
            skills_highlighted=None,
            status="approved",
        )

        response = client.get("/api/v1/portfolios/alice")

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "ready"
        assert data["recommendations"][0]["skills_highlighted"] == []
