"""
API tests for movie endpoints.

Uses FastAPI TestClient with the catalog dependency overridden by the
in-memory fixture service.
"""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_catalog_service
from app.api.main import app


@pytest.fixture
def client(service):
    """TestClient backed by the fixture catalog."""
    app.dependency_overrides[get_catalog_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestBrowseEndpoint:
    """Tests for GET /api/movies."""

    def test_browse_all(self, client):
        """Without criteria all movies are listed with no message."""
        r = client.get("/api/movies")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 5
        assert data["search_message"] == ""
        assert data["genres"] == ["Action/Crime", "Crime/Drama", "Drama"]
        assert data["search_name"] == ""
        assert data["search_id"] == ""

    def test_browse_search_by_name(self, client):
        """A matching name narrows the list and reports the count."""
        r = client.get("/api/movies", params={"name": "prison"})
        data = r.json()
        assert [m["name"] for m in data["movies"]] == ["The Prison Escape"]
        assert "Found 1 movie " in data["search_message"]
        assert data["search_name"] == "prison"

    def test_browse_search_by_id(self, client):
        """The id query parameter filters by exact id."""
        data = client.get("/api/movies", params={"id": 2}).json()
        assert [m["id"] for m in data["movies"]] == [2]
        assert data["search_id"] == "2"

    def test_browse_plural_message(self, client):
        """Several matches use the plural form."""
        data = client.get("/api/movies", params={"genre": "crime"}).json()
        assert data["total"] == 3
        assert "Found 3 movies" in data["search_message"]

    def test_browse_no_match_falls_back_to_all(self, client):
        """No match shows all movies with a no-results message."""
        data = client.get("/api/movies", params={"name": "nonexistent"}).json()
        assert data["total"] == 5
        assert "No movies found" in data["search_message"]


class TestSearchEndpoint:
    """Tests for GET /api/movies/search."""

    def test_search_by_name(self, client):
        """A name search returns matches and the trimmed criteria."""
        r = client.get("/api/movies/search", params={"name": "  family "})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["total_results"] == 1
        assert data["movies"][0]["name"] == "The Family Boss"
        assert data["search_criteria"] == {"name": "family"}
        assert "Found 1 movie." == data["message"]

    def test_search_combined(self, client):
        """All supplied criteria must match."""
        r = client.get("/api/movies/search", params={"name": "family", "id": 1, "genre": "drama"})
        assert r.status_code == 200
        data = r.json()
        assert data["movies"] == []
        assert data["total_results"] == 0
        assert "No movies found" in data["message"]
        assert data["search_criteria"] == {"name": "family", "id": 1, "genre": "drama"}

    def test_search_requires_criteria(self, client):
        """No criteria is a 400 that still lists all movies."""
        r = client.get("/api/movies/search", params={"name": "  "})
        assert r.status_code == 400
        data = r.json()
        assert data["success"] is False
        assert len(data["movies"]) == 5

    @pytest.mark.parametrize("movie_id", [0, -5])
    def test_search_rejects_non_positive_id(self, client, movie_id):
        """A non-positive id is a 400 with no movies."""
        r = client.get("/api/movies/search", params={"id": movie_id})
        assert r.status_code == 400
        data = r.json()
        assert data["success"] is False
        assert data["movies"] == []

    def test_search_non_numeric_id(self, client):
        """A non-numeric id fails request validation."""
        r = client.get("/api/movies/search", params={"id": "abc"})
        assert r.status_code == 422

    def test_search_internal_error(self, client, service, monkeypatch):
        """An unexpected fault is reported as 500, not as no results."""
        def boom(*args, **kwargs):
            raise RuntimeError("index corrupted")

        monkeypatch.setattr(service, "search", boom)
        r = client.get("/api/movies/search", params={"name": "prison"})
        assert r.status_code == 500
        data = r.json()
        assert data["success"] is False
        assert data["movies"] == []


class TestGenresEndpoint:
    """Tests for GET /api/movies/genres."""

    def test_genres(self, client):
        """Genres are sorted and distinct."""
        r = client.get("/api/movies/genres")
        assert r.status_code == 200
        assert r.json() == ["Action/Crime", "Crime/Drama", "Drama"]


class TestMovieDetailsEndpoint:
    """Tests for GET /api/movies/{movie_id}."""

    def test_get_movie(self, client):
        """Details include the movie, its icon and its reviews."""
        r = client.get("/api/movies/1")
        assert r.status_code == 200
        data = r.json()
        assert data["movie"]["name"] == "The Prison Escape"
        assert data["movie"]["rating"] == 5.0
        assert data["icon"] == "⛓️"
        assert [rv["user_name"] for rv in data["reviews"]] == ["Alice", "Bob"]

    def test_get_movie_without_reviews(self, client):
        """A movie with no reviews has an empty review list."""
        data = client.get("/api/movies/4").json()
        assert data["reviews"] == []

    @pytest.mark.parametrize("movie_id", [999, 0, -1])
    def test_get_movie_not_found(self, client, movie_id):
        """Unknown or non-positive ids return 404."""
        r = client.get(f"/api/movies/{movie_id}")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()


class TestSystemEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self, client):
        """Health reports the loaded movie count."""
        data = client.get("/api/health").json()
        assert data["status"] == "healthy"
        assert data["movies"] == 5
        assert data["genres"] == 3

    def test_root(self, client):
        """Root points to docs and health."""
        data = client.get("/").json()
        assert data["health"] == "/api/health"
