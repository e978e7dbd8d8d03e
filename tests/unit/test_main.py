from fastapi.testclient import TestClient

from src.main import app

client = TestClient(app)


def test_index_page():
    """Smoke test for the search page."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"] == "text/html; charset=utf-8"
    assert 'id="query"' in response.text
    assert "api/notes-search/search" in response.text


def test_health_check():
    """Smoke test for health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_health_check():
    """Smoke test for search router health endpoint."""
    response = client.get("/api/notes-search/health")
    assert response.status_code == 200
    assert response.json() == {"status": "search endpoints available"}
