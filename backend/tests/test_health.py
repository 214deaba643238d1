"""
Tests for health check and reporting endpoints.
"""


def test_root_endpoint(client):
    """Test the root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "Bloglist" in data["message"]
    assert "version" in data
    assert "docs" in data
    assert "health" in data


def test_health_check(client):
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert "version" in data
    assert "timestamp" in data
    assert data["app_name"] == "Bloglist"
    assert data["database"] == "connected"


def test_readiness_check(client):
    """Test the readiness check endpoint."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()

    assert data["ready"] is True
    assert data["checks"]["database"] == "ok"


def test_stats_empty(client):
    """Test statistics over an empty database."""
    response = client.get("/api/stats")
    assert response.status_code == 200
    assert response.json() == {
        "total_likes": 0,
        "favorite_blog": None,
        "most_blogs": None,
        "most_likes": None,
    }


def test_stats_over_stored_blogs(client, initial_blogs):
    """Test statistics reflect stored blogs."""
    data = client.get("/api/stats").json()

    assert data["total_likes"] == 12
    assert data["favorite_blog"] == {"title": "React patterns", "author": "Michael Chan", "likes": 7}
    assert data["most_blogs"] == {"author": "Michael Chan", "count": 1}
    assert data["most_likes"] == {"author": "Michael Chan", "likes": 7}
