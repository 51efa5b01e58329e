from fastapi.testclient import TestClient
from main import app

client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint returns expected response"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "message" in data
    assert "version" in data


def test_health_endpoint():
    """Test the health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


def test_app_startup():
    """Test that the FastAPI app starts successfully"""
    assert app.title == "Olympic Medal Table"
    assert app.version == "0.1.0"


def test_medals_route_is_mounted_under_api_prefix():
    assert "/api/v1/medals" in app.openapi()["paths"]
    assert client.get("/api/v1/medals").status_code == 200
