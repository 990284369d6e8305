from hostel_api.config import Settings


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health_reports_database(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["database"] == "connected"


def test_unknown_route_uses_error_shape(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_malformed_json_is_400(client):
    response = client.post(
        "/orders", content="{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_production_warnings():
    settings = Settings(ENVIRONMENT="production", DATABASE_URL="sqlite:///x.db", CREATE_TABLES=True)
    warnings = settings.validate_settings()
    assert any("SECRET_KEY" in w for w in warnings)
    assert any("SQLite" in w for w in warnings)


def test_cors_origins_list():
    settings = Settings(CORS_ORIGINS="https://a.example, https://b.example")
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
