def test_health(client) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "message": "Career Mentor API is running"}


def test_unknown_route_returns_json_404(client) -> None:
    resp = client.get("/api/nothing-here")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Route not found"}


def test_cors_allows_configured_frontend(client) -> None:
    resp = client.options(
        "/api/profile",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
