import pytest
from fastapi.testclient import TestClient

from configlint.config import APP_VERSION, Settings
from configlint.main import create_app


def _client(tmp_path, api_key: str = "") -> TestClient:
    settings = Settings(CONFIG_LINTER_API_KEY=api_key, STATIC_DIR=str(tmp_path / "no-static"))
    return TestClient(create_app(settings))


@pytest.fixture
def client(tmp_path):
    with _client(tmp_path) as c:
        yield c


@pytest.fixture
def secured_client(tmp_path):
    with _client(tmp_path, api_key="secret, other-key") as c:
        yield c


def test_health_is_public(secured_client):
    response = secured_client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == APP_VERSION
    assert body["uptime_seconds"] >= 0


def test_root_info_without_static_dir(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["lint"] == "/api/v1/lint"


def test_static_dir_served_at_root(tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "index.html").write_text("<h1>configlint</h1>", encoding="utf-8")

    with TestClient(create_app(Settings(STATIC_DIR=str(static)))) as c:
        response = c.get("/")

    assert response.status_code == 200
    assert "<h1>configlint</h1>" in response.text


def test_lint_valid_config(client, valid_config):
    response = client.post("/api/v1/lint", json={"config": valid_config, "strict": True})

    assert response.status_code == 200
    body = response.json()
    assert body["issues"] == []
    assert body["strict"] is True
    assert body["fatal"] is False
    assert "generatedAt" in body


def test_lint_scenario_a(client, scenario_a):
    response = client.post("/api/v1/lint", json={"config": scenario_a})
    body = response.json()

    assert response.status_code == 200
    assert body["fatal"] is True
    assert body["strict"] is False
    assert [i["message"] for i in body["issues"]][:2] == [
        "metadata.name is required",
        'metadata.env value "unknown" is not recognized',
    ]
    replicas = body["issues"][2]
    assert replicas == {
        "line": 4,
        "severity": "error",
        "message": "settings.replicas must be a positive integer",
    }


def test_warnings_are_fatal_only_in_strict_mode(client):
    config = "metadata:\n  name: a\n  env: dev\nsettings:\n  replicas: 1\n"

    relaxed = client.post("/api/v1/lint", json={"config": config, "fixSuggestions": True}).json()
    strict = client.post("/api/v1/lint", json={"config": config, "strict": True}).json()

    assert relaxed["fatal"] is False
    assert strict["fatal"] is True
    assert relaxed["issues"][0]["suggestedFix"] == "Add settings.timeout: 30"
    # fixSuggestions is display-only; the fix is always present
    assert strict["issues"][0]["suggestedFix"] == "Add settings.timeout: 30"


def test_blank_config_rejected(client):
    response = client.post("/api/v1/lint", json={"config": "   \n"})

    assert response.status_code == 400
    assert response.json() == {"error": "Config content cannot be empty"}


def test_invalid_json_body_rejected(client):
    response = client.post(
        "/api/v1/lint",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_missing_config_field_rejected(client):
    response = client.post("/api/v1/lint", json={"strict": True})

    assert response.status_code == 400


def test_lint_requires_api_key_when_configured(secured_client, valid_config):
    response = secured_client.post("/api/v1/lint", json={"config": valid_config})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized: Invalid or missing API Key"}


def test_lint_rejects_wrong_api_key(secured_client, valid_config):
    response = secured_client.post(
        "/api/v1/lint", json={"config": valid_config}, headers={"X-API-Key": "nope"}
    )

    assert response.status_code == 401


@pytest.mark.parametrize(
    "headers",
    [{"X-API-Key": "secret"}, {"X-API-Key": "other-key"}, {"Authorization": "Bearer secret"}],
)
def test_lint_accepts_configured_keys(secured_client, valid_config, headers):
    response = secured_client.post("/api/v1/lint", json={"config": valid_config}, headers=headers)

    assert response.status_code == 200
    assert response.json()["issues"] == []


def test_cors_preflight(client):
    response = client.options(
        "/api/v1/lint",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "X-API-Key",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_settings_parse_api_keys():
    settings = Settings(CONFIG_LINTER_API_KEY=" a, ,b ,")

    assert settings.api_keys == frozenset({"a", "b"})


def test_unversioned_paths_work_alongside_static_ui(tmp_path, valid_config):
    static = tmp_path / "static"
    static.mkdir()
    (static / "index.html").write_text("<h1>configlint</h1>", encoding="utf-8")

    with TestClient(create_app(Settings(STATIC_DIR=str(static)))) as c:
        lint = c.post("/lint", json={"config": valid_config})
        health = c.get("/health")

    assert lint.status_code == 200
    assert lint.json()["issues"] == []
    assert health.status_code == 200
    assert health.json()["status"] == "ok"


def test_unversioned_lint_still_requires_api_key(secured_client, valid_config):
    response = secured_client.post("/lint", json={"config": valid_config})

    assert response.status_code == 401
