from app import _load_yaml_config, create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert "Conversion Tools" in titles
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Content-Type-Options") == "nosniff"


def test_request_id_is_echoed_or_generated():
    client = create_app("TestingConfig").test_client()
    response = client.get("/", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    generated = client.get("/").headers["X-Request-ID"]
    assert len(generated) == 32


def test_unknown_route_returns_json_envelope():
    client = create_app("TestingConfig").test_client()
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "not_found"


def test_wrong_method_returns_json_envelope():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/conversion_tools/convert")
    assert response.status_code == 405
    assert response.get_json()["error"]["code"] == "method_not_allowed"


def test_yaml_settings_are_applied(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        "site:\n"
        "  title: Test Tools\n"
        "  max_content_length_mb: 2\n"
        "plugins:\n"
        "  conversion_tools:\n"
        "    summary: Custom summary\n"
        "    allow_identical_units: true\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FIXTOOLS_CONFIG", str(config_file))
    app = create_app("TestingConfig")
    assert app.config["MAX_CONTENT_LENGTH"] == 2 * 1024 * 1024
    assert app.config["PLUGIN_SETTINGS"]["conversion_tools"]["allow_identical_units"] is True

    client = app.test_client()
    data = client.get("/").get_json()["data"]
    assert data["site"] == "Test Tools"
    manifest = next(item for item in data["plugins"] if item["blueprint"] == "conversion_tools")
    assert manifest["summary"] == "Custom summary"

    response = client.post(
        "/api/conversion_tools/convert",
        json={"dimension": "time", "from_unit": "hour", "to_unit": "hour", "value": 3},
    )
    assert response.status_code == 200


def test_invalid_content_length_falls_back(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yml"
    config_file.write_text("site:\n  max_content_length_mb: lots\n", encoding="utf-8")
    monkeypatch.setenv("FIXTOOLS_CONFIG", str(config_file))
    app = create_app("TestingConfig")
    assert app.config["MAX_CONTENT_LENGTH"] == 1024 * 1024


def test_missing_config_file_is_empty(tmp_path):
    assert _load_yaml_config(tmp_path / "absent.yml") == {}
