from __future__ import annotations


def _payload(**overrides):
    body = {
        "table_name": "users",
        "columns": [
            {"name": "id", "sql_type": "bigint(20) unsigned"},
            {"name": "name", "sql_type": "varchar(255)"},
            {"name": "created_at", "sql_type": "timestamp"},
            {"name": "updated_at", "sql_type": "timestamp"},
        ],
    }
    body.update(overrides)
    return body


def test_render_endpoint(client):
    r = client.post("/api/v1/models/render", json=_payload())
    assert r.status_code == 200
    body = r.json()
    assert body["struct_name"] == "Users"
    assert body["file_name"] == "users.go"
    assert body["package_name"] == "models"
    assert body["imports"] == ["github.com/goravel/framework/database/orm"]
    assert [f["name"] for f in body["fields"]] == ["orm.Model", "Name"]
    assert body["fields"][0]["marker"] is True
    assert body["fields"][1]["tags"] == ['json:"name"', 'form:"name"']
    assert body["source"].startswith("package models\n")


def test_render_endpoint_is_deterministic(client):
    r1 = client.post("/api/v1/models/render", json=_payload())
    r2 = client.post("/api/v1/models/render", json=_payload())
    assert r1.json()["source"] == r2.json()["source"]


def test_render_endpoint_package_override(client):
    r = client.post("/api/v1/models/render", json=_payload(package_name="entities"))
    assert r.json()["source"].startswith("package entities\n")


def test_render_endpoint_validates_payload(client):
    r = client.post("/api/v1/models/render", json={"table_name": "", "columns": []})
    assert r.status_code == 422


def test_request_id_header_is_echoed(client):
    r = client.post("/api/v1/models/render", json=_payload(), headers={"X-Request-Id": "abc-123"})
    assert r.headers["X-Request-Id"] == "abc-123"


def test_api_request_is_logged_with_request_id(client, caplog):
    with caplog.at_level("INFO", logger="modelgen.request"):
        client.post("/api/v1/models/render", json=_payload(), headers={"X-Request-Id": "log-42"})
    lines = [r.getMessage() for r in caplog.records if r.name == "modelgen.request"]
    assert len(lines) == 1
    assert "'request_id': 'log-42'" in lines[0]
    assert "'path': '/api/v1/models/render'" in lines[0]
    assert "'status_code': 200" in lines[0]


def test_tables_from_configured_database(client, sqlite_url: str, monkeypatch):
    monkeypatch.setenv("MODELGEN_DATABASE_URL", sqlite_url)
    r = client.get("/api/v1/tables")
    assert r.status_code == 200
    assert sorted(r.json()["tables"]) == ["products", "users"]


def test_table_model_from_configured_database(client, sqlite_url: str, monkeypatch):
    monkeypatch.setenv("MODELGEN_DATABASE_URL", sqlite_url)
    r = client.get("/api/v1/tables/products/model")
    assert r.status_code == 200
    names = [f["name"] for f in r.json()["fields"]]
    assert names == ["Sku", "Price", "orm.Timestamps", "orm.SoftDeletes"]


def test_missing_table_is_404_without_traceback(client, sqlite_url: str, monkeypatch):
    monkeypatch.setenv("MODELGEN_DATABASE_URL", sqlite_url)
    r = client.get("/api/v1/tables/orders/model", headers={"X-Request-Id": "rid-1"})
    assert r.status_code == 404
    body = r.json()
    assert body["detail"] == "orders table does not exist"
    assert "Traceback" not in r.text


def test_health_and_metrics(client):
    assert client.get("/api/v1/health/live").json() == {"status": "alive"}
    client.post("/api/v1/models/render", json=_payload())
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "modelgen_models_rendered_total" in r.text
    assert "modelgen_http_requests_total" in r.text
    snap = client.get("/api/v1/metrics/snapshot").json()
    assert snap["models_rendered"] == 1
