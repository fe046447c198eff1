from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_split_endpoint_default_separator() -> None:
    response = client.post("/api/split", json={"line": "foo = bar"})
    assert response.status_code == 200
    assert response.json() == {"key": "foo", "value": "bar"}


def test_split_endpoint_rejects_malformed_line() -> None:
    response = client.post("/api/split", json={"line": "foo:bar:baz", "separator": ":"})
    assert response.status_code == 422
    assert response.json()["detail"] == 'Invalid property line. Expected format: "key:value"'


def test_split_endpoint_validates_separator() -> None:
    response = client.post("/api/split", json={"line": "foo::bar", "separator": "::"})
    assert response.status_code == 422

    response = client.post("/api/split", json={"line": "foo bar", "separator": " "})
    assert response.status_code == 422


def test_try_split_endpoint_valid_line() -> None:
    response = client.post(
        "/api/try-split",
        json={"line": "foo:bar", "separator": ":", "comment": "//"},
    )
    assert response.status_code == 200
    assert response.json() == {"skipped": False, "property": {"key": "foo", "value": "bar"}}


def test_try_split_endpoint_skips_lines() -> None:
    for payload in (
        {"line": ""},
        {"line": "//foo:bar", "separator": ":", "comment": "//"},
        {"line": "foo:bar:baz", "separator": ":"},
    ):
        response = client.post("/api/try-split", json=payload)
        assert response.status_code == 200
        assert response.json() == {"skipped": True, "property": None}


def test_try_split_endpoint_rejects_empty_comment() -> None:
    response = client.post("/api/try-split", json={"line": "a=b", "comment": ""})
    assert response.status_code == 422


def test_health() -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "default_separator": "="}
