"""Serwowanie builda frontendu (SPA)."""
import pytest

from push_relay import create_app

from conftest import TEST_CONFIG


@pytest.fixture
def spa_client(tmp_path, webpush_mock):
    (tmp_path / "index.html").write_text("<html>app</html>")
    (tmp_path / "sw.js").write_text("// sw")
    app = create_app(dict(TEST_CONFIG, STATIC_DIR=str(tmp_path)))
    return app.test_client()


def test_serves_static_file(spa_client):
    r = spa_client.get("/sw.js")
    assert r.status_code == 200
    assert r.get_data(as_text=True) == "// sw"


def test_unknown_path_falls_back_to_index(spa_client):
    r = spa_client.get("/settings/notifications")
    assert r.status_code == 200
    assert "app" in r.get_data(as_text=True)


def test_api_paths_are_not_spa(spa_client):
    assert spa_client.get("/api/unknown").status_code == 404
    assert spa_client.get("/api/health").get_json() == {"ok": True}


def test_no_static_dir_serves_only_api(client):
    assert client.get("/").status_code == 404
