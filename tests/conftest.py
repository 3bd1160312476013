"""Shared pytest fixtures: a built SPA tree on disk and an app serving it."""

import pytest

from spa_server.main import create_app

INDEX_BODY = b"A"
APP_JS_BODY = b"B"
SECRET_BODY = b"outside the static root"


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "dist"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_bytes(INDEX_BODY)
    (root / "app.js").write_bytes(APP_JS_BODY)
    (root / "assets" / "style.css").write_bytes(b"body { margin: 0; }")
    (root / "manifest.webmanifest").write_bytes(b'{"name": "Duelist City"}')
    (tmp_path / "secret.txt").write_bytes(SECRET_BODY)
    return root


@pytest.fixture
def app(static_root):
    app = create_app(static_root=str(static_root))
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
