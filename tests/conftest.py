"""Shared fixtures: every test gets its own data directory and users file."""

import os

import pytest

os.environ.setdefault("FLATFILE_CMS_CONFIG",
                      os.path.join(os.path.dirname(__file__), "serverconfig.cfg"))

from flatfile_cms import app as cms_app
from flatfile_cms.auth import compute_password_hash
from flatfile_cms.storage import DocumentStore, UserStore


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setitem(cms_app.config, "TESTING", True)
    monkeypatch.setitem(cms_app.config, "DATA_PATH", str(tmp_path / "data"))
    monkeypatch.setitem(cms_app.config, "USERS_PATH", str(tmp_path / "users.yml"))
    UserStore(cms_app.config["USERS_PATH"]).add("admin", compute_password_hash("secret"))
    return cms_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def documents(app):
    return DocumentStore(app.config["DATA_PATH"])


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["username"] = "admin"
    return client


@pytest.fixture
def flashed(client):
    """Return the messages flashed but not yet rendered."""
    def read():
        with client.session_transaction() as sess:
            return [message for _, message in sess.get("_flashes", [])]
    return read
