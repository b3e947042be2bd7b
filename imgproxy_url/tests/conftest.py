"""Shared pytest fixtures for imgproxy_url tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from imgproxy_url.app import app
from imgproxy_url.config import reset_settings_cache

KEY = "0123456789abcdef0123456789abcdef"
SALT = "fedcba9876543210fedcba9876543210"
SOURCE_URL = "https://example.com/images/image.jpg"
BASE_URL = "https://imgproxy.example.com"


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test without ambient IMGPROXY_* variables or a stray .env."""

    for name in (
        "IMGPROXY_BASE_URL",
        "IMGPROXY_KEY",
        "IMGPROXY_SALT",
        "IMGPROXY_ENCODE",
        "IMGPROXY_SIGNATURE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()
