# -*- coding: utf-8 -*-
"""Tests for the page shell that wraps the API."""

from __future__ import annotations

from fastapi.testclient import TestClient

from vedavision.services.api import create_app
from vedavision.services.settings import Settings
from vedavision.web.app import create_web_app


def _client(settings: Settings) -> TestClient:
    return TestClient(create_web_app(create_app(settings=settings)))


def test_index_page_served(settings: Settings) -> None:
    r = _client(settings).get("/")
    assert r.status_code == 200
    assert "VedaVision" in r.text
    assert "/static/app.js" in r.text


def test_static_assets_served(settings: Settings) -> None:
    client = _client(settings)
    assert client.get("/static/app.js").status_code == 200
    assert client.get("/static/style.css").status_code == 200


def test_api_reachable_through_page_app(settings: Settings) -> None:
    data = _client(settings).get("/status").json()
    assert data["phase"] == "idle"
