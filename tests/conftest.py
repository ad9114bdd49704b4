# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import base64
import copy

import pytest

from vedavision.adapters.vision.mock_vision import NEEM
from vedavision.services.settings import Settings
from vedavision.services.status_store import StatusStore


PNG_1X1_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO7+fJ8AAAAASUVORK5CYII="
PNG_1X1_DATA_URL = f"data:image/png;base64,{PNG_1X1_B64}"


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.t = start

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


def data_url(media_type: str, size_bytes: int) -> str:
    payload = base64.standard_b64encode(b"\xff" * size_bytes).decode("ascii")
    return f"data:{media_type};base64,{payload}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def status() -> StatusStore:
    return StatusStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", vision_adapter="mock", camera_adapter="mock", splash_duration_s=0.0)


@pytest.fixture
def neem() -> dict:
    return copy.deepcopy(NEEM)
