# -*- coding: utf-8 -*-
"""Tests for view data, chart data, method categories and share text."""

from __future__ import annotations

import pytest

from vedavision.orchestrator.contracts import AnalysisResult
from vedavision.services.presentation import (
    PLACEHOLDER,
    UNCERTAIN_TITLE,
    build_result_view,
    method_category,
    profile_chart,
    share_text,
    share_title,
)


def test_uncertain_view_ignores_other_fields(neem: dict) -> None:
    neem["identified"] = False
    view = build_result_view(AnalysisResult.model_validate(neem))
    assert view["kind"] == "uncertain"
    assert view["title"] == UNCERTAIN_TITLE
    assert "common_name" not in view


def test_detail_view_for_identified_result(neem: dict) -> None:
    view = build_result_view(AnalysisResult.model_validate(neem))
    assert view["kind"] == "detail"
    assert view["common_name"] == "Neem"
    assert [p["label"] for p in view["properties"]] == [
        "Rasa (Taste)", "Virya (Potency)", "Vipaka (Effect)", "Dosha Karma",
    ]
    assert [m["category"] for m in view["preparation_methods"]] == ["decoction", "paste"]
    assert [d["group"] for d in view["dosage"]] == ["Children", "Adults", "Elderly"]
    assert view["safety_warnings"] == neem["safetyWarnings"]


def test_detail_view_fills_placeholders_for_absent_fields() -> None:
    result = AnalysisResult.model_validate({"identified": True, "commonName": "Ragi", "confidenceScore": 70})
    view = build_result_view(result)
    assert view["botanical_name"] == PLACEHOLDER
    assert view["short_description"] == PLACEHOLDER
    assert all(p["value"] == PLACEHOLDER for p in view["properties"])
    assert view["dosage"] == []
    assert view["medicinal_uses"] == []


def test_profile_chart_axes(neem: dict) -> None:
    chart = profile_chart(AnalysisResult.model_validate(neem))
    assert [(a["subject"], a["value"]) for a in chart] == [
        ("Safety", 8), ("Confidence", 9.2), ("Availability", 8), ("Research", 7), ("Tradition", 9),
    ]
    assert all(a["full_mark"] == 10 for a in chart)


def test_profile_chart_defaults_when_scores_missing() -> None:
    chart = profile_chart(AnalysisResult.model_validate({"identified": True, "commonName": "x", "confidenceScore": 0}))
    assert chart[0]["value"] == 5
    assert chart[1]["value"] == 5


@pytest.mark.parametrize(
    "safety, confidence, expected",
    [
        (0, 101, (5, 10)),
        (12, -40, (10, 0)),
        (-2, 100, (0, 10)),
    ],
)
def test_profile_chart_clamps_scores(safety: int, confidence: int, expected: tuple) -> None:
    result = AnalysisResult.model_validate(
        {"identified": True, "commonName": "x", "confidenceScore": confidence, "safetyProfileScore": safety}
    )
    chart = profile_chart(result)
    assert (chart[0]["value"], chart[1]["value"]) == expected


@pytest.mark.parametrize(
    "name, category",
    [
        ("Decoction (Kashayam)", "decoction"),
        ("Herbal Tea", "infusion"),
        ("Leaf Paste", "paste"),
        ("Fresh Juice (Swarasa)", "extract"),
        ("Churna", "powder"),
        ("Bhasma", "smoke"),
        ("Porridge", "general"),
    ],
)
def test_method_category(name: str, category: str) -> None:
    assert method_category(name) == category


def test_share_text_format(neem: dict) -> None:
    result = AnalysisResult.model_validate(neem)
    text = share_text(result)
    assert text.startswith("🌿 *Neem* (Azadirachta indica)\n\nAyurvedic Name: Nimba")
    assert text.count("• ") == 4
    assert "Wound healing" not in text
    assert text.endswith("Powered by VedaVision AI")
    assert share_title(result) == "VedaVision: Neem"
