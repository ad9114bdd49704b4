# -*- coding: utf-8 -*-
"""Tests for parsing and correcting model output."""

from __future__ import annotations

import json

import pytest

from vedavision.orchestrator.errors import AnalysisFailure, GENERIC_ANALYSIS_MESSAGE
from vedavision.orchestrator.interpreter import interpret


def test_full_result_is_parsed(neem: dict) -> None:
    result = interpret(json.dumps(neem))
    assert result.identified is True
    assert result.common_name == "Neem"
    assert result.ayurvedic_properties.dosha_karma == "Pacifies Pitta and Kapha"
    assert [m.method_name for m in result.preparation_methods] == ["Decoction (Kashayam)", "Paste"]
    assert result.medicinal_uses == neem["medicinalUses"]


@pytest.mark.parametrize("name", [None, "", "   "])
def test_identified_without_common_name_is_downgraded(neem: dict, name) -> None:
    if name is None:
        neem.pop("commonName")
    else:
        neem["commonName"] = name
    result = interpret(json.dumps(neem))
    assert result.identified is False


def test_not_identified_minimal_result() -> None:
    result = interpret('{"identified": false, "confidenceScore": 20}')
    assert result.identified is False
    assert result.confidence_score == 20
    assert result.medicinal_uses == []
    assert result.dosage is None
    assert result.safety_profile_score is None


def test_markdown_fence_is_tolerated() -> None:
    result = interpret('```json\n{"identified": false, "confidenceScore": 5}\n```')
    assert result.confidence_score == 5


@pytest.mark.parametrize("raw", [None, "", "  "])
def test_empty_response_fails(raw) -> None:
    with pytest.raises(AnalysisFailure) as exc:
        interpret(raw)
    assert exc.value.message == GENERIC_ANALYSIS_MESSAGE


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[1, 2, 3]",
        '{"confidenceScore": 50}',                                    # missing identified
        '{"identified": true}',                                       # missing confidenceScore
        '{"identified": false, "confidenceScore": 5, "dosage": {"adults": "x"}}',
        '{"identified": false, "confidenceScore": 5, "preparationMethods": [{"methodName": "Tea"}]}',
    ],
)
def test_shape_mismatch_fails(raw: str) -> None:
    with pytest.raises(AnalysisFailure):
        interpret(raw)


def test_result_is_immutable(neem: dict) -> None:
    result = interpret(json.dumps(neem))
    with pytest.raises(Exception):
        result.identified = False


def test_out_of_range_scores_are_kept(neem: dict) -> None:
    neem["safetyProfileScore"] = 0
    neem["confidenceScore"] = 101
    result = interpret(json.dumps(neem))
    assert result.identified is True
    assert result.common_name == "Neem"
    assert result.safety_profile_score == 0
    assert result.confidence_score == 101
