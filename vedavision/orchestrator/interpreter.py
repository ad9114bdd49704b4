"""
Result interpreter: raw model text -> AnalysisResult.

Strict parse: anything that does not match the AnalysisResult shape becomes an
AnalysisFailure, so a half-typed object never reaches the UI.
"""
import json
import re

from pydantic import ValidationError

from vedavision.orchestrator.contracts import AnalysisResult
from vedavision.orchestrator.errors import AnalysisFailure

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def interpret(raw_text: str | None) -> AnalysisResult:
    if not raw_text or not raw_text.strip():
        raise AnalysisFailure(cause="empty response from model")

    text = _FENCE.sub("", raw_text.strip())
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AnalysisFailure(cause=f"response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise AnalysisFailure(cause=f"response is {type(data).__name__}, expected object")

    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise AnalysisFailure(cause=f"response shape mismatch: {e.error_count()} error(s)") from e

    return correct(result)


def correct(result: AnalysisResult) -> AnalysisResult:
    """An 'identified' claim without a common name is not trusted."""
    if result.identified and not (result.common_name or "").strip():
        return result.model_copy(update={"identified": False})
    return result
