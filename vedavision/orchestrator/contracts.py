from dataclasses import dataclass
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Phase = Literal["splash", "idle", "analyzing", "result", "error"]
CameraState = Literal["closed", "opening", "live", "error"]


@dataclass(frozen=True)
class EncodedImage:
    media_type: str            # e.g. "image/png"
    data: str                  # base64 payload, no "data:" prefix

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"


class _Wire(BaseModel):
    # camelCase on the wire (Gemini + browser), snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class PreparationMethod(_Wire):
    method_name: str
    instructions: str


class Dosage(_Wire):
    children: str
    adults: str
    elderly: str


class AyurvedicProperties(_Wire):
    rasa: Optional[str] = None          # taste
    virya: Optional[str] = None         # potency
    vipaka: Optional[str] = None        # post-digestive effect
    dosha_karma: Optional[str] = None   # effect on vata / pitta / kapha


class AnalysisResult(_Wire):
    identified: bool
    common_name: Optional[str] = None
    botanical_name: Optional[str] = None
    ayurvedic_name: Optional[str] = None
    family: Optional[str] = None
    short_description: Optional[str] = None
    medicinal_uses: list[str] = Field(default_factory=list)
    preparation_methods: list[PreparationMethod] = Field(default_factory=list)
    dosage: Optional[Dosage] = None
    safety_warnings: list[str] = Field(default_factory=list)
    ayurvedic_properties: Optional[AyurvedicProperties] = None
    confidence_score: int
    safety_profile_score: Optional[int] = None


@dataclass
class RunResult:
    ok: bool
    phase: Phase
    duration_ms: int = 0
    error_code: Optional[str] = None
    error: Optional[str] = None
    result: Optional[AnalysisResult] = None
