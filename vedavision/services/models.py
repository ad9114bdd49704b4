from pydantic import BaseModel
from typing import Literal, Optional

PhaseName = Literal["splash", "idle", "analyzing", "result", "error"]


class AnalyzeRequest(BaseModel):
    image: str  # data URL ("data:image/png;base64,...") or raw base64 JPEG


class AnalyzeResponse(BaseModel):
    ok: bool
    phase: PhaseName
    duration_ms: int = 0
    error_code: Optional[str] = None
    error: Optional[str] = None
    camera_error: Optional[str] = None   # CameraErrorKind when the frame never made it
    view: Optional[dict] = None          # build_result_view() output


class StepResponse(BaseModel):
    ok: bool
    phase: PhaseName
    error_code: Optional[str] = None


class StatusResponse(BaseModel):
    phase: PhaseName
    busy: bool
    loading_stage: Optional[int] = None
    loading_text: Optional[str] = None
    image: Optional[str] = None          # data URL of the image under analysis / analysed
    view: Optional[dict] = None
    error_code: Optional[str] = None
    error: Optional[str] = None
    camera_state: str
    logs: list[str]


class ConfigResponse(BaseModel):
    supported_image_types: list[str]
    max_image_size_mb: float
    splash_duration_ms: int
    loading_stage_interval_ms: int
    loading_stages: list[str]


class CameraResponse(BaseModel):
    ok: bool
    state: Literal["closed", "opening", "live", "error"]
    error_kind: Optional[str] = None
    error: Optional[str] = None


class CameraErrorRequest(BaseModel):
    name: Optional[str] = None       # DOMException.name from getUserMedia
    message: Optional[str] = None


class CameraErrorResponse(BaseModel):
    kind: str
    message: str


class ShareResponse(BaseModel):
    ok: bool
    title: Optional[str] = None
    text: Optional[str] = None
    error_code: Optional[str] = None
