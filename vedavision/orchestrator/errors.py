from typing import Literal

ERR_BUSY = "BUSY"
ERR_NOT_READY = "NOT_READY"
ERR_NOT_IDLE = "NOT_IDLE"
ERR_INVALID_INPUT = "INVALID_INPUT"
ERR_CONFIG = "CONFIG"
ERR_ANALYSIS = "ANALYSIS_FAILED"
ERR_CAMERA = "CAMERA"
ERR_NO_RESULT = "NO_RESULT"

GENERIC_ANALYSIS_MESSAGE = "Failed to process the image. Please try again."

CameraErrorKind = Literal[
    "permission_denied",
    "device_not_found",
    "device_busy",
    "permission_dismissed",
    "insecure_context",
    "unavailable",
]

CAMERA_MESSAGES: dict[str, str] = {
    "permission_denied": "Camera permission was denied. Please allow camera access in your browser settings.",
    "device_not_found": "No camera device found.",
    "device_busy": "Camera is currently in use by another application.",
    "permission_dismissed": "Permission request was dismissed. Please tap 'Try Again' and allow access.",
    "insecure_context": "Camera access requires a secure connection (HTTPS) or localhost.",
    "unavailable": "Unable to access camera.",
}


class VedaVisionError(Exception):
    code = ERR_ANALYSIS

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(VedaVisionError):
    code = ERR_CONFIG


class InputValidationError(VedaVisionError):
    code = ERR_INVALID_INPUT


class AnalysisFailure(VedaVisionError):
    """Any failure during or after the model call. `message` is user-facing, `cause` is for the log."""
    code = ERR_ANALYSIS

    def __init__(self, message: str = GENERIC_ANALYSIS_MESSAGE, cause: str | None = None):
        super().__init__(message)
        self.cause = cause


class CaptureDeviceError(VedaVisionError):
    code = ERR_CAMERA

    def __init__(self, kind: CameraErrorKind, detail: str | None = None):
        super().__init__(CAMERA_MESSAGES[kind])
        self.kind = kind
        self.detail = detail


def classify_camera_error(name: str | None, message: str | None = None) -> CameraErrorKind:
    """Map a browser DOMException name (or an OpenCV failure text) onto a camera error kind."""
    name = name or ""
    msg = (message or "").lower()
    if name in ("NotAllowedError", "PermissionDeniedError", "SecurityError") or "permission denied" in msg:
        return "permission_denied"
    if name in ("NotFoundError", "DevicesNotFoundError", "OverconstrainedError") or "device not found" in msg:
        return "device_not_found"
    if name in ("NotReadableError", "TrackStartError", "AbortError") or "in use" in msg or "busy" in msg:
        return "device_busy"
    if name == "PermissionDismissedError" or "dismissed" in msg:
        return "permission_dismissed"
    if name == "InsecureContextError" or "secure context" in msg or "https" in msg:
        return "insecure_context"
    return "unavailable"
