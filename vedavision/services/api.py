import time

from fastapi import FastAPI

from vedavision.services.models import (
    AnalyzeRequest, AnalyzeResponse, StepResponse, StatusResponse, ConfigResponse,
    CameraResponse, CameraErrorRequest, CameraErrorResponse, ShareResponse,
)
from vedavision.services.settings import Settings
from vedavision.services.status_store import StatusStore
from vedavision.services.intake import accept_image, encode_image, validate_upload
from vedavision.services.presentation import build_result_view, share_text, share_title
from vedavision.orchestrator.contracts import RunResult
from vedavision.orchestrator.state_machine import ScanController
from vedavision.orchestrator import errors


def make_vision(settings: Settings, status: StatusStore):
    # Values: gemini | mock  (default: gemini)
    if settings.vision_adapter == "mock":
        from vedavision.adapters.vision.mock_vision import MockVision
        return MockVision(status)
    from vedavision.adapters.vision.gemini_vision import GeminiVision
    return GeminiVision(status, settings)


def make_camera(settings: Settings, status: StatusStore):
    # Values: cv2 | mock  (default: cv2)
    if settings.camera_adapter == "mock":
        from vedavision.adapters.camera.mock_camera import MockCamera
        return MockCamera(status)
    from vedavision.adapters.camera.cv2_camera import CV2Camera
    return CV2Camera(status, index=settings.camera_index)


def _analyze_response(rr: RunResult, camera_error: str | None = None) -> AnalyzeResponse:
    return AnalyzeResponse(
        ok=rr.ok,
        phase=rr.phase,
        duration_ms=rr.duration_ms,
        error_code=rr.error_code,
        error=rr.error,
        camera_error=camera_error,
        view=build_result_view(rr.result) if rr.result else None,
    )


def create_app(settings: Settings | None = None, vision=None, camera=None, clock=None) -> FastAPI:
    settings = settings or Settings.from_env()
    status = StatusStore()
    vision = vision or make_vision(settings, status)
    camera = camera or make_camera(settings, status)
    orch = ScanController(vision, status, settings, clock=clock or time.monotonic)
    status.log(f"vision adapter: {type(vision).__name__}")
    status.log(f"camera adapter: {type(camera).__name__}")

    app = FastAPI(title="vedavision api")
    app.state.settings = settings
    app.state.status = status
    app.state.controller = orch
    app.state.camera = camera

    @app.get("/config", response_model=ConfigResponse)
    def get_config():
        return ConfigResponse(
            supported_image_types=list(settings.supported_image_types),
            max_image_size_mb=settings.max_image_size_mb,
            splash_duration_ms=int(settings.splash_duration_s * 1000),
            loading_stage_interval_ms=int(settings.loading_stage_interval_s * 1000),
            loading_stages=list(settings.loading_stages),
        )

    @app.get("/status", response_model=StatusResponse)
    def get_status():
        with status.lock:
            phase = orch.current_phase()
            stage = orch.loading_stage()
            busy = status.busy
            image, result = status.image, status.result
            error_code, error = status.error_code, status.error
            logs = list(status.logs)
        return StatusResponse(
            phase=phase,
            busy=busy,
            loading_stage=stage,
            loading_text=settings.loading_stages[stage] if stage is not None else None,
            image=image.data_url if image else None,
            view=build_result_view(result) if result else None,
            error_code=error_code,
            error=error,
            camera_state=camera.state,
            logs=logs,
        )

    @app.post("/analyze", response_model=AnalyzeResponse)
    def analyze(req: AnalyzeRequest):
        try:
            image = accept_image(req.image, settings)
        except errors.InputValidationError as e:
            status.log(f"ANALYZE rejected: {e.message}")
            return AnalyzeResponse(ok=False, phase=orch.current_phase(), error_code=e.code, error=e.message)
        status.log(f"ANALYZE received ({image.media_type})")
        return _analyze_response(orch.submit(image))

    @app.post("/reset", response_model=StepResponse)
    def reset():
        rr = orch.reset()
        return StepResponse(ok=rr.ok, phase=rr.phase, error_code=rr.error_code)

    @app.post("/retry", response_model=StepResponse)
    def retry():
        rr = orch.retry()
        return StepResponse(ok=rr.ok, phase=rr.phase, error_code=rr.error_code)

    @app.get("/share", response_model=ShareResponse)
    def share():
        result = status.result
        if result is None or not result.identified:
            return ShareResponse(ok=False, error_code=errors.ERR_NO_RESULT)
        return ShareResponse(ok=True, title=share_title(result), text=share_text(result))

    # ===== Server-side capture device =====

    def _camera_response(e: errors.CaptureDeviceError | None = None) -> CameraResponse:
        e = e or camera.last_error
        return CameraResponse(
            ok=e is None,
            state=camera.state,
            error_kind=e.kind if e else None,
            error=e.message if e else None,
        )

    @app.get("/camera/status", response_model=CameraResponse)
    def camera_status():
        return _camera_response()

    @app.post("/camera/open", response_model=CameraResponse)
    def camera_open():
        try:
            camera.open()
        except errors.CaptureDeviceError as e:
            return _camera_response(e)
        return _camera_response()

    @app.post("/camera/close", response_model=CameraResponse)
    def camera_close():
        camera.close()
        status.log("CAMERA closed")
        return _camera_response()

    @app.post("/camera/capture", response_model=AnalyzeResponse)
    def camera_capture():
        try:
            jpeg = camera.capture()
            validate_upload("image/jpeg", len(jpeg), settings)
        except errors.CaptureDeviceError as e:
            return AnalyzeResponse(ok=False, phase=orch.current_phase(), error_code=e.code,
                                   error=e.message, camera_error=e.kind)
        except errors.InputValidationError as e:
            return AnalyzeResponse(ok=False, phase=orch.current_phase(), error_code=e.code, error=e.message)
        status.log(f"CAMERA captured {len(jpeg)} bytes")
        return _analyze_response(orch.submit(encode_image(jpeg, "image/jpeg")))

    @app.post("/camera/error", response_model=CameraErrorResponse)
    def camera_error(req: CameraErrorRequest):
        """Browser getUserMedia failed: classify it and hand back the message to show."""
        kind = errors.classify_camera_error(req.name, req.message)
        status.log(f"CAMERA browser error name={req.name} → {kind}")
        return CameraErrorResponse(kind=kind, message=errors.CAMERA_MESSAGES[kind])

    @app.get("/health")
    def health():
        return {
            "api": True,
            "vision_adapter": type(vision).__name__,
            "vision_ready": vision.ready,
            "camera_adapter": type(camera).__name__,
            "camera_state": camera.state,
            "all_ok": vision.ready,
        }

    return app


app = create_app()
