"""Mock camera: serves a generated leaf-green frame, or fails on demand for testing."""
import cv2
import numpy as np

from vedavision.adapters.camera.base import CameraAdapter, JPEG_QUALITY
from vedavision.orchestrator.errors import CaptureDeviceError


class MockCamera(CameraAdapter):
    def __init__(self, status_store, fail_open: str | None = None, fail_capture: str | None = None,
                 fail_constrained: bool = False):
        super().__init__(status_store)
        self.fail_open = fail_open
        self.fail_capture = fail_capture
        self.fail_constrained = fail_constrained
        self.acquire_calls: list[bool] = []
        self._held = False

    @property
    def is_holding(self) -> bool:
        return self._held

    def _acquire(self, constrained: bool):
        self.acquire_calls.append(constrained)
        self._held = True
        if constrained and self.fail_constrained:
            raise CaptureDeviceError("unavailable", "constraints not satisfiable")
        if self.fail_open:
            raise CaptureDeviceError(self.fail_open, "mock")

    def _grab_jpeg(self) -> bytes:
        if self.fail_capture:
            raise CaptureDeviceError(self.fail_capture, "mock")
        frame = np.zeros((120, 160, 3), dtype=np.uint8)
        frame[:, :] = (60, 160, 40)  # BGR
        ok, buf = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])
        self.status.log("mock_camera: serving generated frame")
        return bytes(buf)

    def _release(self):
        self._held = False
