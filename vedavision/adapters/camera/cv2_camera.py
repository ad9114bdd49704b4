"""
OpenCV webcam capture adapter.
CAMERA_INDEX env var (default 0) selects the webcam device; on a phone-style
rig point it at the rear camera.
"""
import cv2

from vedavision.adapters.camera.base import CameraAdapter, JPEG_QUALITY, TARGET_WIDTH, TARGET_HEIGHT
from vedavision.orchestrator.errors import CaptureDeviceError, classify_camera_error


class CV2Camera(CameraAdapter):
    def __init__(self, status_store, index: int = 0, capture_factory=None):
        super().__init__(status_store)
        self._index = index
        self._factory = capture_factory or cv2.VideoCapture
        self._cap = None

    @property
    def is_holding(self) -> bool:
        return self._cap is not None

    def _acquire(self, constrained: bool):
        try:
            self._cap = self._factory(self._index)
            if not self._cap.isOpened():
                raise CaptureDeviceError("device_not_found", f"device {self._index} did not open")
            if constrained:
                ok_w = self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, TARGET_WIDTH)
                ok_h = self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, TARGET_HEIGHT)
                if not (ok_w and ok_h):
                    raise CaptureDeviceError("unavailable", f"{TARGET_WIDTH}x{TARGET_HEIGHT} not supported")
            ret, frame = self._cap.read()
            if not ret or frame is None:
                raise CaptureDeviceError("device_busy", "opened but no frame")
        except cv2.error as e:
            raise CaptureDeviceError(classify_camera_error(None, str(e)), str(e)) from e

    def _grab_jpeg(self) -> bytes:
        ret, frame = self._cap.read()
        if not ret or frame is None or frame.size == 0:
            raise CaptureDeviceError("unavailable", "empty frame")
        h, w = frame.shape[:2]
        if h == 0 or w == 0:
            raise CaptureDeviceError("unavailable", "zero-size frame")
        ok, buf = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])
        if not ok:
            raise CaptureDeviceError("unavailable", "jpeg encode failed")
        return bytes(buf)

    def _release(self):
        if self._cap is not None:
            self._cap.release()
            self._cap = None
