from abc import ABC, abstractmethod
from contextlib import contextmanager

from vedavision.orchestrator.contracts import CameraState
from vedavision.orchestrator.errors import CaptureDeviceError

JPEG_QUALITY = 85
TARGET_WIDTH = 1920
TARGET_HEIGHT = 1080


class CameraAdapter(ABC):
    """
    closed → opening → (error | live);  live → closed on close() or after capture().
    The device is released on every way out of live.
    """

    def __init__(self, status_store):
        self.status = status_store
        self.state: CameraState = "closed"
        self.last_error: CaptureDeviceError | None = None

    @abstractmethod
    def _acquire(self, constrained: bool):
        """Open the device; raise CaptureDeviceError on failure."""
        ...

    @abstractmethod
    def _grab_jpeg(self) -> bytes:
        """Read one frame and return JPEG bytes; raise CaptureDeviceError on failure."""
        ...

    @abstractmethod
    def _release(self):
        """Release the device. Must be safe to call when nothing is held."""
        ...

    @property
    def is_holding(self) -> bool:
        return False

    def open(self) -> CameraState:
        if self.state == "live":
            return self.state
        self.state = "opening"
        self.last_error = None
        name = type(self).__name__
        try:
            try:
                self._acquire(constrained=True)
            except CaptureDeviceError as e:
                self.status.log(f"{name}: target resolution failed ({e.kind}), retrying unconstrained")
                self._release()
                self._acquire(constrained=False)
        except BaseException as e:
            self._fail("open", e)
            raise
        self.state = "live"
        self.status.log(f"{name}: live")
        return self.state

    def capture(self) -> bytes:
        if self.state != "live":
            raise CaptureDeviceError("unavailable", f"capture while {self.state}")
        try:
            jpeg = self._grab_jpeg()
        except BaseException as e:
            self._fail("capture", e)
            raise
        self.close()
        return jpeg

    def _fail(self, step: str, e: BaseException):
        self._release()
        self.state = "error"
        if not isinstance(e, CaptureDeviceError):
            e = CaptureDeviceError("unavailable", f"{type(e).__name__}: {e}")
        self.last_error = e
        self.status.log(f"{type(self).__name__}: {step} failed: {e.kind} {e.detail or ''}".rstrip())

    def close(self):
        self._release()
        self.state = "closed"
        self.last_error = None

    @contextmanager
    def session(self):
        self.open()
        try:
            yield self
        finally:
            self.close()
