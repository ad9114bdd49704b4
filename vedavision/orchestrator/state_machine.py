import time

from vedavision.orchestrator.contracts import EncodedImage, Phase, RunResult
from vedavision.orchestrator import errors
from vedavision.services.settings import Settings


class ScanController:
    """
    splash → idle → analyzing → (result | error);  result | error → idle on reset()/retry().

    Splash and loading-stage rotation are derived from the clock, so there are
    no timer threads: whoever reads the phase gets the current one.
    """

    def __init__(self, vision, status_store, settings: Settings, clock=time.monotonic):
        self.vision = vision
        self.status = status_store
        self.settings = settings
        self.clock = clock
        self.status.started_at = clock()
        self.status.phase = "splash"

    def current_phase(self) -> Phase:
        with self.status.lock:
            if self.status.phase == "splash" and self.clock() - self.status.started_at >= self.settings.splash_duration_s:
                self.status.phase = "idle"
                self.status.log("splash done → idle")
            return self.status.phase

    def loading_stage(self) -> int | None:
        """Index into settings.loading_stages while analyzing, else None. Restarts at 0 per analysis."""
        with self.status.lock:
            started = self.status.analysis_started_at
            if self.current_phase() != "analyzing" or started is None:
                return None
            now = self.clock()
        elapsed = max(0.0, now - started)
        return int(elapsed / self.settings.loading_stage_interval_s) % len(self.settings.loading_stages)

    def submit(self, image: EncodedImage) -> RunResult:
        with self.status.lock:
            phase = self.current_phase()
            if phase == "analyzing":
                self.status.log("submit rejected: busy")
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_BUSY)
            if phase == "splash":
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_NOT_READY)
            if phase != "idle":
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_NOT_IDLE)
            self.status.begin_analysis(image, self.clock())

        t0 = time.time()
        self.status.log(f"analyze start media_type={image.media_type} size={len(image.data)}b64")
        try:
            result = self.vision.analyze(image)
        except errors.VedaVisionError as e:
            dt = int((time.time() - t0) * 1000)
            cause = getattr(e, "cause", None)
            self.status.log(f"error {type(e).__name__}: {cause or e.message}")
            self.status.fail(e.code, e.message)
            return RunResult(ok=False, phase="error", duration_ms=dt, error_code=e.code, error=e.message)
        except Exception as e:
            dt = int((time.time() - t0) * 1000)
            self.status.log(f"error {type(e).__name__}: {e}")
            self.status.fail(errors.ERR_ANALYSIS, errors.GENERIC_ANALYSIS_MESSAGE)
            return RunResult(ok=False, phase="error", duration_ms=dt, error_code=errors.ERR_ANALYSIS,
                             error=errors.GENERIC_ANALYSIS_MESSAGE)

        dt = int((time.time() - t0) * 1000)
        self.status.succeed(result)
        self.status.log(f"analyze done identified={result.identified} dt={dt}ms")
        return RunResult(ok=True, phase="result", duration_ms=dt, result=result)

    def reset(self) -> RunResult:
        with self.status.lock:
            phase = self.current_phase()
            if phase == "analyzing":
                self.status.log("reset rejected: busy")
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_BUSY)
            if phase == "splash":
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_NOT_READY)
            self.status.clear()
            self.status.log("reset → idle")
            return RunResult(ok=True, phase="idle")

    def retry(self) -> RunResult:
        """Error view's 'Try Again': back to idle to await a new image."""
        with self.status.lock:
            phase = self.current_phase()
            if phase != "error":
                return RunResult(ok=False, phase=phase, error_code=errors.ERR_NOT_IDLE)
            return self.reset()
