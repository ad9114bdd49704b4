import threading
from dataclasses import dataclass, field
from typing import Optional, List

from vedavision.orchestrator.contracts import AnalysisResult, EncodedImage, Phase


@dataclass
class StatusStore:
    phase: Phase = "splash"
    started_at: float = 0.0
    analysis_started_at: Optional[float] = None
    image: Optional[EncodedImage] = None
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    logs: List[str] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def busy(self) -> bool:
        return self.phase == "analyzing"

    def begin_analysis(self, image: EncodedImage, now: float):
        # no stale data while a new request is out
        with self.lock:
            self.image = image
            self.result = None
            self.error = None
            self.error_code = None
            self.analysis_started_at = now
            self.phase = "analyzing"

    def succeed(self, result: AnalysisResult):
        with self.lock:
            self.result = result
            self.analysis_started_at = None
            self.phase = "result"

    def fail(self, code: str, message: str):
        with self.lock:
            self.error_code = code
            self.error = message
            self.analysis_started_at = None
            self.phase = "error"

    def clear(self):
        with self.lock:
            self.image = None
            self.result = None
            self.error = None
            self.error_code = None
            self.analysis_started_at = None
            self.phase = "idle"

    def log(self, msg: str):
        self.logs.append(msg)
        if len(self.logs) > 200:
            self.logs = self.logs[-200:]
