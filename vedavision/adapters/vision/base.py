from vedavision.orchestrator.contracts import AnalysisResult, EncodedImage


class VisionAdapter:
    def analyze(self, image: EncodedImage) -> AnalysisResult:
        """Return AnalysisResult, or raise AnalysisFailure / ConfigurationError."""
        raise NotImplementedError

    @property
    def ready(self) -> bool:
        return True
