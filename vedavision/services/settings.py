"""
Runtime configuration, read from the environment (vedavision/.env is loaded first).

  GEMINI_API_KEY            credential for the Gemini API (API_KEY also accepted)
  GEMINI_MODEL              default gemini-2.5-flash
  GEMINI_BASE_URL           default https://generativelanguage.googleapis.com/v1beta
  VISION_ADAPTER            gemini | mock               (default: gemini)
  CAMERA_ADAPTER            cv2 | mock                  (default: cv2)
  CAMERA_INDEX              OpenCV device index         (default: 0)
  MAX_IMAGE_SIZE_MB         upload limit                (default: 10)
  ANALYSIS_TIMEOUT_S        bound on the model call     (default: 30)
  SPLASH_DURATION_S         splash screen length        (default: 2.5)
  LOADING_STAGE_INTERVAL_S  loading phrase rotation     (default: 1.5)
"""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

SUPPORTED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")

LOADING_STAGES = (
    "Scanning botanical structure...",
    "Analyzing plant features...",
    "Identifying species...",
    "Compiling Ayurvedic data...",
)


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    vision_adapter: str = "gemini"
    camera_adapter: str = "cv2"
    camera_index: int = 0
    supported_image_types: tuple[str, ...] = SUPPORTED_IMAGE_TYPES
    max_image_size_mb: float = 10.0
    analysis_timeout_s: float = 30.0
    temperature: float = 0.2
    splash_duration_s: float = 2.5
    loading_stage_interval_s: float = 1.5
    loading_stages: tuple[str, ...] = field(default=LOADING_STAGES)

    @property
    def max_image_size_bytes(self) -> int:
        return int(self.max_image_size_mb * 1024 * 1024)

    @classmethod
    def from_env(cls, dotenv_path: str | None = "vedavision/.env") -> "Settings":
        if dotenv_path:
            load_dotenv(dotenv_path=dotenv_path, override=False)
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", cls.gemini_model),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", cls.gemini_base_url).rstrip("/"),
            vision_adapter=os.getenv("VISION_ADAPTER", cls.vision_adapter).lower(),
            camera_adapter=os.getenv("CAMERA_ADAPTER", cls.camera_adapter).lower(),
            camera_index=int(os.getenv("CAMERA_INDEX", "0")),
            max_image_size_mb=float(os.getenv("MAX_IMAGE_SIZE_MB", "10")),
            analysis_timeout_s=float(os.getenv("ANALYSIS_TIMEOUT_S", "30")),
            splash_duration_s=float(os.getenv("SPLASH_DURATION_S", "2.5")),
            loading_stage_interval_s=float(os.getenv("LOADING_STAGE_INTERVAL_S", "1.5")),
        )
