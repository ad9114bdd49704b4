"""
Gemini plant / millet / pulse identifier.

One generateContent call per image over the REST API: inline image, fixed
instruction text, JSON response schema, low temperature. The reply is handed
to the interpreter. Every failure after the credential check surfaces as
AnalysisFailure with the generic message; the cause goes to the status log.

Requires GEMINI_API_KEY in vedavision/.env or the environment.
"""
import httpx

from vedavision.adapters.vision.base import VisionAdapter
from vedavision.adapters.vision.plant_schema import PLANT_SCHEMA, PROMPT
from vedavision.orchestrator.contracts import AnalysisResult, EncodedImage
from vedavision.orchestrator.errors import AnalysisFailure, ConfigurationError
from vedavision.orchestrator.interpreter import interpret
from vedavision.services.intake import split_data_url
from vedavision.services.settings import Settings


def build_request(image: EncodedImage | str, temperature: float = 0.2) -> dict:
    if isinstance(image, str):
        data, media_type = split_data_url(image)
    else:
        data, media_type = image.data, image.media_type
    return {
        "contents": [
            {
                "parts": [
                    {"inlineData": {"mimeType": media_type, "data": data}},
                    {"text": PROMPT},
                ]
            }
        ],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": PLANT_SCHEMA,
            "temperature": temperature,
        },
    }


def response_text(body) -> str | None:
    if not isinstance(body, dict):
        return None
    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return None
    content = candidates[0].get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None
    text = "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))
    return text or None


class GeminiVision(VisionAdapter):
    def __init__(self, status_store, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.status = status_store
        self.settings = settings
        self._transport = transport
        if self.ready:
            self.status.log(f"gemini_vision: ready (model={settings.gemini_model})")
        else:
            self.status.log("gemini_vision: GEMINI_API_KEY not set")

    @property
    def ready(self) -> bool:
        return bool(self.settings.gemini_api_key)

    @property
    def url(self) -> str:
        return f"{self.settings.gemini_base_url}/models/{self.settings.gemini_model}:generateContent"

    def analyze(self, image: EncodedImage | str) -> AnalysisResult:
        if not self.ready:
            raise ConfigurationError("API Key is missing. Please configure the environment.")

        payload = build_request(image, temperature=self.settings.temperature)
        headers = {
            "x-goog-api-key": self.settings.gemini_api_key,
            "Content-Type": "application/json",
        }

        try:
            with httpx.Client(transport=self._transport, timeout=self.settings.analysis_timeout_s) as client:
                resp = client.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            self.status.log(f"gemini_vision: transport error: {type(e).__name__}: {e}")
            raise AnalysisFailure(cause=str(e)) from e

        if not resp.is_success:
            self.status.log(f"gemini_vision: HTTP {resp.status_code}: {resp.text[:300]}")
            raise AnalysisFailure(cause=f"HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            self.status.log("gemini_vision: response body is not JSON")
            raise AnalysisFailure(cause="response body is not JSON") from e

        raw = response_text(body)
        try:
            result = interpret(raw)
        except AnalysisFailure as e:
            self.status.log(f"gemini_vision: {e.cause}")
            raise

        self.status.log(
            f"gemini_vision: → identified={result.identified} name={result.common_name!r} "
            f"conf={result.confidence_score}"
        )
        return result
