from vedavision.adapters.vision.base import VisionAdapter
from vedavision.orchestrator.contracts import AnalysisResult, EncodedImage

NEEM = {
    "identified": True,
    "commonName": "Neem",
    "botanicalName": "Azadirachta indica",
    "ayurvedicName": "Nimba",
    "family": "Meliaceae",
    "shortDescription": "A bitter evergreen tree prized in Ayurveda for cleansing the blood and skin.",
    "medicinalUses": [
        "Skin disorders such as acne and eczema",
        "Supports healthy blood sugar levels",
        "Oral hygiene (twig used as a toothbrush)",
        "Fever reduction",
        "Wound healing",
    ],
    "preparationMethods": [
        {"methodName": "Decoction (Kashayam)", "instructions": "Boil 10 leaves in 2 cups of water until reduced by half."},
        {"methodName": "Paste", "instructions": "Grind fresh leaves with a little water and apply to the skin."},
    ],
    "dosage": {
        "children": "Not recommended without medical supervision.",
        "adults": "30-50 ml decoction once daily.",
        "elderly": "20-30 ml decoction once daily.",
    },
    "safetyWarnings": [
        "Avoid during pregnancy.",
        "Prolonged internal use may lower sperm count.",
    ],
    "ayurvedicProperties": {
        "rasa": "Tikta (Bitter), Kashaya (Astringent)",
        "virya": "Sheeta (Cold)",
        "vipaka": "Katu (Pungent)",
        "doshaKarma": "Pacifies Pitta and Kapha",
    },
    "confidenceScore": 92,
    "safetyProfileScore": 8,
}


class MockVision(VisionAdapter):
    def __init__(self, status_store, canned: dict | None = None):
        self.status = status_store
        self._canned = canned or NEEM

    def analyze(self, image: EncodedImage) -> AnalysisResult:
        # Mock: ignore image, return canned result
        self.status.log(f"mock_vision: {self._canned.get('commonName')} ({image.media_type})")
        return AnalysisResult.model_validate(self._canned)
