"""
View data derived from an AnalysisResult: what the page renders, the safety
radar chart, preparation-method icon categories and the share text.
"""
from vedavision.orchestrator.contracts import AnalysisResult

PLACEHOLDER = "Not available"

UNCERTAIN_TITLE = "Identification Uncertain"
UNCERTAIN_TEXT = (
    "Our AI couldn't confidently identify a medicinal plant, millet, or pulse in this image. "
    "Please try uploading a clearer photo against a plain background."
)

# Fixed axes, not reported by the model
_STATIC_AXES = (("Availability", 8), ("Research", 7), ("Tradition", 9))

# Checked in order; first keyword hit wins
_METHOD_KEYWORDS = (
    ("decoction", ("decoction", "boil", "soup", "kashayam", "cook")),
    ("infusion", ("tea", "infusion", "drink", "hot water")),
    ("paste", ("paste", "poultice", "chutney", "kalka", "ground")),
    ("extract", ("oil", "juice", "extract", "ghee", "swarasa")),
    ("powder", ("powder", "churna", "dust", "ash")),
    ("smoke", ("smoke", "burn", "bhasma")),
)


def method_category(method_name: str) -> str:
    name = method_name.lower()
    for category, words in _METHOD_KEYWORDS:
        if any(w in name for w in words):
            return category
    return "general"


def _on_scale(value: float) -> float:
    return min(max(value, 0), 10)


def profile_chart(result: AnalysisResult) -> list[dict]:
    # scores arrive unchecked from the model; clamp onto the 0-10 chart
    safety = _on_scale(result.safety_profile_score or 5)
    confidence = _on_scale((result.confidence_score or 50) / 10)
    axes = [{"subject": "Safety", "value": safety, "full_mark": 10},
            {"subject": "Confidence", "value": confidence, "full_mark": 10}]
    axes += [{"subject": s, "value": v, "full_mark": 10} for s, v in _STATIC_AXES]
    return axes


def _or_placeholder(value: str | None) -> str:
    return value if value and value.strip() else PLACEHOLDER


def build_result_view(result: AnalysisResult) -> dict:
    if not result.identified:
        return {
            "kind": "uncertain",
            "title": UNCERTAIN_TITLE,
            "text": UNCERTAIN_TEXT,
            "confidence_score": result.confidence_score,
        }

    props = result.ayurvedic_properties
    dosage = result.dosage
    return {
        "kind": "detail",
        "common_name": result.common_name,
        "botanical_name": _or_placeholder(result.botanical_name),
        "ayurvedic_name": _or_placeholder(result.ayurvedic_name),
        "family": _or_placeholder(result.family),
        "short_description": _or_placeholder(result.short_description),
        "confidence_score": result.confidence_score,
        "safety_profile_score": result.safety_profile_score,
        "properties": [
            {"label": "Rasa (Taste)", "value": _or_placeholder(props.rasa if props else None)},
            {"label": "Virya (Potency)", "value": _or_placeholder(props.virya if props else None)},
            {"label": "Vipaka (Effect)", "value": _or_placeholder(props.vipaka if props else None)},
            {"label": "Dosha Karma", "value": _or_placeholder(props.dosha_karma if props else None)},
        ],
        "medicinal_uses": list(result.medicinal_uses),
        "preparation_methods": [
            {"name": m.method_name, "instructions": m.instructions, "category": method_category(m.method_name)}
            for m in result.preparation_methods
        ],
        "dosage": [
            {"group": "Children", "value": dosage.children},
            {"group": "Adults", "value": dosage.adults},
            {"group": "Elderly", "value": dosage.elderly},
        ] if dosage else [],
        "safety_warnings": list(result.safety_warnings),
        "chart": profile_chart(result),
    }


def share_title(result: AnalysisResult) -> str:
    return f"VedaVision: {result.common_name}"


def share_text(result: AnalysisResult) -> str:
    uses = "\n".join(f"• {u}" for u in result.medicinal_uses[:4])
    return (
        f"🌿 *{result.common_name}* ({_or_placeholder(result.botanical_name)})\n\n"
        f"Ayurvedic Name: {_or_placeholder(result.ayurvedic_name)}\n\n"
        f"\"{_or_placeholder(result.short_description)}\"\n\n"
        f"💊 *Medicinal Uses:*\n{uses}\n\n"
        "Powered by VedaVision AI"
    )
