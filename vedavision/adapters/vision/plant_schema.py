# Instruction text and response schema sent with every analysis request.
# Field names here must stay in step with AnalysisResult (camelCase aliases).

PROMPT = (
    "Analyze the provided image. Is it a medicinal plant, leaf, raw millet, or pulse/legume?\n"
    "If yes, identify it precisely and provide detailed Ayurvedic medicinal and nutritional information.\n"
    "Return the data strictly in the specified JSON format.\n"
    "If it is none of these or cannot be identified, set 'identified' to false.\n"
    "Ensure Ayurvedic properties (Rasa, Virya, Vipaka) are accurate according to classical texts.\n"
    "For millets and pulses, include dietary benefits in 'medicinalUses' and serving suggestions in 'dosage'.\n"
    "Provide safety warnings if applicable (e.g., cooking requirements to remove anti-nutrients, allergens)."
)

_STRING = {"type": "STRING"}

PLANT_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "identified": {
            "type": "BOOLEAN",
            "description": "True if a specific plant, millet, or pulse is clearly identified, false if unclear.",
        },
        "commonName": _STRING,
        "botanicalName": _STRING,
        "ayurvedicName": {"type": "STRING", "description": "The Sanskrit or Ayurvedic name."},
        "family": _STRING,
        "shortDescription": _STRING,
        "medicinalUses": {
            "type": "ARRAY",
            "items": _STRING,
            "description": "List of key medicinal or health benefits.",
        },
        "preparationMethods": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "methodName": {"type": "STRING", "description": "e.g., Decoction, Paste, Porridge"},
                    "instructions": {"type": "STRING", "description": "Brief instructions."},
                },
                "required": ["methodName", "instructions"],
            },
        },
        "dosage": {
            "type": "OBJECT",
            "properties": {"children": _STRING, "adults": _STRING, "elderly": _STRING},
            "required": ["children", "adults", "elderly"],
        },
        "safetyWarnings": {
            "type": "ARRAY",
            "items": _STRING,
            "description": "Contraindications, side effects, or warnings.",
        },
        "ayurvedicProperties": {
            "type": "OBJECT",
            "properties": {
                "rasa": {"type": "STRING", "description": "Taste (e.g., Sweet, Bitter)"},
                "virya": {"type": "STRING", "description": "Potency (e.g., Hot, Cold)"},
                "vipaka": {"type": "STRING", "description": "Post-digestive effect"},
                "doshaKarma": {"type": "STRING", "description": "Effect on Vata, Pitta, Kapha"},
            },
        },
        "confidenceScore": {
            "type": "INTEGER",
            "description": "Confidence in identification from 0 to 100.",
        },
        "safetyProfileScore": {
            "type": "INTEGER",
            "description": "General safety rating from 1 (toxic) to 10 (very safe).",
        },
    },
    "required": ["identified", "confidenceScore"],
}
