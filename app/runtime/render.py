# app/runtime/render.py
from __future__ import annotations

from typing import List, Union

from app.schemas.prediction import PredictionResult

PROMPT_REPLY = "Please tell me about your symptoms."

GREETING_REPLY = (
    "👋 Hello! I'm your Medical Assistant. Please describe your symptoms, "
    "and I'll help identify possible conditions."
)

APOLOGY_REPLY = (
    "I'm sorry, I couldn't understand your symptoms. "
    "Could you please describe them more clearly?"
)


def is_greeting(message: str) -> bool:
    lowered = message.lower()
    return "hello" in lowered or "hi" in lowered or lowered.strip() == "hey"


def _numbered(items: List[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def _format_number(value: Union[int, float]) -> Union[int, float]:
    # whole floats print without a trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def render_prediction_reply(message: str, result: PredictionResult) -> str:
    """Build the conversational summary for one prediction.

    Fields are interpolated verbatim; lists are only joined or numbered.
    """
    sections = [
        f'🏥 Based on your symptoms: "{message}"',
        f"🔍 I detected these symptoms: {', '.join(result.matched_symptoms)}",
        f"💊 This might indicate: **{result.disease}**\n"
        f"📊 Confidence: {_format_number(result.confidence)}%",
        f"📖 About this condition:\n{result.description}",
        f"💉 Suggested medicines:\n{_numbered(result.suggested_medicines)}",
        f"⚠️ Important precautions:\n{_numbered(result.precautions)}",
        f"👨‍⚕️ Recommended specialist: {result.doctor_specialty}",
        result.disclaimer,
    ]
    return "\n\n".join(sections).strip()
