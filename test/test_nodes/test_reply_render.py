import pytest
from pydantic import ValidationError

from app.runtime.nodes.reply_render import ReplyRenderNode
from app.runtime.render import render_prediction_reply
from app.schemas.prediction import PredictionResult

from conftest import PREDICTION


def test_render_sections_in_order():
    reply = render_prediction_reply("fever and nausea", PredictionResult(**PREDICTION))

    expected = [
        '🏥 Based on your symptoms: "fever and nausea"',
        "🔍 I detected these symptoms: headache, nausea",
        "💊 This might indicate: **Migraine**",
        "📊 Confidence: 87.5%",
        "📖 About this condition:\nA neurological condition causing recurrent headaches.",
        "💉 Suggested medicines:\n1. Ibuprofen\n2. Sumatriptan",
        "⚠️ Important precautions:\n1. Rest in a dark room\n2. Stay hydrated\n3. Avoid loud noise",
        "👨‍⚕️ Recommended specialist: Neurologist",
        "This is not a substitute for professional medical advice.",
    ]
    positions = [reply.index(part) for part in expected]
    assert positions == sorted(positions)
    assert reply.endswith(PREDICTION["disclaimer"])
    assert reply == reply.strip()


def test_render_keeps_integer_confidence():
    result = PredictionResult(**{**PREDICTION, "confidence": 92})
    assert "📊 Confidence: 92%" in render_prediction_reply("cough", result)


@pytest.mark.asyncio
async def test_reply_render_node_sets_reply():
    shared = {"message": "fever", "prediction": PREDICTION}
    action = await ReplyRenderNode().run_async(shared)
    assert action == "ok"
    assert "**Migraine**" in shared["reply"]


@pytest.mark.asyncio
async def test_reply_render_node_rejects_bad_prediction():
    shared = {"message": "fever", "prediction": {"disease": "Flu"}}
    with pytest.raises(ValidationError):
        await ReplyRenderNode().run_async(shared)


@pytest.mark.parametrize("confidence, shown", [(87.0, "87%"), (87.5, "87.5%"), (0.0, "0%"), (100, "100%")])
def test_render_confidence_number_format(confidence, shown):
    result = PredictionResult(**{**PREDICTION, "confidence": confidence})
    assert f"📊 Confidence: {shown}\n" in render_prediction_reply("cough", result) + "\n"
