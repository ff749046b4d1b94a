# app/runtime/flow.py
from __future__ import annotations

from pocketflow import AsyncFlow
from app.runtime.nodes.intake import ChatIntakeNode, FixedReplyNode
from app.runtime.nodes.predict import SymptomPredictNode
from app.runtime.nodes.reply_render import ReplyRenderNode
from app.runtime.nodes.predict_failure import PredictFailureNode
from app.runtime.render import GREETING_REPLY, PROMPT_REPLY


def make_chat_flow() -> AsyncFlow:
    """Chat turn against the prediction API:
    intake → (empty → prompt)
           → (greeting → greeting)
           → (symptoms → predict → (ok → reply_render)
                                  → (failed → predict_failure))
    """

    # Instantiate all nodes
    intake = ChatIntakeNode()
    prompt = FixedReplyNode(PROMPT_REPLY)
    greeting = FixedReplyNode(GREETING_REPLY, greeting=True)
    predict = SymptomPredictNode()
    reply_render = ReplyRenderNode()
    predict_failure = PredictFailureNode()

    # --- Routing setup ---

    # 1. intake routes
    intake.successors = {
        "empty": prompt,
        "greeting": greeting,
        "symptoms": predict,
    }

    # 2. prediction outcome
    predict.successors = {
        "ok": reply_render,
        "failed": predict_failure,
    }

    # --- Flow entry point ---
    return AsyncFlow(start=intake)
