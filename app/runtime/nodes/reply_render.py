# app/runtime/nodes/reply_render.py
from __future__ import annotations

from typing import Any, Dict
from pocketflow import AsyncNode

from app.runtime.render import render_prediction_reply
from app.schemas.prediction import PredictionResult


class ReplyRenderNode(AsyncNode):
    """Render the prediction into the chat reply text.

    A prediction that does not match PredictionResult raises a pydantic
    ValidationError; the app's catch-all turns it into a 500 envelope.
    """

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {"message": shared["message"], "prediction": shared["prediction"]}

    async def exec_async(self, prep: Dict[str, Any]) -> str:
        result = PredictionResult.model_validate(prep["prediction"])
        return render_prediction_reply(prep["message"], result)

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: str) -> str:
        shared["reply"] = exec_res
        return "ok"
