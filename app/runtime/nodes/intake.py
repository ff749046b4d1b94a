# app/runtime/nodes/intake.py
from __future__ import annotations

from typing import Any, Dict
from pocketflow import AsyncNode

from app.runtime.render import is_greeting


class ChatIntakeNode(AsyncNode):
    """Classify an incoming chat message before any upstream call.
    Routes: "empty" | "greeting" | "symptoms".
    """

    async def prep_async(self, shared: Dict[str, Any]) -> Any:
        return shared.get("message")

    async def exec_async(self, message: Any) -> str:
        if not isinstance(message, str) or not message.strip():
            return "empty"
        if is_greeting(message):
            return "greeting"
        return "symptoms"

    async def post_async(self, shared: Dict[str, Any], prep: Any, exec_res: str) -> str:
        shared["intent"] = exec_res
        return exec_res


class FixedReplyNode(AsyncNode):
    """Terminal node answering with a canned reply (no upstream call)."""

    def __init__(self, reply: str, *, greeting: bool = False, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.reply = reply
        self.greeting = greeting

    async def prep_async(self, shared: Dict[str, Any]) -> None:
        return None

    async def exec_async(self, prep: None) -> str:
        return self.reply

    async def post_async(self, shared: Dict[str, Any], prep: None, exec_res: str) -> str:
        shared["reply"] = exec_res
        if self.greeting:
            shared["is_greeting"] = True
        return "ok"
