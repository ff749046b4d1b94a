from pydantic import BaseModel
from typing import Any, Optional


class ChatOut(BaseModel):
    success: bool
    reply: str
    # raw upstream prediction, only on a rendered reply
    data: Optional[Any] = None
    isGreeting: Optional[bool] = None
    error: Optional[str] = None
