"""
Per-request state carried through the clarification pipeline.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from clarifychat.schemas import ClarificationItem, Message


class ChatState(BaseModel):
    messages: List[Message]
    subject: str

    needs_clarification: bool = False
    questions: List[ClarificationItem] = Field(default_factory=list)
    # Set when the classifier output was unusable and the answer path was taken anyway.
    classification_degraded: bool = False

    content: Optional[str] = None

    @classmethod
    def from_messages(cls, messages: List[Message]) -> "ChatState":
        return cls(messages=messages, subject=messages[-1].content)
