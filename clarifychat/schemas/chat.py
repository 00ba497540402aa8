"""
Wire and domain models for the clarification chat protocol.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictBool

Role = Literal["user", "assistant", "system"]


class Message(BaseModel):
    role: Role
    content: str


class ChatRequest(BaseModel):
    messages: List[Message] = Field(min_length=1)


class ClarificationItem(BaseModel):
    """A follow-up question as returned by the handler."""

    id: int
    question: str
    category: str


class ClarificationQuestion(BaseModel):
    """A follow-up question as held by the UI while the user answers it."""

    id: int
    question: str
    category: Optional[str] = None
    answer: str = ""


class ClarificationResponse(BaseModel):
    needsClarification: Literal[True] = True
    questions: List[ClarificationItem]


class AnswerResponse(BaseModel):
    content: str
    needsClarification: Literal[False] = False


ChatReply = Union[ClarificationResponse, AnswerResponse]


class ErrorBody(BaseModel):
    error: str
    details: Optional[str] = None


class ClassifierPayload(BaseModel):
    """Raw classifier JSON; question entries are normalised separately."""

    needs_clarification: StrictBool
    questions: List[Any]
