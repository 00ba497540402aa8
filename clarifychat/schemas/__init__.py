"""
Pydantic models shared by the chat API, the pipeline and the UI.
"""

from .chat import (
    AnswerResponse,
    ChatReply,
    ChatRequest,
    ClarificationItem,
    ClarificationQuestion,
    ClarificationResponse,
    ClassifierPayload,
    ErrorBody,
    Message,
    Role,
)

__all__ = [
    "AnswerResponse",
    "ChatReply",
    "ChatRequest",
    "ClarificationItem",
    "ClarificationQuestion",
    "ClarificationResponse",
    "ClassifierPayload",
    "ErrorBody",
    "Message",
    "Role",
]
