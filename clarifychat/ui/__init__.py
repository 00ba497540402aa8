"""
Streamlit chat UI and the session controller behind it.
"""

from .client import ChatClient, ChatClientError
from .session import (
    AwaitingAnswer,
    AwaitingClarification,
    ConversationSession,
    ErrorView,
    Idle,
    ViewState,
)

__all__ = [
    "AwaitingAnswer",
    "AwaitingClarification",
    "ChatClient",
    "ChatClientError",
    "ConversationSession",
    "ErrorView",
    "Idle",
    "ViewState",
]
