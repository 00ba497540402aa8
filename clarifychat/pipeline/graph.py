"""
ClarifyGraph wires the classify and answer nodes into a sequential plan.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import ValidationError

from clarifychat.agents import AnswerAgent, ClarifierAgent
from clarifychat.config import Config
from clarifychat.errors import ConfigurationError, InvalidRequest
from clarifychat.schemas import AnswerResponse, ChatReply, ChatRequest, ClarificationResponse, Message
from clarifychat.services.llm import LLM

from .nodes import AnswerNode, ClassifyNode
from .state import ChatState

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request format"
MISSING_API_KEY = "OpenAI API key is not configured"


def require_api_key() -> None:
    """Fail fast when the OpenAI key is missing; runs before the body is looked at."""
    if not Config.OPENAI_API_KEY:
        raise ConfigurationError(MISSING_API_KEY)


def parse_messages(raw: Any) -> List[Message]:
    """Validate a raw ``messages`` value from a request body."""
    if not raw or not isinstance(raw, list):
        raise InvalidRequest(INVALID_REQUEST)
    try:
        return ChatRequest(messages=raw).messages
    except ValidationError as exc:
        raise InvalidRequest(INVALID_REQUEST, details=f"{exc.error_count()} invalid message field(s)") from exc


class ClarifyGraph:
    def __init__(
        self,
        classify_node: ClassifyNode | None = None,
        answer_node: AnswerNode | None = None,
        llm: LLM | None = None,
    ) -> None:
        # One LLM wrapper shared by both nodes unless nodes are injected.
        shared = llm or LLM()
        if classify_node is None:
            classify_node = ClassifyNode(ClarifierAgent(shared))
        if answer_node is None:
            answer_node = AnswerNode(AnswerAgent(shared))
        self.classify_node = classify_node
        self.answer_node = answer_node

    def run_once(self, raw_messages: Any) -> ChatReply:
        """
        Handle one chat request.

        Raises ConfigurationError when no OpenAI key is set, InvalidRequest for a
        missing/empty/malformed transcript and UpstreamFailure when a model call fails.
        """
        require_api_key()
        messages = parse_messages(raw_messages)
        state = ChatState.from_messages(messages)
        logger.info(f"[GRAPH] Handling transcript of {len(messages)} message(s)")

        state = self.classify_node(state)
        if state.needs_clarification:
            return ClarificationResponse(questions=state.questions)

        state = self.answer_node(state)
        return AnswerResponse(content=state.content or "")
