"""
AnswerNode asks the model for the final reply over the full transcript.
"""

from __future__ import annotations

import logging

from clarifychat.agents import AnswerAgent
from ..state import ChatState

logger = logging.getLogger(__name__)


class AnswerNode:
    def __init__(self, agent: AnswerAgent | None = None) -> None:
        self.agent = agent or AnswerAgent()

    def __call__(self, state: ChatState) -> ChatState:
        if state.needs_clarification:
            return state

        state.content = self.agent(state.messages)
        logger.info(f"[ANSWER] Reply generated ({len(state.content)} chars)")
        return state
