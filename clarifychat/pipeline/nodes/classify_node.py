"""
ClassifyNode decides whether the latest message needs clarification.
"""

from __future__ import annotations

import logging

from clarifychat.agents import ClarifierAgent, InvalidClassification, normalize_questions
from ..state import ChatState

logger = logging.getLogger(__name__)


class ClassifyNode:
    def __init__(self, agent: ClarifierAgent | None = None) -> None:
        self.agent = agent or ClarifierAgent()

    def __call__(self, state: ChatState) -> ChatState:
        result = self.agent(state.subject)

        # Unusable classifier output never fails the request: fall through to answering.
        if isinstance(result, InvalidClassification):
            logger.warning(f"[CLARIFIER] Ignoring classifier output ({result.reason}); answering directly")
            state.classification_degraded = True
            return state

        questions = normalize_questions(result.payload.questions)
        if result.payload.needs_clarification and not questions:
            logger.info("[CLARIFIER] Clarification flagged without usable questions; answering directly")

        state.needs_clarification = result.payload.needs_clarification and bool(questions)
        state.questions = questions if state.needs_clarification else []
        logger.info(
            f"[CLARIFIER] needs_clarification={state.needs_clarification} questions={len(state.questions)}"
        )
        return state
