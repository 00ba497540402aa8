"""
AnswerAgent produces the user-facing reply once no clarification is needed.
"""

from __future__ import annotations

from typing import List

from clarifychat.config import Config
from clarifychat.schemas import Message
from clarifychat.services.llm import LLM

ANSWER_PROMPT = (
    "You are a kind and courteous assistant. "
    "Answer the user's questions as concretely and practically as you can."
)


class AnswerAgent:
    def __init__(self, llm: LLM | None = None) -> None:
        self.llm = llm or LLM()

    def __call__(self, history: List[Message]) -> str:
        messages = [{"role": "system", "content": ANSWER_PROMPT}]
        messages.extend(msg.model_dump() for msg in history)
        return self.llm.chat(
            model=Config.ANSWER_MODEL,
            messages=messages,
            temperature=Config.ANSWER_TEMPERATURE,
        )
