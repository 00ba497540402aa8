"""
ClarifierAgent asks the model whether a question is ambiguous and, if so,
which follow-up questions would resolve it.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Literal, Union

from pydantic import BaseModel, ValidationError

from clarifychat.config import Config
from clarifychat.errors import MalformedUpstreamPayload
from clarifychat.schemas import ClarificationItem, ClassifierPayload
from clarifychat.services.llm import LLM

logger = logging.getLogger(__name__)

CLARIFIER_PROMPT = """Judge how ambiguous the given question is and reply with JSON in exactly this shape:
{
  "needs_clarification": true or false,
  "questions": [
    {
      "id": sequential number starting at 1,
      "question": "the follow-up question to ask",
      "category": "category of the follow-up question"
    }
  ]
}

Set needs_clarification to true when follow-up questions are needed, otherwise false.
Only include concrete questions in questions when needs_clarification is true.
When there are no questions, return an empty array []."""


class ValidClassification(BaseModel):
    kind: Literal["valid"] = "valid"
    payload: ClassifierPayload


class InvalidClassification(BaseModel):
    kind: Literal["invalid"] = "invalid"
    reason: str


Classification = Union[ValidClassification, InvalidClassification]


def _decode(raw: str | None) -> ClassifierPayload:
    if not raw:
        raise MalformedUpstreamPayload("classifier returned no content")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedUpstreamPayload(f"not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedUpstreamPayload(f"expected a JSON object, got {type(data).__name__}")
    try:
        return ClassifierPayload.model_validate(data)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise MalformedUpstreamPayload(f"unexpected shape ({fields})") from exc


def validate_classification(raw: str | None) -> Classification:
    """Decode classifier output into a tagged Valid/Invalid result; never raises."""
    try:
        return ValidClassification(payload=_decode(raw))
    except MalformedUpstreamPayload as exc:
        return InvalidClassification(reason=str(exc))


def _question_id(value: Any, position: int) -> int:
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return position


def normalize_questions(entries: List[Any], default_category: str | None = None) -> List[ClarificationItem]:
    """
    Turn raw question entries into ClarificationItems.
    Entries without question text are dropped; ids fall back to the 1-based position.
    """
    category_fallback = default_category or Config.DEFAULT_CATEGORY
    items: List[ClarificationItem] = []
    for position, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            continue
        text = entry.get("question")
        if not isinstance(text, str) or not text.strip():
            continue
        category = entry.get("category")
        items.append(
            ClarificationItem(
                id=_question_id(entry.get("id"), position),
                question=text.strip(),
                category=category.strip() if isinstance(category, str) and category.strip() else category_fallback,
            )
        )
    return items


class ClarifierAgent:
    def __init__(self, llm: LLM | None = None) -> None:
        self.llm = llm or LLM()

    def __call__(self, subject: str) -> Classification:
        messages = [
            {"role": "system", "content": CLARIFIER_PROMPT},
            {"role": "user", "content": f'Analyze the following question:\n"{subject}"'},
        ]
        content = self.llm.chat(
            model=Config.OPENAI_MODEL,
            messages=messages,
            response_format={"type": "json_object"},
            temperature=Config.CLASSIFIER_TEMPERATURE,
            max_tokens=Config.CLASSIFIER_MAX_TOKENS,
        )
        logger.debug(f"[CLARIFIER] Raw classifier output: {content}")
        return validate_classification(content)
