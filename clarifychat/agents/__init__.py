"""
LLM-backed agents used by the pipeline nodes.
"""

from .answer_agent import AnswerAgent
from .clarifier_agent import (
    ClarifierAgent,
    Classification,
    InvalidClassification,
    ValidClassification,
    normalize_questions,
    validate_classification,
)

__all__ = [
    "AnswerAgent",
    "ClarifierAgent",
    "Classification",
    "InvalidClassification",
    "ValidClassification",
    "normalize_questions",
    "validate_classification",
]
