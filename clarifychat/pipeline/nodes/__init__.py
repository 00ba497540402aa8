"""
Node definitions for the clarification pipeline.
"""

from .answer_node import AnswerNode
from .classify_node import ClassifyNode

__all__ = ["AnswerNode", "ClassifyNode"]
