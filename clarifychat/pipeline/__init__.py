"""
Two-step clarification pipeline: classify ambiguity, then answer.
"""

from .graph import ClarifyGraph
from .state import ChatState

__all__ = ["ClarifyGraph", "ChatState"]
