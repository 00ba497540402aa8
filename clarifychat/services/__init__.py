"""
Service helpers for LLM access.
"""

from .llm import LLM

__all__ = ["LLM"]
