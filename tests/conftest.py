"""
Shared fixtures: a scripted LLM double and a configured OpenAI key.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

from clarifychat.config import Config
from clarifychat.errors import UpstreamFailure


class FakeLLM:
    """Returns scripted replies in order and records every call."""

    def __init__(self, *replies: Any) -> None:
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    def chat(self, model: str, messages: List[Dict[str, Any]], **kwargs: Any) -> str:
        self.calls.append({"model": model, "messages": messages, **kwargs})
        if not self.replies:
            raise AssertionError("FakeLLM ran out of scripted replies")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply)
        return reply


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
    return "sk-test"


@pytest.fixture
def upstream_failure():
    return UpstreamFailure("Rate limit reached", status_code=429, details='{"error": "rate_limit"}')
