"""
LLM helpers wrapping the OpenAI client with safe defaults.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

import openai
from openai import OpenAI

from clarifychat.config import Config
from clarifychat.errors import NO_DETAILS, UpstreamFailure

logger = logging.getLogger(__name__)


def _error_details(exc: openai.OpenAIError) -> str:
    body = getattr(exc, "body", None)
    if not body:
        return NO_DETAILS
    if isinstance(body, str):
        return body
    return json.dumps(body, ensure_ascii=False, default=str)


class LLM:
    def __init__(self, api_key: str | None = None, client: OpenAI | None = None) -> None:
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> OpenAI:
        # Built on first use so the app can start (and report a clean 500) without a key.
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key or Config.OPENAI_API_KEY)
        return self._client

    def chat(self, model: str, messages: List[Dict[str, Any]], **kwargs: Any) -> str:
        """
        Thin wrapper over the Chat Completions API returning the reply text.
        - Passes through response_format, temperature, max_tokens and friends.
        - Any SDK failure is re-raised as UpstreamFailure with the upstream status.
        """
        params: Dict[str, Any] = {"model": model, "messages": messages}
        params.update(kwargs)

        try:
            resp = self.client.chat.completions.create(**params)
        except openai.APIStatusError as exc:
            logger.error(f"[LLM] {model} returned {exc.status_code}: {exc.message}")
            raise UpstreamFailure(exc.message, status_code=exc.status_code, details=_error_details(exc)) from exc
        except openai.OpenAIError as exc:
            logger.error(f"[LLM] {model} call failed: {exc}")
            raise UpstreamFailure(str(exc), details=_error_details(exc)) from exc

        if not resp.choices:
            raise UpstreamFailure(f"Model {model} returned no choices", details=NO_DETAILS)
        content = resp.choices[0].message.content
        if content is None:
            raise UpstreamFailure(f"Model {model} returned an empty message", details=NO_DETAILS)
        return content
