"""
HTTP client the UI uses to talk to the /api/chat endpoint.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from clarifychat.config import Config
from clarifychat.schemas import AnswerResponse, ChatReply, ClarificationResponse, Message

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"


class ChatClientError(Exception):
    """Raised for transport failures and non-success responses."""


class ChatClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: Optional[float] = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Config.UI_REQUEST_TIMEOUT
        self.session = session or requests.Session()

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/api/chat"

    def send(self, messages: List[Message]) -> ChatReply:
        payload = {"messages": [msg.model_dump() for msg in messages]}
        try:
            resp = self.session.post(self.chat_url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error(f"[UI] Request to {self.chat_url} failed: {exc}")
            raise ChatClientError(str(exc) or GENERIC_ERROR) from exc

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.ok:
            message = data.get("error") if isinstance(data, dict) else None
            logger.warning(f"[UI] /api/chat returned {resp.status_code}: {message}")
            raise ChatClientError(message or GENERIC_ERROR)

        if not isinstance(data, dict):
            raise ChatClientError(GENERIC_ERROR)
        try:
            if data.get("needsClarification"):
                return ClarificationResponse.model_validate(data)
            return AnswerResponse.model_validate(data)
        except ValidationError as exc:
            logger.error(f"[UI] Unexpected /api/chat body: {exc}")
            raise ChatClientError(GENERIC_ERROR) from exc
