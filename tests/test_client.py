"""Tests for the UI's HTTP client."""

from unittest.mock import MagicMock

import pytest
import requests

from clarifychat.schemas import AnswerResponse, ClarificationResponse, Message
from clarifychat.ui.client import GENERIC_ERROR, ChatClient, ChatClientError

MESSAGES = [Message(role="user", content="Plan a trip")]


def _response(status_code, body):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(http):
    return ChatClient(base_url="http://chat.test/", session=http)


def test_posts_transcript(client, http):
    http.post.return_value = _response(200, {"content": "ok", "needsClarification": False})

    reply = client.send(MESSAGES)

    assert reply == AnswerResponse(content="ok")
    http.post.assert_called_once_with(
        "http://chat.test/api/chat",
        json={"messages": [{"role": "user", "content": "Plan a trip"}]},
        timeout=client.timeout,
    )


def test_parses_clarification(client, http):
    http.post.return_value = _response(
        200,
        {"needsClarification": True, "questions": [{"id": 1, "question": "Which destination?", "category": "general"}]},
    )

    reply = client.send(MESSAGES)

    assert isinstance(reply, ClarificationResponse)
    assert reply.questions[0].question == "Which destination?"


def test_error_body_message_is_raised(client, http):
    http.post.return_value = _response(400, {"error": "Invalid request format"})

    with pytest.raises(ChatClientError, match="Invalid request format"):
        client.send(MESSAGES)


def test_error_without_body_uses_generic_message(client, http):
    http.post.return_value = _response(502, ValueError("no json"))

    with pytest.raises(ChatClientError, match=GENERIC_ERROR):
        client.send(MESSAGES)


def test_transport_failure(client, http):
    http.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(ChatClientError, match="connection refused"):
        client.send(MESSAGES)


def test_unrecognised_success_body(client, http):
    http.post.return_value = _response(200, {"unexpected": True})

    with pytest.raises(ChatClientError):
        client.send(MESSAGES)
