"""Tests for the OpenAI wrapper's error mapping."""

from unittest.mock import MagicMock

import httpx
import openai
import pytest

from clarifychat.errors import NO_DETAILS, UpstreamFailure
from clarifychat.services.llm import LLM

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _completion(content):
    resp = MagicMock()
    resp.choices = [MagicMock(message=MagicMock(content=content))]
    return resp


@pytest.fixture
def mock_client():
    return MagicMock()


def test_returns_reply_text_and_forwards_params(mock_client):
    mock_client.chat.completions.create.return_value = _completion("hello")
    llm = LLM(client=mock_client)

    text = llm.chat("gpt-4o", [{"role": "user", "content": "hi"}], temperature=0.7, max_tokens=500)

    assert text == "hello"
    mock_client.chat.completions.create.assert_called_once_with(
        model="gpt-4o",
        messages=[{"role": "user", "content": "hi"}],
        temperature=0.7,
        max_tokens=500,
    )


def test_status_error_keeps_upstream_status(mock_client):
    mock_client.chat.completions.create.side_effect = openai.APIStatusError(
        "Rate limit reached",
        response=httpx.Response(429, request=REQUEST),
        body={"code": "rate_limit_exceeded"},
    )

    with pytest.raises(UpstreamFailure) as excinfo:
        LLM(client=mock_client).chat("gpt-4o", [])

    assert excinfo.value.status_code == 429
    assert excinfo.value.message == "Rate limit reached"
    assert excinfo.value.details == '{"code": "rate_limit_exceeded"}'


def test_connection_error_is_500(mock_client):
    mock_client.chat.completions.create.side_effect = openai.APIConnectionError(request=REQUEST)

    with pytest.raises(UpstreamFailure) as excinfo:
        LLM(client=mock_client).chat("gpt-4o", [])

    assert excinfo.value.status_code == 500
    assert excinfo.value.details == NO_DETAILS


def test_empty_completion_is_upstream_failure(mock_client):
    mock_client.chat.completions.create.return_value = _completion(None)

    with pytest.raises(UpstreamFailure):
        LLM(client=mock_client).chat("gpt-4o", [])


def test_client_is_built_lazily():
    llm = LLM(api_key="sk-test")

    assert llm._client is None
    assert isinstance(llm.client, openai.OpenAI)
