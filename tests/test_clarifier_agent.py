"""Unit tests for classifier output validation and question normalisation."""

import json

import pytest

from clarifychat.agents import (
    ClarifierAgent,
    InvalidClassification,
    ValidClassification,
    normalize_questions,
    validate_classification,
)
from clarifychat.config import Config


class TestValidateClassification:
    def test_valid_payload(self):
        raw = json.dumps({"needs_clarification": True, "questions": [{"id": 1, "question": "Which destination?"}]})

        result = validate_classification(raw)

        assert isinstance(result, ValidClassification)
        assert result.payload.needs_clarification is True
        assert result.payload.questions == [{"id": 1, "question": "Which destination?"}]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json at all",
            "",
            None,
            "[1, 2, 3]",
            json.dumps({"needs_clarification": "yes", "questions": []}),
            json.dumps({"needs_clarification": 1, "questions": []}),
            json.dumps({"needs_clarification": True, "questions": "Which one?"}),
            json.dumps({"needs_clarification": False}),
            json.dumps({"questions": []}),
        ],
    )
    def test_invalid_payloads_are_tagged_not_raised(self, raw):
        result = validate_classification(raw)

        assert isinstance(result, InvalidClassification)
        assert result.reason


class TestNormalizeQuestions:
    def test_default_category_applied(self):
        items = normalize_questions([{"id": 1, "question": "Which destination?"}])

        assert [item.model_dump() for item in items] == [
            {"id": 1, "question": "Which destination?", "category": "general"}
        ]

    def test_missing_ids_use_one_based_position(self):
        items = normalize_questions(
            [
                {"question": "When?", "category": "dates"},
                {"id": 0, "question": "Budget?"},
                {"id": 7, "question": "Who is going?"},
            ]
        )

        assert [item.id for item in items] == [1, 2, 7]
        assert items[0].category == "dates"

    def test_numeric_string_ids_are_kept(self):
        items = normalize_questions(
            [{"id": "3", "question": "When?"}, {"id": "x", "question": "Where?"}, {"id": "-2", "question": "Who?"}]
        )

        assert [item.id for item in items] == [3, 2, 3]

    def test_entries_without_question_text_are_dropped(self):
        items = normalize_questions(["just a string", {"id": 1}, {"question": "   "}, {"question": "Where?"}])

        assert len(items) == 1
        assert items[0].question == "Where?"
        assert items[0].id == 4

    def test_configured_default_category(self, monkeypatch):
        monkeypatch.setattr(Config, "DEFAULT_CATEGORY", "misc")

        items = normalize_questions([{"question": "Where?"}])

        assert items[0].category == "misc"


class TestClarifierAgent:
    def test_requests_json_object_from_classifier_model(self, fake_llm_factory):
        llm = fake_llm_factory({"needs_clarification": False, "questions": []})
        agent = ClarifierAgent(llm)

        result = agent("Plan a trip")

        assert isinstance(result, ValidClassification)
        call = llm.calls[0]
        assert call["model"] == Config.OPENAI_MODEL
        assert call["response_format"] == {"type": "json_object"}
        assert call["temperature"] == Config.CLASSIFIER_TEMPERATURE
        assert call["max_tokens"] == Config.CLASSIFIER_MAX_TOKENS
        assert call["messages"][0]["role"] == "system"
        assert '"Plan a trip"' in call["messages"][1]["content"]

    def test_garbage_output_becomes_invalid(self, fake_llm_factory):
        agent = ClarifierAgent(fake_llm_factory("Sure! Here is some JSON: {oops"))

        assert isinstance(agent("Plan a trip"), InvalidClassification)
