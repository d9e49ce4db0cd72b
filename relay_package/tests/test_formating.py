"""Unit tests for request building and response parsing."""
import json

import pytest
from pydantic import ValidationError

from ..domain_layer.chat_domain import CompletionChoice, CompletionMessage, CompletionResponse
from ..domain_layer.llm_domain import ReplyText
from ..service_layer.formating import (
    create_completion_request,
    extract_reply,
    parse_completion_response,
    serialize_completion_request,
)


class TestCompletionRequest:

    def test_single_user_turn(self):
        request = create_completion_request("Hello")
        assert len(request.messages) == 1
        assert request.messages[0].role == "user"
        assert request.messages[0].content == "Hello"

    def test_fixed_generation_parameters(self):
        request = create_completion_request("anything")
        assert request.model == "gpt-4-turbo-2024-04-09"
        assert request.max_tokens == 100
        assert request.temperature == 0.9

    def test_serialized_field_names(self):
        body = json.loads(serialize_completion_request(create_completion_request("hi")))
        assert set(body) == {"messages", "model", "max_tokens", "temperature"}

    def test_non_ascii_text_survives_serialization(self):
        body = json.loads(serialize_completion_request(create_completion_request("안녕하세요 👋")))
        assert body["messages"][0]["content"] == "안녕하세요 👋"


class TestParseCompletionResponse:

    def test_invalid_json_raises(self):
        with pytest.raises(ValidationError):
            parse_completion_response(b"not json")

    def test_top_level_array_raises(self):
        with pytest.raises(ValidationError):
            parse_completion_response(b"[]")

    def test_choice_without_message(self):
        response = parse_completion_response(b'{"choices": [{}]}')
        assert response.choices == [CompletionChoice()]

    def test_null_body_is_an_empty_response(self):
        assert parse_completion_response(b"null") == CompletionResponse()

    def test_null_choice_is_kept(self):
        response = parse_completion_response(b'{"choices": [null, {"message": {"content": "x"}}]}')
        assert response.choices[0] is None
        assert extract_reply(response) == ""


class TestExtractReply:

    def test_no_choices(self):
        assert extract_reply(CompletionResponse(choices=[])) == ReplyText.NO_RESPONSE.value
        assert extract_reply(CompletionResponse()) == ReplyText.NO_RESPONSE.value

    def test_first_choice_content(self):
        response = CompletionResponse(choices=[
            CompletionChoice(message=CompletionMessage(content="a")),
            CompletionChoice(message=CompletionMessage(content="b")),
        ])
        assert extract_reply(response) == "a"

    def test_missing_content_is_empty(self):
        assert extract_reply(CompletionResponse(choices=[CompletionChoice()])) == ""
        assert extract_reply(CompletionResponse(choices=[CompletionChoice(message=CompletionMessage())])) == ""
