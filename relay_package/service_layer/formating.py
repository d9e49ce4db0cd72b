# --- Request/Response Formatting ---
from typing import Optional

from pydantic import TypeAdapter

from ..domain_layer.chat_domain import CompletionRequest, CompletionResponse, CompletionTurn
from ..domain_layer.llm_domain import CompletionConstants, ReplyText

# A bare JSON null body decodes to None
_response_adapter = TypeAdapter(Optional[CompletionResponse])


def create_completion_request(input_text: str) -> CompletionRequest:
    """Wraps the inbound text as a single user turn with the fixed generation parameters."""
    return CompletionRequest(
        messages=[CompletionTurn(role=CompletionConstants.USER_ROLE.value, content=input_text)],
        model=CompletionConstants.MODEL.value,
        max_tokens=CompletionConstants.MAX_TOKENS.value,
        temperature=CompletionConstants.TEMPERATURE.value,
    )


def serialize_completion_request(request: CompletionRequest) -> bytes:
    """Raises pydantic_core.PydanticSerializationError if the request cannot be encoded."""
    return request.model_dump_json().encode("utf-8")


def parse_completion_response(body: bytes) -> CompletionResponse:
    """Raises pydantic.ValidationError for invalid JSON and for JSON of the wrong shape."""
    return _response_adapter.validate_json(body) or CompletionResponse()


def extract_reply(response: CompletionResponse) -> str:
    """Returns the first candidate's content verbatim, or the fixed no-response text."""
    if not response.choices:
        return ReplyText.NO_RESPONSE.value

    first = response.choices[0]
    if first is None or first.message is None or first.message.content is None:
        return ""
    return first.message.content
