import uuid
from typing import Optional

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..domain_layer.llm_domain import LLMParams, ReplyText
from ..reporitory_layer.llm.rapidapi_llm import RapidApiLLM
from ..utils.logger import logger
from .formating import (
    create_completion_request,
    extract_reply,
    parse_completion_response,
    serialize_completion_request,
)


def handle_completion_request(llm_client: RapidApiLLM, input_text: str, request_id: str) -> str:
    """
    Turns one inbound chat text into one reply text using the provided client.

    Every failure path returns ReplyText.FAILED; nothing is raised to the caller.
    """
    try:
        payload = serialize_completion_request(create_completion_request(input_text))
    except (PydanticSerializationError, UnicodeEncodeError) as e:
        logger.error(f"[{request_id}] ❌ Failed to marshal request body: {e}")
        return ReplyText.FAILED.value

    try:
        logger.info(f"[{request_id}] ➡️ Sending completion request ({len(input_text)} chars)...")
        response = llm_client.generate_content(payload)
    except httpx.InvalidURL as e:
        logger.error(f"[{request_id}] ❌ Failed to create request: {e}")
        return ReplyText.FAILED.value
    except httpx.HTTPError as e:
        logger.error(f"[{request_id}] ❌ Request failed: {type(e).__name__} - {e}")
        return ReplyText.FAILED.value

    logger.debug(f"[{request_id}] Response body: {response.text}")

    if response.status_code != httpx.codes.OK:
        logger.error(f"[{request_id}] ❌ Non-OK HTTP status: {response.status_code} {response.reason_phrase}")
        return ReplyText.FAILED.value

    try:
        completion = parse_completion_response(response.content)
    except ValidationError as e:
        logger.error(f"[{request_id}] ❌ Failed to unmarshal response body: {e.errors(include_url=False)}")
        return ReplyText.FAILED.value

    if not completion.choices:
        logger.warning(f"[{request_id}] ⚠️ Provider returned no choices.")
    else:
        logger.info(f"[{request_id}] ✅ Completion received.")
    return extract_reply(completion)


def respond(input_text: str, api_key: str, timeout: Optional[float] = None,
            transport: Optional[httpx.BaseTransport] = None) -> str:
    """
    Relays one message to the completion provider and returns the reply text.

    A fresh HTTP client is used per call so no state is shared between calls.

    Args:
        input_text: The inbound chat message text.
        api_key: RapidAPI key for the provider.
        timeout: Optional HTTP timeout in seconds; None waits indefinitely.
        transport: Optional httpx transport override.

    Returns:
        The first completion's content, "No response from AI" when the provider
        returned no choices, or "Failed to process request" on any failure.
    """
    request_id = f"relay-{uuid.uuid4().hex[:8]}"
    try:
        params = LLMParams(apiKey=api_key, timeout=timeout)
        llm_client = RapidApiLLM(params, transport=transport)
    except (ValueError, ValidationError) as e:
        logger.error(f"[{request_id}] ❌ Cannot create completion client: {e}")
        return ReplyText.FAILED.value

    with llm_client:
        return handle_completion_request(llm_client, input_text, request_id)
