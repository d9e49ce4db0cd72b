from typing import Dict, Optional

import httpx

from ...domain_layer.llm_domain import LLMParams
from ...utils.logger import logger


class RapidApiLLM:
    """Encapsulates RapidAPI chat-completions HTTP interactions."""
    def __init__(self, params: LLMParams, transport: Optional[httpx.BaseTransport] = None):
        """
        Initializes the RapidApiLLM client.

        Args:
            params: Credentials, endpoint and timeout for the provider.
            transport: Optional httpx transport (tests pass an httpx.MockTransport).
        """
        if not params.apiKey:
            logger.error("❌ Error: RAPIDAPI_KEY is required for RapidApiLLM.")
            raise ValueError("RAPIDAPI_KEY is required.")

        self.endpoint = params.endpoint
        self.host = params.host
        self._api_key = params.apiKey

        # timeout=None is passed explicitly: httpx would otherwise apply its 5s default
        self.client = httpx.Client(timeout=params.timeout, transport=transport)

    def _prepare_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self.host,
        }

    def generate_content(self, payload: bytes) -> httpx.Response:
        """
        Sends one serialized CompletionRequest to the provider (blocking).

        Args:
            payload: JSON request body.

        Returns:
            The raw httpx.Response with its body already read.

        Raises:
            httpx.HTTPError: On connection, timeout or read failures.
            httpx.InvalidURL: If the configured endpoint is malformed.
        """
        logger.debug(f"⚙️ POST {self.endpoint} ({len(payload)} bytes)")
        return self.client.post(self.endpoint, content=payload, headers=self._prepare_headers())

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "RapidApiLLM":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
