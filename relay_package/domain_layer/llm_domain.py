from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CompletionConstants(Enum):
    """Fixed parameters of the RapidAPI chat-completions provider."""
    API_HOST = "cheapest-gpt-4-turbo-gpt-4-vision-chatgpt-openai-ai-api.p.rapidapi.com"
    API_URL = "https://cheapest-gpt-4-turbo-gpt-4-vision-chatgpt-openai-ai-api.p.rapidapi.com/v1/chat/completions"
    MODEL = "gpt-4-turbo-2024-04-09"
    MAX_TOKENS = 100
    TEMPERATURE = 0.9
    USER_ROLE = "user"


class ReplyText(Enum):
    """Fixed replies sent to the chat when no completion text is available."""
    FAILED = "Failed to process request"
    NO_RESPONSE = "No response from AI"


class LLMParams(BaseModel):
    apiKey: str = Field(..., min_length=1, repr=False, description="The API key used for authentication with the LLM provider.")
    endpoint: str = Field(CompletionConstants.API_URL.value, description="The endpoint URL for accessing the LLM service.")
    host: str = Field(CompletionConstants.API_HOST.value, description="Value of the X-RapidAPI-Host header.")
    timeout: Optional[float] = Field(None, gt=0, description="Request timeout in seconds. None disables the timeout.")
