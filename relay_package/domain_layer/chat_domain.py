from typing import List, Optional

from pydantic import BaseModel, Field


class CompletionTurn(BaseModel):
    role: str
    content: str

class CompletionRequest(BaseModel):
    messages: List[CompletionTurn]
    model: str
    max_tokens: int = Field(..., ge=1)
    temperature: float = Field(..., ge=0.0, le=2.0)

class CompletionMessage(BaseModel):
    content: Optional[str] = None

class CompletionChoice(BaseModel):
    message: Optional[CompletionMessage] = None

class CompletionResponse(BaseModel):
    # Provider extras (id, usage, ...) are ignored; null choices decode like an empty list
    choices: Optional[List[Optional[CompletionChoice]]] = None
