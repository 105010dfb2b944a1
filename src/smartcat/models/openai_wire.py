"""Request and response shapes of the OpenAI-compatible chat API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from smartcat.models.prompt import Message


class OpenAiPrompt(BaseModel):
    model: str
    messages: list[Message]
    temperature: Optional[float] = None


class OpenAiMessage(BaseModel):
    role: str
    content: str


class OpenAiChoice(BaseModel):
    index: int = 0
    message: OpenAiMessage
    finish_reason: Optional[str] = None


class OpenAiUsage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class OpenAiResponse(BaseModel):
    # id, object, created and model are not needed and are ignored.
    choices: list[OpenAiChoice] = Field(min_length=1)
    usage: OpenAiUsage
