"""Pydantic models for prompt templates."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from smartcat.models.provider import Provider

PLACEHOLDER_TOKEN = "#[<input>]"

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)


class Prompt(BaseModel):
    api: Provider = Provider.OPENAI
    model: Optional[str] = None
    messages: list[Message] = Field(default_factory=list)
    temperature: Optional[float] = None
