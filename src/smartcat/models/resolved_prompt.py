"""Prompt after model defaulting and input substitution."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from smartcat.models.prompt import Message
from smartcat.models.provider import Provider


class ResolvedPrompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: Provider
    model: Optional[str] = None
    messages: tuple[Message, ...]
    temperature: Optional[float] = None
