"""Normalized result of one completion request."""

from __future__ import annotations

from pydantic import BaseModel


class TokenUsage(BaseModel):
    prompt: int
    completion: int
    total: int


class RequestResult(BaseModel):
    text: str
    token_usage: TokenUsage
