"""Pydantic model for a provider endpoint configuration."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ApiConfig(BaseModel):
    url: str
    api_key: Optional[str] = None
    api_key_command: Optional[str] = None
    default_model: Optional[str] = None

    def has_credential(self) -> bool:
        return self.api_key is not None or self.api_key_command is not None
