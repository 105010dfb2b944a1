"""Supported providers and their wire formats."""

from __future__ import annotations

from enum import Enum


class WireFormat(str, Enum):
    OPENAI_CHAT = "openai-chat"
    NOT_IMPLEMENTED = "not-implemented"


class Provider(str, Enum):
    OPENAI = "openai"
    MISTRAL = "mistral"
    GROQ = "groq"
    ANTHROPIC = "anthropic"
    OLLAMA = "ollama"

    def __str__(self) -> str:
        return self.value

    @property
    def wire_format(self) -> WireFormat:
        return WIRE_FORMATS.get(self, WireFormat.NOT_IMPLEMENTED)

    @property
    def requires_model(self) -> bool:
        return self.wire_format is not WireFormat.NOT_IMPLEMENTED


WIRE_FORMATS: dict[Provider, WireFormat] = {
    Provider.OPENAI: WireFormat.OPENAI_CHAT,
    Provider.MISTRAL: WireFormat.OPENAI_CHAT,
}


def supported_providers() -> list[Provider]:
    return [provider for provider in Provider if provider.wire_format is not WireFormat.NOT_IMPLEMENTED]
