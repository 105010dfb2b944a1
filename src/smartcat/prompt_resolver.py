"""Model defaulting and input substitution for prompt templates."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from smartcat.errors import MissingModel, MissingPlaceholder
from smartcat.models import PLACEHOLDER_TOKEN, ApiConfig, Message, Prompt, Provider, ResolvedPrompt


logger = logging.getLogger(__name__)


class PlaceholderPolicy(str, Enum):
    """What to do with the input when no message holds the placeholder."""

    APPEND = "append"
    IGNORE = "ignore"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


def apply_overrides(
    prompt: Prompt,
    *,
    api: Optional[Provider] = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
) -> Prompt:
    update: dict[str, object] = {}
    if api is not None and api != prompt.api:
        update["api"] = api
        # The prompt's model belongs to the previous API.
        update["model"] = None
    if model is not None:
        update["model"] = model
    if temperature is not None:
        update["temperature"] = temperature
    if not update:
        return prompt
    return prompt.model_copy(update=update)


def substitute_input(messages: list[Message], user_input: str) -> tuple[list[Message], bool]:
    out: list[Message] = []
    substituted = False
    for message in messages:
        if not substituted and PLACEHOLDER_TOKEN in message.content:
            content = message.content.replace(PLACEHOLDER_TOKEN, user_input, 1)
            out.append(Message(role=message.role, content=content))
            substituted = True
            continue
        out.append(message)
    return out, substituted


class PromptResolver:
    def __init__(self, placeholder_policy: PlaceholderPolicy = PlaceholderPolicy.APPEND) -> None:
        self.placeholder_policy: PlaceholderPolicy = placeholder_policy

    def resolve(self, prompt: Prompt, api_config: ApiConfig, user_input: str) -> ResolvedPrompt:
        model = prompt.model if prompt.model is not None else api_config.default_model
        if model is None and prompt.api.requires_model:
            raise MissingModel(prompt.api.value)

        messages, substituted = substitute_input(prompt.messages, user_input)
        if substituted:
            leftover = sum(message.content.count(PLACEHOLDER_TOKEN) for message in prompt.messages) - 1
            if leftover > 0:
                logger.warning("Only the first %s was replaced; %d more left as-is.", PLACEHOLDER_TOKEN, leftover)
        elif self.placeholder_policy is PlaceholderPolicy.APPEND:
            messages.append(Message.user(user_input))
        elif self.placeholder_policy is PlaceholderPolicy.ERROR:
            raise MissingPlaceholder(PLACEHOLDER_TOKEN)

        return ResolvedPrompt(
            provider=prompt.api,
            model=model,
            messages=tuple(messages),
            temperature=prompt.temperature,
        )
