"""Wires configuration, prompt resolution, credentials and dispatch together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from smartcat.config_store import ConfigStore
from smartcat.credentials import CredentialResolver
from smartcat.dispatcher import RequestDispatcher
from smartcat.models import ApiConfig, Provider, RequestResult, ResolvedPrompt
from smartcat.prompt_resolver import PromptResolver, apply_overrides


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptOverrides:
    api: Optional[Provider] = None
    model: Optional[str] = None
    temperature: Optional[float] = None


class Pipeline:
    def __init__(
        self,
        store: ConfigStore,
        prompt_resolver: Optional[PromptResolver] = None,
        credentials: Optional[CredentialResolver] = None,
        dispatcher: Optional[RequestDispatcher] = None,
    ) -> None:
        self.store: ConfigStore = store
        self.prompt_resolver: PromptResolver = prompt_resolver or PromptResolver()
        self.credentials: CredentialResolver = credentials or CredentialResolver()
        self.dispatcher: RequestDispatcher = dispatcher or RequestDispatcher()

    def resolve(
        self,
        prompt_name: str,
        user_input: str,
        overrides: Optional[PromptOverrides] = None,
    ) -> ResolvedPrompt:
        resolved, _, _ = self._resolve(prompt_name, user_input, overrides or PromptOverrides())
        return resolved

    def run(
        self,
        prompt_name: str,
        user_input: str,
        overrides: Optional[PromptOverrides] = None,
    ) -> RequestResult:
        resolved, api_name, api_config = self._resolve(prompt_name, user_input, overrides or PromptOverrides())
        self.dispatcher.ensure_supported(resolved.provider)
        credential = self.credentials.resolve(api_config, api_name)
        result = self.dispatcher.dispatch(resolved, api_config, credential)
        usage = result.token_usage
        logger.debug(
            "tokens used: prompt=%d completion=%d total=%d",
            usage.prompt,
            usage.completion,
            usage.total,
        )
        return result

    def _resolve(
        self,
        prompt_name: str,
        user_input: str,
        overrides: PromptOverrides,
    ) -> tuple[ResolvedPrompt, str, ApiConfig]:
        prompt = self.store.get_prompt(prompt_name)
        prompt = apply_overrides(
            prompt,
            api=overrides.api,
            model=overrides.model,
            temperature=overrides.temperature,
        )
        api_name = prompt.api.value
        api_config = self.store.get_api_config(api_name)
        return self.prompt_resolver.resolve(prompt, api_config, user_input), api_name, api_config
