"""First-run check that at least one backend can be used."""

from __future__ import annotations

import shutil
from typing import Callable, Mapping, Optional

from smartcat.errors import UnusableSetup
from smartcat.models import ApiConfig, Prompt

WhichFn = Callable[[str], Optional[str]]

NO_API_KEY_MESSAGE = (
    "No API key is configured.\n"
    "How to configure your API keys:\n"
    "https://github.com/efugier/smartcat/#configuration"
)
NO_OLLAMA_MESSAGE = (
    "Ollama not found in PATH.\n"
    "How to setup Ollama:\n"
    "https://github.com/efugier/smartcat#ollama-setup"
)


def has_usable_credential(prompts: Mapping[str, Prompt], api_configs: Mapping[str, ApiConfig]) -> bool:
    for prompt in prompts.values():
        api_config = api_configs.get(prompt.api.value)
        if api_config is not None and api_config.has_credential():
            return True
    return False


def config_usability_warnings(
    prompts: Mapping[str, Prompt],
    api_configs: Mapping[str, ApiConfig],
    which: WhichFn = shutil.which,
) -> list[str]:
    warnings: list[str] = []
    if not has_usable_credential(prompts, api_configs):
        warnings.append(NO_API_KEY_MESSAGE)
    if which("ollama") is None:
        warnings.append(NO_OLLAMA_MESSAGE)
    return warnings


def ensure_usable(
    prompts: Mapping[str, Prompt],
    api_configs: Mapping[str, ApiConfig],
    which: WhichFn = shutil.which,
) -> list[str]:
    """Return the warnings, raising UnusableSetup when neither an API key nor Ollama is available."""
    warnings = config_usability_warnings(prompts, api_configs, which)
    if len(warnings) == 2:
        raise UnusableSetup(warnings)
    return warnings
