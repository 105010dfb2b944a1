from typing import Optional

import pytest

from smartcat.defaults import default_api_configs
from smartcat.defaults import default_prompts
from smartcat.errors import UnusableSetup
from smartcat.models import ApiConfig
from smartcat.setup_check import NO_API_KEY_MESSAGE
from smartcat.setup_check import NO_OLLAMA_MESSAGE
from smartcat.setup_check import config_usability_warnings
from smartcat.setup_check import ensure_usable


class FakeWhich:
    def __init__(self, found: set[str]) -> None:
        self.found = found
        self.calls: list[str] = []

    def __call__(self, name: str) -> Optional[str]:
        self.calls.append(name)
        if name in self.found:
            return f"/usr/bin/{name}"
        return None


def test_fresh_defaults_warn_about_everything() -> None:
    warnings = config_usability_warnings(default_prompts(), default_api_configs(), FakeWhich(set()))

    assert warnings == [NO_API_KEY_MESSAGE, NO_OLLAMA_MESSAGE]


def test_configured_key_removes_key_warning() -> None:
    api_configs = default_api_configs()
    api_configs["openai"] = ApiConfig(url=api_configs["openai"].url, api_key_command="pass show openai")

    warnings = config_usability_warnings(default_prompts(), api_configs, FakeWhich({"ollama"}))

    assert warnings == []


def test_key_on_api_no_prompt_uses_does_not_count() -> None:
    api_configs = default_api_configs()
    api_configs["groq"] = ApiConfig(url=api_configs["groq"].url, api_key="sk-groq")

    warnings = config_usability_warnings(default_prompts(), api_configs, FakeWhich({"ollama"}))

    assert warnings == [NO_API_KEY_MESSAGE]


def test_ensure_usable_raises_when_nothing_is_set_up() -> None:
    with pytest.raises(UnusableSetup) as excinfo:
        ensure_usable(default_prompts(), default_api_configs(), FakeWhich(set()))

    assert excinfo.value.reasons == [NO_API_KEY_MESSAGE, NO_OLLAMA_MESSAGE]


def test_ensure_usable_accepts_ollama_alone() -> None:
    which = FakeWhich({"ollama"})

    warnings = ensure_usable(default_prompts(), default_api_configs(), which)

    assert warnings == [NO_API_KEY_MESSAGE]
    assert which.calls == ["ollama"]
