import pytest
from pydantic import ValidationError

from smartcat.errors import MissingModel
from smartcat.errors import MissingPlaceholder
from smartcat.models import PLACEHOLDER_TOKEN
from smartcat.models import ApiConfig
from smartcat.models import Message
from smartcat.models import Prompt
from smartcat.models import Provider
from smartcat.prompt_resolver import PlaceholderPolicy
from smartcat.prompt_resolver import PromptResolver
from smartcat.prompt_resolver import apply_overrides


API = ApiConfig(url="https://example/v1/chat", default_model="m-1")


def test_default_model_fills_missing_prompt_model() -> None:
    prompt = Prompt(api=Provider.OPENAI, messages=[Message.user("Translate: #[<input>]")])

    resolved = PromptResolver().resolve(prompt, API, "hello")

    assert resolved.model == "m-1"
    assert resolved.provider is Provider.OPENAI


def test_prompt_model_wins_over_default() -> None:
    prompt = Prompt(api=Provider.OPENAI, model="gpt-4o", messages=[])

    resolved = PromptResolver().resolve(prompt, API, "hello")

    assert resolved.model == "gpt-4o"


def test_missing_model_for_implemented_provider() -> None:
    prompt = Prompt(api=Provider.MISTRAL, messages=[])

    with pytest.raises(MissingModel) as excinfo:
        PromptResolver().resolve(prompt, ApiConfig(url="https://example/v1/chat"), "hello")

    assert excinfo.value.provider == "mistral"
    assert excinfo.value.field == "model"


def test_missing_model_tolerated_for_unimplemented_provider() -> None:
    prompt = Prompt(api=Provider.ANTHROPIC, messages=[])

    resolved = PromptResolver().resolve(prompt, ApiConfig(url="https://example/v1/messages"), "hello")

    assert resolved.model is None


def test_placeholder_replaced_once() -> None:
    prompt = Prompt(
        messages=[
            Message.system("You translate text."),
            Message.user("Translate: #[<input>]"),
        ]
    )

    resolved = PromptResolver().resolve(prompt, API, "hello")

    assert resolved.messages == (
        Message.system("You translate text."),
        Message.user("Translate: hello"),
    )


def test_only_first_placeholder_is_replaced() -> None:
    prompt = Prompt(
        messages=[
            Message.system("Context: #[<input>]"),
            Message.user("Again: #[<input>]"),
        ]
    )

    resolved = PromptResolver().resolve(prompt, API, "hello")

    assert resolved.messages[0].content == "Context: hello"
    assert resolved.messages[1].content == f"Again: {PLACEHOLDER_TOKEN}"


def test_input_containing_token_is_not_substituted_again() -> None:
    prompt = Prompt(messages=[Message.user("#[<input>] / #[<input>]")])

    resolved = PromptResolver().resolve(prompt, API, "x#[<input>]")

    assert resolved.messages[0].content == "x#[<input>] / #[<input>]"


def test_missing_placeholder_appends_user_message() -> None:
    prompt = Prompt(messages=[Message.system("Be terse.")])

    resolved = PromptResolver().resolve(prompt, API, "hello")

    assert resolved.messages == (Message.system("Be terse."), Message.user("hello"))


def test_missing_placeholder_on_empty_prompt() -> None:
    resolved = PromptResolver().resolve(Prompt(), API, "hello")

    assert resolved.messages == (Message.user("hello"),)


def test_missing_placeholder_ignore_policy() -> None:
    prompt = Prompt(messages=[Message.system("Be terse.")])

    resolved = PromptResolver(PlaceholderPolicy.IGNORE).resolve(prompt, API, "hello")

    assert resolved.messages == (Message.system("Be terse."),)


def test_missing_placeholder_error_policy() -> None:
    prompt = Prompt(messages=[Message.system("Be terse.")])

    with pytest.raises(MissingPlaceholder):
        PromptResolver(PlaceholderPolicy.ERROR).resolve(prompt, API, "hello")


def test_resolve_does_not_mutate_prompt() -> None:
    prompt = Prompt(messages=[Message.user("Translate: #[<input>]")])

    PromptResolver().resolve(prompt, API, "hello")

    assert prompt.model is None
    assert prompt.messages == [Message.user("Translate: #[<input>]")]


def test_resolved_prompt_is_immutable() -> None:
    resolved = PromptResolver().resolve(Prompt(temperature=0.3), API, "hello")

    assert resolved.temperature == 0.3
    with pytest.raises(ValidationError):
        resolved.model = "other"  # type: ignore[misc]


def test_apply_overrides_switching_api_drops_prompt_model() -> None:
    prompt = Prompt(api=Provider.OPENAI, model="gpt-4o", temperature=0.5)

    overridden = apply_overrides(prompt, api=Provider.MISTRAL)

    assert overridden.api is Provider.MISTRAL
    assert overridden.model is None
    assert overridden.temperature == 0.5
    assert prompt.model == "gpt-4o"


def test_apply_overrides_model_and_temperature() -> None:
    prompt = Prompt(api=Provider.OPENAI)

    overridden = apply_overrides(prompt, api=Provider.MISTRAL, model="small", temperature=0.0)

    assert overridden.model == "small"
    assert overridden.temperature == 0.0


def test_apply_overrides_without_changes_returns_prompt() -> None:
    prompt = Prompt(api=Provider.OPENAI, model="gpt-4o")

    assert apply_overrides(prompt, api=Provider.OPENAI) is prompt
