"""Configuration written on first run."""

from __future__ import annotations

from smartcat.models import ApiConfig, Message, Prompt, Provider

DEFAULT_SYSTEM_MESSAGE = (
    "You are an extremely skilled programmer with a keen eye for detail and an emphasis on readable code. "
    "You have been tasked with acting as a smart version of the cat unix program. "
    "You take text and a prompt in and write text out. "
    "For that reason, it is of crucial importance to just write the desired output. "
    "Do not under any circumstance write any comment or thought as your output will be piped into other programs. "
    "Do not write the markdown delimiters for code as well. "
    "Sometimes you will be asked to implement or extend some input code. "
    "Same thing goes here, write only what was asked because what you write will be directly added "
    "to the user's editor. "
    "Never ever write ``` around the code. "
    "Now let's make something great together!"
)


def default_api_configs() -> dict[str, ApiConfig]:
    return {
        Provider.OPENAI.value: ApiConfig(
            url="https://api.openai.com/v1/chat/completions",
            default_model="gpt-4",
        ),
        Provider.MISTRAL.value: ApiConfig(
            url="https://api.mistral.ai/v1/chat/completions",
            default_model="mistral-medium",
        ),
        Provider.GROQ.value: ApiConfig(
            url="https://api.groq.com/openai/v1/chat/completions",
            default_model="llama3-70b-8192",
        ),
        Provider.ANTHROPIC.value: ApiConfig(
            url="https://api.anthropic.com/v1/messages",
            default_model="claude-3-opus-20240229",
        ),
        Provider.OLLAMA.value: ApiConfig(
            url="http://localhost:11434/api/chat",
            default_model="phi3",
        ),
    }


def default_prompt() -> Prompt:
    return Prompt(api=Provider.OPENAI, messages=[Message.system(DEFAULT_SYSTEM_MESSAGE)])


def empty_prompt() -> Prompt:
    return Prompt(api=Provider.OPENAI, messages=[])


def default_prompts() -> dict[str, Prompt]:
    return {
        "default": default_prompt(),
        "empty": empty_prompt(),
    }
