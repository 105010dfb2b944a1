"""Error types raised by smartcat.

Every error derives from ``SmartcatError`` and is meant to be handled by the
caller. Only the CLI entry point turns them into an exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional


class SmartcatError(Exception):
    """Base class for all recoverable smartcat errors."""


class ConfigError(SmartcatError):
    pass


class ConfigPathUnresolvable(ConfigError):
    def __init__(self, env_vars: Iterable[str]) -> None:
        self.env_vars = list(env_vars)
        names = " or ".join(f"${name}" for name in self.env_vars)
        super().__init__(f"Could not determine the config directory. Set either {names}.")


class ConfigParseError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config file {path}: {detail}")


class ConfigAccessError(ConfigError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot access {path}: {detail}")


class UnknownApiConfig(ConfigError):
    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(f"No API config named {name!r}; available: {', '.join(self.available) or 'none'}")


class UnknownPrompt(ConfigError):
    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(f"No prompt named {name!r}; available: {', '.join(self.available) or 'none'}")


class UnusableSetup(ConfigError):
    def __init__(self, reasons: Iterable[str]) -> None:
        self.reasons = list(reasons)
        super().__init__(
            "Install Ollama or set an API key for at least one of the providers to get started.\n"
            + "\n".join(self.reasons)
        )


class PromptError(SmartcatError):
    pass


class MissingModel(PromptError):
    def __init__(self, provider: str, field: str = "model") -> None:
        self.provider = provider
        self.field = field
        super().__init__(
            f"{field!r} must be set either in the prompt or as default_model in the {provider!r} API config."
        )


class MissingPlaceholder(PromptError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"No message contains the input placeholder {token!r}.")


class CredentialError(SmartcatError):
    pass


class NoCredentialConfigured(CredentialError):
    def __init__(self, api_name: str) -> None:
        self.api_name = api_name
        super().__init__(f"No api_key or api_key_command configured for {api_name or 'this API'}.")


class CredentialExecutionFailed(CredentialError):
    def __init__(self, command: str, detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"api_key_command {command!r} failed: {detail}")


class DispatchError(SmartcatError):
    pass


class UnsupportedProvider(DispatchError):
    def __init__(self, requested: str, supported: Iterable[str]) -> None:
        self.requested = requested
        self.supported = list(supported)
        super().__init__(f"{requested} is not implemented, use one among {self.supported}")


class TransportError(DispatchError):
    def __init__(self, detail: str, status: Optional[int] = None) -> None:
        self.status = status
        self.detail = detail
        if status is None:
            super().__init__(f"Request failed: {detail}")
        else:
            super().__init__(f"Request failed with HTTP {status}: {detail}")


class MalformedResponse(DispatchError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected response shape: {detail}")
