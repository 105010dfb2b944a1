"""API key resolution from inline values or external commands."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

from smartcat.errors import CredentialExecutionFailed, NoCredentialConfigured
from smartcat.models import ApiConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    returncode: int
    stdout: str
    stderr: str = ""


class CommandRunner(Protocol):
    def run(self, command: str) -> CommandOutput: ...


class SubprocessCommandRunner:
    def __init__(self, timeout: float = 30.0) -> None:
        self._timeout = timeout

    def run(self, command: str) -> CommandOutput:
        try:
            completed = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                encoding="utf-8",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CredentialExecutionFailed(command, f"timed out after {self._timeout}s") from exc
        except UnicodeDecodeError as exc:
            raise CredentialExecutionFailed(command, "output is not valid UTF-8") from exc
        except OSError as exc:
            raise CredentialExecutionFailed(command, str(exc)) from exc
        return CommandOutput(returncode=completed.returncode, stdout=completed.stdout, stderr=completed.stderr)


class CredentialResolver:
    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner: CommandRunner = runner or SubprocessCommandRunner()

    def resolve(self, api_config: ApiConfig, api_name: str = "") -> str:
        """
        Return the API key for ``api_config``.
        An inline ``api_key`` wins; ``api_key_command`` is only run when no inline key is set.
        """
        if api_config.api_key is not None:
            return api_config.api_key
        command = api_config.api_key_command
        if command is None:
            raise NoCredentialConfigured(api_name)

        logger.debug("Running api_key_command for %s", api_name or api_config.url)
        output = self._runner.run(command)
        if output.returncode != 0:
            detail = output.stderr.strip() or f"exit status {output.returncode}"
            raise CredentialExecutionFailed(command, detail)
        key = output.stdout.rstrip()
        if not key:
            raise CredentialExecutionFailed(command, "command produced no output")
        return key
