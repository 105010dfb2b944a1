"""Input adaptors and interactive-mode detection."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional, TextIO

IS_NONINTERACTIVE_ENV_VAR = "SMARTCAT_NONINTERACTIVE"


def is_interactive(
    stdin: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    env = os.environ if environ is None else environ
    if env.get(IS_NONINTERACTIVE_ENV_VAR):
        return False
    stream = sys.stdin if stdin is None else stdin
    return stream.isatty()


class InputAdaptor:
    def load(self) -> str:
        raise NotImplementedError("InputAdaptor.load must be implemented by subclasses.")


class FileInput(InputAdaptor):
    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> str:
        if not self._path.exists():
            raise FileNotFoundError(self._path)
        return self._path.read_text(encoding="utf-8")


class StdinInput(InputAdaptor):
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def load(self) -> str:
        stream = sys.stdin if self._stream is None else self._stream
        return stream.read()
