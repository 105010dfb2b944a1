import io
from pathlib import Path

import pytest

from smartcat.input_processing import IS_NONINTERACTIVE_ENV_VAR
from smartcat.input_processing import FileInput
from smartcat.input_processing import StdinInput
from smartcat.input_processing import is_interactive


class FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_is_interactive_follows_tty() -> None:
    assert is_interactive(FakeTty(), {}) is True
    assert is_interactive(io.StringIO(), {}) is False


def test_noninteractive_env_var_wins() -> None:
    assert is_interactive(FakeTty(), {IS_NONINTERACTIVE_ENV_VAR: "1"}) is False


def test_file_input_reads_utf8(tmp_path: Path) -> None:
    input_path = tmp_path / "input.txt"
    input_path.write_text("héllo", encoding="utf-8")

    assert FileInput(input_path).load() == "héllo"


def test_file_input_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileInput(tmp_path / "missing.txt").load()


def test_stdin_input_reads_stream() -> None:
    assert StdinInput(io.StringIO("piped\ntext\n")).load() == "piped\ntext\n"
