"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from smartcat.config_paths import resolve_config_path
from smartcat.config_store import ConfigStore
from smartcat.errors import SmartcatError
from smartcat.input_processing import FileInput, InputAdaptor, StdinInput, is_interactive
from smartcat.models import Provider
from smartcat.pipeline import Pipeline, PromptOverrides
from smartcat.prompt_resolver import PlaceholderPolicy, PromptResolver
from smartcat.setup_check import ensure_usable


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sc",
        description="Put a bit of magic in your text pipes: input is merged into a prompt and sent to an LLM.",
    )
    parser.add_argument("prompt", nargs="?", default="default", help="Name of the prompt in prompts.yaml")
    parser.add_argument("--api", type=Provider, choices=list(Provider), help="Override the prompt's API")
    parser.add_argument("-m", "--model", type=str, help="Override the model")
    parser.add_argument("-t", "--temperature", type=float, help="Override the temperature")
    parser.add_argument("-f", "--file", type=str, help="Read input from a file instead of stdin")
    parser.add_argument(
        "-r",
        "--repeat-input",
        action="store_true",
        help="Write the input back before the model output",
    )
    parser.add_argument(
        "--placeholder-policy",
        type=PlaceholderPolicy,
        choices=list(PlaceholderPolicy),
        default=PlaceholderPolicy.APPEND,
        help="What to do with the input when no message contains #[<input>]",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and token usage to stderr")
    return parser


def run(args: argparse.Namespace) -> str:
    store = ConfigStore(resolve_config_path())
    created = store.ensure_generated()
    if store.api_keys_path in created and is_interactive():
        for warning in ensure_usable(store.load_prompts(), store.load_api_configs()):
            print(warning, file=sys.stderr)

    input_adaptor: InputAdaptor
    if args.file is not None:
        input_adaptor = FileInput(Path(args.file))
    else:
        input_adaptor = StdinInput()
    user_input = input_adaptor.load()

    pipeline = Pipeline(store, prompt_resolver=PromptResolver(args.placeholder_policy))
    overrides = PromptOverrides(api=args.api, model=args.model, temperature=args.temperature)
    result = pipeline.run(args.prompt, user_input, overrides)

    if args.repeat_input:
        return f"{user_input.rstrip()}\n{result.text}"
    return result.text


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        out = run(args)
    except (SmartcatError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(out)
