"""Loading and first-run generation of the persisted configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Hashable, Mapping, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from smartcat.defaults import default_api_configs, default_prompts
from smartcat.errors import ConfigAccessError, ConfigParseError, UnknownApiConfig, UnknownPrompt
from smartcat.models import ApiConfig, Prompt


logger = logging.getLogger(__name__)

API_KEYS_FILE = ".api_configs.yaml"
PROMPT_FILE = "prompts.yaml"

ModelT = TypeVar("ModelT", bound=BaseModel)


class UniqueKeyLoader(yaml.SafeLoader):
    """Safe loader that rejects repeated keys inside a mapping."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[object, object]:
        seen: set[object] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _dump_mapping(entries: Mapping[str, BaseModel]) -> str:
    data = {name: entry.model_dump(mode="json", exclude_none=True) for name, entry in entries.items()}
    return yaml.safe_dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)


def _parse_mapping(text: str, model_cls: type[ModelT], source: Path) -> dict[str, ModelT]:
    try:
        raw = yaml.load(text, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(source, str(exc)) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigParseError(source, f"expected a mapping at the top level, got {type(raw).__name__}")
    out: dict[str, ModelT] = {}
    for name, entry in raw.items():
        try:
            out[str(name)] = model_cls.model_validate(entry)
        except ValidationError as exc:
            raise ConfigParseError(source, f"entry {name!r}: {exc}") from exc
    return out


def dump_api_configs(api_configs: Mapping[str, ApiConfig]) -> str:
    return _dump_mapping(api_configs)


def dump_prompts(prompts: Mapping[str, Prompt]) -> str:
    return _dump_mapping(prompts)


def parse_api_configs(text: str, source: Path = Path("<string>")) -> dict[str, ApiConfig]:
    return _parse_mapping(text, ApiConfig, source)


def parse_prompts(text: str, source: Path = Path("<string>")) -> dict[str, Prompt]:
    return _parse_mapping(text, Prompt, source)


class ConfigStore:
    def __init__(self, config_dir: Path) -> None:
        self._config_dir: Path = config_dir

    @property
    def api_keys_path(self) -> Path:
        return self._config_dir / API_KEYS_FILE

    @property
    def prompts_path(self) -> Path:
        return self._config_dir / PROMPT_FILE

    def ensure_generated(self) -> list[Path]:
        """
        Write the default files that are missing. Existing files are never touched.
        Returns the paths that were created.
        """
        created: list[Path] = []
        targets: list[tuple[Path, Callable[[], str]]] = [
            (self.prompts_path, lambda: dump_prompts(default_prompts())),
            (self.api_keys_path, lambda: dump_api_configs(default_api_configs())),
        ]
        for path, render in targets:
            if path.exists():
                continue
            logger.info("Config file not found at %s, generating one.", path)
            if self._write_new(path, render()):
                created.append(path)
        return created

    def load_api_configs(self) -> dict[str, ApiConfig]:
        path = self.api_keys_path
        return parse_api_configs(self._read(path), path)

    def load_prompts(self) -> dict[str, Prompt]:
        path = self.prompts_path
        return parse_prompts(self._read(path), path)

    def get_api_config(self, name: str) -> ApiConfig:
        api_configs = self.load_api_configs()
        if name not in api_configs:
            raise UnknownApiConfig(name, api_configs.keys())
        return api_configs[name]

    def get_prompt(self, name: str) -> Prompt:
        prompts = self.load_prompts()
        if name not in prompts:
            raise UnknownPrompt(name, prompts.keys())
        return prompts[name]

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ConfigParseError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
        except OSError as exc:
            raise ConfigAccessError(path, exc.strerror or str(exc)) from exc

    def _write_new(self, path: Path, content: str) -> bool:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigAccessError(path.parent, exc.strerror or str(exc)) from exc
        try:
            # Exclusive create: never clobber a file that appeared meanwhile.
            with path.open("x", encoding="utf-8") as handle:
                handle.write(content)
            return True
        except FileExistsError:
            logger.debug("%s appeared while generating defaults; leaving it untouched.", path)
            return False
        except OSError as exc:
            raise ConfigAccessError(path, exc.strerror or str(exc)) from exc
