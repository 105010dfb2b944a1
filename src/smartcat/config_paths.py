"""Config directory resolution from the process environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from smartcat.errors import ConfigPathUnresolvable

CUSTOM_CONFIG_ENV_VAR = "SMARTCAT_CONFIG_PATH"
DEFAULT_CONFIG_PATH = Path(".config") / "smartcat"


def resolve_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    custom_path = env.get(CUSTOM_CONFIG_ENV_VAR)
    if custom_path:
        return Path(custom_path).expanduser()
    home_dir = env.get("HOME")
    if home_dir:
        return Path(home_dir) / DEFAULT_CONFIG_PATH
    raise ConfigPathUnresolvable([CUSTOM_CONFIG_ENV_VAR, "HOME"])
