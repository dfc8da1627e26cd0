"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params (init kwargs)
2) Environment variables
3) YAML config file (``~/.config/arctic_fox/arctic_fox.yaml`` by default)
4) Model defaults

Environment variable format:
- Prefix: ``ARCTIC_FOX_``
- Nested keys: ``__`` separator
- Example: ``ARCTIC_FOX_HASHER__TIME_COST=4`` -> ``hasher.time_cost = 4``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic_settings import SettingsConfigDict

from .models import DEFAULT_CONFIG_PATH, ArcticFoxSettings


def load_settings(
    *,
    config_path: str | Path | None = None,
    cli_params: Mapping[str, Any] | None = None,
) -> ArcticFoxSettings:
    """Load settings through the standard precedence cascade.

    A missing YAML file is not an error; its layer is simply empty.
    """
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    init_values = dict(cli_params) if cli_params is not None else {}

    if resolved == DEFAULT_CONFIG_PATH:
        return ArcticFoxSettings(**init_values)

    class _FileScopedSettings(ArcticFoxSettings):
        model_config = SettingsConfigDict(yaml_file=resolved)

    return _FileScopedSettings(**init_values)
