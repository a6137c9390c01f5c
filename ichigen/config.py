# File: ichigen/config.py
"""
ichigen - Settings Loader
=========================
Reads ``GeneratorSettings`` from YAML and discovers the Go module path.

Lookup order for the settings file:
    1. the path given explicitly (``--config``)
    2. ``.ichigen.yaml`` in the current directory
    3. built-in defaults
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ichigen.errors import ConfigError
from ichigen.models import DEFAULT_MODULE_PATH, GeneratorSettings

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen.config")

DEFAULT_CONFIG_NAME: str = ".ichigen.yaml"

_GO_MODULE_RE: re.Pattern[str] = re.compile(r"^\s*module\s+(\S+)", re.MULTILINE)


def load_settings(
    path: Optional[Union[str, Path]] = None,
    *,
    search_dir: Union[str, Path] = ".",
) -> GeneratorSettings:
    """
    Load settings from *path*, or from ``.ichigen.yaml`` in *search_dir*.

    Raises:
        ConfigError: If an explicit *path* is missing, or any settings file
            can't be read, parsed or validated.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
    else:
        config_path = Path(search_dir) / DEFAULT_CONFIG_NAME
        if not config_path.is_file():
            logger.debug("No %s found in %s, using defaults.", DEFAULT_CONFIG_NAME, search_dir)
            return GeneratorSettings()

    try:
        raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {config_path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"expected a YAML mapping at top level of {config_path}, "
            f"got {type(raw).__name__}"
        )

    try:
        settings = GeneratorSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid settings in {config_path}: {exc}") from exc

    logger.info("Loaded settings from %s", config_path)
    return settings


def apply_overrides(
    settings: GeneratorSettings,
    *,
    output_root: Optional[str] = None,
) -> GeneratorSettings:
    """
    Return a copy of *settings* with command-line overrides applied.

    Raises:
        ConfigError: If an override fails validation (e.g. an empty root).
    """
    if output_root is None:
        return settings
    try:
        return GeneratorSettings.model_validate(
            {**settings.model_dump(), "output_root": output_root}
        )
    except ValidationError as exc:
        raise ConfigError(
            f"invalid output root {output_root!r}: {exc.errors()[0]['msg']}"
        ) from exc


def read_go_module(root: Union[str, Path]) -> Optional[str]:
    """Module path declared in ``<root>/go.mod``, or None if there is none."""
    go_mod = Path(root) / "go.mod"
    try:
        text = go_mod.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigError(f"cannot read {go_mod}: {exc}") from exc

    match = _GO_MODULE_RE.search(text)
    if match is None:
        logger.warning("No module directive in %s", go_mod)
        return None
    return match.group(1).strip('"')


def resolve_module_path(settings: GeneratorSettings) -> str:
    if settings.module_path:
        return settings.module_path
    return read_go_module(settings.output_root) or DEFAULT_MODULE_PATH


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "apply_overrides",
    "load_settings",
    "read_go_module",
    "resolve_module_path",
]
