# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for funseq.

Settings come from, in increasing precedence: built-in defaults, the first
configuration file found (``funseq.toml``, ``.funseq.toml`` or the
``[tool.funseq]`` table of ``pyproject.toml``), and the ``FUNSEQ_LOG_FORMAT``
/ ``FUNSEQ_LOG_LEVEL`` environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from pydantic import ValidationError

from funseq._internal.logging_utils import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    LOG_LEVELS,
    LogConfig,
    configure_logging,
    structured_extra,
)
from funseq.compat import tomllib
from funseq.core.model_types import LogComponent, LogFormat
from funseq.exceptions import ConfigReadError, ConfigValidationError, InvalidConfigFileError

from .models import LOG_FORMAT_ALLOWED_VALUES, FunseqConfig, FunseqConfigModel, config_from_model

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import LogLevelName

logger: logging.Logger = logging.getLogger("funseq.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("funseq.toml", ".funseq.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc


def _tool_section(raw: Mapping[str, object]) -> dict[str, object] | None:
    tool_obj = raw.get("tool")
    if not isinstance(tool_obj, dict):
        return None
    section = cast("dict[str, object]", tool_obj).get("funseq")
    if not isinstance(section, dict):
        return None
    return cast("dict[str, object]", section)


def _section_for(path: Path) -> dict[str, object] | None:
    raw = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        return _tool_section(raw)
    section = _tool_section(raw)
    if section is not None:
        return section
    # Standalone files keep settings at top level; other tools' tables are ignored.
    return {key: value for key, value in raw.items() if key != "tool"}


def _discover(root: Path) -> tuple[Path, dict[str, object]] | None:
    for filename in (*CONFIG_FILENAMES, PYPROJECT_FILENAME):
        candidate = root / filename
        if not candidate.is_file():
            continue
        section = _section_for(candidate)
        if section is None:
            continue
        return candidate, section
    return None


def _apply_env_overrides(config: FunseqConfig) -> FunseqConfig:
    env_format = os.getenv(LOG_FORMAT_ENV)
    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_format:
        try:
            config = replace(config, log_format=LogFormat.from_str(env_format))
        except ValueError as exc:
            allowed = ", ".join(LOG_FORMAT_ALLOWED_VALUES)
            message = f"{LOG_FORMAT_ENV} must be one of: {allowed} (got '{env_format}')"
            raise ConfigValidationError(message) from exc
    if env_level:
        level = env_level.strip().lower()
        if level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            message = f"{LOG_LEVEL_ENV} must be one of: {allowed} (got '{env_level}')"
            raise ConfigValidationError(message)
        config = replace(config, log_level=cast("LogLevelName", level))
    return config


def load_config(explicit_path: Path | None = None, *, root: Path | None = None) -> FunseqConfig:
    """Load funseq configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional configuration file. When given, only this file
            is read and it must exist. Either a standalone file (keys at the
            top level or under ``[tool.funseq]``) or a ``pyproject.toml``.
        root: Directory searched when ``explicit_path`` is ``None``. Defaults
            to the current working directory.

    Returns:
        A ``FunseqConfig`` with environment overrides applied.

    Raises:
        ConfigReadError: If a configuration file cannot be read or parsed.
        InvalidConfigFileError: If a configuration file fails validation.
        ConfigValidationError: If an environment override has an invalid value.
    """
    found: tuple[Path, dict[str, object]] | None
    if explicit_path is not None:
        section = _section_for(explicit_path)
        found = (explicit_path, section or {})
    else:
        found = _discover((root or Path.cwd()).resolve())

    if found is None:
        config = FunseqConfig()
    else:
        path, section = found
        try:
            model = FunseqConfigModel.model_validate(section)
        except ValidationError as exc:
            raise InvalidConfigFileError(path, exc) from exc
        config = config_from_model(model, path)

    config = _apply_env_overrides(config)
    logger.debug(
        "Loaded configuration from %s",
        config.source or "defaults",
        extra=structured_extra(
            component=LogComponent.CONFIG,
            details={"log_format": config.log_format.value, "log_level": config.log_level},
        ),
    )
    return config


def apply_logging(config: FunseqConfig) -> LogConfig:
    """Configure funseq logging from a loaded configuration."""
    return configure_logging(config.log_format, log_level=config.log_level)


__all__ = ["CONFIG_FILENAMES", "apply_logging", "load_config"]
