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

"""Configuration models for funseq.

`FunseqConfigModel` validates raw TOML data with pydantic; the frozen
`FunseqConfig` dataclass is what the rest of the library passes around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from funseq._internal.logging_utils import LOG_LEVELS
from funseq.core.model_types import LogFormat

if TYPE_CHECKING:
    from pathlib import Path

LogLevelName = Literal["debug", "info", "warning", "error"]

LOG_FORMAT_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(format_.value for format_ in LogFormat)


class FunseqConfigModel(BaseModel):
    """Pydantic model for validating funseq configuration from TOML.

    Attributes:
        log_format: Output format of the ``funseq`` log handler.
        log_level: Minimum level emitted by funseq loggers.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = "info"

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> object:
        if isinstance(value, str):
            candidate = value.strip().lower()
            return candidate if candidate in LOG_LEVELS else value
        return value


@dataclass(slots=True, frozen=True)
class FunseqConfig:
    """Resolved funseq configuration.

    Attributes:
        log_format: Output format of the ``funseq`` log handler.
        log_level: Minimum level emitted by funseq loggers.
        source: File the settings were read from, or ``None`` for defaults.
    """

    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = "info"
    source: Path | None = None


def config_from_model(model: FunseqConfigModel, source: Path | None) -> FunseqConfig:
    return FunseqConfig(log_format=model.log_format, log_level=model.log_level, source=source)


__all__ = [
    "LOG_FORMAT_ALLOWED_VALUES",
    "FunseqConfig",
    "FunseqConfigModel",
    "LogLevelName",
    "config_from_model",
]
