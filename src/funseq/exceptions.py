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

"""Common exception hierarchy for funseq.

Only argument problems are reported through these classes. Exceptions raised
by caller-supplied predicates or element comparisons are never wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "FunseqError",
    "FunseqTypeError",
    "FunseqValidationError",
    "InvalidConfigFileError",
]


class FunseqError(Exception):
    """Base error for all funseq exceptions."""


class FunseqValidationError(FunseqError, ValueError):
    """Raised when an argument has an acceptable type but an invalid value."""


class FunseqTypeError(FunseqError, TypeError):
    """Raised when an argument has an unexpected type."""


class ConfigValidationError(FunseqValidationError):
    """Base class for configuration loading failures."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The configuration file that could not be read.
            error: The underlying exception that caused the failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails schema validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid funseq configuration in {path}: {error}")
