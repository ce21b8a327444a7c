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

"""Enumerations shared by the sequence operations, logging and config layers."""

from __future__ import annotations

from funseq.compat import StrEnum


class DedupeStrategy(StrEnum):
    """How `deduplicate` decides whether a value was already seen.

    Attributes:
        SCAN: Compare each candidate against the kept values with ``==``.
            Quadratic, but accepts unhashable elements.
        HASHED: Track seen values in a set. Linear, requires hashable
            elements.
    """

    SCAN = "scan"
    HASHED = "hashed"

    @classmethod
    def from_str(cls, raw: str) -> DedupeStrategy:
        """Create a DedupeStrategy enum from a string value.

        Args:
            raw: String representation of the strategy.

        Returns:
            DedupeStrategy enum value.

        Raises:
            ValueError: If the string does not match any DedupeStrategy value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown dedupe strategy '{raw}'"
            raise ValueError(msg) from exc


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable library components."""

    SEQUENCES = "sequences"
    CONFIG = "config"


__all__ = ["DedupeStrategy", "LogComponent", "LogFormat"]
