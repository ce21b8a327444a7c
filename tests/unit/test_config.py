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

"""Unit tests for configuration loading."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from funseq import FunseqValidationError, apply_logging, load_config
from funseq.config import FunseqConfig
from funseq.core.model_types import LogFormat
from funseq.exceptions import ConfigReadError, ConfigValidationError, InvalidConfigFileError

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def _write(path: Path, text: str) -> Path:
    _ = path.write_text(text, encoding="utf-8")
    return path


def test_load_config_defaults_when_no_files(tmp_path: Path) -> None:
    config = load_config(root=tmp_path)
    assert config == FunseqConfig()
    assert config.source is None
    assert config.log_format is LogFormat.TEXT
    assert config.log_level == "info"


def test_load_config_reads_standalone_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "funseq.toml", 'log_format = "JSON"\nlog_level = "Debug"\n')
    config = load_config(root=tmp_path)
    assert config.source == path
    assert config.log_format is LogFormat.JSON
    assert config.log_level == "debug"


def test_load_config_reads_pyproject_tool_table(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.funseq]\nlog_level = "warning"\n',
    )
    config = load_config(root=tmp_path)
    assert config.source == path
    assert config.log_level == "warning"
    assert config.log_format is LogFormat.TEXT


def test_load_config_skips_pyproject_without_tool_table(tmp_path: Path) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert load_config(root=tmp_path).source is None


def test_standalone_file_ignores_other_tool_tables(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "funseq.toml",
        'log_level = "debug"\n\n[tool.other]\nenabled = true\n',
    )
    config = load_config(root=tmp_path)
    assert config.source == path
    assert config.log_level == "debug"


def test_standalone_file_takes_precedence_over_pyproject(tmp_path: Path) -> None:
    _ = _write(tmp_path / "pyproject.toml", '[tool.funseq]\nlog_level = "error"\n')
    path = _write(tmp_path / ".funseq.toml", 'log_level = "debug"\n')
    config = load_config(root=tmp_path)
    assert config.source == path
    assert config.log_level == "debug"


def test_load_config_explicit_path(tmp_path: Path) -> None:
    _ = _write(tmp_path / "funseq.toml", 'log_level = "error"\n')
    explicit = _write(tmp_path / "custom.toml", '[tool.funseq]\nlog_format = "json"\n')
    config = load_config(explicit)
    assert config.source == explicit
    assert config.log_format is LogFormat.JSON
    assert config.log_level == "info"


def test_load_config_missing_explicit_path_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError) as excinfo:
        _ = load_config(tmp_path / "absent.toml")
    assert excinfo.value.path == tmp_path / "absent.toml"


def test_load_config_malformed_toml_raises(tmp_path: Path) -> None:
    _ = _write(tmp_path / "funseq.toml", "log_level = \n")
    with pytest.raises(ConfigReadError, match="Unable to read"):
        _ = load_config(root=tmp_path)


@pytest.mark.parametrize(
    "body",
    [
        'log_level = "verbose"\n',
        'log_format = "xml"\n',
        'dedupe = "hashed"\n',
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, body: str) -> None:
    _ = _write(tmp_path / "funseq.toml", body)
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_config(root=tmp_path)
    assert isinstance(excinfo.value, FunseqValidationError)


def test_environment_overrides_file_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = _write(tmp_path / "funseq.toml", 'log_format = "text"\nlog_level = "info"\n')
    monkeypatch.setenv("FUNSEQ_LOG_FORMAT", "json")
    monkeypatch.setenv("FUNSEQ_LOG_LEVEL", "ERROR")
    config = load_config(root=tmp_path)
    assert config.log_format is LogFormat.JSON
    assert config.log_level == "error"


@pytest.mark.parametrize(
    ("variable", "value"),
    [("FUNSEQ_LOG_FORMAT", "yaml"), ("FUNSEQ_LOG_LEVEL", "loud")],
)
def test_invalid_environment_override_raises(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    variable: str,
    value: str,
) -> None:
    monkeypatch.setenv(variable, value)
    with pytest.raises(ConfigValidationError, match=variable):
        _ = load_config(root=tmp_path)


def test_apply_logging_configures_funseq_logger(tmp_path: Path) -> None:
    _ = _write(tmp_path / "funseq.toml", 'log_format = "json"\nlog_level = "warning"\n')
    log_config = apply_logging(load_config(root=tmp_path))
    assert log_config.format is LogFormat.JSON
    assert log_config.level == logging.WARNING
    assert logging.getLogger("funseq").level == logging.WARNING
