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

"""funseq - functional-style operations over ordered sequences.

Provides concatenation, deduplication, zipping, eager and lazy filtering,
and materialization of iterators into lists.
"""

from __future__ import annotations

from ._internal.logging_utils import LogConfig, configure_logging
from .config import FunseqConfig, apply_logging, load_config
from .core.model_types import DedupeStrategy
from .exceptions import FunseqError, FunseqTypeError, FunseqValidationError
from .sequences import (
    Pair,
    concatenate,
    deduplicate,
    filter_items,
    filter_where,
    iter_filter,
    materialize,
    zip_pairs,
)

__all__ = [
    "DedupeStrategy",
    "FunseqConfig",
    "FunseqError",
    "FunseqTypeError",
    "FunseqValidationError",
    "LogConfig",
    "Pair",
    "__version__",
    "apply_logging",
    "concatenate",
    "configure_logging",
    "deduplicate",
    "filter_items",
    "filter_where",
    "iter_filter",
    "load_config",
    "materialize",
    "zip_pairs",
]

__version__ = "0.1.0"
