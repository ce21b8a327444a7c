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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from collections.abc import Callable

from hypothesis import strategies as st

__all__ = [
    "element_lists",
    "hashable_elements",
    "predicates",
]


def hashable_elements() -> st.SearchStrategy[int | str]:
    """Small integers and short strings, chosen so duplicates are common."""
    return st.one_of(st.integers(min_value=-5, max_value=5), st.text(max_size=2))


def element_lists(max_size: int = 20) -> st.SearchStrategy[list[int | str]]:
    """Return a strategy that yields lists with frequent repeated values."""
    return st.lists(hashable_elements(), max_size=max_size)


def _type_is(kind: type) -> Callable[[object], bool]:
    return lambda value: isinstance(value, kind)


def predicates() -> st.SearchStrategy[Callable[[object], bool]]:
    """Deterministic, side-effect-free predicates over ``hashable_elements``.

    Returns:
        Hypothesis strategy sampling a fixed set of predicates.
    """
    return st.sampled_from(
        [
            _type_is(int),
            _type_is(str),
            lambda value: bool(value),
            lambda value: len(str(value)) % 2 == 0,
            lambda value: False,
            lambda value: True,
        ],
    )
