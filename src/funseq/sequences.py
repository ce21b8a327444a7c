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

"""Functional-style operations over ordered, in-memory sequences.

Every eager operation returns a freshly allocated ``list`` and leaves its
inputs untouched. ``iter_filter`` is the only lazy operation: it is a
generator that evaluates the predicate for the next element only when the
consumer asks for it.

Exceptions raised by predicates or by element comparisons propagate to the
caller unchanged. Argument type problems are reported as ``FunseqTypeError``.

Example:
    >>> concatenate([1, 2, 3], [4, 5], [6, 7])
    [1, 2, 3, 4, 5, 6, 7]
    >>> deduplicate([1, 1, 3, 4, 2, 2, 8, 1, 4])
    [1, 3, 4, 2, 8]
    >>> zip_pairs([1, 2, 3], [6, 5, 4, 3, 2, 1])[2].b
    4
    >>> materialize(iter_filter([1, 4, 5, 8, 9, 7, 4], lambda x: x % 2 == 0))
    [4, 8, 4]
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Final, Generic, NamedTuple, TypeVar, cast

from funseq._internal.logging_utils import structured_extra
from funseq.core.model_types import DedupeStrategy, LogComponent
from funseq.exceptions import FunseqTypeError, FunseqValidationError

logger: logging.Logger = logging.getLogger("funseq.sequences")

A = TypeVar("A")
B = TypeVar("B")
S = TypeVar("S")
T = TypeVar("T")

Predicate = Callable[[T], object]

_STRATEGIES: Final[tuple[str, ...]] = tuple(strategy.value for strategy in DedupeStrategy)


class Pair(NamedTuple, Generic[A, B]):
    """Two corresponding elements produced by `zip_pairs`.

    Attributes:
        a: Element taken from the first sequence.
        b: Element taken from the second sequence.
    """

    a: A
    b: B


def _require_iterable(value: object, *, name: str) -> None:
    try:
        _ = iter(cast("Iterable[object]", value))
    except TypeError as exc:
        message = f"{name} must be iterable (got {type(value).__name__})"
        raise FunseqTypeError(message) from exc


def _require_sequence(value: object, *, name: str) -> None:
    if not isinstance(value, Sequence):
        message = f"{name} must be a sequence with a length (got {type(value).__name__})"
        raise FunseqTypeError(message)


def _require_callable(value: object, *, name: str) -> None:
    if not callable(value):
        message = f"{name} must be callable (got {type(value).__name__})"
        raise FunseqTypeError(message)


def _coerce_strategy(strategy: DedupeStrategy | str) -> DedupeStrategy:
    if isinstance(strategy, DedupeStrategy):
        return strategy
    if not isinstance(strategy, str):
        message = f"strategy must be a DedupeStrategy or string (got {type(strategy).__name__})"
        raise FunseqTypeError(message)
    try:
        return DedupeStrategy.from_str(strategy)
    except ValueError as exc:
        message = f"Unknown dedupe strategy '{strategy}'; expected one of {', '.join(_STRATEGIES)}"
        raise FunseqValidationError(message) from exc


def _log_completed(
    operation: str,
    *,
    started: float,
    input_count: int,
    output_count: int,
    details: dict[str, object] | None = None,
) -> None:
    duration_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        "%s completed: input=%s output=%s",
        operation,
        input_count,
        output_count,
        extra=structured_extra(
            component=LogComponent.SEQUENCES,
            operation=operation,
            input_count=input_count,
            output_count=output_count,
            duration_ms=duration_ms,
            details=details or {},
        ),
    )


def concatenate(*sequences: Iterable[T]) -> list[T]:
    """Return the items of several sequences inside a new list.

    Items keep the order of the arguments and, within each argument, their
    original order. Calling it with no arguments returns an empty list.

    Args:
        *sequences: Zero or more sequences sharing an element type.

    Returns:
        A new list whose length is the sum of the input lengths.

    Raises:
        FunseqTypeError: If any argument is not iterable.
    """
    started = time.perf_counter()
    for index, sequence in enumerate(sequences):
        _require_iterable(sequence, name=f"sequences[{index}]")
    result: list[T] = []
    for sequence in sequences:
        result.extend(sequence)
    _log_completed(
        "concatenate",
        started=started,
        input_count=len(result),
        output_count=len(result),
        details={"sequences": len(sequences)},
    )
    return result


def _dedupe_scan(values: Iterable[T]) -> tuple[list[T], int]:
    result: list[T] = []
    seen = 0
    for value in values:
        seen += 1
        if value not in result:
            result.append(value)
    return result, seen


def _dedupe_hashed(values: Iterable[T]) -> tuple[list[T], int]:
    kept: set[Hashable] = set()
    result: list[T] = []
    seen = 0
    for value in values:
        seen += 1
        key = cast("Hashable", value)
        if key in kept:
            continue
        kept.add(key)
        result.append(value)
    return result, seen


def deduplicate(
    sequence: Iterable[T],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> list[T]:
    """Return a new list without duplicates, keeping first occurrences.

    Args:
        sequence: Values to deduplicate. Elements must support ``==``; the
            ``hashed`` strategy additionally requires them to be hashable.
        strategy: ``scan`` compares each value against those already kept,
            which is quadratic but works for unhashable values. ``hashed``
            tracks seen values in a set and runs in linear time.

    Returns:
        The first appearance of each distinct value, in order of appearance.

    Raises:
        FunseqTypeError: If ``sequence`` is not iterable.
        FunseqValidationError: If ``strategy`` names an unknown strategy.
    """
    started = time.perf_counter()
    _require_iterable(sequence, name="sequence")
    selected = _coerce_strategy(strategy)
    if selected is DedupeStrategy.HASHED:
        result, seen = _dedupe_hashed(sequence)
    else:
        result, seen = _dedupe_scan(sequence)
    _log_completed(
        "deduplicate",
        started=started,
        input_count=seen,
        output_count=len(result),
        details={"strategy": selected.value},
    )
    return result


def zip_pairs(first: Sequence[S], second: Sequence[T]) -> list[Pair[S, T]]:
    """Combine two sequences into a list of pairs.

    Pair ``i`` holds ``first[i]`` as ``a`` and ``second[i]`` as ``b``. When
    the lengths differ the surplus items of the longer sequence are dropped.

    Args:
        first: Sequence supplying the ``a`` fields.
        second: Sequence supplying the ``b`` fields.

    Returns:
        A new list of ``min(len(first), len(second))`` pairs.

    Raises:
        FunseqTypeError: If either argument is not a sequence.
    """
    started = time.perf_counter()
    _require_sequence(first, name="first")
    _require_sequence(second, name="second")
    result = [Pair(a, b) for a, b in zip(first, second, strict=False)]
    _log_completed(
        "zip_pairs",
        started=started,
        input_count=len(first) + len(second),
        output_count=len(result),
        details={"first": len(first), "second": len(second)},
    )
    return result


def iter_filter(sequence: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Lazily yield every item that fulfils the predicate.

    The predicate runs once per item, in order, and only when the consumer
    pulls the next value. Re-invoking this function on the same sequence
    starts over and yields the same items. Stopping early is always safe.

    Args:
        sequence: Items to test.
        predicate: Callable returning a truthy value for items to keep.

    Returns:
        An iterator over the selected items.

    Raises:
        FunseqTypeError: If ``sequence`` is not iterable or ``predicate`` is
            not callable. Raised on call, before iteration starts.
    """
    _require_iterable(sequence, name="sequence")
    _require_callable(predicate, name="predicate")
    return _filter_generator(sequence, predicate)


def _filter_generator(sequence: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    started = time.perf_counter()
    tested = 0
    kept = 0
    for item in sequence:
        tested += 1
        if predicate(item):
            kept += 1
            yield item
    _log_completed("iter_filter", started=started, input_count=tested, output_count=kept)


def filter_items(sequence: Iterable[T], predicate: Predicate[T]) -> list[T]:
    """Return a new list with all the items that fulfilled the predicate.

    Args:
        sequence: Items to test.
        predicate: Callable returning a truthy value for items to keep.

    Returns:
        The selected items in their original order.

    Raises:
        FunseqTypeError: If ``sequence`` is not iterable or ``predicate`` is
            not callable.
    """
    started = time.perf_counter()
    _require_iterable(sequence, name="sequence")
    _require_callable(predicate, name="predicate")
    tested = 0
    result: list[T] = []
    for item in sequence:
        tested += 1
        if predicate(item):
            result.append(item)
    _log_completed(
        "filter_items",
        started=started,
        input_count=tested,
        output_count=len(result),
    )
    return result


def filter_where(sequence: Iterable[T], condition: Predicate[T]) -> list[T]:
    """Shorthand filter written against an ``it`` placeholder.

    Reads naturally with a one-argument lambda, e.g.
    ``filter_where(temperatures, lambda it: -10 < it < 50)``.
    Behaves exactly like `filter_items`.
    """
    return filter_items(sequence, condition)


def materialize(producer: Iterable[T]) -> list[T]:
    """Drain an iterator or other iterable into a new list.

    Only finite producers terminate; an unbounded generator makes this call
    run forever.

    Args:
        producer: Any finite iterable, including the result of `iter_filter`.

    Returns:
        Every produced item, in production order.

    Raises:
        FunseqTypeError: If ``producer`` is not iterable.
    """
    started = time.perf_counter()
    _require_iterable(producer, name="producer")
    result = list(producer)
    _log_completed(
        "materialize",
        started=started,
        input_count=len(result), output_count=len(result))
    return result


__all__ = [
    "Pair",
    "Predicate",
    "concatenate",
    "deduplicate",
    "filter_items",
    "filter_where",
    "iter_filter",
    "materialize",
    "zip_pairs",
]
