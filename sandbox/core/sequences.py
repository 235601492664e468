"""
Pure sequence operations backing `IntegerStringArrayStore`.

Every function here takes plain sequences and returns new lists (or scalars);
none of them mutates its inputs. Results are always sized to exactly the
number of live elements: there is no spare capacity and no sentinel slot.

Policies:
- Insertion positions are clamped into ``[0, len(seq)]``.
- Removal positions outside ``[0, len(seq))`` leave the sequence unchanged.
- Float -> int conversion truncates toward zero (``3.7 -> 3``, ``-3.7 -> -3``).
- Aggregates over an empty sequence return an empty result.
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, Hashable, List, Protocol, Sequence, TypeVar

from ..errors import InvalidArgument
from .text import fold, require_str

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def require_int(value: Any, *, name: str = "value") -> int:
    # bool is an int subclass; reject it so True/False never land in the integer sequence.
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


def clamp_position(position: int, length: int) -> int:
    """Clamp an insertion position into ``[0, length]``."""
    position = require_int(position, name="position")
    if position < 0:
        return 0
    if position > length:
        return length
    return position


def appended(seq: Sequence[T], value: T) -> List[T]:
    """New list one element longer, with ``value`` last."""
    out: List[T] = list(seq)
    out.append(value)
    return out


def inserted_at(seq: Sequence[T], value: T, position: int) -> List[T]:
    """
    New list with ``value`` placed at the clamped ``position``.

    Elements at or after the insertion point shift right by one.
    """
    pos = clamp_position(position, len(seq))
    return [*seq[:pos], value, *seq[pos:]]


def removed_at(seq: Sequence[T], position: int) -> List[T]:
    """
    New list without the element at ``position``.

    Out-of-range positions (including negative ones) yield an unchanged copy.
    """
    position = require_int(position, name="position")
    if position < 0 or position >= len(seq):
        return list(seq)
    return [*seq[:position], *seq[position + 1:]]


def without_value(seq: Sequence[T], value: T) -> List[T]:
    """New list excluding every element equal to ``value``; relative order kept."""
    return [item for item in seq if item != value]


def truncate_toward_zero(values: Sequence[Any]) -> List[int]:
    """
    Convert each number to an int by dropping its fractional part.

    Raises:
        TypeError: if an element is not a real number
        InvalidArgument: if an element is NaN or infinite
    """
    out: List[int] = []
    for i, v in enumerate(values):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise TypeError(f"values[{i}] must be a number, got {type(v).__name__}")
        if isinstance(v, float) and not math.isfinite(v):
            raise InvalidArgument(f"values[{i}] cannot be truncated: {v!r}")
        # math.trunc rounds toward zero for both signs.
        out.append(math.trunc(v))
    return out


def absolute_values(seq: Sequence[int]) -> List[int]:
    return [-v if v < 0 else v for v in seq]


def count_equal(seq: Sequence[T], value: T) -> int:
    return sum(1 for item in seq if item == value)


def count_folded(seq: Sequence[str], value: str) -> int:
    """Case-insensitive occurrence count (both sides folded before comparing)."""
    target = fold(require_str(value))
    return sum(1 for item in seq if fold(item) == target)


def positions_of(seq: Sequence[T], value: T) -> List[int]:
    """Ascending indices ``i`` with ``seq[i] == value``; empty when absent."""
    return [i for i, item in enumerate(seq) if item == value]


def value_range(seq: Sequence[int]) -> List[int]:
    """``[min, max]`` of the sequence, or ``[]`` when it is empty."""
    if not seq:
        return []
    lo = hi = seq[0]
    for v in seq[1:]:
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    return [lo, hi]


def histogram(seq: Sequence[H]) -> Dict[H, int]:
    """Occurrence count per distinct value; ``{}`` for an empty sequence."""
    counts: Dict[H, int] = {}
    for v in seq:
        counts[v] = counts.get(v, 0) + 1
    return counts


def count_repeated_values(seq: Sequence[H]) -> int:
    """Number of *distinct* values occurring more than once."""
    return sum(1 for n in histogram(seq).values() if n > 1)


def equals_ordered(a: Sequence[T], b: Sequence[T]) -> bool:
    """Same length and element-wise equal at every index."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def uniform_integers(count: int, lo: int, hi: int, rng: RandomSource | None = None) -> List[int]:
    """
    ``count`` independent draws, uniform over the inclusive range ``[lo, hi]``.

    Uses the process-wide ``random`` module unless ``rng`` is given.

    Raises:
        InvalidArgument: if ``count < 0`` or ``lo > hi``
    """
    count = require_int(count, name="count")
    lo = require_int(lo, name="min")
    hi = require_int(hi, name="max")
    if count < 0:
        raise InvalidArgument(f"count must be non-negative: {count}")
    if lo > hi:
        raise InvalidArgument(f"min must not exceed max: {lo} > {hi}")
    source = rng if rng is not None else random
    return [source.randint(lo, hi) for _ in range(count)]
