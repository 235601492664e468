"""
Parallel integer/string sequences with exact-size storage.

Implements IntegerStringArrayStore: one ordered sequence of signed integers and
one ordered sequence of strings, each resized independently.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional, Sequence

from ..config import SandboxConfig
from ..core import sequences as seqs
from ..core.text import canonical_text, require_str
from ..errors import InvariantViolation
from .invariants import check_all_arrays

logger = logging.getLogger(__name__)


class IntegerStringArrayStore:
    """
    Owner of an integer sequence and a string sequence.

    Storage rules:
    - Every cardinality change swaps in a freshly built list of the exact new
      size (see `sandbox/core/sequences.py`); no slot is ever empty.
    - Accessors return copies, never the internal lists.
    - Out-of-range positions are clamped (insert) or ignored (remove) instead
      of raising.
    """

    def __init__(
        self,
        *,
        rng: Optional[seqs.RandomSource] = None,
        check_invariants: bool = False,
    ) -> None:
        self._integers: List[int] = []
        self._strings: List[str] = []
        self._rng = rng
        self._check_invariants = bool(check_invariants)

    @classmethod
    def from_config(cls, config: SandboxConfig) -> "IntegerStringArrayStore":
        rng = random.Random(config.random_seed) if config.random_seed is not None else None
        return cls(rng=rng, check_invariants=config.check_invariants)

    def _after_mutation(self) -> None:
        if not self._check_invariants:
            return
        violations = check_all_arrays(self)
        if violations:
            raise InvariantViolation(violations)

    # ------------------------------------------------------------------
    # Copies and sizes
    # ------------------------------------------------------------------

    def copy_integers(self) -> List[int]:
        """Independent copy of the integer sequence."""
        return list(self._integers)

    def copy_strings(self) -> List[str]:
        """Independent copy of the string sequence."""
        return list(self._strings)

    def count(self) -> int:
        return len(self._integers)

    def count_strings(self) -> int:
        return len(self._strings)

    # ------------------------------------------------------------------
    # Cardinality-changing mutations
    # ------------------------------------------------------------------

    def append(self, value: int) -> None:
        """Grow the integer sequence by one, with ``value`` last."""
        value = seqs.require_int(value)
        self._integers = seqs.appended(self._integers, value)
        self._after_mutation()

    def append_string(self, value: str) -> None:
        """Grow the string sequence by one, with ``value`` last."""
        value = require_str(value)
        self._strings = seqs.appended(self._strings, value)
        self._after_mutation()

    def remove_all_occurrences(self, value: int) -> None:
        """Drop every integer equal to ``value``; the rest keep their order."""
        self._integers = seqs.without_value(self._integers, seqs.require_int(value))
        self._after_mutation()

    def remove_all_string_occurrences(self, value: str) -> None:
        """Drop every string equal to ``value`` (exact, case-sensitive match)."""
        self._strings = seqs.without_value(self._strings, require_str(value))
        self._after_mutation()

    def insert_at(self, value: int, position: int) -> None:
        """
        Insert ``value`` so that it ends up at ``position``.

        Args:
            value: Integer to insert
            position: Target index; values below 0 mean the front and values
                above the current length mean the end
        """
        value = seqs.require_int(value)
        position = seqs.require_int(position, name="position")
        length = len(self._integers)
        if position < 0 or position > length:
            logger.debug("insert position %s clamped into [0, %d]", position, length)
        self._integers = seqs.inserted_at(self._integers, value, position)
        self._after_mutation()

    def remove_at(self, position: int) -> None:
        """
        Remove the integer at ``position``.

        Positions outside ``[0, count())`` leave the sequence untouched.
        """
        position = seqs.require_int(position, name="position")
        if position < 0 or position >= len(self._integers):
            logger.debug("remove position %d out of range, ignored", position)
            return
        self._integers = seqs.removed_at(self._integers, position)
        self._after_mutation()

    # ------------------------------------------------------------------
    # Full replacements
    # ------------------------------------------------------------------

    def reinitialize_from_floats(self, values: Sequence[float]) -> None:
        """
        Replace the integers with ``values`` truncated toward zero.

        Raises:
            TypeError: If an element is not a number
            InvalidArgument: If an element is NaN or infinite
        """
        self._integers = seqs.truncate_toward_zero(values)
        logger.debug("integers reinitialized from %d floats", len(self._integers))
        self._after_mutation()

    def reinitialize_from_stringable(self, objects: Sequence[Any]) -> None:
        """Replace the strings with the textual form of each object, in order."""
        self._strings = [canonical_text(obj) for obj in objects]
        logger.debug("strings reinitialized from %d objects", len(self._strings))
        self._after_mutation()

    def randomize(self, count: int, min_value: int, max_value: int) -> None:
        """
        Replace the integers with ``count`` uniform draws from
        ``[min_value, max_value]`` (inclusive).

        Raises:
            InvalidArgument: If ``count < 0`` or ``min_value > max_value``
        """
        self._integers = seqs.uniform_integers(count, min_value, max_value, self._rng)
        logger.debug("integers randomized: count=%d range=[%d, %d]", count, min_value, max_value)
        self._after_mutation()

    # ------------------------------------------------------------------
    # In-place transforms
    # ------------------------------------------------------------------

    def absolutize(self) -> None:
        """Negate every negative integer; positions are unchanged."""
        self._integers[:] = seqs.absolute_values(self._integers)
        self._after_mutation()

    def sort_integers(self) -> None:
        """Ascending numeric order."""
        self._integers.sort()
        self._after_mutation()

    def sort_strings(self) -> None:
        """Ascending lexicographic (code point) order."""
        self._strings.sort()
        self._after_mutation()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def count_occurrences(self, value: int) -> int:
        return seqs.count_equal(self._integers, seqs.require_int(value))

    def count_string_occurrences(self, value: str) -> int:
        """Occurrences of ``value`` among the strings, ignoring case."""
        return seqs.count_folded(self._strings, value)

    def find_positions(self, value: int) -> List[int]:
        return seqs.positions_of(self._integers, seqs.require_int(value))

    def range(self) -> List[int]:
        """``[min, max]`` over the integers, or ``[]`` if there are none."""
        return seqs.value_range(self._integers)

    def histogram(self) -> Dict[int, int]:
        return seqs.histogram(self._integers)

    def count_values_appearing_more_than_once(self) -> int:
        """Number of distinct integers that occur at least twice."""
        return seqs.count_repeated_values(self._integers)

    def equals_ordered(self, other: Sequence[int]) -> bool:
        return seqs.equals_ordered(self._integers, other)

    def equals_as_multiset(self, other: Sequence[int]) -> bool:
        """
        Same elements with the same multiplicities, in any order.

        Side effect: when the lengths match, the internal integers end up
        sorted ascending, and so does ``other`` when it is a list. Other
        sequence types are compared through a sorted copy. Different lengths
        return False with both operands untouched.
        """
        if len(self._integers) != len(other):
            return False
        self._integers.sort()
        if isinstance(other, list):
            other.sort()
            theirs: Sequence[int] = other
        else:
            theirs = sorted(other)
        self._after_mutation()
        return seqs.equals_ordered(self._integers, theirs)

    def __len__(self) -> int:
        return len(self._integers)

    def __repr__(self) -> str:
        return (
            f"IntegerStringArrayStore({len(self._integers)} integers, "
            f"{len(self._strings)} strings)"
        )
