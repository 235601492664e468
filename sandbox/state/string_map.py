"""
String -> string map keyed by the reverse of each value.

Implements ReversibleStringMap: `insert("abc")` stores ``{"cba": "abc"}``.

Two mutators are defined to break the reversal rule and must keep doing so:
- `reinitialize_from_objects` stores each text as both key and value,
- `uppercase_keys` upper-cases keys but keeps the original values; when two
  keys upper-case to the same string, the one processed later wins.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..config import SandboxConfig
from ..core.text import canonical_text, require_str, reverse_text, upper
from ..errors import InvariantViolation
from .invariants import check_all_map

logger = logging.getLogger(__name__)


class ReversibleStringMap:
    """
    Mapping from reversed text to text.

    Notes:
    - Keys are unique; inserting a text whose reverse is already a key
      overwrites the previous value.
    - Iteration order of the underlying dict is insertion order, which also
      decides which entry wins a collision in `uppercase_keys`.
    """

    def __init__(self, *, check_invariants: bool = False) -> None:
        self._entries: Dict[str, str] = {}
        self._check_invariants = bool(check_invariants)

    @classmethod
    def from_config(cls, config: SandboxConfig) -> "ReversibleStringMap":
        return cls(check_invariants=config.check_invariants)

    def _after_mutation(self) -> None:
        if not self._check_invariants:
            return
        violations = check_all_map(self)
        if violations:
            raise InvariantViolation(violations)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def values_sorted_ascending(self) -> List[str]:
        """All values in ascending lexicographic order (duplicates kept)."""
        return sorted(self._entries.values())

    def keys_sorted_descending(self) -> List[str]:
        return sorted(self._entries, reverse=True)

    def smallest_key(self) -> Optional[str]:
        """Lexicographically smallest key, or None for an empty map."""
        if not self._entries:
            return None
        return min(self._entries)

    def largest_value(self) -> Optional[str]:
        """Lexicographically largest value, or None for an empty map."""
        if not self._entries:
            return None
        return max(self._entries.values())

    def keys_uppercased_unordered(self) -> List[str]:
        """One upper-cased entry per key, in no particular order. Does not modify the map."""
        return [upper(k) for k in self._entries]

    def distinct_value_count(self) -> int:
        return len(set(self._entries.values()))

    def values_contain_all(self, candidates: Iterable[str]) -> bool:
        """True iff every candidate is one of the values (vacuously true for none)."""
        values = set(self._entries.values())
        return all(c in values for c in candidates)

    def reversal_mismatches(self) -> List[str]:
        """Keys (sorted) whose value is not their character reverse."""
        return sorted(k for k, v in self._entries.items() if k != reverse_text(v))

    def get_all(self) -> Dict[str, str]:
        # Shallow copy; callers must not alias internal storage.
        return dict(self._entries)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, text: str) -> None:
        """Store ``text`` under the key ``reverse(text)``, overwriting any previous value."""
        text = require_str(text, name="text")
        self._entries[reverse_text(text)] = text
        self._after_mutation()

    def remove_by_key(self, key: str) -> None:
        """Delete the entry for ``key``; absent keys are ignored."""
        self._entries.pop(key, None)
        self._after_mutation()

    def remove_by_value(self, value: str) -> None:
        """Delete every entry whose value equals ``value`` exactly."""
        doomed = [k for k, v in self._entries.items() if v == value]
        for k in doomed:
            del self._entries[k]
        self._after_mutation()

    def reinitialize_from_objects(self, objects: Iterable[Any]) -> None:
        """
        Clear the map, then store the textual form of each object as both
        key and value.
        """
        self._entries.clear()
        for obj in objects:
            text = canonical_text(obj)
            self._entries[text] = text
        logger.debug("map reinitialized with %d entries", len(self._entries))
        self._after_mutation()

    def uppercase_keys(self) -> None:
        """Rebuild the map with upper-cased keys and the same paired values."""
        rebuilt: Dict[str, str] = {}
        for key, value in self._entries.items():
            new_key = upper(key)
            if new_key in rebuilt:
                logger.debug("uppercase key collision on %r, later entry wins", new_key)
            rebuilt[new_key] = value
        self._entries = rebuilt
        self._after_mutation()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ReversibleStringMap({len(self._entries)} entries)"
