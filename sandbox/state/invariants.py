"""Invariant checkers for the sandbox containers.

Each function returns True when the invariant holds, and the ``check_all_*``
helpers return the list of violated invariant IDs (empty = all pass).

The reversal rule of `ReversibleStringMap` (key == reverse(value)) is not in
the registry: `reinitialize_from_objects` and `uppercase_keys` are defined to
break it. Use `ReversibleStringMap.reversal_mismatches()` to inspect it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .arrays import IntegerStringArrayStore
    from .string_map import ReversibleStringMap


def _is_plain_int(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def inv_integers_storage_is_list(s: IntegerStringArrayStore) -> bool:
    return type(s._integers) is list


def inv_strings_storage_is_list(s: IntegerStringArrayStore) -> bool:
    return type(s._strings) is list


def inv_integers_no_empty_slot(s: IntegerStringArrayStore) -> bool:
    return all(_is_plain_int(v) for v in s._integers)


def inv_strings_no_empty_slot(s: IntegerStringArrayStore) -> bool:
    return all(isinstance(v, str) for v in s._strings)


def inv_map_storage_is_dict(m: ReversibleStringMap) -> bool:
    return type(m._entries) is dict


def inv_map_keys_are_str(m: ReversibleStringMap) -> bool:
    return all(isinstance(k, str) for k in m._entries)


def inv_map_values_are_str(m: ReversibleStringMap) -> bool:
    return all(isinstance(v, str) for v in m._entries.values())


# ---------------------------------------------------------------------------
# Registries + check_all
# ---------------------------------------------------------------------------

ARRAY_INVARIANTS: dict[str, Callable[[IntegerStringArrayStore], bool]] = {
    "inv_integers_storage_is_list": inv_integers_storage_is_list,
    "inv_strings_storage_is_list": inv_strings_storage_is_list,
    "inv_integers_no_empty_slot": inv_integers_no_empty_slot,
    "inv_strings_no_empty_slot": inv_strings_no_empty_slot,
}

MAP_INVARIANTS: dict[str, Callable[[ReversibleStringMap], bool]] = {
    "inv_map_storage_is_dict": inv_map_storage_is_dict,
    "inv_map_keys_are_str": inv_map_keys_are_str,
    "inv_map_values_are_str": inv_map_values_are_str,
}


def check_all_arrays(store: IntegerStringArrayStore) -> list[str]:
    """Return list of violated array invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in ARRAY_INVARIANTS.items()
        if not check_fn(store)
    ]


def check_all_map(mapping: ReversibleStringMap) -> list[str]:
    """Return list of violated map invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in MAP_INVARIANTS.items()
        if not check_fn(mapping)
    ]
