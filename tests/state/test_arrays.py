"""Tests for sandbox/state/arrays.py: IntegerStringArrayStore."""

import logging
import random

import pytest

from sandbox import IntegerStringArrayStore, InvalidArgument, SandboxConfig


def make_store(integers=(), strings=()):
    store = IntegerStringArrayStore()
    for v in integers:
        store.append(v)
    for s in strings:
        store.append_string(s)
    return store


class TestEmptyStore:
    def test_starts_empty(self):
        store = IntegerStringArrayStore()
        assert store.count() == 0
        assert store.count_strings() == 0
        assert store.copy_integers() == []
        assert store.copy_strings() == []

    def test_empty_aggregates(self):
        store = IntegerStringArrayStore()
        assert store.range() == []
        assert store.histogram() == {}
        assert store.count_values_appearing_more_than_once() == 0
        assert store.find_positions(1) == []


class TestCopies:
    def test_copy_integers_is_independent(self):
        store = make_store([1, 2, 3])
        copy = store.copy_integers()
        copy.append(4)
        copy[0] = 99
        assert store.copy_integers() == [1, 2, 3]

    def test_copy_strings_is_independent(self):
        store = make_store(strings=["a", "b"])
        copy = store.copy_strings()
        copy.clear()
        assert store.copy_strings() == ["a", "b"]


class TestAppend:
    def test_append_grows_by_one_and_places_last(self):
        store = make_store([5, 6])
        store.append(-1)
        assert store.count() == 3
        assert store.copy_integers()[-1] == -1

    def test_append_string(self):
        store = make_store(strings=["x"])
        store.append_string("y")
        assert store.copy_strings() == ["x", "y"]

    def test_append_rejects_wrong_types(self):
        store = IntegerStringArrayStore()
        with pytest.raises(TypeError):
            store.append("1")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            store.append(True)
        with pytest.raises(TypeError):
            store.append_string(1)  # type: ignore[arg-type]
        assert store.count() == 0
        assert store.count_strings() == 0


class TestRemoveAllOccurrences:
    def test_removes_every_match(self):
        store = make_store([1, 2, 1, 3, 1])
        store.remove_all_occurrences(1)
        assert store.copy_integers() == [2, 3]

    def test_absent_value_is_noop(self):
        store = make_store([1, 2])
        store.remove_all_occurrences(7)
        assert store.copy_integers() == [1, 2]

    def test_string_match_is_case_sensitive(self):
        store = make_store(strings=["Hola", "hola", "HOLA", "hola"])
        store.remove_all_string_occurrences("hola")
        assert store.copy_strings() == ["Hola", "HOLA"]


class TestInsertAt:
    def test_insert_in_middle(self):
        store = make_store([1, 2, 3])
        store.insert_at(9, 1)
        assert store.copy_integers() == [1, 9, 2, 3]

    def test_negative_position_inserts_at_front(self):
        a = make_store([1, 2, 3])
        b = make_store([1, 2, 3])
        a.insert_at(9, -4)
        b.insert_at(9, 0)
        assert a.copy_integers() == b.copy_integers() == [9, 1, 2, 3]

    def test_position_past_end_appends(self):
        a = make_store([1, 2, 3])
        b = make_store([1, 2, 3])
        a.insert_at(9, 50)
        b.insert_at(9, 3)
        assert a.copy_integers() == b.copy_integers() == [1, 2, 3, 9]

    def test_clamping_is_logged_at_debug(self, caplog):
        store = make_store([1])
        with caplog.at_level(logging.DEBUG, logger="sandbox"):
            store.insert_at(2, 10)
        assert "clamped" in caplog.text


class TestRemoveAt:
    def test_removes_single_element(self):
        store = make_store([4, 5, 6])
        store.remove_at(0)
        assert store.copy_integers() == [5, 6]

    @pytest.mark.parametrize("pos", [-1, 3, 1000])
    def test_out_of_range_leaves_sequence_identical(self, pos):
        store = make_store([4, 5, 6])
        store.remove_at(pos)
        assert store.copy_integers() == [4, 5, 6]

    def test_remove_from_empty_is_noop(self):
        store = IntegerStringArrayStore()
        store.remove_at(0)
        assert store.count() == 0


class TestReinitialize:
    def test_from_floats_truncates(self):
        store = make_store([100])
        store.reinitialize_from_floats([3.67, -2.9, 0.1, 7.0])
        assert store.copy_integers() == [3, -2, 0, 7]

    def test_from_floats_empty(self):
        store = make_store([1, 2])
        store.reinitialize_from_floats([])
        assert store.count() == 0

    def test_from_floats_nan_rejected_and_state_kept(self):
        store = make_store([1, 2])
        with pytest.raises(InvalidArgument):
            store.reinitialize_from_floats([1.5, float("nan")])
        assert store.copy_integers() == [1, 2]

    def test_from_stringable(self):
        store = make_store(strings=["old"])
        store.reinitialize_from_stringable([1, 2.5, "x", None])
        assert store.copy_strings() == ["1", "2.5", "x", "None"]

    def test_reinitialize_does_not_touch_other_sequence(self):
        store = make_store([1], ["a"])
        store.reinitialize_from_floats([2.2])
        store.reinitialize_from_stringable(["b", "c"])
        assert store.copy_integers() == [2]
        assert store.copy_strings() == ["b", "c"]


class TestTransforms:
    def test_absolutize(self):
        store = make_store([-3, 0, 4, -1])
        store.absolutize()
        assert store.copy_integers() == [3, 0, 4, 1]

    def test_sort_integers(self):
        store = make_store([3, -1, 2, -1])
        store.sort_integers()
        assert store.copy_integers() == [-1, -1, 2, 3]
        store.sort_integers()
        assert store.copy_integers() == [-1, -1, 2, 3]

    def test_sort_strings_uses_code_point_order(self):
        store = make_store(strings=["b", "B", "a", "A"])
        store.sort_strings()
        assert store.copy_strings() == ["A", "B", "a", "b"]


class TestQueries:
    def test_count_occurrences(self):
        store = make_store([1, 2, 1, 1])
        assert store.count_occurrences(1) == 3
        assert store.count_occurrences(5) == 0

    def test_count_string_occurrences_ignores_case(self):
        store = make_store(strings=["Hola", "HOLA", "mundo"])
        assert store.count_string_occurrences("hola") == 2
        assert store.count_string_occurrences("nada") == 0

    def test_find_positions(self):
        store = make_store([7, 3, 7, 7])
        assert store.find_positions(7) == [0, 2, 3]

    def test_range(self):
        assert make_store([5]).range() == [5, 5]
        assert make_store([3, -1, 4]).range() == [-1, 4]

    def test_histogram_sums_to_count(self):
        store = make_store([1, 1, 2, 3, 3, 3])
        hist = store.histogram()
        assert hist == {1: 2, 2: 1, 3: 3}
        assert sum(hist.values()) == store.count()

    def test_count_values_appearing_more_than_once(self):
        store = make_store([1, 1, 1, 2, 3, 3])
        assert store.count_values_appearing_more_than_once() == 2


class TestComparisons:
    def test_equals_ordered(self):
        store = make_store([1, 2, 3])
        assert store.equals_ordered([1, 2, 3])
        assert not store.equals_ordered([3, 2, 1])
        assert not store.equals_ordered([1, 2])

    def test_equals_ordered_does_not_mutate(self):
        store = make_store([3, 1])
        other = [1, 3]
        assert not store.equals_ordered(other)
        assert store.copy_integers() == [3, 1]
        assert other == [1, 3]

    def test_equals_as_multiset_sorts_both_sides(self):
        store = make_store([1, 2, 3])
        other = [3, 2, 1]
        assert store.equals_as_multiset(other)
        assert other == [1, 2, 3]

        store = make_store([3, 1, 2])
        other = [2, 3, 1]
        assert store.equals_as_multiset(other)
        assert store.copy_integers() == [1, 2, 3]
        assert other == [1, 2, 3]

    def test_equals_as_multiset_respects_multiplicity(self):
        store = make_store([1, 1, 2])
        assert not store.equals_as_multiset([1, 2, 2])
        assert not store.equals_as_multiset([1, 2])

    def test_equals_as_multiset_length_mismatch_sorts_nothing(self):
        store = make_store([3, 1, 2])
        other = [2, 1]
        assert not store.equals_as_multiset(other)
        assert store.copy_integers() == [3, 1, 2]
        assert other == [2, 1]

    def test_equals_as_multiset_accepts_tuple(self):
        store = make_store([2, 1])
        assert store.equals_as_multiset((1, 2))
        assert store.copy_integers() == [1, 2]


class TestRandomize:
    def test_count_and_bounds(self):
        store = make_store([1000])
        store.randomize(5, 10, 20)
        values = store.copy_integers()
        assert len(values) == 5
        assert all(10 <= v <= 20 for v in values)

    def test_zero_count_empties(self):
        store = make_store([1, 2])
        store.randomize(0, 0, 10)
        assert store.count() == 0

    def test_min_greater_than_max_rejected(self):
        store = make_store([1, 2])
        with pytest.raises(InvalidArgument):
            store.randomize(3, 20, 10)
        assert store.copy_integers() == [1, 2]

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidArgument):
            IntegerStringArrayStore().randomize(-1, 0, 1)

    def test_injected_rng_is_used(self):
        a = IntegerStringArrayStore(rng=random.Random(7))
        b = IntegerStringArrayStore(rng=random.Random(7))
        a.randomize(20, -100, 100)
        b.randomize(20, -100, 100)
        assert a.copy_integers() == b.copy_integers()

    def test_from_config_seed(self):
        cfg = SandboxConfig(random_seed=3)
        a = IntegerStringArrayStore.from_config(cfg)
        b = IntegerStringArrayStore.from_config(cfg)
        a.randomize(10, 0, 1000)
        b.randomize(10, 0, 1000)
        assert a.copy_integers() == b.copy_integers()


def test_len_and_repr():
    store = make_store([1, 2], ["a"])
    assert len(store) == 2
    assert repr(store) == "IntegerStringArrayStore(2 integers, 1 strings)"
