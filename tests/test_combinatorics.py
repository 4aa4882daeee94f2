"""Tests for vdsparser.combinatorics module."""

from vdsparser.combinatorics import (
    cross_product,
    all_subsets,
    permutations,
    column_sets,
    unique,
)


class TestCrossProduct:
    def test_two_lists(self):
        assert cross_product([["1", "2"], ["a", "b"]]) == [
            ["1", "a"],
            ["1", "b"],
            ["2", "a"],
            ["2", "b"],
        ]

    def test_no_lists(self):
        assert cross_product([]) == [[]]

    def test_empty_member(self):
        assert cross_product([["1"], []]) == []

    def test_single_list(self):
        assert cross_product([["x", "y"]]) == [["x"], ["y"]]


class TestSubsets:
    def test_iterative_extension_order(self):
        assert all_subsets(["a", "b", "c"]) == [
            [],
            ["a"],
            ["b"],
            ["a", "b"],
            ["c"],
            ["a", "c"],
            ["b", "c"],
            ["a", "b", "c"],
        ]

    def test_empty(self):
        assert all_subsets([]) == [[]]

    def test_count(self):
        assert len(all_subsets(list("abcd"))) == 16


class TestPermutations:
    def test_lexicographic_positions(self):
        perms = ["".join(p) for p in permutations(["a", "b", "c"])]
        assert perms == ["abc", "acb", "bac", "bca", "cab", "cba"]

    def test_empty(self):
        assert permutations([]) == [[]]

    def test_single(self):
        assert permutations(["a"]) == [["a"]]

    def test_input_not_mutated(self):
        items = ["a", "b"]
        permutations(items)
        assert items == ["a", "b"]


class TestColumnSets:
    def test_first_seen_order(self):
        rows = [["a", "x"], ["b", "x"], ["a", "y"]]
        assert column_sets(rows) == [["a", "b"], ["x", "y"]]

    def test_ragged_rows(self):
        assert column_sets([["c"], ["a", "b"]]) == [["c", "a"], ["b"]]

    def test_no_rows(self):
        assert column_sets([]) == []


class TestUnique:
    def test_keeps_first_occurrence(self):
        assert unique(["b", "a", "b", "", "a", ""]) == ["b", "a", ""]

    def test_generator_input(self):
        assert unique(x for x in "aab") == ["a", "b"]
