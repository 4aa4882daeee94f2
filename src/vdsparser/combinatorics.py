# -------------------------------------
# list combinatorics
# -------------------------------------
"""
Generic list combinatorics used by the grammar expander.

All functions are pure and return fresh lists; ordering is deterministic
so that expansion results are stable across calls.
"""
from itertools import product
from typing import Iterable, List, TypeVar

T = TypeVar("T")


def cross_product(lists: List[List[T]]) -> List[List[T]]:
    """
    Cartesian product of a list of lists, row-major (last list varies fastest).

      cross_product([["1","2"],["a","b"]]) -> [["1","a"],["1","b"],["2","a"],["2","b"]]
      cross_product([])                    -> [[]]
      cross_product([["1"],[]])            -> []
    """
    return [list(row) for row in product(*lists)]


def all_subsets(items: List[T]) -> List[List[T]]:
    """
    All 2^n subsets, built by extending every subset seen so far with the next item:
      [a,b] -> [], [a], [b], [a,b]
    """
    out: List[List[T]] = [[]]
    for it in items:
        out.extend([s + [it] for s in out])
    return out


def permutations(items: List[T]) -> List[List[T]]:
    """All n! orderings; the element picked first varies slowest."""
    if len(items) <= 1:
        return [list(items)]
    out: List[List[T]] = []
    for i, it in enumerate(items):
        rest = items[:i] + items[i + 1:]
        for p in permutations(rest):
            out.append([it] + p)
    return out


def column_sets(rows: List[List[T]]) -> List[List[T]]:
    """
    Distinct values per column index, in first-seen order.
    Ragged rows are allowed; the result has as many columns as the widest row.
    """
    if not rows:
        return []
    width = max(len(r) for r in rows)
    cols: List[List[T]] = [[] for _ in range(width)]
    for row in rows:
        for i, v in enumerate(row):
            if v not in cols[i]:
                cols[i].append(v)
    return cols


def unique(items: Iterable[T]) -> List[T]:
    """Order-preserving de-duplication."""
    return list(dict.fromkeys(items))
