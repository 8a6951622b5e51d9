from __future__ import annotations

from pytest_benchmark.fixture import BenchmarkFixture

import sexpr
from benchmarks.inputs import DEEP, WIDE

_DEEP_TREE: sexpr.Expression = sexpr.parse(DEEP)
# WIDE = generate(1, 34): same 69 nodes as DEEP = generate(8, 6).
# Any gap between test_deep_traversal and test_wide_traversal is the cost
# of the traversal pattern (many short child tuples vs one long one),
# not of tree size.
_WIDE_TREE: sexpr.Expression = sexpr.parse(WIDE)


def _dfs_atom_count(root: sexpr.Expression) -> int:
    stack: list[sexpr.Expression] = [root]
    n: int = 0
    while stack:
        node = stack.pop()
        if isinstance(node, sexpr.Atom):
            n += 1
        else:
            stack.extend(node)
    return n


def test_deep_traversal(benchmark: BenchmarkFixture) -> None:
    benchmark(_dfs_atom_count, _DEEP_TREE)


def test_wide_traversal(benchmark: BenchmarkFixture) -> None:
    benchmark(_dfs_atom_count, _WIDE_TREE)
