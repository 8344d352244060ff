"""Test generators; each returns the text a generator run would print."""

from __future__ import annotations

from typing import Iterable

from judgekit.random_gen import Random

__all__ = [
    "binary_string",
    "bipartite_graph",
    "rooted_tree",
    "tree",
    "structured_string",
    "uniform_int",
    "weighted_int",
    "multitest",
    "random_token",
    "weighted_token",
]

_MAX_VALUE = 1_000_000
_MAX_TOKEN = 1000


def _lines(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def binary_string(rng: Random) -> str:
    """A 100-digit binary string with about 10% ones."""
    return _lines([rng.pattern("[0000000001]{100}")])


def bipartite_graph(rng: Random, n: int, m: int, k: int) -> str:
    """A bipartite graph with parts of size n and m and k distinct edges."""
    if n < 1 or m < 1:
        raise ValueError("both parts must be non-empty")
    if not 0 <= k <= n * m:
        raise ValueError(f"cannot place {k} distinct edges between {n} and {m} vertices")
    weight = rng.randint(-2, 2)
    edges: set[tuple[int, int]] = set()
    while len(edges) < k:
        edges.add((rng.wnext_below(n, weight), rng.wnext_below(m, weight)))
    ordered = sorted(edges)
    rng.shuffle(ordered)
    left = list(range(1, n + 1))
    rng.shuffle(left)
    right = list(range(1, m + 1))
    rng.shuffle(right)
    return _lines([f"{n} {m} {len(ordered)}", *(f"{left[a]} {right[b]}" for a, b in ordered)])


def _tree_shape(rng: Random, n: int, t: int) -> tuple[list[int], list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    parent = [0] + [rng.wnext_below(i, t) for i in range(1, n)]
    perm = list(range(n))
    tail = perm[1:]
    rng.shuffle(tail)
    perm[1:] = tail
    return parent, perm


def rooted_tree(rng: Random, n: int, t: int) -> str:
    """A tree rooted at vertex 1, given as the parents of vertices 2..n.

    The weight t controls elongation: larger values give longer chains.
    """
    parent, perm = _tree_shape(rng, n, t)
    parent_of = [0] * n
    for vertex, par in zip(perm[1:], parent[1:]):
        parent_of[vertex] = perm[par]
    return _lines([str(n), " ".join(str(parent_of[v] + 1) for v in range(1, n))])


def tree(rng: Random, n: int, t: int) -> str:
    """An unrooted tree on n vertices as a shuffled list of edges."""
    parent, perm = _tree_shape(rng, n, t)
    edges = []
    for vertex, par in zip(perm[1:], parent[1:]):
        if rng.below(2):
            edges.append((vertex, perm[par]))
        else:
            edges.append((perm[par], vertex))
    rng.shuffle(edges)
    return _lines([str(n), *(f"{a + 1} {b + 1}" for a, b in edges)])


def structured_string(parts: Iterable[tuple[int, str]]) -> str:
    """Concatenate each period repeated its count of times."""
    return _lines(["".join(period * count for count, period in parts)])


def uniform_int(rng: Random) -> str:
    """A uniform integer between 1 and 10^6."""
    return _lines([str(rng.randint(1, _MAX_VALUE))])


def weighted_int(rng: Random, weight: int) -> str:
    """A weighted integer between 1 and 10^6."""
    return _lines([str(rng.wnext(1, _MAX_VALUE, weight))])


def multitest(rng: Random, count: int = 10) -> list[str]:
    """Tests for A+B growing with their index: test i holds two numbers in [1, i*i]."""
    return [
        _lines([f"{rng.randint(1, test * test)} {rng.randint(1, test * test)}"])
        for test in range(1, count + 1)
    ]


def random_token(rng: Random) -> str:
    """A token of 1 to 1000 Latin letters and digits."""
    return _lines([rng.pattern(f"[a-zA-Z0-9]{{1,{_MAX_TOKEN}}}")])


def weighted_token(rng: Random, weight: int) -> str:
    """A token whose length limit is drawn with the given weight."""
    length = rng.wnext(1, _MAX_TOKEN, weight)
    return _lines([rng.pattern(f"[a-zA-Z0-9]{{1,{length}}}")])