import pytest

from judgekit.generators import (
    binary_string,
    bipartite_graph,
    multitest,
    random_token,
    rooted_tree,
    structured_string,
    tree,
    uniform_int,
    weighted_int,
    weighted_token,
)
from judgekit.random_gen import Random


@pytest.mark.parametrize(
    "parts, expected",
    [
        ([(4, "ab")], "abababab\n"),
        ([(5, "a"), (1, "b")], "aaaaab\n"),
        ([(1, "a"), (5, "b"), (1, "a")], "abbbbba\n"),
    ],
)
def test_structured_string_examples(parts, expected):
    assert structured_string(parts) == expected


def test_binary_string_shape():
    text = binary_string(Random(1))
    assert text.endswith("\n")
    body = text[:-1]
    assert len(body) == 100
    assert set(body) <= {"0", "1"}


def test_bipartite_graph_edges():
    n, m, k = 5, 4, 12
    lines = bipartite_graph(Random(3), n, m, k).splitlines()
    assert lines[0] == f"{n} {m} {k}"
    edges = [tuple(map(int, line.split())) for line in lines[1:]]
    assert len(edges) == k
    assert len(set(edges)) == k
    assert all(1 <= a <= n and 1 <= b <= m for a, b in edges)


def test_bipartite_graph_complete():
    lines = bipartite_graph(Random(8), 2, 3, 6).splitlines()
    edges = {tuple(map(int, line.split())) for line in lines[1:]}
    assert edges == {(a, b) for a in range(1, 3) for b in range(1, 4)}


def test_bipartite_graph_too_many_edges():
    with pytest.raises(ValueError):
        bipartite_graph(Random(1), 2, 2, 5)


def _find(root, v):
    while root[v] != v:
        v = root[v]
    return v


@pytest.mark.parametrize("t", [-5, 0, 5, 1000])
def test_tree_is_spanning_tree(t):
    n = 20
    lines = tree(Random(t + 100), n, t).splitlines()
    assert int(lines[0]) == n
    edges = [tuple(map(int, line.split())) for line in lines[1:]]
    assert len(edges) == n - 1
    root = list(range(n + 1))
    for a, b in edges:
        assert 1 <= a <= n and 1 <= b <= n
        ra, rb = _find(root, a), _find(root, b)
        assert ra != rb
        root[ra] = rb


@pytest.mark.parametrize("t", [-5, 0, 5, 1000])
def test_rooted_tree_reaches_root(t):
    n = 15
    lines = rooted_tree(Random(t + 7), n, t).splitlines()
    assert int(lines[0]) == n
    parents = [int(x) for x in lines[1].split()]
    assert len(parents) == n - 1
    parent_of = {vertex: p for vertex, p in zip(range(2, n + 1), parents)}
    for vertex in range(2, n + 1):
        current = vertex
        for _ in range(n):
            if current == 1:
                break
            current = parent_of[current]
        assert current == 1


def test_single_vertex_trees():
    assert rooted_tree(Random(1), 1, 0) == "1\n\n"
    assert tree(Random(1), 1, 0) == "1\n"


def test_tree_rejects_empty():
    with pytest.raises(ValueError):
        tree(Random(1), 0, 0)


def test_uniform_and_weighted_int_bounds():
    rng = Random(12)
    for weight in (-10, 0, 10):
        assert 1 <= int(weighted_int(rng, weight)) <= 10**6
    assert 1 <= int(uniform_int(rng)) <= 10**6


def test_multitest_growth():
    tests = multitest(Random(2), 10)
    assert len(tests) == 10
    for index, text in enumerate(tests, start=1):
        a, b = map(int, text.split())
        assert 1 <= a <= index * index
        assert 1 <= b <= index * index


def test_random_words():
    rng = Random(6)
    for text in (random_token(rng), weighted_token(rng, -1000), weighted_token(rng, 1000)):
        word = text.rstrip("\n")
        assert 1 <= len(word) <= 1000
        assert word.isalnum() and word.isascii()


def test_generators_are_deterministic():
    first_tree = tree(Random(5), 10, 2)
    second_tree = tree(Random(5), 10, 2)
    assert first_tree.startswith("10\n")
    assert len(first_tree.splitlines()) == 10
    assert first_tree == second_tree

    first_word = random_token(Random(5))
    second_word = random_token(Random(5))
    assert first_word.endswith("\n")
    assert first_word == second_word