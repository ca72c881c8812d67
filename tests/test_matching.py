import itertools

import pytest
from hypothesis import given, strategies as st

from algokit.matching import BipartiteMatching, KuhnMunkres, Side


@st.composite
def bipartite(draw):
    n = draw(st.integers(1, 4))
    m = draw(st.integers(1, 4))
    edges = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, m - 1)), max_size=8)
    )
    return n, m, edges


def _brute_matching_size(edges):
    unique = sorted(set(edges))
    for r in range(len(unique), 0, -1):
        for combo in itertools.combinations(unique, r):
            if len({x for x, _ in combo}) == r and len({y for _, y in combo}) == r:
                return r
    return 0


def _build(n, m, edges):
    bm = BipartiteMatching(n, m)
    for x, y in edges:
        bm.add_edge(x, y)
    return bm


@given(bipartite())
def test_matching_is_valid_and_maximum(graph):
    n, m, edges = graph
    matching = _build(n, m, edges).max_matching()
    assert all(pair in edges for pair in matching)
    assert len({x for x, _ in matching}) == len(matching)
    assert len({y for _, y in matching}) == len(matching)
    assert len(matching) == _brute_matching_size(edges)


@given(bipartite())
def test_vertex_cover_covers_and_matches_size(graph):
    n, m, edges = graph
    bm = _build(n, m, edges)
    size = len(bm.max_matching())
    cover = bm.min_vertex_cover()
    left = {i for side, i in cover if side == Side.LEFT}
    right = {j for side, j in cover if side == Side.RIGHT}
    assert all(x in left or y in right for x, y in edges)
    assert len(cover) == size


@given(bipartite())
def test_vertex_cover_without_prior_matching(graph):
    n, m, edges = graph
    cover = _build(n, m, edges).min_vertex_cover()
    assert len(cover) == _brute_matching_size(edges)


def test_matching_rejects_bad_edge():
    bm = BipartiteMatching(2, 3)
    with pytest.raises(IndexError):
        bm.add_edge(2, 0)
    with pytest.raises(IndexError):
        bm.add_edge(0, 3)


@st.composite
def weights(draw):
    n = draw(st.integers(1, 4))
    cell = st.integers(0, n - 1)
    entries = draw(st.lists(st.tuples(cell, cell, st.integers(0, 20)), max_size=12))
    return n, entries


def _weight_matrix(n, entries):
    w = [[0] * n for _ in range(n)]
    for x, y, value in entries:
        w[x][y] = max(w[x][y], value)
    return w


@given(weights())
def test_kuhn_munkres_matches_brute_force(data):
    n, entries = data
    km = KuhnMunkres(n)
    for x, y, value in entries:
        km.add_edge(x, y, value)
    w = _weight_matrix(n, entries)
    best = max(
        sum(w[i][p[i]] for i in range(n)) for p in itertools.permutations(range(n))
    )
    assert km.solve() == best


@given(weights())
def test_kuhn_munkres_match_is_permutation(data):
    n, entries = data
    km = KuhnMunkres(n)
    for x, y, value in entries:
        km.add_edge(x, y, value)
    total = km.solve()
    w = _weight_matrix(n, entries)
    assert sorted(km.match) == list(range(n))
    assert sum(w[i][j] for j, i in enumerate(km.match)) == total


def test_kuhn_munkres_small_example():
    km = KuhnMunkres(3)
    for x, row in enumerate([[3, 1, 2], [2, 4, 6], [5, 3, 1]]):
        for y, value in enumerate(row):
            km.add_edge(x, y, value)
    assert km.solve() == 12


def test_kuhn_munkres_rejects_bad_edge():
    with pytest.raises(IndexError):
        KuhnMunkres(2).add_edge(0, 2, 1)