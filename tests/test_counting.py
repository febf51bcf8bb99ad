"""Tests for triangle counting and the pseudo C4/P4 scorer."""
import itertools

import networkx as nx
import pytest

from qtmover.counting.pseudo_c4p4 import INFINITY, PseudoC4P4Counter
from qtmover.counting.triangles import count_all_triangles, count_triangles
from qtmover.errors import InternalConsistencyError
from qtmover.structure.working import WorkingGraph


def _counted(G):
    W = WorkingGraph.from_networkx(G)
    total = count_all_triangles(W)
    return W, total


# --- triangles ---

def test_triangles_match_common_neighbours(small_graph):
    W, _ = _counted(small_graph)
    for (u, v), e in W.edges.items():
        a, b = W.vertices[u].id, W.vertices[v].id
        brute = len(set(small_graph[a]) & set(small_graph[b]))
        assert e.num_triangles == brute
        assert count_triangles(W, u, v) == brute


def test_total_triangles_matches_networkx(small_graph):
    _, total = _counted(small_graph)
    assert total == sum(nx.triangles(small_graph).values()) // 3


def test_triangles_path_all_zero():
    W, total = _counted(nx.path_graph(5))
    assert total == 0
    assert all(e.num_triangles == 0 for e in W.edges.values())


def test_triangles_k4():
    W, total = _counted(nx.complete_graph(4))
    assert total == 4
    assert all(e.num_triangles == 2 for e in W.edges.values())


def test_triangles_recount_is_stable():
    W, _ = _counted(nx.complete_graph(5))
    count_all_triangles(W)
    assert all(e.num_triangles == 3 for e in W.edges.values())


def test_triangles_ignore_root():
    W, _ = _counted(nx.path_graph(3))
    W.attach_all_to_root()
    assert count_all_triangles(W) == 0


def test_triangles_string_ids():
    G = nx.Graph([("a", "b"), ("b", "c"), ("a", "c"), ("c", "d")])
    W, total = _counted(G)
    assert total == 1
    assert W.edge(W.index_of["a"], W.index_of["b"]).num_triangles == 1
    assert W.edge(W.index_of["c"], W.index_of["d"]).num_triangles == 0


# --- scorer ---

def test_score_formula_path():
    G = nx.path_graph(5)
    W, _ = _counted(G)
    pc = PseudoC4P4Counter(W)
    for u, v in G.edges():
        assert pc.score(u, v) == (G.degree(u) - 1) * (G.degree(v) - 1)
    assert pc.score(1, 2) == 1
    assert pc.score(0, 1) == 0


def test_score_formula_with_triangles():
    G = nx.Graph([(0, 1), (1, 2), (0, 2), (2, 3), (3, 4)])
    W, _ = _counted(G)
    pc = PseudoC4P4Counter(W)
    # deg(2) = 3, deg(0) = 2, one triangle on (0, 2)
    assert pc.score(0, 2) == (2 - 1 - 1) * (3 - 1 - 1)
    # (2, 3) lies in no triangle
    assert pc.score(2, 3) == (3 - 1) * (2 - 1)


def test_score_symmetric():
    G = nx.karate_club_graph()
    W, _ = _counted(G)
    pc = PseudoC4P4Counter(W)
    for u, v in W.edges:
        assert pc.score(u, v) == pc.score(v, u)


def test_score_root_edges_are_zero():
    W, _ = _counted(nx.star_graph(4))
    pc = PseudoC4P4Counter(W)
    assert all(pc.score(v, W.root) == 0 for v in W.real_indices())


def test_infinity_is_sticky():
    W, _ = _counted(nx.complete_graph(4))
    pc = PseudoC4P4Counter(W)
    pc.set_to_infinity(1, 0)
    assert pc.is_infinite(0, 1)
    for _ in range(3):
        assert pc.score(0, 1) == INFINITY
        assert pc.score(1, 0) == INFINITY
    W.edge(0, 1).num_triangles = 0
    W.vertices[0].degree = 99
    assert pc.score(0, 1) == INFINITY
    assert pc.score(2, 3) != INFINITY


def test_infinity_on_root_and_non_edges():
    W, _ = _counted(nx.path_graph(3))
    pc = PseudoC4P4Counter(W)
    pc.set_to_infinity(0, W.root)
    pc.set_to_infinity(0, 2)
    assert pc.score(W.root, 0) == INFINITY
    assert pc.score(2, 0) == INFINITY


def test_score_non_edge_is_internal_error():
    W, _ = _counted(nx.path_graph(3))
    pc = PseudoC4P4Counter(W)
    with pytest.raises(InternalConsistencyError):
        pc.score(0, 2)


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_complete_graph_scores_are_zero(n):
    W, _ = _counted(nx.complete_graph(n))
    pc = PseudoC4P4Counter(W)
    assert all(pc.score(u, v) == 0 for u, v in itertools.combinations(range(n), 2))
