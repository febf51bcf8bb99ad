"""Tests for the core dynamic program and single vertex moves."""
import networkx as nx
import pytest

from qtmover.algorithm.core import core, diff
from qtmover.algorithm.materialize import count_tree_edits
from qtmover.algorithm.refine import detach, move_vertex, reattach
from qtmover.errors import InternalConsistencyError
from qtmover.structure.working import WorkingGraph


def _tree(G, parents):
    """Working graph for G with the tree given as {child: parent} (missing -> root)."""
    W = WorkingGraph.from_networkx(G)
    W.attach_all_to_root()
    for c, p in parents.items():
        W.change_parent(W.index_of[c], W.index_of[p])
    W.compute_depths()
    return W


def test_diff():
    W = _tree(nx.path_graph(3), {})
    assert diff(W, 0, 1) == 1
    assert diff(W, 0, 2) == -1
    assert diff(W, 0, W.root) == 1
    assert diff(W, 0, 0) == -1


def test_core_prefers_root_with_adoption():
    # chain 0 -> 1 -> 2 below the root, vm = 3 adjacent to 1 and 2
    G = nx.Graph([(0, 1), (1, 2), (1, 3), (2, 3)])
    W = _tree(G, {1: 0, 2: 1})
    res = core(W, 3)

    assert res.child_close[2] == 1
    assert res.child_close[1] == 2
    assert res.child_close[0] == 1
    assert res.child_close[3] == -1
    assert res.score_max[1] == 2
    assert res.score_max[W.root] == 2
    assert res.best_parent == W.root
    assert res.children_to_adopt(W.root) == [0]
    assert res.close_children[1] == [2]


def test_core_tie_goes_to_lowest_id():
    # root -> {0 -> 2, 1 -> 3}; vm = 4 adjacent to 0 and 1 only
    G = nx.Graph([(0, 2), (1, 3), (0, 4), (1, 4)])
    W = _tree(G, {2: 0, 3: 1})
    res = core(W, 4)
    assert res.score_max[0] == res.score_max[1] == 1
    assert res.best_parent == 0
    assert res.children_to_adopt(0) == []


def test_core_rejects_stale_depths():
    W = _tree(nx.path_graph(4), {1: 0, 2: 1})
    W.vertices[2].depth = 0
    with pytest.raises(InternalConsistencyError):
        core(W, 3)


def test_detach_hands_children_to_parent():
    W = _tree(nx.path_graph(4), {1: 0, 2: 1, 3: 2})
    detach(W, 1)
    assert W.parent(1) == W.root
    assert W.depth(1) == 1
    assert W.children(1) == []
    assert W.parent(2) == 0
    assert [W.depth(v) for v in (2, 3)] == [2, 3]
    W.check_tree()


def test_reattach_adopts_children():
    W = _tree(nx.path_graph(4), {1: 0, 2: 0})
    reattach(W, 3, 0, [1, 2])
    assert W.parent_map() == {0: None, 1: 3, 2: 3, 3: 0}
    assert W.children(0) == [3]
    W.check_tree()


def test_move_vertex_never_increases_edits():
    G = nx.gnp_random_graph(25, 0.25, seed=5)
    W = _tree(G, {})
    before = count_tree_edits(W)
    for vm in W.real_indices():
        move_vertex(W, vm)
        W.check_tree()
        after = count_tree_edits(W)
        assert after <= before
        before = after
