from __future__ import annotations

import logging
import random
from typing import Dict, Hashable, List, Optional, Union

import networkx as nx

from qtmover.algorithm.initialize import initialize
from qtmover.algorithm.materialize import build_qt_graph, count_tree_edits
from qtmover.algorithm.refine import refine
from qtmover.config import QtmConfig
from qtmover.counting.pseudo_c4p4 import PseudoC4P4Counter
from qtmover.counting.triangles import count_all_triangles
from qtmover.structure.vertex import ROOT_SENTINEL
from qtmover.structure.working import WorkingGraph
from qtmover.utils.convert import ensure_simple_graph

log = logging.getLogger(__name__)


class QuasiThresholdMover:
    """
    One Quasi-Threshold Mover instance over a snapshot of an input graph.

    Typical use::

        qtm = QuasiThresholdMover(G, config=QtmConfig(seed=7))
        H = qtm.run(show_transitive_closures=True)

    The input graph is copied at construction and never modified. `root` is
    only a placeholder id for the synthetic universal root and must not be a
    vertex of G.

    Randomness: if `rng` is given it is used (and advanced) by every run;
    otherwise each run starts from random.Random(config.seed), so with a
    fixed seed repeated runs give identical results.
    """

    def __init__(
        self,
        graph: nx.Graph,
        root: Hashable = ROOT_SENTINEL,
        *,
        config: Optional[QtmConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = (config if config is not None else QtmConfig()).validate()
        self._graph = ensure_simple_graph(graph)
        self._root = root
        self._rng = rng
        # validates the input before anything runs
        self._working = WorkingGraph.from_networkx(self._graph, root)
        self._fresh = True
        self.edit_history: List[int] = []
        self.number_of_triangles: Optional[int] = None

    @property
    def working(self) -> WorkingGraph:
        return self._working

    def _rng_for_run(self) -> random.Random:
        if self._rng is not None:
            return self._rng
        return random.Random(self.config.seed)

    def run(
        self,
        show_transitive_closures: bool = True,
        simulated_annealing: bool = False,
    ) -> Union[nx.Graph, nx.DiGraph]:
        """
        Run initialization and refinement, then materialize the result.

        show_transitive_closures: True returns the edited quasi-threshold
            graph, False only the directed tree skeleton implying it.
        simulated_annealing: allow occasional random reattachments during the
            first config.annealing_iterations sweeps.
        """
        if not self._fresh:
            self._working = WorkingGraph.from_networkx(self._graph, self._root)
        self._fresh = False
        working = self._working
        cfg = self.config

        log.info(
            "QTM on %d vertices, %d edges (%d sweeps)",
            working.n, len(working.edges), cfg.iterations,
        )

        self.number_of_triangles = count_all_triangles(working)
        scorer = PseudoC4P4Counter(working)
        initialize(working, scorer)
        working.compute_depths()
        working.check_tree()
        if log.isEnabledFor(logging.DEBUG):
            log.debug("after initialize: %d edits", count_tree_edits(working))

        self.edit_history = []
        refine(
            working,
            self._rng_for_run(),
            iterations=cfg.iterations,
            annealing_iterations=cfg.annealing_iterations,
            initial_sub_optimal_choice_probability=cfg.initial_sub_optimal_choice_probability,
            simulated_annealing=simulated_annealing,
            edit_history=self.edit_history,
        )
        working.check_tree()

        result = build_qt_graph(working, show_transitive_closures)
        if log.isEnabledFor(logging.INFO):
            log.info("QTM finished with %d edits", self.number_of_edits)
        return result

    @property
    def forest(self) -> Dict[Hashable, Optional[Hashable]]:
        """{vertex: parent} of the last run; top-level vertices map to None."""
        self._require_run()
        return self._working.parent_map()

    @property
    def number_of_edits(self) -> int:
        """Edge insertions plus deletions of the last run's result."""
        self._require_run()
        return count_tree_edits(self._working)

    def _require_run(self) -> None:
        if self._fresh:
            raise RuntimeError("run() has not been called yet")


def quasi_threshold_editing(
    graph: nx.Graph,
    *,
    show_transitive_closures: bool = True,
    simulated_annealing: bool = False,
    config: Optional[QtmConfig] = None,
    rng: Optional[random.Random] = None,
) -> Union[nx.Graph, nx.DiGraph]:
    """Run the Quasi-Threshold Mover once and return its output graph."""
    qtm = QuasiThresholdMover(graph, config=config, rng=rng)
    return qtm.run(show_transitive_closures, simulated_annealing)
