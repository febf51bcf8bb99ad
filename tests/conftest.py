import networkx as nx
import pytest


def _small_graphs():
    return {
        "k4": nx.complete_graph(4),
        "p5": nx.path_graph(5),
        "c4": nx.cycle_graph(4),
        "c6": nx.cycle_graph(6),
        "star": nx.star_graph(5),
        "petersen": nx.petersen_graph(),
        "karate": nx.karate_club_graph(),
        "barbell": nx.barbell_graph(4, 2),
        "gnp": nx.gnp_random_graph(30, 0.2, seed=3),
        "two_cliques": nx.disjoint_union(nx.complete_graph(4), nx.complete_graph(3)),
        "empty": nx.empty_graph(4),
    }


SMALL_GRAPHS = _small_graphs()


@pytest.fixture(params=sorted(SMALL_GRAPHS))
def small_graph(request):
    return SMALL_GRAPHS[request.param]
