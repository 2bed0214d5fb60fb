import itertools

import pytest

import graphgen
from kruskal import KruskalMST, kruskal, total_weight
from unionfind import UnionFind
from weighted_edge import Edge
from weighted_graph import EdgeWeightedGraph


def is_acyclic(nvertices, edges):
    uf = UnionFind(nvertices)
    return all(uf.union(e.v, e.w) for e in edges)


def count_components(nvertices, edges):
    uf = UnionFind(nvertices)
    for e in edges:
        uf.union(e.v, e.w)
    return uf.count


def brute_force_forest_weight(g):
    '''Minimum weight over all acyclic edge subsets that span every component.'''
    edges = list(g.all_edges())
    needed = g.V - count_components(g.V, edges)
    best = None
    for subset in itertools.combinations(edges, needed):
        if is_acyclic(g.V, subset):
            w = total_weight(subset)
            if best is None or w < best:
                best = w
    return best


def test_four_vertex_example():
    g = EdgeWeightedGraph.from_edges(4, [
        (0, 1, 1.0), (1, 2, 2.0), (2, 3, 1.5), (0, 3, 4.0), (0, 2, 3.0),
    ])
    mst = kruskal(g)
    assert [tuple(e) for e in mst] == [(0, 1, 1.0), (2, 3, 1.5), (1, 2, 2.0)]
    assert total_weight(mst) == 4.5
    assert Edge(0, 3, 4.0) not in mst
    assert Edge(0, 2, 3.0) not in mst


def test_path_with_equal_weights():
    g = EdgeWeightedGraph.from_edges(3, [(0, 1, 5.0), (1, 2, 5.0)])
    mst = kruskal(g)
    assert len(mst) == g.V - 1
    assert total_weight(mst) == 10.0


def test_disconnected_graph_gives_forest():
    g = EdgeWeightedGraph.from_edges(4, [(0, 1, 1.0), (2, 3, 1.0)])
    mst = KruskalMST(g)
    assert len(mst) == 2 == g.V - 2
    assert not mst.is_spanning_tree()
    assert mst.num_components() == 2
    assert mst.weight() == 2.0


@pytest.mark.parametrize('nvertices', [0, 1])
def test_trivial_graphs(nvertices):
    g = EdgeWeightedGraph(nvertices)
    mst = KruskalMST(g)
    assert kruskal(g) == []
    assert mst.is_spanning_tree()
    assert mst.weight() == 0


def test_isolated_vertices():
    g = EdgeWeightedGraph(5)
    mst = KruskalMST(g)
    assert len(mst) == 0
    assert mst.num_components() == 5


def test_self_loops_and_parallel_edges_are_handled():
    g = EdgeWeightedGraph.from_edges(3, [
        (0, 0, 0.1), (0, 1, 3.0), (0, 1, 1.0), (1, 2, 2.0), (2, 2, 0.0), (1, 2, 2.5),
    ])
    mst = kruskal(g)
    assert [tuple(e) for e in mst] == [(0, 1, 1.0), (1, 2, 2.0)]


def test_negative_weights():
    g = EdgeWeightedGraph.from_edges(3, [(0, 1, -2.0), (1, 2, -1.0), (0, 2, -3.0)])
    assert total_weight(kruskal(g)) == -5.0


def test_deterministic_across_runs():
    g = graphgen.random_edges(12, 40, seed=7)
    assert kruskal(g) == kruskal(g)
    assert [id(e) for e in kruskal(g)] == [id(e) for e in kruskal(g)]


def test_does_not_modify_graph():
    g = graphgen.random_edges(8, 20, seed=1)
    before = [list(g.adjacent(v)) for v in range(g.V)]
    kruskal(g)
    assert [list(g.adjacent(v)) for v in range(g.V)] == before
    assert g.E == 20


def test_accepted_order_is_nondecreasing():
    g = graphgen.random_graph(30, density=0.3, seed=3)
    weights = [e.weight for e in kruskal(g)]
    assert weights == sorted(weights)


def test_mst_object_keeps_result_from_construction():
    g = EdgeWeightedGraph.from_edges(3, [(0, 1, 1.0)])
    mst = KruskalMST(g)
    g.add_edge(1, 2, 1.0)
    assert len(mst) == 1
    assert list(mst) == [Edge(0, 1, 1.0)]


@pytest.mark.parametrize('seed', range(25))
def test_matches_brute_force_on_small_graphs(seed):
    nvertices = 2 + seed % 5
    nedges = seed % 9
    g = graphgen.random_edges(nvertices, nedges, seed=seed)
    mst = kruskal(g)

    assert is_acyclic(g.V, mst)
    assert len(mst) <= g.V - 1
    components = count_components(g.V, list(g.all_edges()))
    assert len(mst) == g.V - components
    assert (len(mst) == g.V - 1) == (components == 1)
    assert total_weight(mst) == pytest.approx(brute_force_forest_weight(g))


@pytest.mark.parametrize('seed', range(5))
def test_dense_graph_against_brute_force(seed):
    g = graphgen.random_graph(6, density=0.8, min_weight=1, max_weight=4, seed=seed)
    mst = kruskal(g)
    assert len(mst) == 5
    assert total_weight(mst) == pytest.approx(brute_force_forest_weight(g))
