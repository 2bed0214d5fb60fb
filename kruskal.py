import sys

from typing import Iterable

from unionfind import UnionFind
from weighted_edge import Edge
from weighted_graph import EdgeWeightedGraph


def kruskal(g: EdgeWeightedGraph) -> list[Edge]:
    '''
    Compute a minimum spanning forest of `g` with Kruskal's algorithm.

    Returns the accepted edges in the order they were accepted. The result
    has V-1 edges exactly when `g` is connected; fewer means a forest.
    '''
    # collect, then order by (weight, min endpoint, max endpoint)
    edges = sorted(g.all_edges())

    uf = UnionFind(g.V)
    mst = []
    target = g.V - 1

    # perform kruskals
    for edge in edges:
        if len(mst) >= target:
            break

        v = edge.either()
        w = edge.other(v)
        rv = uf.find(v)
        rw = uf.find(w)
        if rv != rw:
            mst.append(edge)
            uf.union(rv, rw)

    return mst


def total_weight(edges: Iterable[Edge]) -> float:
    return sum(e.weight for e in edges)


class KruskalMST:
    '''Runs Kruskal once on a graph and keeps the accepted edges.'''

    def __init__(self, g: EdgeWeightedGraph) -> None:
        self._nvertices = g.V
        self._edges = tuple(kruskal(g))

    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    def weight(self) -> float:
        return total_weight(self._edges)

    def num_components(self) -> int:
        # every accepted edge merges two components
        return self._nvertices - len(self._edges)

    def is_spanning_tree(self) -> bool:
        return self.num_components() <= 1

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self):
        return iter(self._edges)

    def __repr__(self):
        return f'KruskalMST(edges={len(self._edges)}, weight={self.weight()})'


if __name__ == '__main__':
    import graphgen

    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <nvertices> [verbose]')
        sys.exit(1)

    nvertices = int(sys.argv[1])
    verbose = (len(sys.argv) > 2)

    g = graphgen.random_graph(nvertices)
    mst = KruskalMST(g)

    print('Final MST sum:', mst.weight())
    if not mst.is_spanning_tree():
        print(f'Graph is disconnected: spanning forest with {mst.num_components()} trees')
    if verbose:
        print(list(mst))
