from collections.abc import Sequence
from typing import Iterable, Iterator, Optional, Union

from weighted_edge import Edge


class AdjacencyView(Sequence):
    '''Read-only, re-iterable view over one vertex's adjacency list.'''

    __slots__ = ('_edges',)

    def __init__(self, edges: list[Edge]) -> None:
        self._edges = edges

    def __getitem__(self, index):
        return self._edges[index]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __repr__(self):
        return f'AdjacencyView({self._edges!r})'


class EdgeWeightedGraph:
    '''
    An undirected edge-weighted graph on vertices 0..V-1, stored as
    adjacency lists. Parallel edges and self-loops are permitted.

    Edges can only be added. Each edge is referenced from the adjacency
    list of both endpoints (twice from the same list for a self-loop),
    while E counts the number of add_edge calls.
    '''

    def __init__(self, nvertices: int) -> None:
        if nvertices < 0:
            raise ValueError('Number of vertices must be nonnegative')

        self._nvertices = nvertices
        self._nedges = 0
        self._adj: list[list[Edge]] = [[] for _ in range(nvertices)]

    @classmethod
    def from_edges(cls,
                   nvertices: int,
                   edges: Iterable[Union[Edge, tuple[int, int, float]]]) -> 'EdgeWeightedGraph':
        g = cls(nvertices)
        for edge in edges:
            if isinstance(edge, Edge):
                g.add_edge(edge)
            else:
                g.add_edge(*edge)
        return g

    @property
    def num_vertices(self) -> int:
        return self._nvertices

    @property
    def num_edges(self) -> int:
        return self._nedges

    V = num_vertices
    E = num_edges

    def __len__(self) -> int:
        return self._nvertices

    def _validate_vertex(self, v: int) -> None:
        if not 0 <= v < self._nvertices:
            raise IndexError(f'vertex {v} is not between 0 and {self._nvertices - 1}')

    def add_edge(self,
                 e: Union[Edge, int],
                 w: Optional[int] = None,
                 weight: Optional[float] = None) -> Edge:
        '''
        Add an undirected edge, either as an Edge or as `add_edge(v, w, weight)`.

        Raises IndexError (leaving the graph unchanged) unless both endpoints
        are in [0, V). Returns the stored edge.
        '''
        if isinstance(e, Edge):
            if w is not None or weight is not None:
                raise TypeError('add_edge() takes either an Edge or (v, w, weight), not both')
        else:
            if w is None or weight is None:
                raise TypeError('add_edge() takes an Edge or (v, w, weight)')
            e = Edge(e, w, weight)

        v = e.either()
        w = e.other(v)
        self._validate_vertex(v)
        self._validate_vertex(w)

        self._adj[v].append(e)
        self._adj[w].append(e)
        self._nedges += 1
        return e

    def adjacent(self, v: int) -> AdjacencyView:
        self._validate_vertex(v)
        return AdjacencyView(self._adj[v])

    def degree(self, v: int) -> int:
        self._validate_vertex(v)
        return len(self._adj[v])

    def all_edges(self) -> Iterator[Edge]:
        '''
        Yield every edge exactly once, scanning vertices in increasing order.
        '''
        for v in range(self._nvertices):
            self_loops = 0
            for e in self._adj[v]:
                other = e.other(v)
                if other > v:
                    yield e
                elif other == v:
                    # both copies of a self-loop are appended back to back
                    if self_loops % 2 == 0:
                        yield e
                    self_loops += 1

    def copy(self) -> 'EdgeWeightedGraph':
        g = type(self)(self._nvertices)
        g._nedges = self._nedges
        g._adj = [list(edges) for edges in self._adj]
        return g

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'EdgeWeightedGraph':
        return self.copy()

    def __repr__(self):
        return f'{type(self).__name__}(V={self._nvertices}, E={self._nedges})'
