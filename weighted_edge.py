import math
import operator

from functools import total_ordering


@total_ordering
class Edge:
    '''
    An undirected weighted edge between vertices v and w.

    Edges are immutable and ordered by weight, with ties broken on the
    (smaller endpoint, larger endpoint) pair so sorting is reproducible.
    Self-loops (v == w) are allowed.
    '''

    __slots__ = ('_v', '_w', '_weight')

    def __init__(self, v: int, w: int, weight: float) -> None:
        # operator.index rejects floats and strings but takes numpy integers
        v = operator.index(v)
        w = operator.index(w)
        weight = float(weight)
        if math.isnan(weight):
            raise ValueError(f'edge ({v}, {w}) has a NaN weight')

        object.__setattr__(self, '_v', v)
        object.__setattr__(self, '_w', w)
        object.__setattr__(self, '_weight', weight)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def v(self) -> int:
        return self._v

    @property
    def w(self) -> int:
        return self._w

    @property
    def weight(self) -> float:
        return self._weight

    def either(self) -> int:
        return self._v

    def other(self, vertex: int) -> int:
        if vertex == self._v:
            return self._w
        if vertex == self._w:
            return self._v
        raise ValueError(f'vertex {vertex} is not an endpoint of {self!r}')

    def sort_key(self) -> tuple[float, int, int]:
        return (self._weight, min(self._v, self._w), max(self._v, self._w))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self):
        return hash(self.sort_key())

    def __iter__(self):
        # allows `v, w, weight = edge`
        yield self._v
        yield self._w
        yield self._weight

    def __copy__(self) -> 'Edge':
        return self

    def __deepcopy__(self, memo) -> 'Edge':
        return self

    def __reduce__(self):
        return (Edge, (self._v, self._w, self._weight))

    def __repr__(self):
        return f'({self._v}, {self._w}, {self._weight})'

    __str__ = __repr__
