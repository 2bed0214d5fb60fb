import argparse

import numpy as np

from weighted_graph import EdgeWeightedGraph


def random_graph(nvertices: int,
                 density: float = 0.5,
                 min_weight: int = 1,
                 max_weight: int = 100,
                 seed: int = 0) -> EdgeWeightedGraph:
    '''
    Simple random graph: `density` of all V*(V-1)/2 vertex pairs get an
    edge, with integer weights drawn from [min_weight, max_weight].
    No self-loops or parallel edges.
    '''
    if nvertices < 0:
        raise ValueError('Number of vertices must be nonnegative')
    if not 0 <= density <= 1:
        raise ValueError(f'density must be between 0 and 1, got {density}')
    if min_weight > max_weight:
        raise ValueError(f'min_weight ({min_weight}) is larger than max_weight ({max_weight})')

    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    # Only bother filling upper triangle for undirected graphs
    rows, cols = np.triu_indices(nvertices, k=1)
    if total_edges:
        picked = np.sort(rng.choice(len(rows), size=total_edges, replace=False))
    else:
        picked = np.empty(0, dtype=np.intp)
    weights = rng.integers(min_weight, max_weight, size=total_edges, endpoint=True)

    return EdgeWeightedGraph.from_edges(
        nvertices,
        zip(rows[picked].tolist(), cols[picked].tolist(), weights.tolist()),
    )


def random_edges(nvertices: int,
                 nedges: int,
                 min_weight: float = 0.0,
                 max_weight: float = 1.0,
                 seed: int = 0) -> EdgeWeightedGraph:
    '''
    Random multigraph with exactly `nedges` edges whose endpoints are drawn
    independently, so self-loops and parallel edges can occur. Weights are
    uniform floats in [min_weight, max_weight).
    '''
    if nvertices < 0:
        raise ValueError('Number of vertices must be nonnegative')
    if nedges < 0:
        raise ValueError('Number of edges must be nonnegative')
    if nedges > 0 and nvertices == 0:
        raise ValueError('Cannot place edges in a graph without vertices')
    if min_weight > max_weight:
        raise ValueError(f'min_weight ({min_weight}) is larger than max_weight ({max_weight})')

    if nedges == 0:
        return EdgeWeightedGraph(nvertices)

    rng = np.random.default_rng(seed)
    endpoints = rng.integers(0, nvertices, size=(nedges, 2))
    weights = rng.uniform(min_weight, max_weight, size=nedges)

    return EdgeWeightedGraph.from_edges(
        nvertices,
        ((int(v), int(w), float(weight)) for (v, w), weight in zip(endpoints, weights)),
    )


if __name__ == '__main__':
    from kruskal import KruskalMST

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate a random graph and compute its MST')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    try:
        g = random_graph(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    if not args.quiet:
        print(f'Generated a graph on {g.V} vertices...')
        print(f'  Density: {args.density} ({g.E} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph edges:')
        print(list(g.all_edges()))

    mst = KruskalMST(g)
    print('Total weight:', mst.weight())
    if not mst.is_spanning_tree():
        print(f'  (spanning forest of {mst.num_components()} trees)')
