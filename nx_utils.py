import networkx as nx
import random

from typing import Any, Callable

from weighted_graph import EdgeWeightedGraph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rand = random.Random(seed)
    return lambda _a, _b: rand.randint(low, high)

def from_networkx(g: nx.Graph,
                  decide_weight: Callable[[Any, Any], float] = None,
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x),
                  weight: str='weight') -> EdgeWeightedGraph:
    '''
    Build an EdgeWeightedGraph from a networkx graph.

    Node names are mapped to vertex ids with `nodename_to_idx`. Weights come
    from `decide_weight(a, b)` if given, otherwise from the `weight` edge
    attribute (defaulting to 1).
    '''
    ewg = EdgeWeightedGraph(g.number_of_nodes())

    for a, b, data in g.edges(data=True):
        if decide_weight is not None:
            w = decide_weight(a, b)
        else:
            w = data.get(weight, 1)
        # Convert edge names to index
        ewg.add_edge(nodename_to_idx(a), nodename_to_idx(b), w)

    return ewg

def to_networkx(g: EdgeWeightedGraph) -> nx.MultiGraph:
    '''MultiGraph so parallel edges and self-loops survive the conversion.'''
    mg = nx.MultiGraph()
    mg.add_nodes_from(range(g.V))
    for e in g.all_edges():
        mg.add_edge(e.v, e.w, weight=e.weight)
    return mg

def reference_weight(g: EdgeWeightedGraph) -> float:
    '''Weight of a minimum spanning forest as computed by networkx.'''
    forest = nx.minimum_spanning_tree(to_networkx(g), algorithm='kruskal')
    return forest.size(weight='weight')

def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1]* 2**i for i in range(len(node)))


if __name__ == '__main__':
    from kruskal import KruskalMST

    ## Compare against networkx on a few graph families

    families = {
        'circulant_n1000': (nx.circulant_graph(1000, [1, 2]), lambda x: int(x)),
        'hypercube_n1024': (nx.hypercube_graph(10), hypercube_idx),
        'caveman_n1000': (nx.caveman_graph(100, 10), lambda x: int(x)),
        'conn_caveman_n1000': (nx.connected_caveman_graph(100, 10), lambda x: int(x)),
    }

    for name, (g, to_idx) in families.items():
        ewg = from_networkx(g, arbitrary_weight(1, 500), nodename_to_idx=to_idx)
        mst = KruskalMST(ewg)
        print(f'{name}: weight={mst.weight()} reference={reference_weight(ewg)} trees={mst.num_components()}')
