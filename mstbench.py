## Tester for timing and cross-checking the Kruskal implementation

import time

from typing import Any, Callable

import networkx as nx

import nx_utils
from kruskal import total_weight, kruskal
from weighted_graph import EdgeWeightedGraph

def run_kruskal(g: EdgeWeightedGraph) -> float:
    return total_weight(kruskal(g))

def run_networkx(g: EdgeWeightedGraph) -> float:
    return nx_utils.reference_weight(g)

def time_impl(impl: Callable[[EdgeWeightedGraph], float],
              g: EdgeWeightedGraph,
              nreps: int) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(nreps):
        start = time.perf_counter()
        weights.append(impl(g))
        compute_times.append(time.perf_counter() - start)

    return {
        'compute_times': compute_times,
        'weights': weights,
    }

def get_stats(metrics: dict[str, Any]) -> dict[str, Any]:
    '''Reduce the raw per-run numbers of one (impl, test) pair in place.'''
    metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

    # every run on the same graph must agree
    if min(metrics['weights']) == max(metrics['weights']):
        metrics['weight'] = min(metrics['weights'])
        del metrics['weights']

    return metrics

def print_stats(all_metrics: dict[Any, Any], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        all_tests = all_metrics[impl]
        speedups = []
        for (test, metrics) in all_tests.items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            base = all_metrics[baseline][test]
            if 'weight' not in metrics or 'weight' not in base \
                    or abs(metrics['weight'] - base['weight']) > 1e-6 * max(1.0, abs(base['weight'])):
                print('Inconsistent result on this test')
                continue

            compute_time = metrics['avg_compute_time']
            speedup = base['avg_compute_time'] / compute_time if compute_time else float('inf')
            speedups.append(speedup)

            print(f'    Weight = {metrics["weight"]},  Compute time = {compute_time:0.4f}s,  Baseline time = {base["avg_compute_time"]:0.4f}s')
            print(f'    Compute speedup={speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average computation time speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the Kruskal MST implementation against networkx')
    parser.add_argument('--baseline-reps',
                        default=3,
                        help='the number of times to repeat each experiment for the networkx baseline',
                        type=int)
    parser.add_argument('--reps',
                        default=5,
                        help='the number of times to repeat each experiment for Kruskal',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random weights',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args()

    if args.baseline_reps < 1 or args.reps < 1:
        parser.error('repetition counts must be positive')

    def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], EdgeWeightedGraph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.from_networkx(g,
                                          nx_utils.arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                                          nodename_to_idx=nodename_to_idx)

        return inner

    # Which impl is the one being benchmarked against
    BASELINE = 'networkx'

    impls = {
        BASELINE: (run_networkx, args.baseline_reps),
        'Kruskal': (run_kruskal, args.reps),
    }

    tests = {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph, (50000, [1, 2])),

        'Hypercube d=12, n=4096':
            create_arb_weight_test(nx.hypercube_graph, (12,), nx_utils.hypercube_idx),

        'Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.caveman_graph, (500, 20)),

        'Connected Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.connected_caveman_graph, (500, 20)),

        'Binomial Graph, p=8e-4 n=20000':
            create_arb_weight_test(nx.fast_gnp_random_graph, (20000, 8e-4, args.seed)),
    }

    all_metrics = {
        impl: {} for impl in impls.keys()
    }

    for (test_name, test_gen) in tests.items():
        print(f'Generating graph for test "{test_name}"...')
        g = test_gen()

        for (impl, (fxn, nreps)) in impls.items():
            print(f'  Running {impl} impl on test "{test_name}"...')

            metrics = get_stats(time_impl(fxn, g, nreps))
            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')

            all_metrics[impl][test_name] = metrics

            print('   ', metrics)
            print()
        print()

    print_stats(all_metrics, BASELINE)
