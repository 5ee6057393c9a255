#!/usr/bin/env python3
"""
Benchmark the polygon intersection scan backends.

Scans two random polygons of increasing vertex count with the reference
Python loop, the numpy broadcast and the numba kernel, and prints the mean
time per scan.
"""

import argparse
import time

import numpy as np

from polycross.core.scanner import find_all_intersections
from polycross.core.vectorized_ops import find_all_intersections_vectorized


def time_scan(fn, a, b, n_iters):
    fn(a, b)  # warm up (numba compiles on first call)
    start = time.perf_counter()
    for _ in range(n_iters):
        fn(a, b)
    return (time.perf_counter() - start) / n_iters


def main():
    p = argparse.ArgumentParser()
    p.add_argument('--sizes', type=int, nargs='+', default=[8, 32, 128, 512],
                   help='Vertex counts per polygon (default: 8 32 128 512)')
    p.add_argument('--iters', type=int, default=20, help='Scans per measurement (default: 20)')
    p.add_argument('--seed', type=int, default=0)
    args = p.parse_args()

    rng = np.random.default_rng(args.seed)
    runners = {
        'python': find_all_intersections,
        'numpy': lambda a, b: find_all_intersections_vectorized(a, b, backend='numpy'),
        'numba': lambda a, b: find_all_intersections_vectorized(a, b, backend='numba'),
    }

    print(f"{'vertices':>9} {'hits':>7} " + ' '.join(f"{k:>12}" for k in runners))
    for n in args.sizes:
        a = rng.uniform(-1, 1, size=2 * n)
        b = rng.uniform(-1, 1, size=2 * n)
        hits = len(find_all_intersections(a, b)) // 2
        times = [time_scan(fn, a, b, args.iters) for fn in runners.values()]
        print(f"{n:>9} {hits:>7} " + ' '.join(f"{t * 1e3:>10.3f}ms" for t in times))


if __name__ == '__main__':
    main()
