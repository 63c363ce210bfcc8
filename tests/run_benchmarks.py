#!/usr/bin/env python
"""Benchmark runner for optbins.

Times the vectorised search against the loop rendition on samples of
increasing size, records wall/CPU mean+std, and appends results to
tests/benchmarks.json.

Usage:
    python tests/run_benchmarks.py [--n-runs 10]
"""
import argparse
import json
import os
import platform
import socket
import sys
import time

import numpy as np

from optbins.brhist import brhist
from optbins.classic import brhist_classic

BENCHMARKS_FILE = os.path.join(os.path.dirname(__file__), "benchmarks.json")
SIZES = (107, 1000, 10000)


def bench(func, x):
    t0_wall = time.perf_counter()
    t0_cpu = time.process_time()
    func(x)
    wall = time.perf_counter() - t0_wall
    cpu = time.process_time() - t0_cpu
    return wall, cpu


def run_benchmarks(n_runs):
    rs = np.random.RandomState(42)

    functions = [
        ("brhist", brhist),
        ("brhist_classic", brhist_classic),
    ]

    results = {}
    for size in SIZES:
        x = np.concatenate([rs.normal(-2, 0.5, size // 2),
                            rs.normal(2, 1.0, size - size // 2)])
        for name, func in functions:
            walls = []
            cpus = []
            for _ in range(n_runs):
                wall, cpu = bench(func, x)
                walls.append(wall)
                cpus.append(cpu)
            results[f"{name}[n={size}]"] = {
                "wall_mean": float(np.mean(walls)),
                "wall_std": float(np.std(walls)),
                "cpu_mean": float(np.mean(cpus)),
                "cpu_std": float(np.std(cpus)),
            }

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark optbins functions")
    parser.add_argument("--n-runs", type=int, default=10,
                        help="Number of benchmark runs per function (default: 10)")
    args = parser.parse_args()

    print(f"Python {sys.version}")
    print(f"NumPy  {np.__version__}")
    print(f"Machine: {socket.gethostname()}")
    print(f"Running {args.n_runs} benchmark iterations per function...")
    print()

    results = run_benchmarks(args.n_runs)

    record = {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
        "machine": socket.gethostname(),
        "n_runs": args.n_runs,
        "functions": results,
    }

    # Load existing or create new
    if os.path.exists(BENCHMARKS_FILE):
        with open(BENCHMARKS_FILE, "r") as f:
            data = json.load(f)
    else:
        data = []

    data.append(record)

    with open(BENCHMARKS_FILE, "w") as f:
        json.dump(data, f, indent=2)

    print(f"  {'Function':<24} {'Wall mean':>10} {'Wall std':>10} {'CPU mean':>10} {'CPU std':>10}")
    print("  " + "-" * 68)
    for name, stats in results.items():
        print(f"  {name:<24} {stats['wall_mean']:>10.4f} {stats['wall_std']:>10.4f} "
              f"{stats['cpu_mean']:>10.4f} {stats['cpu_std']:>10.4f}")

    print()
    print(f"Results appended to {BENCHMARKS_FILE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
