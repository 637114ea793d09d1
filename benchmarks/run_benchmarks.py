#!/usr/bin/env python3
"""Benchmark suite for pyskip comparing against a bisect-maintained sorted list."""

import argparse
import bisect
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskip import SkipList


class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.find_latencies: List[float] = []
        self.remove_latencies: List[float] = []
        self.level_counts: List[int] = []

    def to_dict(self) -> Dict:
        return {
            "insert_latencies": _percentiles(self.insert_latencies),
            "find_latencies": _percentiles(self.find_latencies),
            "remove_latencies": _percentiles(self.remove_latencies),
            "level_counts": self.level_counts,
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()
        for name, ys in (
            ("Insert Latency", self.insert_latencies),
            ("Find Latency", self.find_latencies),
            ("Remove Latency", self.remove_latencies),
        ):
            fig.add_trace(go.Box(y=ys, name=name, boxpoints="outliers"))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (ms)",
            boxmode="group"
        )

        fig.write_html(output_path)


def _percentiles(samples: List[float]) -> Dict[str, float]:
    return {
        "p50": float(np.percentile(samples, 50)),
        "p95": float(np.percentile(samples, 95)),
        "p99": float(np.percentile(samples, 99)),
    }


class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        self.seed = seed
        rng = random.Random(seed)
        self._keys = list(range(num_entries))
        rng.shuffle(self._keys)

    def run_skiplist_benchmark(self) -> Metrics:
        metrics = Metrics()
        sl = SkipList[int, int](seed=self.seed)

        for key in tqdm(self._keys, desc="SkipList Insert"):
            start = time.perf_counter()
            sl.insert(key, key)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1000)

        metrics.level_counts = sl.level_counts()

        for key in tqdm(self._keys, desc="SkipList Find"):
            start = time.perf_counter()
            sl.find(key)
            metrics.find_latencies.append((time.perf_counter() - start) * 1000)

        for key in tqdm(self._keys, desc="SkipList Remove"):
            start = time.perf_counter()
            sl.remove(key)
            metrics.remove_latencies.append((time.perf_counter() - start) * 1000)

        return metrics

    def run_sorted_list_benchmark(self) -> Metrics:
        metrics = Metrics()
        keys: List[int] = []
        values: List[int] = []

        for key in tqdm(self._keys, desc="Sorted list Insert"):
            start = time.perf_counter()
            i = bisect.bisect_left(keys, key)
            if i < len(keys) and keys[i] == key:
                values[i] = key
            else:
                keys.insert(i, key)
                values.insert(i, key)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1000)

        for key in tqdm(self._keys, desc="Sorted list Find"):
            start = time.perf_counter()
            i = bisect.bisect_left(keys, key)
            _ = values[i] if i < len(keys) and keys[i] == key else None
            metrics.find_latencies.append((time.perf_counter() - start) * 1000)

        for key in tqdm(self._keys, desc="Sorted list Remove"):
            start = time.perf_counter()
            i = bisect.bisect_left(keys, key)
            if i < len(keys) and keys[i] == key:
                del keys[i]
                del values[i]
            metrics.remove_latencies.append((time.perf_counter() - start) * 1000)

        return metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of entries")
    parser.add_argument("--seed", type=int, default=0, help="Seed for key order and levels")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    skiplist_metrics = suite.run_skiplist_benchmark()
    sorted_list_metrics = suite.run_sorted_list_benchmark()

    skiplist_metrics.plot_latencies(
        "SkipList Latency Distribution",
        args.output / "skiplist_latencies.html"
    )
    sorted_list_metrics.plot_latencies(
        "Sorted List Latency Distribution",
        args.output / "sorted_list_latencies.html"
    )

    results = {
        "skiplist": skiplist_metrics.to_dict(),
        "sorted_list": sorted_list_metrics.to_dict(),
    }
    with open(args.output / "metrics.json", "w") as f:
        json.dump(results, f, indent=2)

    for name, summary in results.items():
        print(name, {k: v for k, v in summary.items() if k.endswith("latencies")})


if __name__ == "__main__":
    main()
