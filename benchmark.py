#!/usr/bin/env python3
"""
Performance Test Script for BinaryHeap

Tests:
1. Sequential insert throughput
2. Random insert throughput
3. Bulk construction (from_sequence)
4. Extract-all throughput
5. Mixed workload (insert/extract)
6. K-way merge

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
"""

import logging
import os
import random
import statistics
import time

from heapkit.algorithms.merge_iterator import merge_sorted
from heapkit.models.binary_heap import BinaryHeap

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self, num_ops: int = 100_000, seed: int = 42):
        self.num_ops = num_ops
        self.rng = random.Random(seed)

    @staticmethod
    def calculate_stats(latencies: list[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        n = len(sorted_latencies)
        return {
            "min_us": sorted_latencies[0] / 1_000,
            "max_us": sorted_latencies[-1] / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "p50_us": sorted_latencies[n // 2] / 1_000,
            "p95_us": sorted_latencies[int(n * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(n * 0.99)] / 1_000,
        }

    def report(self, name: str, ops: int, elapsed_s: float, latencies: list[int] | None = None) -> None:
        ops_per_sec = ops / elapsed_s if elapsed_s > 0 else float("inf")
        logger.info(f"{name}: {ops} ops in {elapsed_s:.3f}s ({ops_per_sec:,.0f} ops/sec)")
        if latencies:
            stats = self.calculate_stats(latencies)
            logger.info(
                f"  latency p50={stats['p50_us']:.2f}us "
                f"p95={stats['p95_us']:.2f}us p99={stats['p99_us']:.2f}us "
                f"max={stats['max_us']:.2f}us"
            )

    def _timed_inserts(self, name: str, values: list[int]) -> BinaryHeap[int]:
        heap: BinaryHeap[int] = BinaryHeap()
        latencies = []
        start = time.perf_counter()
        for value in values:
            t0 = time.perf_counter_ns()
            heap.insert(value)
            latencies.append(time.perf_counter_ns() - t0)
        self.report(name, len(values), time.perf_counter() - start, latencies)
        return heap

    def test_sequential_insert(self) -> None:
        self._timed_inserts("Sequential insert", list(range(self.num_ops)))

    def test_random_insert(self) -> None:
        values = [self.rng.randint(0, self.num_ops) for _ in range(self.num_ops)]
        self._timed_inserts("Random insert", values)

    def test_bulk_construction(self) -> None:
        values = [self.rng.randint(0, self.num_ops) for _ in range(self.num_ops)]
        start = time.perf_counter()
        BinaryHeap.from_sequence(values)
        self.report("Bulk construction", len(values), time.perf_counter() - start)

    def test_extract_all(self) -> None:
        values = [self.rng.randint(0, self.num_ops) for _ in range(self.num_ops)]
        heap = BinaryHeap.from_sequence(values)
        latencies = []
        start = time.perf_counter()
        while not heap.is_empty():
            t0 = time.perf_counter_ns()
            heap.extract_root()
            latencies.append(time.perf_counter_ns() - t0)
        self.report("Extract all", len(values), time.perf_counter() - start, latencies)

    def test_mixed_workload(self, insert_ratio: float = 0.6) -> None:
        heap: BinaryHeap[int] = BinaryHeap()
        start = time.perf_counter()
        for _ in range(self.num_ops):
            if heap.is_empty() or self.rng.random() < insert_ratio:
                heap.insert(self.rng.randint(0, self.num_ops))
            else:
                heap.extract_root()
        self.report(f"Mixed workload ({insert_ratio:.0%} inserts)", self.num_ops, time.perf_counter() - start)

    def test_k_way_merge(self, num_sources: int = 16) -> None:
        per_source = self.num_ops // num_sources
        sources = [
            sorted(self.rng.randint(0, self.num_ops) for _ in range(per_source))
            for _ in range(num_sources)
        ]
        start = time.perf_counter()
        merged = merge_sorted(sources)
        self.report(f"K-way merge ({num_sources} sources)", len(merged), time.perf_counter() - start)

    def run(self) -> None:
        logger.info(f"Running heap benchmarks with {self.num_ops} operations")
        self.test_sequential_insert()
        self.test_random_insert()
        self.test_bulk_construction()
        self.test_extract_all()
        self.test_mixed_workload()
        self.test_k_way_merge()


if __name__ == "__main__":
    PerformanceTest(num_ops=int(os.environ.get("BENCH_OPS", "100000"))).run()
