#!/usr/bin/env python3
"""Benchmark catalog indexing and query latency.

Indexes the real home directory once per run, then times a set of
queries against the built catalog with a full clipboard history.
Writes a markdown report next to this script.

Usage:
    python3 scripts/bench-search.py [QUERY ...]
    # Default queries: a, no, set, term, calc, doc
"""

import math
import os
import sys
import time

from quicklaunch.core import LauncherCore

RUNS = 20
QUERIES = sys.argv[1:] or ["a", "no", "set", "term", "calc", "doc"]

OUT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data", "bench-search")
os.makedirs(OUT_DIR, exist_ok=True)

# Collect all output for the markdown report
report_lines = []


def log(line=""):
    """Print to terminal and buffer for report."""
    print(line)
    report_lines.append(line)


def stats(values):
    """Compute min, max, avg, median, p5, p95, stddev from a list of floats."""
    s = sorted(values)
    n = len(s)
    avg = sum(s) / n
    variance = sum((x - avg) ** 2 for x in s) / n
    return {
        "min": s[0],
        "max": s[-1],
        "avg": avg,
        "median": s[n // 2] if n % 2 else (s[n // 2 - 1] + s[n // 2]) / 2,
        "p5": s[max(0, int(n * 0.05))],
        "p95": s[min(n - 1, int(n * 0.95))],
        "stddev": math.sqrt(variance),
        "n": n,
    }


def bench_index(runs=RUNS):
    """Time full catalog builds in milliseconds."""
    times = []
    core = None
    for _ in range(runs):
        core = LauncherCore()
        t0 = time.perf_counter()
        core.initialize()
        times.append((time.perf_counter() - t0) * 1000)
    return core, stats(times)


def bench_query(core, query, runs=RUNS):
    """Time one query in milliseconds; also return its last result count."""
    times = []
    results = []
    for _ in range(runs):
        t0 = time.perf_counter()
        results = core.search(query)
        times.append((time.perf_counter() - t0) * 1000)
    return stats(times), len(results)


log("# Quicklaunch Search Benchmark")
log()

core, index_stats = bench_index()
log(f"Catalog: **{len(core.catalog.apps)}** apps, **{len(core.catalog.files)}** files")
log(f"Index build: median **{index_stats['median']:.1f}ms**, p95 {index_stats['p95']:.1f}ms")
log()

for i in range(core.clipboard.capacity):
    core.clipboard.add(f"clipboard sample {i} " + "lorem ipsum " * (i % 10))

log("| Query | Results | Median (ms) | p95 (ms) | Stddev |")
log("|-------|---------|-------------|----------|--------|")
for query in QUERIES:
    s, count = bench_query(core, query)
    log(f"| `{query}` | {count} | {s['median']:.3f} | {s['p95']:.3f} | {s['stddev']:.3f} |")

report_path = os.path.join(OUT_DIR, "benchmark-report.md")
with open(report_path, "w") as f:
    f.write("\n".join(report_lines) + "\n")

print(f"\n Report saved to: {report_path}")
