"""
scripts/benchmark.py — Prediction latency and memory benchmarking.

Loads the bundled corpus, queries every one- and two-letter prefix that
occurs in it, reports p50/p95/p99 latencies and checks the per-keystroke
budget.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --rounds 50 --report-memory
"""

from __future__ import annotations

import argparse
import logging
import statistics
import sys
import time

logger = logging.getLogger(__name__)

# A suggestion refresh happens on every keystroke; keep it well under a frame.
MAX_LATENCY_P95_MS: float = 5.0


def _setup_logging(level: str = "INFO") -> None:
    """Configure logging for the benchmark script."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stdout,
    )


def _prefixes(words: list[str]) -> list[str]:
    """Every distinct one- and two-letter prefix of *words*, sorted."""
    found: set[str] = set()
    for word in words:
        found.add(word[:1])
        if len(word) > 1:
            found.add(word[:2])
    return sorted(found)


def run_benchmark(rounds: int, report_memory: bool) -> bool:
    """
    Run the prediction benchmark and report results.

    Args:
        rounds: Number of passes over the prefix set.
        report_memory: If True, report process RAM usage.

    Returns:
        True if the latency budget is satisfied, False otherwise.
    """
    from dwellkey.core.config import load_config
    from dwellkey.predict.predictor import Predictor
    from dwellkey.predict.vocabulary import SPANISH_WORDS

    config = load_config()
    predictor = Predictor(config.prediction)

    t_load = time.monotonic()
    predictor.load(SPANISH_WORDS)
    load_ms = (time.monotonic() - t_load) * 1000.0

    prefixes = _prefixes([w for w, _ in SPANISH_WORDS])

    print("\n═══ DwellKey — Prediction Benchmark ═════════════════════")
    print(f"  Words:      {predictor.word_count}")
    print(f"  Prefixes:   {len(prefixes)}")
    print(f"  Rounds:     {rounds}")
    print(f"  Limit:      {config.prediction.limit}")
    print(f"  Load time:  {load_ms:.1f}ms")
    print("═════════════════════════════════════════════════════════\n")

    if report_memory:
        _report_memory()

    latencies: list[float] = []
    for _ in range(rounds):
        for prefix in prefixes:
            t0 = time.perf_counter()
            predictor.predict(prefix, config.prediction.limit)
            latencies.append((time.perf_counter() - t0) * 1000.0)

    if not latencies:
        print("No results collected.")
        return False

    p50 = statistics.median(latencies)
    p95 = _percentile(latencies, 95)
    p99 = _percentile(latencies, 99)

    print(f"{'─'*55}")
    print(f"  {'p50 latency':<20} {p50:>8.3f} ms")
    print(f"  {'p95 latency':<20} {p95:>8.3f} ms  {'✅' if p95 <= MAX_LATENCY_P95_MS else '❌ BUDGET EXCEEDED'}")
    print(f"  {'p99 latency':<20} {p99:>8.3f} ms")
    print(f"  {'max latency':<20} {max(latencies):>8.3f} ms")
    print(f"  {'queries':<20} {len(latencies):>8d}")
    print(f"{'─'*55}")

    ok = p95 <= MAX_LATENCY_P95_MS
    if ok:
        print("\n✅ Prediction latency within budget")
    else:
        print(f"\n❌ p95 ({p95:.3f}ms) > {MAX_LATENCY_P95_MS:.1f}ms budget")
        print("   Consider a bounded top-K collection instead of a full subtree sort")
    return ok


def _percentile(data: list[float], pct: int) -> float:
    """Return the *pct* percentile of *data* (nearest-rank)."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    idx = max(0, int(len(sorted_data) * pct / 100) - 1)
    return sorted_data[idx]


def _report_memory() -> None:
    """Print current process RAM usage."""
    try:
        import os

        import psutil
        process = psutil.Process(os.getpid())
        ram_mb = process.memory_info().rss / (1024 ** 2)
        print(f"  {'RAM used':<20} {ram_mb:>8.1f} MB")
    except ImportError:
        print("  (psutil not installed — skipping RAM report)")


def main() -> None:
    """Parse arguments, run the benchmark, exit 0 on pass and 1 on failure."""
    _setup_logging("WARNING")

    parser = argparse.ArgumentParser(description="Benchmark DwellKey prediction latency")
    parser.add_argument(
        "--rounds", type=int, default=20,
        help="Number of passes over the prefix set (default: 20)",
    )
    parser.add_argument(
        "--report-memory", action="store_true",
        help="Include process RAM usage in the report",
    )
    args = parser.parse_args()

    passed = run_benchmark(args.rounds, args.report_memory)
    sys.exit(0 if passed else 1)


if __name__ == "__main__":
    main()
