"""cProfile wrapper for cifras scanning.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_scan.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_scan.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import random
import sys


def build_corpus(count: int = 2000, terms: int = 50, seed: int = 0) -> list[str]:
    """Generate random expressions with mixed spacing."""
    rng = random.Random(seed)
    corpus = []
    for _ in range(count):
        parts = []
        for i in range(terms):
            if i:
                pad = " " * rng.randint(0, 2)
                parts.append(pad + rng.choice("+-*/") + pad)
            parts.append(str(rng.randint(0, 10**6)))
        corpus.append("".join(parts))
    return corpus


def scan_corpus(corpus: list[str], iterations: int = 5) -> int:
    """Scan the corpus multiple times, returning the total token count."""
    from cifras import tokenize

    total = 0
    for _ in range(iterations):
        for source in corpus:
            total += len(tokenize(source))
    return total


def main() -> None:
    """Run profiling and print results."""
    from cifras.profiling import profiled_scan

    print("cifras Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    corpus = build_corpus()
    iterations = 5
    print(f"\nScanning {len(corpus)} expressions {iterations}x...")

    profiler = cProfile.Profile()
    with profiled_scan() as metrics:
        profiler.enable()
        scan_corpus(corpus, iterations)
        profiler.disable()

    print(f"\nSummary: {metrics.summary()}")

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE)
    ps.print_stats(20)
    print(s.getvalue())

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(20)
    print(s.getvalue())


if __name__ == "__main__":
    main()
