from __future__ import annotations

import sys
from pathlib import Path

BENCH_DIR = Path(__file__).resolve().parents[2] / "benchmarks" / "compute" / "approx_pi_gcd"


def on_config(config):  # noqa: D401 - MkDocs hook signature
    """Make the benchmark modules importable for gen-files scripts."""
    if str(BENCH_DIR) not in sys.path:
        sys.path.insert(0, str(BENCH_DIR))
    return config
