# tests/conftest.py
"""
Pytest configuration shared by all tests.
Puts the benchmark modules on the import path and gates slow tests behind --runslow.
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
BENCH_DIR = PROJECT_ROOT / "benchmarks" / "compute" / "approx_pi_gcd"

if str(BENCH_DIR) not in sys.path:
    sys.path.insert(0, str(BENCH_DIR))


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run the full N=10000 checks")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-size benchmark run, needs --runslow")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
