# Approximate Pi Benchmark
# Probability that two integers in [1, N] are coprime tends to 6 / pi^2.
# Count coprime pairs exactly for N = 10,000 and invert the formula.

import math
import time
from typing import Callable

from mygcd import mygcd


def count_coprime_pairs(n: int, gcd: Callable[[int, int], int] = mygcd) -> int:
    # Local binding avoids repeated global lookup inside the hot loop
    _gcd = gcd
    cnt = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            if _gcd(a, b) == 1:
                cnt += 1
    return cnt


def pi_from_count(cnt: int, n: int) -> float:
    # pi ~= sqrt(6 / prob), prob = share of coprime pairs
    prob = cnt / (n * n)
    return math.sqrt(6 / prob)


def calc_pi(n: int, gcd: Callable[[int, int], int] = mygcd) -> float:
    """Approximate pi from the share of coprime pairs in [1, n] x [1, n]."""
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")

    return pi_from_count(count_coprime_pairs(n, gcd), n)


def main():
    n = 10_000
    start = time.perf_counter()
    pi = calc_pi(n)
    elapsed = time.perf_counter() - start

    print(f"calcPi: {elapsed * 1000:.3f}ms")
    print(f"N: {n}")
    print(f"pi: {pi}")


if __name__ == "__main__":
    main()
