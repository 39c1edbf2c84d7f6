# Approximate Pi Benchmark (GCD speedup)
# Same computation as approx_pi_gcd, timed once per GCD implementation.
# Note: "builtin" gives python a fair chance by using math.gcd, which is implemented in C.

import time
from math import gcd

from approx_pi_gcd import calc_pi
from mygcd import gcd_binary, mygcd

IMPLEMENTATIONS = (
    ("euclidean", mygcd),
    ("binary", gcd_binary),
    ("builtin", gcd),
)


def main():
    n = 10_000
    pi = None
    for name, impl in IMPLEMENTATIONS:
        start = time.perf_counter()
        pi = calc_pi(n, impl)
        elapsed = time.perf_counter() - start
        print(f"calcPi[{name}]: {elapsed * 1000:.3f}ms")

    print(f"N: {n}")
    print(f"pi: {pi}")


if __name__ == "__main__":
    main()
