# GCD implementations
# Euclidean algorithm plus Stein's binary algorithm (shifts and subtraction)


def mygcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers (Euclid).

    Callers must not pass two zeros; gcd(0, 0) is undefined and is not checked.
    """
    while b != 0:
        a, b = b, a % b
    return a


def _trailing_zeros(x: int) -> int:
    # x must be non-zero
    return (x & -x).bit_length() - 1


def gcd_binary(a: int, b: int) -> int:
    """Binary GCD (Stein's algorithm).

    Works on the absolute values, so the result is never negative.
    """
    a = abs(a)
    b = abs(b)
    if a == 0:
        return b
    if b == 0:
        return a

    # Factor out common powers of 2
    za = _trailing_zeros(a)
    zb = _trailing_zeros(b)
    k = min(za, zb)

    b >>= zb

    while a != 0:
        a >>= za
        diff = abs(a - b)
        b = min(a, b)
        a = diff
        if a:
            za = _trailing_zeros(a)

    # Restore common factors of 2
    return b << k
