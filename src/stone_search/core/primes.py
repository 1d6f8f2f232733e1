"""
Prime helpers used by the static evaluator.

Both functions use plain trial division. The evaluator only ever asks about
stone indices, so inputs stay small.
"""


def is_prime(x: int) -> bool:
    """Return True if x is prime. 1 is not prime."""
    if x < 1:
        raise ValueError(f"is_prime expects a positive integer, got {x}")
    if x == 1:
        return False
    for i in range(2, x):
        if x % i == 0:
            return False
    return True


def largest_prime_factor(x: int) -> int:
    """
    Return the largest prime dividing x.

    Scans divisors downward from x - 1. The first divisor found is the
    largest proper divisor; if it is not prime, the search continues on it.
    """
    if x < 2:
        raise ValueError(f"largest_prime_factor expects an integer >= 2, got {x}")

    if is_prime(x):
        return x

    for i in range(x - 1, 1, -1):
        if x % i == 0:
            if is_prime(i):
                return i
            return largest_prime_factor(i)

    # Unreachable: a composite x >= 4 always has a divisor in [2, x - 1]
    raise ValueError(f"No prime factor found for {x}")
