#!/usr/bin/env python3
import argparse


def is_prime_odd(n: int) -> bool:
    """Trial division of an odd n >= 3 by odd divisors only.

    Even divisors never need testing since n is odd. Once 3 * d exceeds n the
    only divisor left below n would be n / 2, which an odd number can't have.
    """
    d = 3
    while d < n:
        if n % d == 0:
            return False
        if 3 * d > n:
            return True
        d += 2
    return True


def search_range(start: int, end: int, include_two: bool = False) -> list[int]:
    """Return the primes in [start, end), optionally led by 2."""
    primes = [2] if include_two else []
    # 0, 1 and 2 are handled by the caller
    for n in range(max(start, 3), end):
        if n % 2 == 0:
            continue
        if is_prime_odd(n):
            primes.append(n)
    return primes


def generate_primes_sequential(limit: int) -> list[int]:
    """Find all primes below 'limit' by trial division, one number at a time."""
    if limit < 2:
        return []
    return search_range(3, limit, include_two=True)


def main():
    ap = argparse.ArgumentParser(description="Sequential trial-division prime search.")
    ap.add_argument("--limit", type=int, required=True, help="Generate all primes < LIMIT.")
    args = ap.parse_args()

    limit = args.limit
    print(f"Calculating all prime numbers below {limit:,}...")
    primes = generate_primes_sequential(limit)

    print(f"Found {len(primes):,} prime numbers.")
    print(f"The first 100 primes are: {primes[:100]}")
    print(f"The last 100 primes are: {primes[-100:]}")


if __name__ == "__main__":
    main()
