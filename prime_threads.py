#!/usr/bin/env python3
import argparse
import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial

from prime import search_range

EXECUTORS = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


@dataclass(frozen=True)
class SearchRange:
    """Half-open interval [start, end) handed to exactly one worker."""
    start: int
    end: int

    def __len__(self):
        return self.end - self.start


def partition(limit: int, worker_count: int) -> list[SearchRange]:
    """
    Split [3, limit) into 'worker_count' contiguous ranges of near-equal size.
    The step is real-valued so the remainder is spread across the ranges
    instead of piling up in the last one. For limit < 3 every range is empty.
    """
    if worker_count <= 0:
        raise ValueError(f"worker_count must be positive, got {worker_count}")

    if limit < 3:
        return [SearchRange(3, 3) for _ in range(worker_count)]

    step = (limit - 3) / worker_count
    # Boundary i is shared by range i-1 (as end) and range i (as start)
    bounds = [int(3 + i * step) for i in range(worker_count + 1)]
    bounds[-1] = limit
    return [SearchRange(low, high) for low, high in zip(bounds, bounds[1:])]


def search_worker(search: SearchRange, include_two: bool = False) -> list[int]:
    """Worker: primes in its own range, led by 2 for the first range."""
    return search_range(search.start, search.end, include_two=include_two)


def generate_primes_parallel(limit: int, workers: int | None = None, executor: str = "process") -> list[int]:
    """
    Find all primes below 'limit' by trial division, fanning [3, limit) out
    over 'workers' tasks (default: os.cpu_count()).

    The pool lives only for this call. Results are collected in partition
    order, so the concatenation is already ascending. If any worker raises,
    the exception propagates here and nothing is returned.
    """
    if executor not in EXECUTORS:
        raise ValueError(f"Unknown executor {executor!r}; expected one of {sorted(EXECUTORS)}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")

    if limit < 2:
        return []
    if limit == 2:
        return [2]

    segments = partition(limit, workers)

    with EXECUTORS[executor](max_workers=workers) as ex:
        # Leading ranges may all be SearchRange(3, 3) when limit is small; only the first emits 2
        futures = [ex.submit(search_worker, segment, idx == 0) for idx, segment in enumerate(segments)]
        # Partition order, not completion order
        parts = [fut.result() for fut in futures]

    primes = []
    for part in parts:
        primes.extend(part)
    return primes


def parallel_generator(workers: int | None = None, executor: str = "process"):
    """Bind the pool configuration, leaving a plain limit -> primes callable."""
    return partial(generate_primes_parallel, workers=workers, executor=executor)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Range-partitioned parallel trial-division prime search.")
    ap.add_argument("--limit", type=int, required=True, help="Generate all primes < LIMIT.")
    ap.add_argument("--workers", type=int, default=0,
                    help="Number of workers (default: os.cpu_count()).")
    ap.add_argument("--executor", choices=sorted(EXECUTORS), default="process",
                    help="Worker pool type (default: process).")
    args = ap.parse_args(argv)

    if args.limit < 0:
        ap.error("--limit must be non-negative")
    if args.workers < 0:
        ap.error("--workers must be positive (or 0 for auto)")

    workers = args.workers or None
    primes = generate_primes_parallel(args.limit, workers=workers, executor=args.executor)

    print(f"Mode: primes < {args.limit:,} | Workers: {workers or 'auto'} | Executor: {args.executor}")
    print(f"Found {len(primes):,} prime numbers.")
    print(f"The first 100 primes are: {primes[:100]}")
    print(f"The last 100 primes are: {primes[-100:]}")


if __name__ == "__main__":
    main()
