from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class VerificationReport:
    """Differences between a candidate's primes and the baseline's."""
    missing: frozenset = field(default_factory=frozenset)   # in baseline, not in candidate
    spurious: frozenset = field(default_factory=frozenset)  # in candidate, not in baseline

    @property
    def ok(self) -> bool:
        return not self.missing and not self.spurious


def _common_dtype(*sides: list) -> type:
    # uint64 covers every prime up to 2**64 - 1; a negative value anywhere
    # means plain Python ints so neither side gets narrowed or promoted to float
    if any(side and min(side) < 0 for side in sides):
        return object
    return np.uint64


def verify(baseline: Iterable[int], candidate: Iterable[int]) -> VerificationReport:
    """
    Compare 'candidate' against 'baseline'. Both sides may be empty; an empty
    report means the candidate found exactly the baseline's primes.
    """
    baseline = list(baseline)
    candidate = list(candidate)
    dtype = _common_dtype(baseline, candidate)
    base = np.array(baseline, dtype=dtype)
    cand = np.array(candidate, dtype=dtype)
    missing = np.setdiff1d(base, cand)
    spurious = np.setdiff1d(cand, base)
    return VerificationReport(
        missing=frozenset(missing.tolist()),
        spurious=frozenset(spurious.tolist()),
    )
