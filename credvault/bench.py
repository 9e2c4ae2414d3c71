"""
bench.py - Benchmark credential hashing cost per scrypt profile.

Responsibilities:
- Measure hash and verify time for a given set of cost parameters
- Compare profiles against an optional per-derivation CPU budget
- Return results in structured dicts for printing/reporting
"""

from __future__ import annotations

import statistics
import time
from typing import Any, Dict, List, Mapping, Optional

from .auth import CredentialHasher
from .config import CostParameters


BENCH_SECRET = "correct horse battery staple"


def _time_ms(fn, rounds: int) -> float:
    timings = []
    for _ in range(rounds):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        timings.append((t1 - t0) * 1000.0)
    return float(statistics.median(timings))


def bench_hash(params: CostParameters, rounds: int = 5) -> Dict[str, Any]:
    """Benchmark credential creation (salt + scrypt + encode)."""
    hasher = CredentialHasher(params)
    ms = _time_ms(lambda: hasher.hash_sync(BENCH_SECRET), rounds)
    return {"metric": "scrypt_hash_median_ms", "rounds": rounds, "value": ms, **params.as_dict()}


def bench_verify(params: CostParameters, rounds: int = 5) -> Dict[str, Any]:
    """Benchmark verification of a matching password."""
    hasher = CredentialHasher(params)
    stored = hasher.hash_sync(BENCH_SECRET)
    ms = _time_ms(lambda: hasher.verify_sync(stored, BENCH_SECRET), rounds)
    return {"metric": "scrypt_verify_median_ms", "rounds": rounds, "value": ms, **params.as_dict()}


def bench_profiles(
    profiles: Mapping[str, CostParameters],
    rounds: int = 5,
    budget_ms: Optional[float] = None,
) -> List[Dict[str, Any]]:
    """
    One row per profile with hash/verify medians and memory.
    When budget_ms is given each row says whether verify fits in it.
    """
    results: List[Dict[str, Any]] = []
    for name, params in profiles.items():
        hash_ms = bench_hash(params, rounds)["value"]
        verify_ms = bench_verify(params, rounds)["value"]
        row: Dict[str, Any] = {
            "profile": name,
            "n": params.n,
            "r": params.r,
            "p": params.p,
            "memory_mib": round(params.memory_mib, 2),
            "hash_median_ms": hash_ms,
            "verify_median_ms": verify_ms,
            "rounds": rounds,
        }
        if budget_ms is not None:
            row["within_budget"] = verify_ms <= budget_ms
        results.append(row)
    return results
