"""
compare.py - Constant-time equality for secrets.

The loop always walks max(len(a), len(b)) positions and folds every
difference (and the length mismatch) into one accumulator with bitwise OR.
There is no early exit, so running time does not depend on where the inputs
first differ.
"""

from __future__ import annotations

from typing import Iterator, Tuple, Union

BytesLike = Union[str, bytes, bytearray, memoryview]


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"cannot compare {type(value).__name__}")


def _byte_pairs(a: bytes, b: bytes) -> Iterator[Tuple[int, int]]:
    """Yield (a[i], b[i]) for every position, padding the shorter input with 0."""
    len_a, len_b = len(a), len(b)
    for i in range(max(len_a, len_b)):
        yield (a[i] if i < len_a else 0), (b[i] if i < len_b else 0)


def constant_time_equal(a: BytesLike, b: BytesLike) -> bool:
    """True iff ``a`` and ``b`` hold the same bytes. Text is UTF-8 encoded first."""
    left = _as_bytes(a)
    right = _as_bytes(b)
    acc = len(left) ^ len(right)
    for x, y in _byte_pairs(left, right):
        acc |= x ^ y
    return acc == 0
