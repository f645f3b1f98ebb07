"""
Bucket arithmetic for sparse insertion.

A pile of ``total`` items is cut into ``n`` contiguous buckets whose sizes
differ by at most one. The remainder goes to the earliest buckets, so the first
``total % n`` buckets hold ``total // n + 1`` items and the rest hold
``total // n``.
"""

from typing import Sequence, TypeVar

T = TypeVar("T")


def bucket_sizes(total: int, n: int) -> list[int]:
    """
    Sizes of ``n`` contiguous buckets covering ``total`` items.

    Args:
        total: Number of items to distribute
        n: Number of buckets

    Returns:
        List of n bucket sizes summing to total

    Raises:
        ValueError: If n is not positive or total is negative
    """
    if n <= 0:
        raise ValueError(f"Bucket count must be positive, got {n}")
    if total < 0:
        raise ValueError(f"Total must be non-negative, got {total}")

    standard, carry = divmod(total, n)
    return [standard + 1 if i < carry else standard for i in range(n)]


def split(items: Sequence[T], n: int) -> list[list[T]]:
    """
    Cut ``items`` into exactly ``n`` contiguous buckets.

    Buckets may be empty when there are fewer items than buckets; the
    concatenation of the buckets is always equal to ``items``.

    Args:
        items: Items in pile order (bottom first)
        n: Number of buckets

    Returns:
        List of n lists
    """
    buckets = []
    start = 0
    for size in bucket_sizes(len(items), n):
        buckets.append(list(items[start:start + size]))
        start += size
    return buckets


def bucket_ranges(total: int, n: int) -> list[range]:
    """
    Index ranges of each bucket after one item was inserted into every bucket.

    Bucket i of the original pile ends up spanning ``bucket_sizes[i] + 1``
    positions of the grown pile.

    Args:
        total: Number of items in the pile before insertion
        n: Number of buckets (and inserted items)

    Returns:
        List of n ranges over the grown pile's indices
    """
    ranges = []
    start = 0
    for size in bucket_sizes(total, n):
        ranges.append(range(start, start + size + 1))
        start += size + 1
    return ranges
