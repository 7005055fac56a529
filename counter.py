"""Deduplicated insertion counting.

``count_distinct`` is what the service runs. ``count_distinct_scan`` is the
old list-scanning version, kept so the benchmark can show the difference.
"""


def count_distinct(n: int) -> int:
    """
    Inserts 0..n-1 into a set, skipping values already present, and returns
    how many distinct values it holds. Non-positive n inserts nothing.
    """
    seen = set()
    for i in range(n):
        if i not in seen:
            seen.add(i)
    return len(seen)


def count_distinct_scan(n: int) -> int:
    """
    Same result as count_distinct, but checks membership by scanning a list.
    It is intentionally inefficient.
    """
    items = []
    # BOTTLENECK: `in` on a list is a linear scan, so the loop is quadratic.
    for i in range(n):
        if i not in items:
            items.append(i)
    return len(items)


STRATEGIES = {
    "set": count_distinct,
    "scan": count_distinct_scan,
}
