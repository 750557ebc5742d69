from collections import Counter
from typing import Dict

# Weights behave like unsigned 64-bit counters that saturate instead of wrapping.
WEIGHT_MAX = (1 << 64) - 1


def saturating_add(a: int, b: int) -> int:
    return min(a + b, WEIGHT_MAX)


def count_frequencies(data: bytes) -> Dict[int, int]:
    """
    Occurrence count for every distinct byte value in `data`.

    Empty input gives an empty mapping.
    """
    return {byte: min(count, WEIGHT_MAX) for byte, count in Counter(data).items()}
