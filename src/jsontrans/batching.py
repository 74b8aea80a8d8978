"""Splits the distinct keys of a run into provider-sized batches."""

from collections.abc import Sequence

# DeepL accepts at most 50 texts per request.
DEFAULT_BATCH_SIZE = 49


def partition(keys: Sequence[str], max_size: int = DEFAULT_BATCH_SIZE) -> list[list[str]]:
    """
    Create simple, size-based batches.

    Each batch is filled up to ``max_size`` items before the next one starts, so
    concatenating the batches gives back ``keys`` in the same order.

    Raises:
        ValueError: If ``max_size`` is lower than 1.

    """
    if max_size < 1:
        msg = f"Batch size must be at least 1, got {max_size}."
        raise ValueError(msg)
    return [list(keys[i : i + max_size]) for i in range(0, len(keys), max_size)]
