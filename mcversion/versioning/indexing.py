"""Reverse indexing helpers."""

import logging
from typing import Callable, Dict, Iterable, TypeVar

from .exceptions import DuplicateVersionError

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def build_multiple(
    items: Iterable[V], keys_fn: Callable[[V], Iterable[K]]
) -> Dict[K, V]:
    """
    Index each item under every key it produces.

    Args:
        items: Items to index, visited in order
        keys_fn: Returns the keys an item should be reachable by

    Returns:
        Mapping from key to the single item that produced it

    Raises:
        DuplicateVersionError: If two different items produce the same key
    """
    index: Dict[K, V] = {}
    for item in items:
        for key in keys_fn(item):
            if key in index and index[key] is not item:
                raise DuplicateVersionError(key, index[key], item)
            index[key] = item

    logger.debug(f"Built reverse index with {len(index)} keys")
    return index
