"""
Bounded memoization of grapheme cluster widths.

Classification is a pure function of the cluster, so a stored width stays
valid for the life of the process.  Memory is bounded bluntly: when a new
cluster is stored while the cache holds ``maxsize`` entries, every entry is
dropped first, this is not an LRU cache.
"""

from __future__ import annotations

# std imports
import logging
import threading
from types import MappingProxyType

from typing import TYPE_CHECKING, Dict, Union, NamedTuple

# local
from .classify import Cluster, classify

if TYPE_CHECKING:  # pragma: no cover
    # std imports
    from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_CACHE_SIZE = 10000

Key = Union[str, bytes]


class CacheInfo(NamedTuple):
    """Statistics of a :class:`WidthCache`, after :func:`functools.lru_cache`."""

    hits: int
    misses: int
    maxsize: int
    currsize: int
    clears: int


def validate_maxsize(maxsize: object) -> int:
    """
    Return ``maxsize`` if it is usable as a cache ceiling.

    :raises ValueError: ``maxsize`` is not a positive integer.
    """
    if isinstance(maxsize, bool) or not isinstance(maxsize, int):
        raise ValueError(f"maxsize must be a positive integer, got {maxsize!r}")
    if maxsize < 1:
        raise ValueError(f"maxsize must be a positive integer, got {maxsize!r}")
    return maxsize


def _key(cluster: Cluster) -> Key:
    # bytearray and memoryview are not hashable, they are keyed by their bytes
    if isinstance(cluster, (bytearray, memoryview)):
        return bytes(cluster)
    return cluster


class WidthCache:
    """
    Memoizing wrapper around :func:`~.classify`.

    Clusters are keyed by their exact content: a ``str`` and the ``bytes``
    encoding the same text are distinct entries, each measured on its own.

    Safe for concurrent use.  Classification happens outside of the lock, so
    two threads missing on the same cluster may both classify it; both store
    the same width.
    """

    def __init__(self, maxsize: Optional[int] = None):
        """
        Initialize the cache.

        :param maxsize: Number of entries at which the cache is emptied before
            storing another.  Default is :data:`DEFAULT_MAX_CACHE_SIZE`.
        :raises ValueError: ``maxsize`` is not a positive integer.
        """
        self._maxsize = validate_maxsize(DEFAULT_MAX_CACHE_SIZE if maxsize is None else maxsize)
        self._entries: Dict[Key, int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._clears = 0

    def __repr__(self) -> str:
        return f'{type(self).__name__}(maxsize={self._maxsize!r}, currsize={len(self)!r})'

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, cluster: Cluster) -> bool:
        return _key(cluster) in self._entries

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @maxsize.setter
    def maxsize(self, value: int) -> None:
        self.set_capacity(value)

    def set_capacity(self, maxsize: int) -> None:
        """
        Change the ceiling; it applies from the next miss on.

        Entries already stored are kept even when they exceed the new ceiling.

        :raises ValueError: ``maxsize`` is not a positive integer.
        """
        maxsize = validate_maxsize(maxsize)
        with self._lock:
            self._maxsize = maxsize
        logger.debug('width cache ceiling set to %d', maxsize)

    def lookup(self, cluster: Cluster) -> Optional[int]:
        """Return the stored width of ``cluster``, or None."""
        key = _key(cluster)
        with self._lock:
            width = self._entries.get(key)
            if width is None:
                self._misses += 1
            else:
                self._hits += 1
            return width

    def store(self, cluster: Cluster, width: int) -> None:
        """
        Remember ``width`` for ``cluster``.

        When ``cluster`` is new and the cache already holds :attr:`maxsize`
        entries, the cache is emptied first.
        """
        key = _key(cluster)
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._maxsize:
                logger.debug('width cache reached %d entries, dropping %d',
                             self._maxsize, len(self._entries))
                self._entries.clear()
                self._clears += 1
            self._entries[key] = width

    def clear(self) -> None:
        """Drop all stored widths; statistics are kept."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
        logger.debug('width cache cleared, dropped %d', dropped)

    def measure(self, cluster: Cluster) -> int:
        """
        Return the width of ``cluster``, classifying and storing it on a miss.

        :raises TypeError: ``cluster`` is neither text nor bytes.
        """
        width = self.lookup(cluster)
        if width is None:
            width = classify(cluster)
            self.store(cluster, width)
        return width

    def entries(self) -> Mapping[Key, int]:
        """Read-only snapshot of the stored widths, for diagnostics."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, self._maxsize,
                             len(self._entries), self._clears)
