"""
Process-wide width cache and the module level functions that use it.

Callers that need isolation, such as tests or applications serving several
terminals with separate budgets, should construct their own
:class:`~.WidthCache` instead.
"""

from __future__ import annotations

# std imports
import os
import warnings

from typing import TYPE_CHECKING

# 3rd party
import wcwidth

# local
from .cache import DEFAULT_MAX_CACHE_SIZE, WidthCache, validate_maxsize

if TYPE_CHECKING:  # pragma: no cover
    # std imports
    from typing import Mapping

    # local
    from .cache import Key, CacheInfo
    from .classify import Cluster

CACHE_SIZE_ENV = 'GRAPHEME_WIDTH_CACHE_SIZE'


def _max_cache_size_from_env() -> int:
    """
    Return the ceiling of the default cache.

    The ``GRAPHEME_WIDTH_CACHE_SIZE`` environment variable is used if set,
    otherwise :data:`~.DEFAULT_MAX_CACHE_SIZE`.  An unusable value is
    reported with a warning and the default is used.
    """
    given = os.environ.get(CACHE_SIZE_ENV)
    if given is None:
        return DEFAULT_MAX_CACHE_SIZE
    try:
        return validate_maxsize(int(given))
    except ValueError:
        warnings.warn(f"{CACHE_SIZE_ENV} value, {given!r}, is invalid. Value should be "
                      f"a positive integer, the default {DEFAULT_MAX_CACHE_SIZE!r} "
                      "has been used.")
        return DEFAULT_MAX_CACHE_SIZE


_DEFAULT_CACHE = WidthCache(_max_cache_size_from_env())


def default_cache() -> WidthCache:
    """Return the cache shared by :func:`width` and the other module functions."""
    return _DEFAULT_CACHE


def width(cluster: Cluster) -> int:
    r"""
    Given one grapheme cluster, return its printable width on a terminal.

    :param cluster: A single grapheme cluster, as text or UTF-8 bytes.
    :returns: ``0``, ``1`` or ``2``.  The empty cluster is ``0``.
    :raises TypeError: ``cluster`` is neither text nor bytes.

    Results are memoized in the process-wide cache, see :func:`clear_cache`
    and :func:`set_max_cache_size`.

    Examples::

        >>> width('\U0001F600')
        2
        >>> width('a\u200d')
        1
        >>> width('\uff9c')
        1
    """
    return _DEFAULT_CACHE.measure(cluster)


def line_width(text: str) -> int:
    r"""
    Return the total width of ``text``, a line of any number of clusters.

    ``text`` is split into grapheme clusters by :func:`wcwidth.iter_graphemes`,
    and the width of each is summed.

    Example::

        >>> line_width('cafe\u0301 \U0001F1FA\U0001F1F8')
        7
    """
    return sum(width(cluster) for cluster in wcwidth.iter_graphemes(text))


def clear_cache() -> None:
    """Drop every memoized width, to free memory in long-running processes."""
    _DEFAULT_CACHE.clear()


def set_max_cache_size(maxsize: int) -> None:
    """
    Set the number of entries at which the process-wide cache is emptied.

    Takes effect on the next miss.

    :raises ValueError: ``maxsize`` is not a positive integer.
    """
    _DEFAULT_CACHE.set_capacity(maxsize)


def cache_info() -> CacheInfo:
    return _DEFAULT_CACHE.cache_info()


def cached_widths() -> Mapping[Key, int]:
    """Read-only snapshot of the process-wide cache."""
    return _DEFAULT_CACHE.entries()
