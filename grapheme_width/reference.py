"""
Adapters around the :mod:`wcwidth` library.

The classifier consults two collaborators that carry no cluster-specific
heuristics of their own: a per-codepoint "string width" function, used as the
last resort, and an independent grapheme cluster counter, used to confirm that
a skin tone or flag sequence really forms a single cluster.
"""

from __future__ import annotations

# 3rd party
import wcwidth


def reference_width(text: str) -> int:
    """
    Measure ``text`` one codepoint at a time.

    A codepoint occupies two cells when :func:`wcwidth.wcwidth` reports it as
    wide, and one cell otherwise: codepoints reported as zero width or as not
    printable (``-1``) are still given a cell, the way a plain string width
    function without cluster heuristics counts them.

    :param text: Any string, possibly empty.
    :returns: Sum of cells, ``0`` for the empty string.
    """
    return sum(2 if wcwidth.wcwidth(char) == 2 else 1 for char in text)


def clamp(width: int) -> int:
    """
    Fit a reference measurement into the range of a single cluster.

    A result of zero or less means the reference function could not measure
    the text, which is then given one cell.  Results above two are capped,
    a cluster never spans more than two cells.
    """
    if width <= 0:
        return 1
    return min(width, 2)


def grapheme_count(text: str) -> int:
    """Number of grapheme clusters in ``text`` by :func:`wcwidth.iter_graphemes`."""
    return sum(1 for _ in wcwidth.iter_graphemes(text))
