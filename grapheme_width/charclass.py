"""
Character classes consulted by the width classifier.

Every class is a membership test on a single codepoint.  Most are interval
lookups in :mod:`~.table_classes`; :attr:`CharClass.LETTER` and the general
category half of :attr:`CharClass.COMBINING_MARK` come from :mod:`unicodedata`.
"""

from __future__ import annotations

# std imports
import unicodedata
from enum import Enum
from functools import lru_cache

from typing import TYPE_CHECKING, Union

# 3rd party
from wcwidth.bisearch import bisearch as _bisearch

# local
from .table_classes import (TAGS,
                            ASCII,
                            EMOJI,
                            HALFWIDTH,
                            SKIN_TONES,
                            TEXT_STYLE,
                            ZERO_WIDTH,
                            DEVANAGARI,
                            WIDE_EASTASIAN,
                            EMOJI_PICTOGRAPHS,
                            TEXT_PRESENTATION,
                            REGIONAL_INDICATORS,
                            VARIATION_SELECTORS,
                            COMBINING_DIACRITICS)

if TYPE_CHECKING:  # pragma: no cover
    # std imports
    from typing import Callable, FrozenSet

ZWJ = '\u200d'
ZWNJ = '\u200c'
VS15 = '\ufe0e'
VS16 = '\ufe0f'
BLACK_FLAG = 0x1f3f4


class CharClass(Enum):
    """Classes a codepoint may belong to; a codepoint may be in several."""

    ASCII = 'ascii'
    LETTER = 'letter'
    COMBINING_MARK = 'combining-mark'
    ZERO_WIDTH = 'zero-width'
    VARIATION_SELECTOR = 'variation-selector'
    EMOJI = 'emoji'
    EMOJI_PICTOGRAPH = 'emoji-pictograph'
    EAST_ASIAN_WIDE = 'east-asian-wide'
    HALFWIDTH = 'halfwidth'
    REGIONAL_INDICATOR = 'regional-indicator'
    BLACK_FLAG = 'black-flag'
    TAG = 'tag'
    SKIN_TONE = 'skin-tone'
    DEVANAGARI = 'devanagari'
    TEXT_STYLE = 'text-style'
    TEXT_PRESENTATION = 'text-presentation'


def is_ascii(ucs: int) -> bool:
    return bool(_bisearch(ucs, ASCII))


def is_letter(ucs: int) -> bool:
    return unicodedata.category(chr(ucs)).startswith('L')


def is_combining_mark(ucs: int) -> bool:
    """Whether ``ucs`` is of general category Mark or in a combining diacritics block."""
    return (unicodedata.category(chr(ucs)).startswith('M')
            or bool(_bisearch(ucs, COMBINING_DIACRITICS)))


def is_zero_width(ucs: int) -> bool:
    return bool(_bisearch(ucs, ZERO_WIDTH))


def is_variation_selector(ucs: int) -> bool:
    return bool(_bisearch(ucs, VARIATION_SELECTORS))


def is_emoji(ucs: int) -> bool:
    return bool(_bisearch(ucs, EMOJI))


def is_emoji_pictograph(ucs: int) -> bool:
    return bool(_bisearch(ucs, EMOJI_PICTOGRAPHS))


def is_halfwidth(ucs: int) -> bool:
    return bool(_bisearch(ucs, HALFWIDTH))


def is_east_asian_wide(ucs: int) -> bool:
    """
    Whether ``ucs`` falls in a wide East Asian block.

    Halfwidth forms are excluded, although they live in the same block as the
    fullwidth forms.
    """
    return bool(_bisearch(ucs, WIDE_EASTASIAN)) and not is_halfwidth(ucs)


def is_regional_indicator(ucs: int) -> bool:
    return bool(_bisearch(ucs, REGIONAL_INDICATORS))


def is_black_flag(ucs: int) -> bool:
    return ucs == BLACK_FLAG


def is_tag(ucs: int) -> bool:
    return bool(_bisearch(ucs, TAGS))


def is_skin_tone(ucs: int) -> bool:
    return bool(_bisearch(ucs, SKIN_TONES))


def is_devanagari(ucs: int) -> bool:
    return bool(_bisearch(ucs, DEVANAGARI))


def is_text_style(ucs: int) -> bool:
    return bool(_bisearch(ucs, TEXT_STYLE))


def is_text_presentation(ucs: int) -> bool:
    return bool(_bisearch(ucs, TEXT_PRESENTATION))


_PREDICATES: tuple[tuple[CharClass, Callable[[int], bool]], ...] = (
    (CharClass.ASCII, is_ascii),
    (CharClass.LETTER, is_letter),
    (CharClass.COMBINING_MARK, is_combining_mark),
    (CharClass.ZERO_WIDTH, is_zero_width),
    (CharClass.VARIATION_SELECTOR, is_variation_selector),
    (CharClass.EMOJI, is_emoji),
    (CharClass.EMOJI_PICTOGRAPH, is_emoji_pictograph),
    (CharClass.EAST_ASIAN_WIDE, is_east_asian_wide),
    (CharClass.HALFWIDTH, is_halfwidth),
    (CharClass.REGIONAL_INDICATOR, is_regional_indicator),
    (CharClass.BLACK_FLAG, is_black_flag),
    (CharClass.TAG, is_tag),
    (CharClass.SKIN_TONE, is_skin_tone),
    (CharClass.DEVANAGARI, is_devanagari),
    (CharClass.TEXT_STYLE, is_text_style),
    (CharClass.TEXT_PRESENTATION, is_text_presentation),
)


def is_special(ucs: int) -> bool:
    """
    Whether ``ucs`` needs any cluster heuristic at all.

    Clusters made only of codepoints for which this is False are measured
    directly by the reference width function.
    """
    return (is_zero_width(ucs)
            or is_combining_mark(ucs)
            or is_variation_selector(ucs)
            or is_emoji(ucs)
            or bool(_bisearch(ucs, WIDE_EASTASIAN)))


# Sized like the grapheme break property caches of wcwidth: a western
# document touches well under a hundred codepoints, CJK text a few thousand.
@lru_cache(maxsize=1024)
def _codepoint_classes(ucs: int) -> FrozenSet[CharClass]:
    return frozenset(cls for cls, test in _PREDICATES if test(ucs))


def class_of(ucs_or_cluster: Union[int, str]) -> FrozenSet[CharClass]:
    r"""
    Return the set of character classes matched.

    :param ucs_or_cluster: A codepoint ordinal, or a string whose codepoints
        are each classified.
    :returns: For an ordinal, the classes of that codepoint; for a string,
        the union of the classes of all of its codepoints.

    Example::

        >>> sorted(c.value for c in class_of(0x200d))
        ['zero-width']
        >>> CharClass.SKIN_TONE in class_of('\U0001F44D\U0001F3FB')
        True
    """
    if isinstance(ucs_or_cluster, int):
        return _codepoint_classes(ucs_or_cluster)
    result: FrozenSet[CharClass] = frozenset()
    for char in ucs_or_cluster:
        result |= _codepoint_classes(ord(char))
    return result


def contains(text: str, predicate: Callable[[int], bool]) -> bool:
    """Whether any codepoint of ``text`` satisfies ``predicate``."""
    return any(predicate(ord(char)) for char in text)


def consists_of(text: str, predicate: Callable[[int], bool]) -> bool:
    """Whether ``text`` is non-empty and every codepoint satisfies ``predicate``."""
    return bool(text) and all(predicate(ord(char)) for char in text)


def strip(text: str, predicate: Callable[[int], bool]) -> str:
    """Remove every codepoint of ``text`` that satisfies ``predicate``."""
    return ''.join(char for char in text if not predicate(ord(char)))
