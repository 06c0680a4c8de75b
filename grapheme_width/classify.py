"""
Width classification of a single grapheme cluster.

The Unicode East Asian Width and emoji presentation properties are necessary
but not sufficient to predict how a modern terminal renders a cluster: ZWJ
sequences, variation selectors and regional indicator flags all diverge from
the tables.  :func:`classify` applies an ordered series of structural checks,
the first that matches decides the width, so the order of the checks below is
significant and must not be rearranged.
"""

from __future__ import annotations

from typing import Union

# local
from .charclass import (VS15,
                        VS16,
                        ZWJ,
                        ZWNJ,
                        strip,
                        is_tag,
                        contains,
                        is_ascii,
                        is_emoji,
                        is_letter,
                        is_special,
                        consists_of,
                        is_skin_tone,
                        is_text_style,
                        is_black_flag,
                        is_devanagari,
                        is_zero_width,
                        is_combining_mark,
                        is_east_asian_wide,
                        is_emoji_pictograph,
                        is_text_presentation,
                        is_variation_selector,
                        is_regional_indicator)
from .normalize import nfc, maybe_needs_normalization
from .reference import clamp, grapheme_count, reference_width

Cluster = Union[str, bytes, bytearray, memoryview]


def _has_flag_sequence(text: str) -> bool:
    """Two adjacent regional indicators, or a black flag followed by a tag character."""
    for prev, char in zip(text, text[1:]):
        prev_ucs, ucs = ord(prev), ord(char)
        if is_regional_indicator(prev_ucs) and is_regional_indicator(ucs):
            return True
        if is_black_flag(prev_ucs) and is_tag(ucs):
            return True
    return False


def _is_base_then_zero_width(text: str, base_test) -> bool:
    """A single character accepted by ``base_test`` followed only by zero width characters."""
    return (len(text) > 1
            and base_test(ord(text[0]))
            and consists_of(text[1:], is_zero_width))


def _is_letter_with_marks(text: str) -> bool:
    return (len(text) > 1
            and is_letter(ord(text[0]))
            and consists_of(text[1:], is_combining_mark))


def _is_letter_with_marks_then_zero_width(text: str) -> bool:
    """
    A letter, one or more combining marks, then one or more zero width characters.

    Some codepoints, such as U+034F COMBINING GRAPHEME JOINER, are both a mark
    and zero width, and may count toward either run.
    """
    length = len(text)
    if length < 3 or not is_letter(ord(text[0])):
        return False
    marks_end = 1
    while marks_end < length and is_combining_mark(ord(text[marks_end])):
        marks_end += 1
    zero_width_start = length
    while zero_width_start > 1 and is_zero_width(ord(text[zero_width_start - 1])):
        zero_width_start -= 1
    return max(2, zero_width_start) <= min(marks_end, length - 1)


def _decode(cluster: Cluster) -> tuple[str | None, int | None]:
    """
    Apply the byte level fast paths.

    :returns: tuple of ``(text, None)`` when the cluster must be classified
        further, or ``(None, width)`` when the width is already decided.
    :raises TypeError: ``cluster`` is neither text nor bytes.
    """
    if isinstance(cluster, str):
        if not cluster:
            return None, 0
        if cluster.isascii():
            return None, 1
        return cluster, None

    if not isinstance(cluster, (bytes, bytearray, memoryview)):
        raise TypeError(f"grapheme cluster must be str or bytes, not {type(cluster).__name__}")

    data = bytes(cluster)
    if not data:
        return None, 0
    if len(data) == 1:
        return None, 1
    # malformed sequences decode to U+FFFD and are measured like any other text
    text = data.decode('utf-8', errors='replace')
    if len(text) == len(data):
        return None, 1
    return text, None


def classify(cluster: Cluster) -> int:
    r"""
    Given one grapheme cluster, return the number of cells it occupies on a terminal.

    :param cluster: A single grapheme cluster, as produced by a UAX #29
        segmenter, given either as text or as UTF-8 encoded bytes.  Malformed
        bytes are accepted and measured on a best-effort basis.
    :returns: ``0``, ``1`` or ``2``.  Never raises for ``str`` or ``bytes``.
    :raises TypeError: ``cluster`` is neither text nor bytes.

    The result is a pure function of ``cluster``; see :class:`~.WidthCache`
    for a memoizing wrapper.

    Examples::

        >>> classify('a')
        1
        >>> classify('\u6587')
        2
        >>> classify('\u200b')
        0
        >>> classify('\u26a0\ufe0e')
        1
        >>> classify('\U0001F1FA\U0001F1F8'.encode('utf-8'))
        2
    """
    text, decided = _decode(cluster)
    if text is None:
        return decided

    # A lone invisible character.
    if len(text) == 1 and is_zero_width(ord(text)):
        return 0

    # ASCII followed by invisible characters: only the base is visible.
    if _is_base_then_zero_width(text, is_ascii):
        return 1

    # Regional indicator pair, or black flag + tag sequence (subdivision flags).
    if _has_flag_sequence(text):
        return 2

    # Devanagari conjuncts render narrow in terminals despite their shaping.
    if contains(text, is_devanagari):
        return 1

    # Compose decomposed letters, so that later checks see one codepoint.
    if maybe_needs_normalization(text):
        text = nfc(text)

    if ZWJ in text or ZWNJ in text:
        residual = strip(text, is_zero_width)
        if len(residual) == 1:
            if _is_base_then_zero_width(text, is_emoji_pictograph):
                return 2
            if is_east_asian_wide(ord(residual)):
                return 2
            # a letter followed by a joiner keeps the width of the letter
            return 1
        if contains(text, is_emoji_pictograph):
            # ZWJ emoji sequence, such as a family or profession emoji
            return 2

    if contains(text, is_variation_selector):
        base = strip(text, is_variation_selector)
        if VS15 in text and len(base) == 1 and is_text_style(ord(base)):
            return 1
        if contains(base, is_emoji):
            return 2
        if contains(base, is_east_asian_wide):
            return 2
        return clamp(reference_width(base))

    if contains(text, is_zero_width):
        filtered = strip(text, is_zero_width)
        if not filtered or consists_of(filtered, is_combining_mark):
            return 0
        if _is_letter_with_marks_then_zero_width(text):
            return 1
        if len(filtered) == 1:
            return 2 if is_east_asian_wide(ord(filtered)) else 1

    # Nothing that needs a heuristic: the reference measurement is trusted.
    if not contains(text, is_special):
        return clamp(reference_width(text))

    if _is_letter_with_marks(text):
        return 1

    # Confirm single-cluster-ness independently of the caller's segmentation.
    if grapheme_count(text) == 1:
        if contains(text, is_skin_tone):
            return 2
        if len(text) == 2 and consists_of(text, is_regional_indicator):
            return 2

    # Symbols and dingbats default to a narrow glyph unless emoji is requested.
    if len(text) == 1 and is_text_presentation(ord(text)) and VS16 not in text:
        return 1

    return clamp(reference_width(strip(text, is_zero_width)))
