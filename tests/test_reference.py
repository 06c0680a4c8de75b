"""Tests for the reference width, segmentation and normalization adapters."""
# 3rd party
import pytest

# local
from grapheme_width.normalize import nfc, maybe_needs_normalization
from grapheme_width.reference import clamp, grapheme_count, reference_width


@pytest.mark.parametrize('text,expected', [
    ('', 0),
    ('a', 1),
    ('abc', 3),
    ('文', 2),
    ('文a', 3),
    ('\x07', 1),
    ('\u200b', 1),
    ('1\ufe0f\u20e3', 3),
    ('\U0001F600', 2),
])
def test_reference_width(text, expected):
    """Codepoints reported as wide take two cells, all others take one."""
    assert reference_width(text) == expected


@pytest.mark.parametrize('given,expected', [
    (-3, 1),
    (-1, 1),
    (0, 1),
    (1, 1),
    (2, 2),
    (3, 2),
    (10, 2),
])
def test_clamp(given, expected):
    assert clamp(given) == expected


@pytest.mark.parametrize('text,expected', [
    ('', 0),
    ('a', 1),
    ('ab', 2),
    ('e\u0301', 1),
    ('\U0001F1FA\U0001F1F8', 1),
    ('\U0001F44D\U0001F3FB', 1),
    ('\U0001F468\u200d\U0001F469\u200d\U0001F467', 1),
    ('文文', 2),
])
def test_grapheme_count(text, expected):
    assert grapheme_count(text) == expected


def test_nfc():
    assert nfc('e\u0301') == '\xe9'
    assert nfc('abc') == 'abc'
    assert nfc('q\u0323\u0307') == 'q\u0323\u0307'


@pytest.mark.parametrize('text,expected', [
    ('abc', False),
    ('文', False),
    ('\u200b', False),
    ('e\u0301', True),
    ('\U0001F44D\ufe0f', True),
])
def test_maybe_needs_normalization(text, expected):
    assert maybe_needs_normalization(text) is expected
