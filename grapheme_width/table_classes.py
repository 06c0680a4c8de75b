"""
Codepoint interval tables for each character class used by the classifier.

Each table is a tuple of inclusive ``(start, end)`` ranges, sorted and
non-overlapping, suitable for :func:`wcwidth.bisearch.bisearch`.  These are
observed terminal behaviours rather than a verbatim copy of any single Unicode
property file: the emoji and East Asian ranges are broad blocks.  The
halfwidth forms of :data:`HALFWIDTH` lie inside :data:`WIDE_EASTASIAN` and are
carved out of it by :func:`~.charclass.is_east_asian_wide`.
"""

# Blocks of combining diacritics, in addition to general category M*.
COMBINING_DIACRITICS = (
    (0x00300, 0x0036f,),  # Combining Grave Accent  ..Combining Latin Small Letter X
    (0x01ab0, 0x01aff,),  # Combining Doubled Circumflex Accent ..(Diacritical Marks Extended)
    (0x01dc0, 0x01dff,),  # Combining Dotted Grave Accent ..Combining Right Arrowhead And Down Arrowhead Below
    (0x020d0, 0x020ff,),  # Combining Left Harpoon Above ..(Diacritical Marks for Symbols)
)

# Invisible format, joiner, bidi control and filler characters.
ZERO_WIDTH = (
    (0x0034f, 0x0034f,),  # Combining Grapheme Joiner
    (0x0061c, 0x0061c,),  # Arabic Letter Mark
    (0x0115f, 0x01160,),  # Hangul Choseong Filler  ..Hangul Jungseong Filler
    (0x0180b, 0x0180e,),  # Mongolian Free Variation Selector One ..Mongolian Vowel Separator
    (0x0200b, 0x0200f,),  # Zero Width Space        ..Right-to-left Mark
    (0x0202a, 0x0202e,),  # Left-to-right Embedding ..Right-to-left Override
    (0x02060, 0x02064,),  # Word Joiner             ..Invisible Plus
    (0x02066, 0x02069,),  # Left-to-right Isolate   ..Pop Directional Isolate
    (0x03164, 0x03164,),  # Hangul Filler
    (0x0feff, 0x0feff,),  # Zero Width No-break Space
    (0x0fff9, 0x0fffb,),  # Interlinear Annotation Anchor ..Interlinear Annotation Terminator
)

VARIATION_SELECTORS = (
    (0x0fe0e, 0x0fe0f,),  # Variation Selector-15   ..Variation Selector-16
)

# Blocks historically given emoji presentation.
EMOJI = (
    (0x02600, 0x027bf,),  # Black Sun With Rays     ..Double Curly Loop
    (0x1f000, 0x1ffff,),  # Mahjong Tile East Wind  ..(end of Supplementary Symbols)
)

# Pictographs that anchor ZWJ emoji sequences (people, objects, transport).
EMOJI_PICTOGRAPHS = (
    (0x1f300, 0x1f6ff,),  # Cyclone                 ..(end of Transport and Map Symbols)
)

WIDE_EASTASIAN = (
    (0x01100, 0x011ff,),  # Hangul Choseong Kiyeok  ..Hangul Jongseong Ssangnieun
    (0x03000, 0x0303f,),  # Ideographic Space       ..Ideographic Half Fill Space
    (0x03130, 0x0318f,),  # (Hangul Compatibility Jamo)
    (0x03400, 0x04dbf,),  # Cjk Unified Ideograph-3400 ..Cjk Unified Ideograph-4dbf
    (0x04e00, 0x09fff,),  # Cjk Unified Ideograph-4e00 ..Cjk Unified Ideograph-9fff
    (0x0ac00, 0x0d7af,),  # Hangul Syllable Ga      ..(end of Hangul Syllables)
    (0x0f900, 0x0faff,),  # Cjk Compatibility Ideograph-f900 ..(end of CJK Compatibility Ideographs)
    (0x0ff00, 0x0ffef,),  # (Halfwidth and Fullwidth Forms)
)

# Halfwidth forms share the U+FF00 block with fullwidth forms but are narrow.
HALFWIDTH = (
    (0x0ff61, 0x0ffdf,),  # Halfwidth Ideographic Full Stop ..Halfwidth Hangul Letter I
    (0x0ffe8, 0x0ffef,),  # Halfwidth Forms Light Vertical  ..(Halfwidth Forms)
)

REGIONAL_INDICATORS = (
    (0x1f1e6, 0x1f1ff,),  # Regional Indicator Symbol Letter A ..Regional Indicator Symbol Letter Z
)

# Tag characters following U+1F3F4 WAVING BLACK FLAG form subdivision flags.
TAGS = (
    (0xe0020, 0xe007f,),  # Tag Space               ..Cancel Tag
)

SKIN_TONES = (
    (0x1f3fb, 0x1f3ff,),  # Emoji Modifier Fitzpatrick Type-1-2 ..Emoji Modifier Fitzpatrick Type-6
)

DEVANAGARI = (
    (0x00900, 0x0097f,),  # Devanagari Sign Inverted Candrabindu ..Devanagari Letter Bba
    (0x0a8e0, 0x0a8ff,),  # Combining Devanagari Digit Zero ..Devanagari Vowel Sign Ay
    (0x11b00, 0x11b5f,),  # (Devanagari Extended-A)
)

# Symbols whose text presentation is honoured when followed by U+FE0E.
TEXT_STYLE = (
    (0x02600, 0x027bf,),  # Black Sun With Rays     ..Double Curly Loop
)

# Symbols that render narrow unless U+FE0F requests emoji presentation.
TEXT_PRESENTATION = (
    (0x02600, 0x027bf,),  # Black Sun With Rays     ..Double Curly Loop
    (0x1f100, 0x1f1ff,),  # Digit Zero Full Stop    ..Regional Indicator Symbol Letter Z
)

ASCII = (
    (0x00000, 0x0007f,),  # Null                    ..Delete
)
