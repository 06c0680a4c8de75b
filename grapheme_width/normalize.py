"""Unicode canonical composition, applied only where it can change a cluster."""

from __future__ import annotations

# std imports
import unicodedata

# local
from .charclass import contains, is_combining_mark


def maybe_needs_normalization(text: str) -> bool:
    """
    Cheap pre-check for :func:`nfc`.

    Only a cluster holding a combining mark can be composed into fewer
    codepoints, so anything else is left untouched.
    """
    return contains(text, is_combining_mark)


def nfc(text: str) -> str:
    r"""
    Return the NFC (canonically composed) form of ``text``.

    Example::

        >>> nfc('e\u0301')
        '\xe9'
    """
    return unicodedata.normalize('NFC', text)
