"""
Placeholder protection for translatable text.

Template placeholders such as ``{{name}}`` must reach the output untouched, so
before a string is sent to a provider each placeholder is swapped for a short
positional marker (``<t0/>``, ``<t1/>``, ...) that providers pass through as an
empty XML-like tag. After translation the markers are replaced, in order, by the
original placeholder text.
"""

import logging
from typing import NamedTuple

import regex

from .errors import IntegrityError

logger = logging.getLogger(__name__)

# Non-greedy and without DOTALL, so a placeholder never spans a line break.
PLACEHOLDER_PATTERN = regex.compile(r"\{\{.*?\}\}")
MARKER_PATTERN = regex.compile(r"<t\d+/>")
# Literal marker text is protected along with the placeholders of the same string.
_PROTECTED_PATTERN = regex.compile(r"\{\{.*?\}\}|<t\d+/>")


class NormalizedText(NamedTuple):
    """A translation-safe key and the placeholders it replaced, in occurrence order."""

    key: str
    placeholders: tuple[str, ...]


def make_marker(index: int) -> str:
    """Return the marker that stands in for the placeholder at ``index``."""
    return f"<t{index}/>"


def normalize(text: str) -> NormalizedText:
    """
    Replace every placeholder in ``text`` with a numbered marker.

    Args:
        text: The display text, possibly containing ``{{...}}`` placeholders.

    Returns:
        The translation-safe key and the ordered placeholder substrings. When the
        text has no placeholders the key is the text itself. Marker-like text
        already present in a string with placeholders is kept as a placeholder too,
        so it is restored verbatim.

    """
    if not PLACEHOLDER_PATTERN.search(text):
        return NormalizedText(text, ())

    placeholders = tuple(m.group(0) for m in _PROTECTED_PATTERN.finditer(text))
    counter = iter(range(len(placeholders)))
    key = _PROTECTED_PATTERN.sub(lambda _m: make_marker(next(counter)), text)
    return NormalizedText(key, placeholders)


def count_markers(text: str) -> int:
    """Count the markers present in ``text``."""
    return len(MARKER_PATTERN.findall(text))


def denormalize(translated_key: str, placeholders: tuple[str, ...] | list[str]) -> str:
    """
    Restore the original placeholders into a translated key.

    The i-th marker found left to right is replaced by ``placeholders[i]``.
    Strings that had no placeholders are returned as they are.

    Raises:
        IntegrityError: If the number of markers differs from the number of placeholders.

    """
    if not placeholders:
        return translated_key

    found = count_markers(translated_key)
    if found != len(placeholders):
        msg = f"Expected {len(placeholders)} placeholder marker(s) but found {found} in translated text: '{translated_key}'"
        raise IntegrityError(msg)

    replacements = iter(placeholders)
    restored = MARKER_PATTERN.sub(lambda _m: next(replacements), translated_key)
    logger.debug("Restored placeholders: '%s' -> '%s'", translated_key, restored)
    return restored
