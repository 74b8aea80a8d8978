"""In-memory cache of translation-safe keys and their translations for a single run."""

import logging
from collections.abc import Iterator

from .errors import IntegrityError
from .placeholders import count_markers

logger = logging.getLogger(__name__)

# Text snippet length for debug logging
_TEXT_SNIPPET_MAX_LENGTH = 50


def truncate_text(text: str, limit: int = _TEXT_SNIPPET_MAX_LENGTH) -> str:
    """Shorten ``text`` to ``limit`` characters for log output."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class EntryCache:
    """
    Maps each distinct translation-safe key to its translation.

    A key is inserted once, as pending, during the collection pass. It is
    resolved when its batch comes back from the provider, and read during the
    reconstruction pass. Insertion order is preserved and is the order in which
    keys are submitted.
    """

    def __init__(self) -> None:
        """Create an empty cache."""
        self._entries: dict[str, str | None] = {}
        self._placeholders: dict[str, tuple[str, ...]] = {}
        self.total_characters = 0

    def __len__(self) -> int:
        """Return the number of distinct keys."""
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Check whether ``key`` has been recorded."""
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        """Iterate over the keys in first-discovery order."""
        return iter(self._entries)

    def ensure(self, key: str, placeholders: tuple[str, ...] = ()) -> bool:
        """
        Record ``key`` as pending if it is not known yet.

        Args:
            key: The translation-safe key.
            placeholders: The placeholders replaced in the first text that produced this key.

        Returns:
            True if the key was newly added, False if it was already present.

        """
        if key in self._entries:
            return False

        self._entries[key] = None
        self.total_characters += len(key)
        if placeholders:
            self._placeholders[key] = tuple(placeholders)
            logger.debug("Adding processed entry: %s", truncate_text(key))
        else:
            logger.debug("Adding entry: %s", truncate_text(key))
        return True

    def resolve(self, key: str, translated_text: str) -> None:
        """
        Store the translation for a previously recorded key.

        Raises:
            KeyError: If ``key`` was never recorded with :meth:`ensure`.
            IntegrityError: If the translation lost or gained placeholder markers.

        """
        if key not in self._entries:
            msg = f"Cannot resolve unknown cache key: '{truncate_text(key)}'"
            raise KeyError(msg)

        expected = len(self._placeholders.get(key, ()))
        if expected:
            found = count_markers(translated_text)
            if found != expected:
                msg = f"Translation of '{truncate_text(key)}' has {found} placeholder marker(s), expected {expected}: '{translated_text}'"
                raise IntegrityError(msg)

        self._entries[key] = translated_text

    def lookup(self, key: str) -> str:
        """
        Return the translation stored for ``key``.

        Raises:
            IntegrityError: If the key is unknown or still pending.

        """
        translated = self._entries.get(key)
        if translated is None:
            msg = f"Missing cache entry, the collection and reconstruction passes disagree: '{truncate_text(key)}'"
            raise IntegrityError(msg)
        return translated

    def is_resolved(self, key: str) -> bool:
        """Check whether ``key`` has a translation."""
        return self._entries.get(key) is not None

    def keys(self) -> list[str]:
        """Return all keys in first-discovery order."""
        return list(self._entries)

    def pending_keys(self) -> list[str]:
        """Return the keys still awaiting a translation, in first-discovery order."""
        return [key for key, value in self._entries.items() if value is None]

    def placeholders_for(self, key: str) -> tuple[str, ...]:
        """Return the placeholders recorded with ``key`` (empty if it had none)."""
        return self._placeholders.get(key, ())

    @property
    def placeholder_entries(self) -> int:
        """Number of keys whose source text contained placeholders."""
        return len(self._placeholders)
