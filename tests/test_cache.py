"""Unit tests for the in-memory entry cache."""

import pytest

from jsontrans.cache import EntryCache, truncate_text
from jsontrans.errors import IntegrityError


@pytest.fixture
def cache() -> EntryCache:
    """Return an empty cache."""
    return EntryCache()


def test_ensure_adds_pending_entry(cache: EntryCache) -> None:
    """A new key is stored as pending and counted."""
    assert cache.ensure("Hello") is True

    assert "Hello" in cache
    assert len(cache) == 1
    assert cache.is_resolved("Hello") is False
    assert cache.pending_keys() == ["Hello"]
    assert cache.total_characters == len("Hello")


def test_ensure_is_idempotent(cache: EntryCache) -> None:
    """Re-inserting a key changes neither the entries nor the character count."""
    cache.ensure("Hello")
    assert cache.ensure("Hello") is False

    assert len(cache) == 1
    assert cache.total_characters == len("Hello")


def test_keys_keep_discovery_order(cache: EntryCache) -> None:
    """Keys are listed in the order they were first seen."""
    for key in ["b", "a", "c", "a"]:
        cache.ensure(key)

    assert cache.keys() == ["b", "a", "c"]
    assert list(cache) == ["b", "a", "c"]


def test_placeholders_are_recorded_once(cache: EntryCache) -> None:
    """The first placeholder record of a key is kept."""
    cache.ensure("Hi <t0/>", ("{{name}}",))
    cache.ensure("Hi <t0/>", ("{{user}}",))

    assert cache.placeholders_for("Hi <t0/>") == ("{{name}}",)
    assert cache.placeholders_for("unknown") == ()
    assert cache.placeholder_entries == 1


def test_resolve_and_lookup(cache: EntryCache) -> None:
    """A resolved key returns its translation."""
    cache.ensure("Hello")
    cache.resolve("Hello", "Bonjour")

    assert cache.lookup("Hello") == "Bonjour"
    assert cache.is_resolved("Hello") is True
    assert cache.pending_keys() == []


def test_resolve_accepts_empty_translation(cache: EntryCache) -> None:
    """An empty string is a valid translation, not a pending entry."""
    cache.ensure("Hello")
    cache.resolve("Hello", "")

    assert cache.lookup("Hello") == ""


def test_resolve_unknown_key_raises(cache: EntryCache) -> None:
    """Resolving a key that was never collected is a programming error."""
    with pytest.raises(KeyError, match="unknown cache key"):
        cache.resolve("never seen", "jamais vu")


def test_resolve_checks_marker_count(cache: EntryCache) -> None:
    """A translation that dropped a marker is rejected at once."""
    cache.ensure("Hi <t0/> and <t1/>", ("{{a}}", "{{b}}"))

    with pytest.raises(IntegrityError, match="expected 2"):
        cache.resolve("Hi <t0/> and <t1/>", "Salut <t0/>")


def test_lookup_unknown_key_raises(cache: EntryCache) -> None:
    """Looking up a key that was never collected is fatal."""
    with pytest.raises(IntegrityError, match="Missing cache entry"):
        cache.lookup("never seen")


def test_lookup_pending_key_raises(cache: EntryCache) -> None:
    """Looking up a key before its batch came back is fatal."""
    cache.ensure("Hello")

    with pytest.raises(IntegrityError, match="Missing cache entry"):
        cache.lookup("Hello")


def test_truncate_text() -> None:
    """Long log snippets are cut at 50 characters."""
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 60) == "x" * 50 + "..."
