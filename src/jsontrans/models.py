"""Defines the data models used throughout JsonTrans."""

from dataclasses import dataclass, field

from .cache import EntryCache
from .config import TranslationJob
from .translators.base import BaseTranslator
from .types import JsonValue


@dataclass
class RunStats:
    """Counters reported to the user before and after translation."""

    total_characters: int = 0
    total_entries: int = 0
    placeholder_entries: int = 0
    batch_count: int = 0
    translated_entries: int = 0
    billed_characters: int = 0


@dataclass
class ExecutionContext:
    """
    State shared by the processors of a single translation run.

    The cache and counters live here rather than in module globals, so every run
    starts from a clean slate.
    """

    job: TranslationJob
    translator: BaseTranslator | None = None
    document: JsonValue = None
    cache: EntryCache = field(default_factory=EntryCache)
    stats: RunStats = field(default_factory=RunStats)
    batches: list[list[str]] = field(default_factory=list)
    translated_document: JsonValue = None
    is_reconstructed: bool = False
    is_aborted: bool = False
    is_written: bool = False

    @property
    def is_dry_run(self) -> bool:
        """Check whether the run should stop before calling the provider."""
        return self.job.dry_run
