"""Core translation logic for JsonTrans."""

import logging

from .cache import EntryCache, truncate_text
from .config import ProviderSettings, TranslationJob
from .errors import ConfigurationError, IntegrityError
from .placeholders import denormalize, normalize
from .translators import TRANSLATOR_MAPPING
from .translators.base import BaseTranslator
from .types import JsonValue, LeafAction
from .walker import walk

logger = logging.getLogger(__name__)


def get_translator(provider_name: str, settings: ProviderSettings | None = None) -> BaseTranslator:
    """
    Instantiate a translator class using a dictionary-based factory pattern.

    Args:
        provider_name: The name of the provider (e.g., "deepl", "google").
        settings: The provider-specific settings.

    Raises:
        ConfigurationError: If the provider is unknown or cannot be initialized.

    """
    translator_class = TRANSLATOR_MAPPING.get(provider_name.lower())
    if translator_class is None:
        msg = f"Unknown translator provider: '{provider_name}'. Available providers: {', '.join(sorted(TRANSLATOR_MAPPING))}."
        raise ConfigurationError(msg)

    translator = translator_class(settings=settings or ProviderSettings())
    logger.debug("Provider '%s' initialized.", provider_name)
    return translator


def make_recording_action(cache: EntryCache) -> LeafAction:
    """Build the collection-pass leaf action: record the text in ``cache`` and leave it unchanged."""

    def record(text: str) -> str:
        if not text:
            return text
        key, placeholders = normalize(text)
        cache.ensure(key, placeholders)
        return text

    return record


def make_substitution_action(cache: EntryCache) -> LeafAction:
    """Build the reconstruction-pass leaf action: replace the text with its restored translation."""

    def substitute(text: str) -> str:
        if not text:
            return text
        # The leaf's own placeholders are restored, not the ones recorded with the key,
        # so '{{a}}' and '{{b}}' variants sharing one key each keep their own names.
        key, placeholders = normalize(text)
        return denormalize(cache.lookup(key), placeholders)

    return substitute


def collect_entries(document: JsonValue, cache: EntryCache, *, translate_keys: bool = False) -> None:
    """Walk ``document`` and record every distinct translation-safe string in ``cache``."""
    walk(document, make_recording_action(cache), translate_keys=translate_keys)


def reconstruct_document(document: JsonValue, cache: EntryCache, *, translate_keys: bool = False) -> JsonValue:
    """
    Build the translated document from the original one and a fully resolved cache.

    Raises:
        IntegrityError: If a string of the document has no translation in the cache.

    """
    return walk(document, make_substitution_action(cache), translate_keys=translate_keys)


def _translate_batch(
    translator: BaseTranslator,
    batch: list[str],
    cache: EntryCache,
    job: TranslationJob,
    *,
    debug: bool,
) -> int:
    """Translate a single batch and resolve its keys. Returns the billed characters."""
    results = translator.translate(
        texts=batch,
        target_language=job.target_lang,
        source_language=job.source_lang,
        formality=job.formality,
        debug=debug,
    )

    if len(results) != len(batch):
        msg = f"Provider returned {len(results)} translations for a batch of {len(batch)} texts."
        raise IntegrityError(msg)

    billed = 0
    for key, result in zip(batch, results, strict=True):
        cache.resolve(key, result.translated_text)
        logger.debug("Translated: '%s' -> '%s'", truncate_text(key), truncate_text(result.translated_text))
        billed += result.billed_characters or 0
    return billed


def submit_batches(
    translator: BaseTranslator,
    batches: list[list[str]],
    cache: EntryCache,
    job: TranslationJob,
    *,
    debug: bool = False,
) -> int:
    """
    Submit batches one after another and write each response back into ``cache``.

    The next batch is only sent once the previous one is fully resolved. Any
    failure aborts the remaining batches.

    Returns:
        The number of characters the provider reported as billed.

    Raises:
        ProviderError: If a provider call fails.
        IntegrityError: If a response does not match its batch.

    """
    billed = 0
    total = len(batches)
    for i, batch in enumerate(batches):
        pct = int(i / total * 100)
        logger.info("Translating batch %d/%d (%d unique texts) - %d%%", i + 1, total, len(batch), pct)
        billed += _translate_batch(translator, batch, cache, job, debug=debug)
    return billed
