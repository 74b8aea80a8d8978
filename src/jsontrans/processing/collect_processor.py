"""Collection processor: load the document and record its distinct strings."""

import logging

from jsontrans.document import load_document
from jsontrans.models import ExecutionContext
from jsontrans.translate import collect_entries

from .base import Processor

__all__ = ["CollectProcessor"]

logger = logging.getLogger(__name__)


class CollectProcessor(Processor):
    """Phase 1: Load the input file and fill the cache with every distinct translation-safe key."""

    def process(self, context: ExecutionContext) -> None:
        """Load the document, walk it once and update the run statistics."""
        logger.info("Loading json file...")
        context.document = load_document(context.job.input_path)

        logger.info("Retrieving entries to translate...")
        collect_entries(context.document, context.cache, translate_keys=context.job.translate_keys)

        stats = context.stats
        stats.total_characters = context.cache.total_characters
        stats.total_entries = len(context.cache)
        stats.placeholder_entries = context.cache.placeholder_entries
        logger.info("Total characters: %d. Entries: %d", stats.total_characters, stats.total_entries)
        if stats.placeholder_entries:
            logger.debug("%d entries contain protected placeholders.", stats.placeholder_entries)
