"""A reporter for generating dry-run execution summaries."""

import logging

from jsontrans.cache import truncate_text
from jsontrans.models import ExecutionContext

logger = logging.getLogger(__name__)

# Number of sample entries listed per batch
_SAMPLE_SIZE = 3


class DryRunReporter:
    """Logs what a run would send to the provider, without sending anything."""

    def generate(self, context: ExecutionContext) -> None:
        """Log the batch plan of a dry run."""
        stats = context.stats
        logger.info("--- Dry Run Report for '%s' ---", context.job.input_path)
        logger.info("Provider: %s", context.job.provider)
        logger.info("Source language: %s", context.job.source_lang or "Auto detect")
        logger.info("Target language: %s", context.job.target_lang)
        logger.info("Distinct entries: %d (%d with placeholders)", stats.total_entries, stats.placeholder_entries)
        logger.info("Characters to translate: %d", stats.total_characters)
        logger.info("Planned batches: %d (max %d texts each)", len(context.batches), context.job.batch_size)

        for i, batch in enumerate(context.batches, start=1):
            logger.info("  Batch %d: %d texts", i, len(batch))
            for key in batch[:_SAMPLE_SIZE]:
                logger.info("    - %s", truncate_text(key))
            if len(batch) > _SAMPLE_SIZE:
                logger.info("    ... %d additional texts", len(batch) - _SAMPLE_SIZE)

        logger.info("No API calls were made and no file was written.")
