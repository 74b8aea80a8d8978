"""A reporter for generating concise execution summaries."""

import logging

from jsontrans.models import ExecutionContext

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Generates a concise summary of a translation run and logs it."""

    def generate(self, context: ExecutionContext) -> None:
        """Log a summary of the execution to the console."""
        if context.is_aborted:
            return

        stats = context.stats
        logger.info("--- Translation Summary for '%s' ---", context.job.input_path)
        logger.info("Distinct entries: %d", stats.total_entries)
        logger.info("  - With placeholders: %d", stats.placeholder_entries)
        logger.info("Characters submitted: %d", stats.total_characters)
        logger.info("Batches sent: %d", stats.batch_count)
        if stats.billed_characters:
            logger.info("Characters billed by provider: %d", stats.billed_characters)
        if context.is_written:
            logger.info("Output written to: %s", context.job.output_path)
        logger.info("-------------------------------------------------")
