"""Submission processor: batch the pending keys and translate them."""

import logging

from jsontrans.batching import partition
from jsontrans.models import ExecutionContext
from jsontrans.translate import submit_batches

from .base import Processor

__all__ = ["SubmitProcessor"]

logger = logging.getLogger(__name__)


class SubmitProcessor(Processor):
    """Phase 3: Partition the distinct keys into batches and resolve them through the provider."""

    def __init__(self, *, debug: bool = False) -> None:
        """Initialize the processor, optionally with provider debug logging."""
        self.debug = debug

    def process(self, context: ExecutionContext) -> None:
        """
        Plan the batches, then submit them unless this is a dry run.

        Raises:
            ProviderError: If a provider call fails.
            IntegrityError: If a provider response does not match its batch.

        """
        if context.is_aborted:
            return

        context.batches = partition(context.cache.pending_keys(), context.job.batch_size)
        context.stats.batch_count = len(context.batches)

        if context.is_dry_run:
            logger.debug("[DRY RUN] Planned %d batches. Skipping API translation.", len(context.batches))
            return

        if not context.batches:
            logger.info("No strings to translate. No API call needed.")
            return

        if context.translator is None:
            msg = "No translator is available for this run."
            raise RuntimeError(msg)

        billed = submit_batches(context.translator, context.batches, context.cache, context.job, debug=self.debug)
        context.stats.translated_entries = sum(len(batch) for batch in context.batches)
        context.stats.billed_characters = billed
