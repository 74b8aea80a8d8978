"""Reconstruction processor: rebuild the document from the resolved cache."""

import logging

from jsontrans.models import ExecutionContext
from jsontrans.translate import reconstruct_document

from .base import Processor

__all__ = ["ReconstructProcessor"]

logger = logging.getLogger(__name__)


class ReconstructProcessor(Processor):
    """Phase 4: Walk the original document again, substituting restored translations."""

    def process(self, context: ExecutionContext) -> None:
        """
        Build the translated document.

        Raises:
            IntegrityError: If a string has no translation or lost placeholder markers.

        """
        if context.is_aborted or context.is_dry_run:
            return

        logger.info("Constructing translated object...")
        context.translated_document = reconstruct_document(
            context.document,
            context.cache,
            translate_keys=context.job.translate_keys,
        )
        context.is_reconstructed = True
