"""Write processor: emit the translated document."""

import logging

from jsontrans.document import write_document
from jsontrans.models import ExecutionContext

from .base import Processor

__all__ = ["WriteProcessor"]

logger = logging.getLogger(__name__)


class WriteProcessor(Processor):
    """Phase 5: Write the output file, only once the whole document was rebuilt."""

    def process(self, context: ExecutionContext) -> None:
        """Serialize the translated document to the job's output path."""
        if context.is_aborted or not context.is_reconstructed:
            return

        logger.info("Generating file...")
        write_document(context.job.output_path, context.translated_document)
        context.is_written = True
