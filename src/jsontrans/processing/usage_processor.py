"""Usage processor: report the provider's account quota."""

import logging

from jsontrans.models import ExecutionContext

from .base import Processor

__all__ = ["UsageProcessor"]

logger = logging.getLogger(__name__)


class UsageProcessor(Processor):
    """Log the provider usage limits when the job asks for it."""

    def process(self, context: ExecutionContext) -> None:
        """
        Query and log the provider usage.

        Raises:
            ProviderError: If the usage request fails.

        """
        if not context.job.show_usage or context.translator is None:
            return

        usage = context.translator.get_usage()
        if usage is None:
            logger.info("Usage limit: not reported by provider '%s'.", context.job.provider)
            return

        logger.info("Usage limit:")
        if usage.any_limit_reached:
            logger.warning("Translation limit exceeded.")
        if usage.character is not None:
            logger.info("Characters: %d of %d", usage.character.count, usage.character.limit)
        if usage.document is not None:
            logger.info("Documents: %d of %d", usage.document.count, usage.document.limit)
