"""Confirmation processor: ask the user before any text is sent to the provider."""

import logging
from collections.abc import Callable

from rich.prompt import Confirm

from jsontrans.models import ExecutionContext

from .base import Processor

__all__ = ["ConfirmProcessor"]

logger = logging.getLogger(__name__)


def _ask(question: str) -> bool:
    return Confirm.ask(question)


class ConfirmProcessor(Processor):
    """Phase 2: Stop the run cleanly if the user declines to continue."""

    def __init__(self, ask: Callable[[str], bool] | None = None) -> None:
        """
        Initialize the processor.

        Args:
            ask: Prompt function returning the user's answer. Defaults to a rich yes/no prompt.

        """
        self.ask = ask or _ask

    def process(self, context: ExecutionContext) -> None:
        """Prompt the user when the job asks for confirmation and texts are about to be sent."""
        if context.is_aborted or context.is_dry_run or not context.job.confirm:
            return

        if not self.ask("Do you want to continue?"):
            logger.info("Translation cancelled. No text was sent and no file was written.")
            context.is_aborted = True
