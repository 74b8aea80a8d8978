"""The common interface of the translation pipeline stages."""

from abc import ABC, abstractmethod

from jsontrans.models import ExecutionContext

__all__ = ["Processor"]


class Processor(ABC):
    """One stage of a translation run: collect, confirm, submit, reconstruct or write."""

    @abstractmethod
    def process(self, context: ExecutionContext) -> None:
        """
        Advance the run by one stage.

        Stages read and update the shared context. A stage that stops the run sets
        ``context.is_aborted``; failures are raised and end the run.

        Args:
            context: The state of the current translation run.

        """
        raise NotImplementedError
