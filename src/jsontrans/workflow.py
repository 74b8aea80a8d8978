"""Manages the overall JsonTrans translation workflow."""

import logging
from typing import TYPE_CHECKING

from .config import TranslationJob
from .models import ExecutionContext
from .processing import (
    CollectProcessor,
    ConfirmProcessor,
    Processor,
    ReconstructProcessor,
    SubmitProcessor,
    UsageProcessor,
    WriteProcessor,
)
from .reporters import DryRunReporter, SummaryReporter
from .translators.base import BaseTranslator

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)


def run_job(
    job: TranslationJob,
    translator: BaseTranslator | None,
    *,
    debug: bool = False,
    ask: "Callable[[str], bool] | None" = None,
) -> ExecutionContext:
    """
    Translate one JSON document by running the processor pipeline.

    The output file is written only after every batch was translated and the
    whole document was rebuilt; any error raised by a processor propagates and
    leaves the output untouched.

    Args:
        job: The validated job parameters.
        translator: The provider to translate with. May be None for a dry run.
        debug: If True, enables provider debug logging.
        ask: Prompt function used when the job requires confirmation.

    Returns:
        The execution context, holding the translated document and run statistics.

    Raises:
        ConfigurationError: If the input file cannot be loaded.
        ProviderError: If a provider call fails.
        IntegrityError: If a run invariant is broken.

    """
    context = ExecutionContext(job=job, translator=translator)

    pipeline: Sequence[Processor] = [
        UsageProcessor(),
        CollectProcessor(),
        ConfirmProcessor(ask),
        SubmitProcessor(debug=debug),
        ReconstructProcessor(),
        WriteProcessor(),
    ]

    for processor in pipeline:
        if context.is_aborted:
            break
        logger.debug("Executing processor: %s", processor.__class__.__name__)
        processor.process(context)

    if context.is_aborted:
        return context

    if context.is_dry_run:
        DryRunReporter().generate(context)
        return context

    UsageProcessor().process(context)
    SummaryReporter().generate(context)
    return context
