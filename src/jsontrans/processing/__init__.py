"""
Processing pipeline components.

This module provides a set of processor classes for the JsonTrans
translation workflow. Each processor implements a specific stage
of the pipeline.
"""

from .base import Processor
from .collect_processor import CollectProcessor
from .confirm_processor import ConfirmProcessor
from .reconstruct_processor import ReconstructProcessor
from .submit_processor import SubmitProcessor
from .usage_processor import UsageProcessor
from .write_processor import WriteProcessor

__all__ = [
    "CollectProcessor",
    "ConfirmProcessor",
    "Processor",
    "ReconstructProcessor",
    "SubmitProcessor",
    "UsageProcessor",
    "WriteProcessor",
]
