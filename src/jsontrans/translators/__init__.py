"""
Translation provider implementations.

Each translator adheres to the `BaseTranslator` interface and can be
dynamically initialized and selected based on the user's configuration.
"""

from .base import BaseTranslator, TranslationResult, UsageDetail, UsageReport
from .deepl_translator import DeepLTranslator
from .google_translator import GoogleTranslator
from .mock_translator import MockTranslator

# Central mapping from provider name to translator class.
TRANSLATOR_MAPPING: dict[str, type[BaseTranslator]] = {
    "deepl": DeepLTranslator,
    "google": GoogleTranslator,
    "mock": MockTranslator,
}

__all__ = [
    "TRANSLATOR_MAPPING",
    "BaseTranslator",
    "DeepLTranslator",
    "GoogleTranslator",
    "MockTranslator",
    "TranslationResult",
    "UsageDetail",
    "UsageReport",
]
