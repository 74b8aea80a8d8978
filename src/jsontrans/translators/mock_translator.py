"""A mock translator for testing purposes."""

import logging

from jsontrans.config import ProviderSettings
from jsontrans.errors import ProviderError
from jsontrans.types import Formality

from .base import BaseTranslator, TranslationResult, UsageDetail, UsageReport

logger = logging.getLogger(__name__)

# Pretend account quota reported by get_usage().
MOCK_CHARACTER_LIMIT = 500_000


class MockTranslatorError(ProviderError):
    """Custom exception for mock translator errors."""


class MockTranslator(BaseTranslator):
    """
    A mock translator for testing that prepends a '[MOCK]' prefix.

    It can also be configured to raise an exception for testing error handling.
    Every call is recorded in ``calls`` so tests can check how texts were batched.
    """

    def __init__(self, settings: ProviderSettings | None = None, *, return_error: bool = False) -> None:
        """
        Initialize the Mock Translator.

        Args:
            settings: Provider-specific configurations (ignored).
            return_error: If True, the translate method will raise an exception.

        """
        super().__init__(settings)
        self.return_error = return_error
        self.calls: list[list[str]] = []
        self.characters_translated = 0

    def translate(
        self,
        texts: list[str],
        target_language: str,
        source_language: str | None = None,
        *,
        formality: Formality = Formality.PREFER_LESS,
        debug: bool = False,
    ) -> list[TranslationResult]:
        """
        Prepend '[MOCK] ' to each text to simulate translation.

        Raises:
            MockTranslatorError: If `return_error` was set to True during initialization.

        """
        _ = source_language
        _ = formality

        if self.return_error:
            msg = "Mock translator was configured to fail."
            raise MockTranslatorError(msg)

        if not texts:
            return []

        self.calls.append(list(texts))
        results = []
        for text in texts:
            self.characters_translated += len(text)
            results.append(TranslationResult(translated_text=f"[MOCK] {text}", billed_characters=len(text)))

        if debug:
            logger.debug(
                "MockTranslator processed %d texts for target '%s'.",
                len(texts),
                target_language,
            )

        return results

    def get_usage(self) -> UsageReport:
        """Report the characters translated so far against a fixed quota."""
        character = UsageDetail(count=self.characters_translated, limit=MOCK_CHARACTER_LIMIT)
        return UsageReport(character=character, any_limit_reached=character.limit_reached)
