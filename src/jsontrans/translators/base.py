"""Defines the base class for all translators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from jsontrans.config import ProviderSettings
from jsontrans.types import Formality


@dataclass
class TranslationResult:
    """A single translated text, in the position of the text it translates."""

    translated_text: str
    billed_characters: int | None = None


@dataclass
class UsageDetail:
    """Consumption of one quota, e.g. characters translated this billing period."""

    count: int
    limit: int

    @property
    def limit_reached(self) -> bool:
        """Check whether the quota is used up."""
        return self.limit > 0 and self.count >= self.limit


@dataclass
class UsageReport:
    """The provider's account usage. Quotas the provider does not report are None."""

    character: UsageDetail | None = None
    document: UsageDetail | None = None
    any_limit_reached: bool = False


class BaseTranslator(ABC):
    """Abstract base class for all translator implementations."""

    def __init__(self, settings: ProviderSettings | None = None) -> None:
        """
        Initialize the translator with provider-specific settings.

        Args:
            settings: A Pydantic model containing provider-specific configurations.

        """
        self.settings = settings or ProviderSettings()

    @abstractmethod
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
        Translate a list of texts.

        Args:
            texts: A list of strings to be translated.
            target_language: The target language code.
            source_language: The source language code, or None to let the provider detect it.
            formality: The requested register, for providers that support it.
            debug: If True, enables debug logging.

        Returns:
            One TranslationResult per input text, in the same order.

        Raises:
            ProviderError: If the provider call fails.

        """
        raise NotImplementedError

    def get_usage(self) -> UsageReport | None:
        """Return the account usage, or None when the provider does not expose it."""
        return None
