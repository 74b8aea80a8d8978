"""Translator implementation using the official DeepL API client."""

import logging

import deepl

from jsontrans.config import ProviderSettings
from jsontrans.errors import ConfigurationError, ProviderError
from jsontrans.types import Formality

from .base import BaseTranslator, TranslationResult, UsageDetail, UsageReport

logger = logging.getLogger(__name__)


def _usage_detail(detail: "deepl.Usage.Detail | None") -> UsageDetail | None:
    """Convert a DeepL usage detail, dropping quotas the account does not have."""
    if detail is None or not detail.valid:
        return None
    return UsageDetail(count=detail.count, limit=detail.limit)


class DeepLTranslator(BaseTranslator):
    """A translator backed by the DeepL REST API via the 'deepl' library."""

    def __init__(self, settings: ProviderSettings) -> None:
        """
        Initialize the DeepL client.

        Args:
            settings: Provider settings; ``api_key`` is required, ``server_url`` is optional.

        Raises:
            ConfigurationError: If no API key is configured.

        """
        super().__init__(settings)
        if not self.settings.api_key:
            msg = "API key for DeepLTranslator is missing."
            raise ConfigurationError(msg)
        self.client = deepl.Translator(self.settings.api_key, server_url=self.settings.server_url)

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
        Translate a batch of texts with a single DeepL request.

        Raises:
            ProviderError: If the DeepL request fails.

        """
        if not texts:
            return []

        if debug:
            logger.debug(
                "[DeepL] Sending %d texts (%s -> %s, formality=%s).",
                len(texts),
                source_language or "auto",
                target_language,
                formality.value,
            )

        try:
            response = self.client.translate_text(
                texts,
                source_lang=source_language,
                target_lang=target_language,
                formality=formality.value,
            )
        except deepl.DeepLException as e:
            msg = f"DeepL request failed: {e}"
            raise ProviderError(msg) from e

        # A list input always yields a list, but guard against a bare TextResult.
        if not isinstance(response, list):
            response = [response]

        return [TranslationResult(translated_text=result.text, billed_characters=getattr(result, "billed_characters", None)) for result in response]

    def get_usage(self) -> UsageReport:
        """
        Query the DeepL account usage.

        Raises:
            ProviderError: If the usage request fails.

        """
        try:
            usage = self.client.get_usage()
        except deepl.DeepLException as e:
            msg = f"DeepL usage request failed: {e}"
            raise ProviderError(msg) from e

        return UsageReport(
            character=_usage_detail(usage.character),
            document=_usage_detail(usage.document),
            any_limit_reached=bool(usage.any_limit_reached),
        )
