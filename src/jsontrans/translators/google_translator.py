"""Translator implementation using the Google Translate web API."""

import logging

from deep_translator import GoogleTranslator as DeepGoogleTranslator  # type: ignore[import-untyped]

from jsontrans.config import ProviderSettings
from jsontrans.errors import ProviderError
from jsontrans.types import Formality

from .base import BaseTranslator, TranslationResult

logger = logging.getLogger(__name__)


class GoogleTranslator(BaseTranslator):
    """A translator using Google Translate via the 'deep-translator' library."""

    def __init__(self, settings: ProviderSettings) -> None:
        """
        Initialize the Google Translator.

        Args:
            settings: Provider-specific configurations. Only ``batch_size`` is used.

        """
        super().__init__(settings)
        # deep-translator handles the client setup internally.

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
        Translate a list of texts using deep-translator.

        Google has no formality option, so ``formality`` is ignored. Language codes
        are lower-cased because deep-translator only knows the lower-case forms.

        Raises:
            ProviderError: If the request fails, returns too few texts, or leaves a text untranslated.

        """
        _ = formality
        if not texts:
            return []

        source = source_language.lower() if source_language else "auto"
        target = target_language.lower()
        if debug:
            logger.debug("[Google] Sending %d texts (%s -> %s).", len(texts), source, target)

        try:
            # deep-translator's translate_batch is a loop of single requests.
            translated_texts = DeepGoogleTranslator(source=source, target=target).translate_batch(texts)
        except Exception as e:
            msg = f"deep-translator (Google) request failed: {e}"
            raise ProviderError(msg) from e

        if not translated_texts or len(translated_texts) != len(texts):
            msg = f"deep-translator (Google) returned {len(translated_texts or [])} texts for {len(texts)} inputs."
            raise ProviderError(msg)

        missing = [i for i, translated in enumerate(translated_texts) if translated is None]
        if missing:
            msg = f"deep-translator (Google) returned no translation for text(s) at position(s) {missing}."
            raise ProviderError(msg)

        return [TranslationResult(translated_text=translated) for translated in translated_texts]
