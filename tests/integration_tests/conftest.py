"""Pytest configuration and fixtures for integration tests."""

import os

import pytest

from jsontrans.config import API_KEY_ENV_VAR, ProviderSettings
from jsontrans.translators.deepl_translator import DeepLTranslator


@pytest.fixture
def deepl_translator() -> DeepLTranslator:
    """
    Provide DeepLTranslator if an API key is available.

    Skips the test if the DEEPL_API_KEY environment variable is not set.
    """
    api_key = os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        pytest.skip(f"DeepL API key not available (set {API_KEY_ENV_VAR})")
    return DeepLTranslator(settings=ProviderSettings(api_key=api_key))
