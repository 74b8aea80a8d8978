"""
Integration tests for DeepLTranslator.

These tests call the real DeepL API and consume characters from the account
quota. They are skipped unless DEEPL_API_KEY is set.
"""

import json
from pathlib import Path

import pytest

from jsontrans.config import TranslationJob
from jsontrans.translators.deepl_translator import DeepLTranslator
from jsontrans.workflow import run_job

pytestmark = pytest.mark.integration


def test_translate_simple_batch(deepl_translator: DeepLTranslator) -> None:
    """1. Translation: Returns one translation per text, in order."""
    results = deepl_translator.translate(["Good morning", "Thank you"], "FR", "EN")

    assert len(results) == 2  # noqa: PLR2004
    assert all(r.translated_text for r in results)


def test_markers_survive_translation(deepl_translator: DeepLTranslator) -> None:
    """2. Markers: Placeholder markers come back unchanged."""
    results = deepl_translator.translate(["Hello <t0/>, you have <t1/> new messages."], "FR", "EN")

    assert "<t0/>" in results[0].translated_text
    assert "<t1/>" in results[0].translated_text


def test_get_usage(deepl_translator: DeepLTranslator) -> None:
    """3. Usage: Reports the character quota of the account."""
    usage = deepl_translator.get_usage()

    assert usage.character is not None
    assert usage.character.limit > 0


def test_run_job_end_to_end(deepl_translator: DeepLTranslator, tmp_path: Path) -> None:
    """4. Workflow: Translates a small document and keeps its placeholders."""
    input_file = tmp_path / "en.json"
    input_file.write_text(json.dumps({"greeting": "Hello {{name}}", "nested": {"bye": "Goodbye"}}), encoding="utf-8")
    job = TranslationJob(input_path=input_file, output_path=tmp_path / "en.fr.json", source_lang="EN", target_lang="FR")

    context = run_job(job, deepl_translator)

    output = json.loads((tmp_path / "en.fr.json").read_text(encoding="utf-8"))
    assert context.is_written
    assert "{{name}}" in output["greeting"]
    assert set(output["nested"]) == {"bye"}
