"""Tests for the processor pipeline run by run_job."""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from jsontrans.config import TranslationJob
from jsontrans.errors import ConfigurationError, IntegrityError, ProviderError
from jsontrans.models import ExecutionContext
from jsontrans.processing import Processor
from jsontrans.translators.base import BaseTranslator, TranslationResult
from jsontrans.translators.mock_translator import MockTranslator
from jsontrans.workflow import run_job

SOURCE_DOCUMENT = {
    "greeting": "Hello {{name}}",
    "farewell": "Bye {{name}}",
    "count": 2,
    "items": ["apple", "apple", None],
}


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Write the source document to a temporary en.json."""
    path = tmp_path / "en.json"
    path.write_text(json.dumps(SOURCE_DOCUMENT), encoding="utf-8")
    return path


def _job(input_file: Path, **kwargs: object) -> TranslationJob:
    return TranslationJob(input_path=input_file, output_path=input_file.with_name("en.fr.json"), provider="mock", **kwargs)


def test_run_job_writes_translated_document(input_file: Path) -> None:
    """A full run translates distinct strings once and writes compact JSON."""
    translator = MockTranslator()

    context = run_job(_job(input_file), translator)

    output = input_file.with_name("en.fr.json")
    assert context.is_written
    assert json.loads(output.read_text(encoding="utf-8")) == {
        "greeting": "[MOCK] Hello {{name}}",
        "farewell": "[MOCK] Bye {{name}}",
        "count": 2,
        "items": ["[MOCK] apple", "[MOCK] apple", None],
    }
    assert "\n" not in output.read_text(encoding="utf-8")
    assert translator.calls == [["Hello <t0/>", "Bye <t0/>", "apple"]]
    assert context.stats.total_entries == 3  # noqa: PLR2004
    assert context.stats.placeholder_entries == 2  # noqa: PLR2004
    assert context.stats.batch_count == 1
    assert context.stats.translated_entries == 3  # noqa: PLR2004


def test_run_job_respects_batch_size(input_file: Path) -> None:
    """Smaller batches are sent one after another."""
    translator = MockTranslator()

    context = run_job(_job(input_file, batch_size=2), translator)

    assert translator.calls == [["Hello <t0/>", "Bye <t0/>"], ["apple"]]
    assert context.stats.batch_count == 2  # noqa: PLR2004


def test_declined_confirmation_writes_nothing(input_file: Path) -> None:
    """Answering no stops the run before any provider call."""
    translator = MockTranslator()
    asked: list[str] = []

    def ask(question: str) -> bool:
        asked.append(question)
        return False

    context = run_job(_job(input_file, confirm=True), translator, ask=ask)

    assert asked == ["Do you want to continue?"]
    assert context.is_aborted
    assert translator.calls == []
    assert not input_file.with_name("en.fr.json").exists()


def test_accepted_confirmation_continues(input_file: Path) -> None:
    """Answering yes runs the translation as usual."""
    context = run_job(_job(input_file, confirm=True), MockTranslator(), ask=lambda _question: True)

    assert context.is_written


def test_confirmation_not_asked_by_default(input_file: Path) -> None:
    """Without --confirm no prompt is shown."""
    ask = MagicMock(return_value=False)

    run_job(_job(input_file), MockTranslator(), ask=ask)

    ask.assert_not_called()


def test_provider_failure_writes_nothing(input_file: Path) -> None:
    """A provider error propagates and leaves no output file behind."""
    with pytest.raises(ProviderError, match="configured to fail"):
        run_job(_job(input_file), MockTranslator(return_error=True))

    assert not input_file.with_name("en.fr.json").exists()


def test_response_mismatch_writes_nothing(input_file: Path) -> None:
    """A short provider response is an integrity failure and nothing is written."""
    translator = MagicMock(spec=BaseTranslator)
    translator.translate.return_value = [TranslationResult("only one")]

    with pytest.raises(IntegrityError):
        run_job(_job(input_file), translator)

    assert not input_file.with_name("en.fr.json").exists()


def test_missing_input_file(tmp_path: Path) -> None:
    """A missing input file is a configuration error."""
    with pytest.raises(ConfigurationError, match="Input file not found"):
        run_job(_job(tmp_path / "missing.json"), MockTranslator())


def test_dry_run_makes_no_calls(input_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A dry run plans batches but neither translates nor writes."""
    with caplog.at_level(logging.INFO):
        context = run_job(_job(input_file, dry_run=True), None)

    assert context.stats.batch_count == 1
    assert context.batches == [["Hello <t0/>", "Bye <t0/>", "apple"]]
    assert not context.is_reconstructed
    assert not input_file.with_name("en.fr.json").exists()
    assert "No API calls were made and no file was written." in caplog.text


def test_empty_document_needs_no_call(tmp_path: Path) -> None:
    """A document without strings is written without contacting the provider."""
    path = tmp_path / "en.json"
    path.write_text('{"a": 1, "b": [true, null]}', encoding="utf-8")
    translator = MockTranslator()

    context = run_job(_job(path), translator)

    assert translator.calls == []
    assert context.is_written
    assert json.loads(path.with_name("en.fr.json").read_text(encoding="utf-8")) == {"a": 1, "b": [True, None]}


def test_usage_is_reported_before_and_after(input_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    """With show_usage the quota is logged around the run."""
    with caplog.at_level(logging.INFO):
        run_job(_job(input_file, show_usage=True), MockTranslator())

    usage_lines = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Characters: ")]
    assert usage_lines == ["Characters: 0 of 500000", "Characters: 25 of 500000"]


def test_dry_run_does_not_ask_for_confirmation(input_file: Path) -> None:
    """A dry run sends nothing, so --confirm does not prompt."""
    ask = MagicMock(return_value=False)

    context = run_job(_job(input_file, dry_run=True, confirm=True), None, ask=ask)

    ask.assert_not_called()
    assert not context.is_aborted
    assert context.stats.batch_count == 1
    assert not input_file.with_name("en.fr.json").exists()


def test_processor_requires_process() -> None:
    """Pipeline stages must implement process()."""
    with pytest.raises(TypeError):
        Processor()  # type: ignore[abstract]

    class MarkAborted(Processor):
        def process(self, context: ExecutionContext) -> None:
            context.is_aborted = True

    context = ExecutionContext(job=_job(Path("en.json")))
    MarkAborted().process(context)
    assert context.is_aborted
