"""Main entry point for the JsonTrans command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__, paths
from .config import JsonTransConfig, TranslationJob, load_config, resolve_api_key
from .errors import ConfigurationError, JsonTransError
from .logging_utils import setup_logging
from .translate import get_translator
from .translators import TRANSLATOR_MAPPING
from .translators.base import BaseTranslator
from .types import Formality
from .workflow import run_job

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the JsonTrans CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(
        prog="jsontrans",
        description="Translate the string values of a JSON file, keeping {{placeholders}} intact.",
    )
    parser.add_argument("-v", "--version", action="version", version=f"JsonTrans {__version__}", help="Show the version number and exit.")
    parser.add_argument("-i", "--input", help="Input JSON file (default: first *.json file in the current directory).")
    parser.add_argument("-o", "--output", help="Output file (default: input name with '.<target>.json').")
    parser.add_argument("-s", "--source", help="Source language code (default: detected by the provider).")
    parser.add_argument("-t", "--target", help="Target language code (default: FR).")
    parser.add_argument("-k", "--key", help="Provider API key (default: DEEPL_API_KEY environment variable).")
    parser.add_argument("-f", "--formal", action="store_true", help="Prefer a more formal register.")
    parser.add_argument("-p", "--properties", action="store_true", help="Translate object keys as well as values.")
    parser.add_argument("-c", "--confirm", action="store_true", help="Ask for confirmation before sending texts to the provider.")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug level logging.")
    parser.add_argument("-u", "--usagelimit", action="store_true", help="Show the provider usage before and after translating.")
    parser.add_argument("--provider", choices=sorted(TRANSLATOR_MAPPING), help="Translation provider (default: deepl).")
    parser.add_argument("--batch-size", type=int, help="Maximum number of texts per provider request (default: 49).")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be translated without calling the provider or writing files.")
    parser.add_argument("--config", help=f"YAML configuration file (default: {paths.CONFIG_FILE_NAME} in the current directory, if present).")
    return parser.parse_args(argv)


def _load_config(config_arg: str | None) -> JsonTransConfig:
    """Load the configuration file named on the command line, or the default one if it exists."""
    config_path = Path(config_arg) if config_arg else paths.find_config_file()
    if config_path is None:
        return JsonTransConfig()
    logger.info("Loading configuration from: %s", config_path)
    return load_config(config_path)


def _build_job(args: argparse.Namespace, config: JsonTransConfig) -> TranslationJob:
    """
    Combine command-line flags and configuration defaults into a job.

    Raises:
        ConfigurationError: If no input file was given or found.

    """
    input_path = Path(args.input) if args.input else paths.find_default_input()
    if input_path is None:
        msg = "At least specify input file with --input or -i."
        raise ConfigurationError(msg)

    provider = args.provider or config.provider
    target_lang = args.target or config.target_lang
    output_path = Path(args.output) if args.output else paths.default_output_path(input_path, target_lang)
    batch_size = args.batch_size if args.batch_size is not None else config.settings_for(provider).batch_size

    try:
        return TranslationJob(
            input_path=input_path,
            output_path=output_path,
            provider=provider,
            source_lang=args.source or config.source_lang,
            target_lang=target_lang,
            formality=Formality.from_flag(formal=args.formal or config.formal),
            translate_keys=args.properties or config.translate_keys,
            confirm=args.confirm,
            show_usage=args.usagelimit,
            dry_run=args.dry_run,
            batch_size=batch_size,
        )
    except ValidationError as e:
        msg = f"Invalid job settings: {e}"
        raise ConfigurationError(msg) from e


def _create_translator(job: TranslationJob, config: JsonTransConfig, cli_key: str | None) -> BaseTranslator | None:
    """Initialize the job's provider. Dry runs never contact a provider and get None."""
    if job.dry_run:
        return None
    settings = config.settings_for(job.provider)
    api_key = resolve_api_key(job.provider, cli_key, settings)
    return get_translator(job.provider, settings.model_copy(update={"api_key": api_key}))


def _log_job(job: TranslationJob, *, debug: bool) -> None:
    logger.info("Input file: %s", job.input_path)
    logger.info("Output file: %s", job.output_path)
    logger.info("Provider: %s", job.provider)
    logger.info("Source language: %s", job.source_lang or "Auto detect")
    logger.info("Target language: %s", job.target_lang)
    logger.info("Formality: %s", job.formality.value)
    logger.info("Translate properties: %s", job.translate_keys)
    logger.info("Show debug: %s", debug)
    logger.info("Show usage limit: %s", job.show_usage)


def main(argv: list[str] | None = None) -> None:
    """
    Run the main entry point for the JsonTrans command-line interface.

    Orchestrates the entire process:
    1. Parses command-line arguments and loads the configuration.
    2. Builds the job and the translator.
    3. Runs the translation pipeline.

    Exits with status 1 on any error; declining the confirmation prompt is not an error.
    """
    args = _parse_args(argv)
    setup_logging(version=__version__, debug=args.debug)

    try:
        config = _load_config(args.config)
        job = _build_job(args, config)
        translator = _create_translator(job, config, args.key)
        _log_job(job, debug=args.debug)
        context = run_job(job, translator, debug=args.debug)
    except JsonTransError as e:
        logger.critical("%s", e)
        sys.exit(1)
    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)

    if not context.is_aborted:
        logger.info("Done.")


if __name__ == "__main__":
    main()
