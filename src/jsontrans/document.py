"""Reading and writing whole JSON documents."""

import json
import logging
import tempfile
from pathlib import Path

from .errors import ConfigurationError
from .types import JsonValue

logger = logging.getLogger(__name__)


def load_document(path: Path) -> JsonValue:
    """
    Read and parse a JSON file.

    Raises:
        ConfigurationError: If the file does not exist or does not contain valid JSON.

    """
    if not path.is_file():
        msg = f"Input file not found: {path}"
        raise ConfigurationError(msg)

    try:
        # utf-8-sig also accepts files saved with a byte order mark.
        text = path.read_text(encoding="utf-8-sig")
        document = json.loads(text)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read input file {path}: {e}"
        raise ConfigurationError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Input file {path} is not valid JSON: {e}"
        raise ConfigurationError(msg) from e

    logger.debug("Loaded %d characters of JSON from %s", len(text), path)
    return document


def dump_document(document: JsonValue) -> str:
    """Serialize a document compactly, keeping non-ASCII characters as they are."""
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def write_document(path: Path, document: JsonValue) -> None:
    """
    Serialize ``document`` and write it to ``path`` in one go.

    The content goes to a temporary file in the same directory first and is then
    moved over ``path``, so a failed write never leaves a truncated output file.
    """
    content = dump_document(document)
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(mode="w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False) as temp_f:
            temp_path = Path(temp_f.name)
            temp_f.write(content)
        temp_path.replace(path)
    except OSError:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise

    logger.info("Successfully wrote %d characters to %s", len(content), path)
