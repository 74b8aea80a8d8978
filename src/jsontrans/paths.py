"""Default locations for the input, output, configuration and log files."""

from pathlib import Path
from typing import Final

CONFIG_FILE_NAME: Final[str] = "jsontrans.yaml"
DEBUG_LOG_FILE_NAME: Final[str] = "jsontrans_debug.log"


def find_default_input(directory: Path | None = None) -> Path | None:
    """
    Return the first file in ``directory`` (or CWD) whose name contains '.json'.

    Entries are checked in name order and directories are ignored.
    """
    root = directory or Path.cwd()
    for entry in sorted(root.iterdir()):
        if not entry.is_dir() and ".json" in entry.name:
            return entry
    return None


def default_output_path(input_path: Path, target_lang: str) -> Path:
    """
    Derive the output file name from the input name and the target language.

    The last extension is replaced, so 'en.json' becomes 'en.fr.json' for target 'FR'.
    """
    return input_path.with_name(f"{input_path.stem}.{target_lang.lower()}.json")


def find_config_file(directory: Path | None = None) -> Path | None:
    """Return the configuration file in ``directory`` (or CWD) if there is one."""
    candidate = (directory or Path.cwd()) / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


def get_debug_log_path(directory: Path | None = None) -> Path:
    """Return the path of the debug log file."""
    return (directory or Path.cwd()) / DEBUG_LOG_FILE_NAME
