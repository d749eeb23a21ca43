"""Upload gate for dashboard datasets.

Only plain-text formats are forwarded to the model. The extension check
runs before the file is read and before any model call is attempted.
"""

from pathlib import Path

from .errors import UnsupportedFileError

SUPPORTED_EXTENSIONS = frozenset({".csv", ".json", ".txt", ".md"})


def is_supported_file(filename: str | Path) -> bool:
    """Check whether the file name has a supported extension (case-insensitive)."""
    return Path(filename).suffix.lower() in SUPPORTED_EXTENSIONS


def ensure_supported_file(filename: str | Path) -> None:
    """Reject file names the dashboard generator cannot read.

    Raises:
        UnsupportedFileError: If the extension is not one of SUPPORTED_EXTENSIONS
    """
    if not is_supported_file(filename):
        raise UnsupportedFileError(
            "Please upload a supported text format (CSV, JSON, TXT, MD)."
        )


def read_dataset(path: str | Path) -> str:
    """Read an uploaded dataset as text after passing the extension gate.

    Raises:
        UnsupportedFileError: If the extension is not supported or the
            file cannot be read as UTF-8 text
    """
    file_path = Path(path)
    ensure_supported_file(file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnsupportedFileError(f"Failed to read file: {e}") from e
