"""Reading JSON files from disk and writing results back out."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from ..config import LoaderConfig
from ..exceptions import FileLoadError, JsonParseError
from .parser import parse

logger = logging.getLogger(__name__)


def load_json_file(
    path: str | Path,
    config: LoaderConfig | None = None,
    validate: bool = True,
) -> str:
    """Read a JSON file as text.

    Files above `config.max_file_size` are refused before anything is read.
    Files above `config.large_file_size` are read in `config.chunk_size`
    pieces instead of one call.

    Args:
        path: File to read.
        config: Size limits. Defaults to LoaderConfig.from_env().
        validate: Check that the content parses as JSON.

    Returns:
        The file content.

    Raises:
        FileLoadError: If the file is too large, unreadable or not JSON.
    """
    config = config or LoaderConfig.from_env()
    file_path = Path(path)

    try:
        size = file_path.stat().st_size
    except OSError as e:
        raise FileLoadError("Failed to load file", details={"path": str(path), "error": e}) from e

    if size > config.max_file_size:
        raise FileLoadError(
            "File too large",
            details={"size": size, "max_size": config.max_file_size},
        )

    try:
        if size > config.large_file_size:
            logger.debug("Reading %s in chunks (%d bytes)", file_path, size)
            text = _read_chunked(file_path, config.chunk_size)
        else:
            text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadError("Failed to load file", details={"path": str(path), "error": e}) from e

    if validate:
        try:
            parse(text)
        except JsonParseError as e:
            raise FileLoadError("Invalid JSON file", details={"error": e.message}) from e
    return text


def _read_chunked(path: Path, chunk_size: int) -> str:
    chunks: list[str] = []
    with path.open("r", encoding="utf-8") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            chunks.append(chunk)
    return "".join(chunks)


def default_filename() -> str:
    return f"formatted_json_{int(time.time() * 1000)}.json"


def save_json(text: str, path: str | Path | None = None) -> Path:
    """Write JSON text to `path`, or to a timestamped file in the cwd.

    Returns:
        The path written.
    """
    target = Path(path) if path else Path(default_filename())
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d chars to %s", len(text), target)
    return target
