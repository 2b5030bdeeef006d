"""File utility functions."""

import os
import tempfile
from pathlib import Path
from typing import Union

from loguru import logger


class FileError(Exception):
    """Base class for file-related errors."""


class FileWriteError(FileError):
    """Error writing to a file."""


class DocumentReadError(FileError):
    """Source document is missing, unreadable or not well-formed XML."""


def ensure_directory(path: Union[str, Path]) -> None:
    """Create directory if it doesn't exist.

    Args:
        path: Path to directory to create
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def write_file_atomic(path: Union[str, Path], content: str) -> None:
    """Write file atomically using a temporary file.

    The target either keeps its previous content or receives the complete new
    content; a partially written file is never left in place.

    Args:
        path: Path to write to
        content: Content to write

    Raises:
        FileWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        ensure_directory(path.parent)
        # Create temp file in same directory so the rename stays on one filesystem
        fd, temp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    except OSError as e:
        raise FileWriteError(f"Failed to write {path}: {e}") from e

    success = False
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        Path(temp_path).replace(path)
        success = True
    except OSError as e:
        logger.error(f"Failed to write file {path}: {e}")
        raise FileWriteError(f"Failed to write {path}: {e}") from e
    finally:
        if not success:
            try:
                Path(temp_path).unlink()
            except OSError:
                pass


def move_file(source: Union[str, Path], destination_dir: Union[str, Path]) -> Path:
    """Move a file into a directory, creating the directory if needed.

    Args:
        source: File to move
        destination_dir: Directory to move it into

    Returns:
        The new path of the file
    """
    source = Path(source)
    ensure_directory(destination_dir)
    destination = Path(destination_dir) / source.name
    source.replace(destination)
    return destination
