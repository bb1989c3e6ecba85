"""Staged output file: written line by line, then moved or destroyed."""

from __future__ import annotations

import os
from pathlib import Path
import shutil
from typing import TextIO

from loguru import logger

from orthopy.core.exceptions import SessionIOError
from orthopy.utils import ensure_parent_directory

COLLISION_SUFFIX = "+copy"


def with_extension(destination: str, extension: str) -> str:
    """Make sure ``destination`` ends with the source document's extension."""
    if extension and not destination.endswith(extension):
        return destination + extension
    return destination


def next_free_path(destination: Path) -> Path:
    """Append ``+copy`` to the file stem until the name is unused."""
    while destination.exists():
        name = destination.stem + COLLISION_SUFFIX + destination.suffix
        destination = destination.with_name(name)
    return destination


class StagedOutput:
    """Corrected lines are flushed here until the session exports them."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._writer: TextIO | None = None
        try:
            ensure_parent_directory(path)
            self._writer = open(path, "w", encoding="utf-8")
        except OSError as e:
            logger.error(f"✗ Could not open staging file {path}: {e}")
            raise SessionIOError(f"Failed to open staging file: {path}") from e

    def write_line(self, line: str) -> None:
        if self._writer is None:
            raise SessionIOError(f"Staging file is closed: {self.path}")
        try:
            self._writer.write(line)
            self._writer.write("\n")
            self._writer.flush()
        except OSError as e:
            logger.error(f"✗ Write to staging file {self.path} failed: {e}")
            raise SessionIOError(f"Failed to write staging file: {self.path}") from e

    def close(self) -> None:
        if self._writer is None:
            return
        try:
            self._writer.close()
        except OSError as e:
            logger.error(f"✗ Error closing staging file {self.path}: {e}")
            raise SessionIOError(f"Failed to close staging file: {self.path}") from e
        finally:
            self._writer = None

    def move_to(self, destination: str) -> str:
        """Close the staging file and move it to ``destination``.

        Returns:
            The path actually written, which differs from ``destination``
            when a file by that name already existed
        """
        self.close()
        target = Path(destination)
        while True:
            target = next_free_path(target)
            try:
                ensure_parent_directory(target)
                shutil.move(self.path, str(target))
            except FileExistsError:
                logger.warning(f"Destination {target} appeared during move, retrying")
                continue
            except OSError as e:
                logger.error(f"✗ File move failed: {self.path} -> {target}: {e}")
                raise SessionIOError(f"Failed to move output to {target}") from e
            logger.info(f"Output saved to {target}")
            return str(target)

    def destroy(self) -> None:
        """Close and delete the staging file."""
        self.close()
        try:
            os.remove(self.path)
        except OSError as e:
            logger.error(f"✗ Error destroying staging file {self.path}: {e}")
            raise SessionIOError(f"Failed to delete staging file: {self.path}") from e
        logger.debug(f"Staging file {self.path} removed")
