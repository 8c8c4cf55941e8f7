"""Flat text file storage for taskpal.

The file holds every task as a group of lines::

    <T|D|E> <done|not-done>
    <description>
    <yyyy-MM-dd HHmm>[-<HHmm>]     (deadlines and events only)

The whole file is rewritten after every change to the task list.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from .exceptions import StorageError, StorageMissingError

logger = logging.getLogger(__name__)


class Storage:
    """Reads and writes a single storage file."""

    def __init__(self, file_path: Union[str, Path]):
        self.file_path = Path(os.path.expanduser(str(file_path)))

    def get_storage_contents(self) -> List[str]:
        """Return the lines of the storage file, without line endings.

        Raises:
            StorageMissingError: If the file does not exist.
            StorageError: If the file exists but cannot be read.
        """
        if not self.file_path.exists():
            raise StorageMissingError(self.file_path)

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {self.file_path}: {e}")
            raise StorageError(f"Could not read {self.file_path}: {e}", self.file_path) from e

        logger.debug(f"Read {len(lines)} lines from {self.file_path}")
        return lines

    def write_to_storage(self, contents: str, append: bool = False) -> None:
        """Write ``contents`` to the storage file.

        Args:
            contents: Full text to write.
            append: Add to the end of the file instead of replacing it.

        Raises:
            StorageError: If the path cannot be written.
        """
        mode = "a" if append else "w"
        try:
            with open(self.file_path, mode, encoding="utf-8") as f:
                f.write(contents)
        except OSError as e:
            logger.error(f"Failed to write {self.file_path}: {e}")
            raise StorageError(f"Could not save tasks to {self.file_path}: {e}", self.file_path) from e

        logger.debug(f"Wrote {len(contents)} characters to {self.file_path} (append={append})")
