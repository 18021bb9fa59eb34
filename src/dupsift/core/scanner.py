"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file scanning functionality using pathlib and os.walk.
Features:
- Recursively scans directories in sorted order (stable output across runs)
- Keeps regular files only; symbolic links are not followed
- Applies the minimum size filter (strictly greater than the threshold)
- Skips entries that cannot be read instead of failing the scan
"""

import os
import stat
import time
import logging
from typing import List, Optional
from pathlib import Path

logger = logging.getLogger(__name__)

# Local imports
from dupsift.core.models import File
from dupsift.core.interfaces import FileScanner


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and keeps regular files larger than min_size.

    Attributes:
        root_dir: Root directory to scan
        min_size: Files must be strictly larger than this many bytes
    """

    def __init__(self, root_dir: str, min_size: int = 0):
        self.root_dir = root_dir
        self.min_size = min_size

    def scan(self) -> List[File]:
        """
        Single-pass scanner. Returns the candidate files found in the directory tree.
        """
        logger.debug(f"Root directory: {self.root_dir}, min_size={self.min_size}")

        found_files = []
        root_path = Path(self.root_dir)

        # Validate root directory exists and is accessible
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            dirs.sort()
            for filename in sorted(files):
                file_info = self._process_file(Path(root) / filename)
                if file_info:
                    found_files.append(file_info)

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan completed in {elapsed_time:.2f} seconds. Found {len(found_files)} matching files.")

        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable entry: {error}")

    def _process_file(self, path: Path) -> Optional[File]:
        """
        Process an individual file path and return a File if it passes all filters.
        Args:
            path: Path object pointing to the file
        Returns:
            Optional[File]: File object if it passes filters, else None
        """
        try:
            # lstat: a symlink is never a regular file here
            stat_result = path.lstat()
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        size = stat_result.st_size
        if size <= self.min_size:
            logger.debug(f"Skipping {path} (size {size} bytes not above {self.min_size})")
            return None

        return File(path=str(path), size=size)
