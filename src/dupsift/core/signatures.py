"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/signatures.py
Signature functions used by the pipeline stages.

Each function maps a File to a hashable key, or to None when the file cannot
be compared at that stage (the grouper then drops it).
"""

import os
import logging
from typing import Optional

from dupsift.core.models import File
from dupsift.core.interfaces import Hasher
from dupsift.core.hasher import HasherImpl

logger = logging.getLogger(__name__)

FRONT_1K_LIMIT = 1024
FRONT_4K_LIMIT = 4096
NO_LIMIT = 0


class SignatureExtractor:
    """
    Computes name, size and content signatures for files.
    Content signatures are delegated to an injected Hasher.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    @staticmethod
    def by_name(file: File) -> str:
        """Base name of the file (last path component)."""
        return file.name

    @staticmethod
    def by_size(file: File) -> Optional[int]:
        """Byte length from file metadata, None if metadata cannot be read."""
        try:
            return os.stat(file.path).st_size
        except OSError as e:
            logger.debug(f"Could not get size of {file.path}: {e}")
            return None

    def by_prefix_hash(self, file: File, byte_limit: int) -> Optional[bytes]:
        """SHA-1 over the first byte_limit bytes, or the whole file when byte_limit is 0."""
        return self.hasher.compute_prefix_hash(file, byte_limit)

    def by_full_hash(self, file: File) -> Optional[bytes]:
        return self.hasher.compute_full_hash(file)
