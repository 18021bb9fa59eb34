"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing utilities using the File class and pluggable hash algorithms.

HasherImpl computes digests over the first N bytes of a file, or over the whole
file when N is 0. Full reads are streamed in chunks.
"""

import hashlib
import logging
from typing import Callable, Optional

from dupsift.core.models import File
from dupsift.core.interfaces import Hasher, HashAlgorithm

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


# Use the same way to plug in any other hashlib-compatible algorithm
class Sha1AlgorithmImpl:
    @staticmethod
    def new() -> HashAlgorithm:
        return hashlib.sha1()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via a factory returning
    hashlib-like objects. Files that cannot be opened yield None.
    """

    def __init__(self, algorithm_factory: Callable[[], HashAlgorithm] = Sha1AlgorithmImpl.new):
        self.algorithm_factory = algorithm_factory

    def compute_prefix_hash(self, file: File, byte_limit: int) -> Optional[bytes]:
        """
        Digest of the first byte_limit bytes (0 means the whole file).
        Short files hash only the bytes present. Returns None only when the file
        cannot be opened; a read that fails midway keeps what was read so far.
        """
        if byte_limit < 0:
            raise ValueError(f"byte_limit cannot be negative: {byte_limit}")

        try:
            f = open(file.path, 'rb')
        except OSError as e:
            logger.debug(f"Error opening {file.path}: {e}")
            return None

        hasher = self.algorithm_factory()
        with f:
            try:
                if byte_limit > 0:
                    hasher.update(f.read(byte_limit))
                else:
                    for chunk in iter(lambda: f.read(READ_CHUNK_SIZE), b''):
                        hasher.update(chunk)
            except OSError as e:
                logger.debug(f"Read of {file.path} stopped early, hashing partial content: {e}")
        return hasher.digest()

    def compute_full_hash(self, file: File) -> Optional[bytes]:
        """Digest of the entire file content."""
        return self.compute_prefix_hash(file, 0)
