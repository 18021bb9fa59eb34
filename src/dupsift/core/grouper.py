"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements file grouping strategies using File objects and signature functions.
A single generic group_by serves every stage; keys may be str, int or bytes.
"""

import logging
from typing import List, Dict, Any, Callable, Optional, Hashable

from dupsift.core.interfaces import FileGrouper
from dupsift.core.models import File, DuplicateGroup
from dupsift.core.signatures import SignatureExtractor, FRONT_1K_LIMIT

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Uses an injected SignatureExtractor for flexibility and testability.
    """

    def __init__(self, signatures: SignatureExtractor = None):
        self.signatures = signatures or SignatureExtractor()

    def group_by_name(self, files: List[File]) -> List[DuplicateGroup]:
        """Groups files by their base name."""
        return self.group_by(files, self.signatures.by_name)

    def group_by_size(self, files: List[File]) -> List[DuplicateGroup]:
        """Groups files by their size on disk."""
        return self.group_by(files, self.signatures.by_size)

    def group_by_prefix_hash(self, files: List[File], byte_limit: int = FRONT_1K_LIMIT) -> List[DuplicateGroup]:
        """Groups files by the hash of their first byte_limit bytes."""
        return self.group_by(files, lambda f: self.signatures.by_prefix_hash(f, byte_limit))

    def group_by_full_hash(self, files: List[File]) -> List[DuplicateGroup]:
        """Groups files by full content hash."""
        return self.group_by(files, self.signatures.by_full_hash)

    def group_by(
        self,
        files: List[File],
        key_func: Callable[[File], Optional[Hashable]]
    ) -> List[DuplicateGroup]:
        """
        Partition files by any computed key.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a File, or None
        Returns:
            Groups with 2+ files, in order of first key appearance
        """
        return [
            DuplicateGroup(files=members)
            for members in self._group_by(files, key_func).values()
        ]

    @staticmethod
    def _group_by(files: List[File], key_func: Callable[[File], Any]) -> Dict[Any, List[File]]:
        """
        Helper method to group files by any computed key.
        Files whose key is None, or whose key_func raises OSError, are dropped.
        Returns:
            Dict[key, List[File]] without singleton entries
        """
        groups: Dict[Any, List[File]] = {}
        skipped_files = 0
        for file in files:
            try:
                key = key_func(file)
            except OSError as e:
                logger.debug(f"Error processing {file.path}: {e}")
                key = None

            if key is None:
                skipped_files += 1
                continue
            groups.setdefault(key, []).append(file)

        if skipped_files > 0:
            logger.warning(f"Skipped {skipped_files} files without a signature")

        # Avoid groups with less than 2 files
        return {key: group for key, group in groups.items() if len(group) >= 2}
