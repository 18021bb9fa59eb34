"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection system.
These protocols enforce structural typing using Python's `typing.Protocol` to keep
modules swappable and testable in isolation.

Key Components:
---------------
- HashAlgorithm: Incremental hash function interface (SHA-1 by default).
- Hasher: Computes prefix and full content digests of files.
- FileScanner: Scans directories and returns candidate files.
- FileGrouper: Partitions files into groups by a signature function.
- PipelineStage: One narrowing pass of the pipeline.
- Deduplicator: The engine running the configured stages.
"""

from typing import Protocol, List, Tuple, Optional, Callable, Hashable
from dupsift.core.models import (
    File,
    Algorithm,
    Stage,
    DuplicateGroup,
    DeduplicationStats,
)


# ===== Interfaces =====

class HashAlgorithm(Protocol):
    """
    Interface for incremental hash algorithms.

    Mirrors the hashlib object API so any hashlib constructor can back it.
    """
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class Hasher(Protocol):
    """Interface for hashing the leading bytes of a file."""
    def compute_prefix_hash(self, file: File, byte_limit: int) -> Optional[bytes]: ...
    def compute_full_hash(self, file: File) -> Optional[bytes]: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting candidates.
    """
    def scan(self) -> List[File]:
        """
        Scan files from the configured directory.

        Returns:
            List of files matching the size filter.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by a signature.

    Used by every stage of the pipeline to narrow potential duplicates.
    """
    def group_by(
        self,
        files: List[File],
        key_func: Callable[[File], Optional[Hashable]]
    ) -> List[DuplicateGroup]:
        """Group files by the key returned from key_func, dropping singletons."""
        ...


# =============================
# Stage Interfaces
# =============================


class PipelineStage(Protocol):
    """
    Interface for a single narrowing pass.

    Each implementation re-partitions every incoming group on its own
    signature and returns the flattened sub-groups.
    """

    stage: Stage

    def process(
        self,
        groups: List[DuplicateGroup],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[DuplicateGroup]:
        """
        Args:
            groups: Surviving groups from the previous stage.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            Refined groups, each with 2+ files.
        """
        ...


class Deduplicator(Protocol):
    """
    Interface for the main duplicate detection engine.

    Runs the stages selected by the algorithm and collects statistics.
    """
    def find_duplicates(
        self,
        files: List[File],
        algorithm: Algorithm,
        stats: Optional[DeduplicationStats] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Run the pipeline on the scanned files.

        Args:
            files: Candidates produced by the scanner.
            algorithm: Which stages run and in which order.
            stats: Optional pre-built stats object with listeners attached.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            A tuple containing:
                - Final candidate-duplicate groups
                - Statistics collected during processing
        """
        ...
