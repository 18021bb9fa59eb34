"""
Core duplicate detection engine — scanner, signatures, grouper, stages and pipeline.

This package contains the foundation of dupsift:
- FileScannerImpl: recursive directory traversal with a minimum size filter
- HasherImpl + Sha1AlgorithmImpl: SHA-1 prefix and full content hashing
- SignatureExtractor: name, size and content signatures per file
- FileGrouperImpl: generic signature-based grouping with singleton filtering
- DeduplicatorImpl: multi-stage pipeline selected by Algorithm
- ResultAggregator: size-keyed report ordered by descending size

All components are pure Python and read-only.
"""

from .scanner import FileScannerImpl
from .hasher import HasherImpl, Sha1AlgorithmImpl
from .signatures import SignatureExtractor
from .grouper import FileGrouperImpl
from .stages import NameStage, SizeStage, PrefixHashStage, FullHashStage, build_stage
from .deduplicator import DeduplicatorImpl
from .aggregator import ResultAggregator
from .models import (
    File, DuplicateGroup, DuplicateReport, Algorithm, Stage, StageEvent,
    DeduplicationStats, ScanParams)

__all__ = [
    "FileScannerImpl",
    "HasherImpl",
    "Sha1AlgorithmImpl",
    "SignatureExtractor",
    "FileGrouperImpl",
    "NameStage",
    "SizeStage",
    "PrefixHashStage",
    "FullHashStage",
    "build_stage",
    "DeduplicatorImpl",
    "ResultAggregator",
    "File",
    "DuplicateGroup",
    "DuplicateReport",
    "Algorithm",
    "Stage",
    "StageEvent",
    "DeduplicationStats",
    "ScanParams",
]
