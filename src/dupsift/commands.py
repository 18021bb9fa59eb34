"""
Unified command orchestrator for duplicate detection.
Single source of business logic for the CLI and for library callers.
"""
from typing import List, Optional, Callable, Tuple

from dupsift.core.models import DuplicateReport, DeduplicationStats, ScanParams, File, StageEvent
from dupsift.core.scanner import FileScannerImpl
from dupsift.core.deduplicator import DeduplicatorImpl
from dupsift.core.aggregator import ResultAggregator


class DeduplicationCommand:
    """
    Orchestrates the whole workflow:
    1. Scan the root directory for candidates above the minimum size
    2. Run the pipeline stages selected by the algorithm
    3. Aggregate the final groups into a size-keyed report

    Usage:
        params = ScanParams.from_megabytes("/data", 1.0, Algorithm.FULL_CONTENT)
        report, stats = DeduplicationCommand().execute(
            params,
            stage_listener=lambda event: print(event.criterion, event.groups_found)
        )
    """

    def __init__(self):
        self._deduplicator = DeduplicatorImpl()
        self._files: List[File] = []

    def execute(
            self,
            params: ScanParams,
            stage_listener: Optional[Callable[[StageEvent], None]] = None,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[DuplicateReport, DeduplicationStats]:
        """
        Execute duplicate detection with given parameters.

        Args:
            params: Validated scan parameters
            stage_listener: (event: StageEvent) -> None, called after every stage
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (report, statistics)

        Raises:
            RuntimeError: If the root directory cannot be scanned
        """
        # Step 1: Scan files
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            min_size=params.min_size_bytes
        )
        self._files = scanner.scan()

        # Step 2: Narrow candidates through the pipeline
        stats = DeduplicationStats()
        if stage_listener:
            stats.add_listener(stage_listener)

        groups, stats = self._deduplicator.find_duplicates(
            self._files,
            params.algorithm,
            stats=stats,
            progress_callback=progress_callback
        )

        # Step 3: Key by total size, largest first
        return ResultAggregator.aggregate(groups), stats

    def get_files(self) -> List[File]:
        """Get scanned files after execution."""
        return self._files.copy()  # Return copy to prevent external mutation
