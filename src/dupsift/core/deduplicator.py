"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements a pipeline-based duplicate detection system using File objects.
Supports five algorithms:
    - name: name
    - size: size
    - name-and-size: name → size
    - fuzzy-content: size → first 1024 bytes → first 4096 bytes
    - full-content: size → first 1024 bytes → first 4096 bytes → full content
"""
import time
import logging
from typing import List, Tuple, Optional, Callable

from dupsift.core.models import File, DuplicateGroup, DeduplicationStats, Algorithm, StageEvent
from dupsift.core.grouper import FileGrouperImpl
from dupsift.core.interfaces import Deduplicator
from dupsift.core.stages import StageBase, build_stage

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Implements multi-stage duplicate detection using a pipeline architecture.
    Publishes a StageEvent through the stats object after every stage.
    """
    def __init__(self, grouper=None):
        self.grouper = grouper or FileGrouperImpl()

    def find_duplicates(
        self,
        files: List[File],
        algorithm: Algorithm,
        stats: Optional[DeduplicationStats] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[List[DuplicateGroup], DeduplicationStats]:
        """
        Main duplicate detection pipeline.
        Args:
            files: List of scanned file objects
            algorithm: Which stages run and in which order
            stats: Stats object to publish to (listeners already attached), created if None
            progress_callback: Reports per-group progress inside each stage
        Returns:
            Tuple[List[DuplicateGroup], DeduplicationStats]
        """
        stats = stats if stats is not None else DeduplicationStats()
        total_start_time = time.time()

        # The whole candidate set enters the first stage as a single batch
        groups = [DuplicateGroup(files=list(files))]

        for stage in self._build_pipeline(algorithm):
            start_time = time.time()
            groups = stage.process(groups, progress_callback=progress_callback)
            duration = time.time() - start_time

            logger.debug(f"{stage.get_stage_name()}: {len(groups)} groups in {duration:.3f}s")
            DeduplicatorImpl._update_stats(stats, stage, duration, groups)

        stats.total_time = time.time() - total_start_time

        return groups, stats

    def _build_pipeline(self, algorithm: Algorithm) -> List[StageBase]:
        """Builds the ordered stage list for the algorithm."""
        return [build_stage(stage, self.grouper) for stage in algorithm.stages]

    @staticmethod
    def _update_stats(
        stats: DeduplicationStats,
        stage: StageBase,
        duration: float,
        groups: List[DuplicateGroup]
    ):
        """
        Helper to publish a StageEvent for the surviving groups.
        """
        stats.update_stage(StageEvent(
            stage=stage.stage,
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups),
            duration=duration
        ))
