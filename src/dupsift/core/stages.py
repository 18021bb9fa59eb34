"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages for dupsift's multi-stage duplicate detection engine.

CLASS HIERARCHY
---------------
StageBase        : Shared process() loop: re-partition each group, flatten results
NameStage        : Groups by base name
SizeStage        : Groups by size read from file metadata
PrefixHashStage  : Groups by SHA-1 of the first N bytes (1024 or 4096)
FullHashStage    : Groups by SHA-1 of the entire content

STAGE CONTRACTS
---------------
Each stage implements a consistent `process()` interface that:
  • Accepts candidate groups from the previous stage
  • Partitions every group independently on the stage's signature
  • Returns the flattened sub-groups, each holding 2+ files
  • Reports progress via callback (stage name, processed count, total count)

A stage never moves a file into a group it did not share with its
siblings before, so every stage output refines its input.
"""

from typing import List, Optional, Callable

from dupsift.core.models import File, DuplicateGroup, Stage
from dupsift.core.grouper import FileGrouperImpl
from dupsift.core.interfaces import PipelineStage
from dupsift.core.signatures import FRONT_1K_LIMIT, FRONT_4K_LIMIT


# =============================
# Base Class
# =============================
class StageBase(PipelineStage):
    """
    Abstract base class for all stages.
    Subclasses set `stage` and implement _group_files.
    """
    stage: Stage

    def __init__(self, grouper: FileGrouperImpl):
        self.grouper = grouper

    def get_stage_name(self) -> str:
        """Criterion text used for statistics and reporting."""
        return self.stage.value

    def _group_files(self, files: List[File]) -> List[DuplicateGroup]:
        """
        Partitions one batch of files on this stage's signature.

        Args:
            files (List[File]): Members of one surviving group.

        Returns:
            List[DuplicateGroup]: Sub-groups with 2+ files.
        """
        raise NotImplementedError

    def process(
        self,
        groups: List[DuplicateGroup],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[DuplicateGroup]:
        """
        Re-partitions every incoming group and flattens the results.
        """
        refined_groups = []
        total_files = sum(len(group.files) for group in groups)
        processed_files = 0

        for group in groups:
            refined_groups.extend(self._group_files(group.files))

            processed_files += len(group.files)
            if progress_callback:
                progress_callback(self.get_stage_name(), processed_files, total_files)

        return refined_groups


# =============================
# Individual Stages
# =============================
class NameStage(StageBase):
    stage = Stage.NAME

    def _group_files(self, files: List[File]) -> List[DuplicateGroup]:
        return self.grouper.group_by_name(files)


class SizeStage(StageBase):
    stage = Stage.SIZE

    def _group_files(self, files: List[File]) -> List[DuplicateGroup]:
        return self.grouper.group_by_size(files)


class PrefixHashStage(StageBase):
    """Groups by the digest of the leading byte_limit bytes."""

    LIMITS = {
        Stage.FRONT_1K: FRONT_1K_LIMIT,
        Stage.FRONT_4K: FRONT_4K_LIMIT,
    }

    def __init__(self, grouper: FileGrouperImpl, stage: Stage = Stage.FRONT_1K):
        super().__init__(grouper)
        if stage not in self.LIMITS:
            raise ValueError(f"Not a prefix hash stage: {stage!r}")
        self.stage = stage
        self.byte_limit = self.LIMITS[stage]

    def _group_files(self, files: List[File]) -> List[DuplicateGroup]:
        return self.grouper.group_by_prefix_hash(files, self.byte_limit)


class FullHashStage(StageBase):
    stage = Stage.FULL

    def _group_files(self, files: List[File]) -> List[DuplicateGroup]:
        return self.grouper.group_by_full_hash(files)


def build_stage(stage: Stage, grouper: FileGrouperImpl) -> StageBase:
    """Instantiates the stage implementation for a Stage value."""
    if stage == Stage.NAME:
        return NameStage(grouper)
    if stage == Stage.SIZE:
        return SizeStage(grouper)
    if stage in (Stage.FRONT_1K, Stage.FRONT_4K):
        return PrefixHashStage(grouper, stage)
    if stage == Stage.FULL:
        return FullHashStage(grouper)
    raise ValueError(f"Unknown stage: {stage!r}")
