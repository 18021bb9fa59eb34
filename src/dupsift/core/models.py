"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and domain logic for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union, Callable, Tuple
import os
import logging
from enum import Enum

logger = logging.getLogger(__name__)


# =============================
# Enums
# =============================

class Stage(str, Enum):
    """
    Single pipeline pass. The value is the criterion text used in
    "Found N duplicate groups by <criterion>".
    """
    NAME = "name"
    SIZE = "size"
    FRONT_1K = "first 1024 bytes"
    FRONT_4K = "first 4096 bytes"
    FULL = "full content bytes"

    @property
    def key(self) -> str:
        """Short identifier used in statistics."""
        mapping = {
            Stage.NAME: "name",
            Stage.SIZE: "size",
            Stage.FRONT_1K: "front_1k",
            Stage.FRONT_4K: "front_4k",
            Stage.FULL: "full",
        }
        return mapping[self]

    @classmethod
    def get_all(cls):
        return [cls.NAME, cls.SIZE, cls.FRONT_1K, cls.FRONT_4K, cls.FULL]


class Algorithm(Enum):
    """
    Detection algorithm controlling which stages run and in which order.
    """
    NAME = "name"
    SIZE = "size"
    NAME_AND_SIZE = "name-and-size"
    FUZZY_CONTENT = "fuzzy-content"
    FULL_CONTENT = "full-content"

    @property
    def display_name(self) -> str:
        """Human-readable name for help output."""
        mapping = {
            Algorithm.NAME: "Name",
            Algorithm.SIZE: "Size",
            Algorithm.NAME_AND_SIZE: "Name + Size",
            Algorithm.FUZZY_CONTENT: "Fuzzy content",
            Algorithm.FULL_CONTENT: "Full content",
        }
        return mapping.get(self, self.value)

    @property
    def stages(self) -> List[Stage]:
        """Ordered stages enabled by this algorithm."""
        mapping = {
            Algorithm.NAME: [Stage.NAME],
            Algorithm.SIZE: [Stage.SIZE],
            Algorithm.NAME_AND_SIZE: [Stage.NAME, Stage.SIZE],
            Algorithm.FUZZY_CONTENT: [Stage.SIZE, Stage.FRONT_1K, Stage.FRONT_4K],
            Algorithm.FULL_CONTENT: [Stage.SIZE, Stage.FRONT_1K, Stage.FRONT_4K, Stage.FULL],
        }
        return list(mapping[self])

    @property
    def description(self) -> str:
        """Stage chain, e.g. 'Size → First 1024 bytes'."""
        return " → ".join(stage.value.capitalize() for stage in self.stages)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class File:
    """
    A regular file discovered by the scanner.
    Size is cached at discovery time; the object never changes afterwards.
    """
    path: str
    size: int  # in bytes
    name: Optional[str] = None

    def __post_init__(self):
        """Extract basename from path if not provided."""
        if self.name is None:
            object.__setattr__(self, "name", os.path.basename(self.path))

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Files sharing a signature at the current stage, in order of first appearance.
    """
    files: List[File]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def total_size(self) -> int:
        """Bytes occupied by all members together."""
        return sum(f.size for f in self.files)

    def __repr__(self):
        return f"<DuplicateGroup count={len(self.files)}, total={self.total_size}>"


@dataclass(frozen=True)
class StageEvent:
    """Published after every pipeline stage completes."""
    stage: Stage
    groups_found: int
    files_processed: int
    duration: float

    @property
    def criterion(self) -> str:
        return self.stage.value


class DeduplicationStats:
    """
    Statistics collected while the pipeline runs.
    Listeners receive a StageEvent after each completed stage.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}
        self._listeners: List[Callable[[StageEvent], None]] = []

    def add_listener(self, listener: Callable[[StageEvent], None]):
        """Adds a listener to receive an event when a stage completes."""
        self._listeners.append(listener)

    def update_stage(self, event: StageEvent) -> None:
        self.stage_stats[event.stage.key] = {
            "groups": event.groups_found,
            "files": event.files_processed,
            "time": event.duration,
        }

        for listener in self._listeners:
            listener(event)

    def print_summary(self) -> str:
        labels = {stage.key: stage.value.capitalize() for stage in Stage.get_all()}

        lines = [
            "Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage, stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


@dataclass
class DuplicateReport:
    """
    Final duplicate groups keyed by total group size.
    Two groups with an identical total collide; only the first one inserted is kept.
    """
    groups_by_size: Dict[int, DuplicateGroup] = field(default_factory=dict)

    def add(self, group: DuplicateGroup) -> bool:
        """Insert a group. Returns False when its total size is already taken."""
        size = group.total_size
        if size in self.groups_by_size:
            logger.debug(f"Dropping {group!r}: total size {size} already reported")
            return False
        self.groups_by_size[size] = group
        return True

    def ordered(self) -> List[Tuple[int, DuplicateGroup]]:
        """(total_size, group) pairs by descending total size."""
        return sorted(self.groups_by_size.items(), key=lambda item: item[0], reverse=True)

    @property
    def group_count(self) -> int:
        return len(self.groups_by_size)

    @property
    def total_size(self) -> int:
        return sum(self.groups_by_size.keys())


"""
DTO for scan parameters with built-in validation.
"""
from dupsift.utils.convert_utils import ConvertUtils

@dataclass
class ScanParams:
    """Parameters for a duplicate scan with validation."""
    root_dir: str
    min_size_bytes: int = 0
    algorithm: Algorithm = Algorithm.NAME

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

    @staticmethod
    def from_megabytes(
            root_dir: str,
            min_size_mb: float,
            algorithm: Algorithm = Algorithm.NAME,
    ) -> 'ScanParams':
        """
        Factory method to create params from the CLI's megabyte threshold.
        """
        return ScanParams(
            root_dir=root_dir,
            min_size_bytes=ConvertUtils.megabytes_to_bytes(min_size_mb),
            algorithm=algorithm,
        )
