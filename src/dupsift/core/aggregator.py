"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/aggregator.py
Turns the pipeline's final groups into a DuplicateReport ordered by occupied space.
"""
from typing import Iterable

from dupsift.core.models import DuplicateGroup, DuplicateReport


class ResultAggregator:
    """
    Keys every final group by its total size.
    A later group whose total equals an earlier one is dropped (first inserted wins).
    """

    @staticmethod
    def aggregate(groups: Iterable[DuplicateGroup]) -> DuplicateReport:
        report = DuplicateReport()
        for group in groups:
            report.add(group)
        return report
