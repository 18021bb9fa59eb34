#!/usr/bin/env python3
"""
dupsift CLI — Command line interface for duplicate file detection.
Read-only: files are grouped and reported, never modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import Optional, NoReturn, Tuple
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupsift import __version__
from dupsift.core.models import Algorithm, ScanParams, DuplicateReport, DeduplicationStats, StageEvent
from dupsift.commands import DeduplicationCommand
from dupsift.utils.convert_utils import ConvertUtils
from dupsift.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupsift",
            description="dupsift — Find duplicate files by name, size and content",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "root",
            type=str,
            help="Root directory to scan for duplicates"
        )

        parser.add_argument(
            "--min-size", "-m",
            default=1.0,
            type=float,
            metavar='MB',
            help="Only consider files larger than this many megabytes (e.g., 0.5, 10). Default: 1.0"
        )

        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default=Algorithm.NAME.value,
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress per-stage diagnostics"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and per-stage statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any traversal begins."""
        root_path = Path(args.root)
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.root}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.root}")

        if not ConvertUtils.is_valid_size_format(args.min_size):
            self.error_exit(f"Invalid minimum size: {args.min_size}")

        if args.algorithm not in ALGORITHM_ALIASES:
            self.error_exit(
                f"Invalid algorithm: '{args.algorithm}'.\n"
                f"Valid options: {', '.join(ALGORITHM_CHOICES)}"
            )

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_megabytes(
                root_dir=args.root,
                min_size_mb=args.min_size,
                algorithm=ALGORITHM_ALIASES[args.algorithm]
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def stage_listener(self, event: StageEvent) -> None:
        """Prints the surviving group count after every stage."""
        if not self.quiet:
            print(f"Found {event.groups_found} duplicate groups by {event.criterion}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def run_deduplication(self, params: ScanParams) -> Tuple[DuplicateReport, DeduplicationStats]:
        """Execute the scan, pipeline and aggregation."""
        command = DeduplicationCommand()
        try:
            report, stats = command.execute(
                params,
                stage_listener=self.stage_listener,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except RuntimeError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
        if not self.quiet:
            print()
        return report, stats

    @staticmethod
    def display_path(path: str) -> str:
        """Path as text stdout can always encode; undecodable filename bytes are replaced."""
        encoding = sys.stdout.encoding or "utf-8"
        text = os.fsencode(path).decode(encoding, "replace")
        return text.encode(encoding, "replace").decode(encoding)

    @staticmethod
    def output_results(report: DuplicateReport) -> None:
        """Print groups largest first, followed by the summary line."""
        for size, group in report.ordered():
            print(ConvertUtils.bytes_to_human(size))
            for file in group.files:
                print(CLIApplication.display_path(file.path))
            print()

        print(
            f"Found {report.group_count} duplicate groups occupying a space of "
            f"{ConvertUtils.bytes_to_human(report.total_size)}"
        )

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        args = self.parse_args(args)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("dupsift").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        report, stats = self.run_deduplication(params)
        self.output_results(report)

        if self.verbose:
            print("\n" + stats.print_summary())
            elapsed = time.time() - self.start_time
            print(f"\nCompleted in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
