"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import math


class ConvertUtils:
    # (upper bound exclusive, divisor, suffix), base-1000
    SIZE_SCALES = [
        (1_000_000, 1_000, "Kb"),
        (1_000_000_000, 1_000_000, "Mb"),
    ]
    LARGEST_SCALE = (1_000_000_000, "Gb")

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to a base-1000 string with two decimals (e.g., 0.50Kb, 3.00Mb).
        Anything below 1,000,000 bytes is shown in Kb, anything from 1,000,000,000 up in Gb.
        """
        if size_bytes < 0:
            raise ValueError(f"Negative size not allowed: {size_bytes}")

        for upper_bound, divisor, suffix in ConvertUtils.SIZE_SCALES:
            if size_bytes < upper_bound:
                return f"{size_bytes / divisor:.2f}{suffix}"

        divisor, suffix = ConvertUtils.LARGEST_SCALE
        return f"{size_bytes / divisor:.2f}{suffix}"

    @staticmethod
    def megabytes_to_bytes(size_mb: float) -> int:
        """
        Convert a (possibly fractional) megabyte count to bytes, truncating.
        Negative values clamp to 0. Raises ValueError for non-numeric or non-finite values.
        """
        try:
            value = float(size_mb)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid numeric value in size: '{size_mb}'")

        if not math.isfinite(value):
            raise ValueError(f"Size must be a finite number: '{size_mb}'")
        return int(max(value, 0.0) * 1_000_000)

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        """
        Check if the input string is an acceptable megabyte value.
        """
        try:
            ConvertUtils.megabytes_to_bytes(size_str)
            return True
        except ValueError:
            return False
