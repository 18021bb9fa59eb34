"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupsift' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir(tmp_path):
    """Isolated temporary directory, auto-cleanup by pytest."""
    return tmp_path


@pytest.fixture
def hello_tree(temp_dir) -> Dict[str, Path]:
    """
    Three 5-byte files with identical content:
    - a/x.txt and b/x.txt share a name
    - c/y.txt only shares content
    """
    files = {}
    for key, rel in (("a_x", "a/x.txt"), ("b_x", "b/x.txt"), ("c_y", "c/y.txt")):
        path = temp_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"hello")
        files[key] = path
    return files


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for pipeline scenarios:
    - 3 identical 1KB files (one in a subdirectory)
    - 2 identical 2KB files
    - 2 same-size 3KB files differing in the first byte
    - 2 same-size 8KB files sharing the first 4096 bytes, differing at the end
    - 1 unique file and 1 empty file
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["front_diff_a"] = temp_dir / "front_diff_a.bin"
    files["front_diff_b"] = temp_dir / "front_diff_b.bin"
    files["front_diff_a"].write_bytes(b"X" + b"C" * 3071)
    files["front_diff_b"].write_bytes(b"Y" + b"C" * 3071)

    prefix = b"P" * 4096
    files["tail_diff_a"] = temp_dir / "tail_diff_a.bin"
    files["tail_diff_b"] = temp_dir / "tail_diff_b.bin"
    files["tail_diff_a"].write_bytes(prefix + b"1" * 4096)
    files["tail_diff_b"].write_bytes(prefix + b"2" * 4096)

    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"D" * 1500)

    files["empty"] = temp_dir / "empty.txt"
    files["empty"].write_bytes(b"")

    return files
