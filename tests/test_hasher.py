"""
Unit tests for HasherImpl and SignatureExtractor.
Verifies SHA-1 prefix/full hashing, short reads, failed reads and unreadable files.
"""
import hashlib
import io
from unittest import mock

import pytest
from dupsift.core.hasher import HasherImpl, Sha1AlgorithmImpl, READ_CHUNK_SIZE
from dupsift.core.signatures import SignatureExtractor
from dupsift.core.models import File


def make_file(path) -> File:
    return File(path=str(path), size=path.stat().st_size)


class TestHasherImpl:
    """Test SHA-1 computation over bounded and unbounded prefixes."""

    def test_same_content_produces_same_full_hash(self, tmp_path):
        """Identical files must produce identical 20-byte digests."""
        content = b"test content " * 1000
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(content)
        f2.write_bytes(content)

        hasher = HasherImpl(Sha1AlgorithmImpl.new)
        hash1 = hasher.compute_full_hash(make_file(f1))
        hash2 = hasher.compute_full_hash(make_file(f2))

        assert hash1 == hash2
        assert isinstance(hash1, bytes)
        assert len(hash1) == 20  # SHA-1 = 160 bits
        assert hash1 == hashlib.sha1(content).digest()

    def test_prefix_hash_covers_only_limit(self, tmp_path):
        """Bytes beyond the limit must not influence the prefix digest."""
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(b"S" * 1024 + b"tail-one")
        f2.write_bytes(b"S" * 1024 + b"tail-two")

        hasher = HasherImpl()
        assert hasher.compute_prefix_hash(make_file(f1), 1024) == hasher.compute_prefix_hash(make_file(f2), 1024)
        assert hasher.compute_prefix_hash(make_file(f1), 1024) == hashlib.sha1(b"S" * 1024).digest()
        assert hasher.compute_full_hash(make_file(f1)) != hasher.compute_full_hash(make_file(f2))

    def test_short_file_hashes_only_bytes_present(self, tmp_path):
        """A file shorter than the limit is hashed as-is, without padding."""
        path = tmp_path / "short.txt"
        path.write_bytes(b"hello")

        digest = HasherImpl().compute_prefix_hash(make_file(path), 4096)
        assert digest == hashlib.sha1(b"hello").digest()

    def test_empty_file_hashes_zero_bytes(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        hasher = HasherImpl()
        empty_digest = hashlib.sha1(b"").digest()
        assert hasher.compute_prefix_hash(make_file(path), 1024) == empty_digest
        assert hasher.compute_full_hash(make_file(path)) == empty_digest

    def test_zero_limit_reads_whole_large_file(self, tmp_path):
        """Limit 0 streams the entire file across several read chunks."""
        content = bytes(range(256)) * 1024  # 256 KiB
        path = tmp_path / "large.bin"
        path.write_bytes(content)

        assert HasherImpl().compute_prefix_hash(make_file(path), 0) == hashlib.sha1(content).digest()

    def test_missing_file_returns_none(self, tmp_path):
        missing = File(path=str(tmp_path / "gone.bin"), size=10)
        hasher = HasherImpl()
        assert hasher.compute_prefix_hash(missing, 1024) is None
        assert hasher.compute_full_hash(missing) is None

    def test_read_failure_after_open_hashes_bytes_read(self, tmp_path):
        """A read error midway keeps the digest of the chunks already consumed."""

        class FailingReader(io.BytesIO):
            def read(self, size=-1):
                if self.tell() > 0:
                    raise OSError("Input/output error")
                return super().read(size)

        path = tmp_path / "flaky.bin"
        path.write_bytes(b"x" * 10)
        reader = FailingReader(b"a" * READ_CHUNK_SIZE + b"b" * 10)

        with mock.patch("dupsift.core.hasher.open", create=True, return_value=reader):
            digest = HasherImpl().compute_full_hash(make_file(path))

        assert digest == hashlib.sha1(b"a" * READ_CHUNK_SIZE).digest()
        assert reader.closed

    def test_read_failure_on_prefix_hashes_empty_content(self, tmp_path):
        class BrokenReader(io.BytesIO):
            def read(self, size=-1):
                raise OSError("Input/output error")

        path = tmp_path / "broken.bin"
        path.write_bytes(b"x" * 10)

        with mock.patch("dupsift.core.hasher.open", create=True, return_value=BrokenReader()):
            digest = HasherImpl().compute_prefix_hash(make_file(path), 1024)

        assert digest == hashlib.sha1(b"").digest()

    def test_negative_limit_rejected(self, tmp_path):
        path = tmp_path / "f.bin"
        path.write_bytes(b"x")
        with pytest.raises(ValueError):
            HasherImpl().compute_prefix_hash(make_file(path), -1)

    def test_custom_algorithm_factory(self, tmp_path):
        """Any hashlib-compatible constructor can replace SHA-1."""
        path = tmp_path / "f.bin"
        path.write_bytes(b"payload")
        digest = HasherImpl(hashlib.sha256).compute_full_hash(make_file(path))
        assert digest == hashlib.sha256(b"payload").digest()


class TestSignatureExtractor:
    """Test name/size/content signature functions."""

    def test_by_name_returns_basename(self):
        assert SignatureExtractor.by_name(File(path="/some/dir/photo.jpg", size=1)) == "photo.jpg"

    def test_by_size_reads_metadata(self, tmp_path):
        path = tmp_path / "f.bin"
        path.write_bytes(b"12345")
        # Cached size is deliberately wrong: the signature comes from metadata
        assert SignatureExtractor.by_size(File(path=str(path), size=999)) == 5

    def test_by_size_missing_file_returns_none(self, tmp_path):
        assert SignatureExtractor.by_size(File(path=str(tmp_path / "nope"), size=5)) is None

    def test_by_prefix_hash_delegates_to_hasher(self, tmp_path):
        path = tmp_path / "f.bin"
        path.write_bytes(b"abcdef")
        extractor = SignatureExtractor()
        assert extractor.by_prefix_hash(make_file(path), 3) == hashlib.sha1(b"abc").digest()
        assert extractor.by_full_hash(make_file(path)) == hashlib.sha1(b"abcdef").digest()
