"""Tests for size measurement and formatting."""

import os
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from storage_audit.sizing import (
    GIB,
    KIB,
    MIB,
    allocated_size,
    format_size,
    get_directory_size,
    measure_path,
)


class TestAllocatedSize:
    def test_uses_blocks(self):
        st = SimpleNamespace(st_blocks=8, st_size=100)
        assert allocated_size(st) == 4096

    def test_sparse_file_reports_blocks_not_length(self):
        st = SimpleNamespace(st_blocks=0, st_size=10 * MIB)
        assert allocated_size(st) == 0

    def test_falls_back_to_size_without_blocks(self):
        st = SimpleNamespace(st_size=1234)
        assert allocated_size(st) == 1234


class TestMeasurePath:
    def test_nonexistent_path(self, tmp_path):
        assert measure_path(tmp_path / "missing") == 0

    def test_nonexistent_string_path(self):
        assert measure_path("/nonexistent/path/for/storage-audit") == 0

    def test_empty_directory(self, tmp_path):
        assert measure_path(tmp_path) == 0

    def test_single_file(self, tmp_path):
        target = tmp_path / "data.bin"
        target.write_bytes(os.urandom(64 * KIB))
        assert measure_path(target) == allocated_size(target.stat())

    def test_directory_sums_files(self, tmp_path):
        files = []
        for name in ["a.bin", "sub/b.bin", "sub/deeper/c.bin"]:
            target = tmp_path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(os.urandom(16 * KIB))
            files.append(target)

        expected = sum(allocated_size(f.stat()) for f in files)
        assert measure_path(tmp_path) == expected

    def test_hard_links_counted_once(self, tmp_path):
        original = tmp_path / "original.bin"
        original.write_bytes(os.urandom(32 * KIB))
        os.link(original, tmp_path / "link.bin")

        assert measure_path(tmp_path) == allocated_size(original.stat())

    def test_symlinks_not_followed(self, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "big.bin").write_bytes(os.urandom(64 * KIB))

        measured = tmp_path / "measured"
        measured.mkdir()
        link = measured / "link"
        link.symlink_to(outside, target_is_directory=True)

        # Only the link itself is counted, never the directory it points to
        assert measure_path(measured) == allocated_size(os.lstat(link))

    def test_permission_error_returns_zero(self, tmp_path):
        (tmp_path / "file.txt").write_text("data")
        with patch("storage_audit.sizing.os.scandir", side_effect=PermissionError("denied")):
            assert get_directory_size(tmp_path) == 0

    def test_unreadable_subtree_keeps_partial_sum(self, tmp_path):
        readable = tmp_path / "readable.bin"
        readable.write_bytes(os.urandom(16 * KIB))
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "hidden.bin").write_bytes(os.urandom(16 * KIB))

        real_scandir = os.scandir

        def fake_scandir(path):
            if Path(path).name == "locked":
                raise PermissionError("denied")
            return real_scandir(path)

        with patch("storage_audit.sizing.os.scandir", side_effect=fake_scandir):
            size = measure_path(tmp_path)

        assert size == allocated_size(readable.stat())


class TestFormatSize:
    def test_bytes(self):
        assert format_size(0) == "0 B"
        assert format_size(500) == "500 B"
        assert format_size(1023) == "1023 B"

    def test_kilobytes_have_no_decimals(self):
        assert format_size(1024) == "1 KB"
        assert format_size(1536) == "1 KB"
        assert format_size(512 * KIB) == "512 KB"

    def test_megabytes_one_decimal(self):
        assert format_size(MIB) == "1.0 MB"
        assert format_size(60 * MIB) == "60.0 MB"
        assert format_size(int(2.5 * MIB)) == "2.5 MB"

    def test_gigabytes_two_decimals(self):
        assert format_size(GIB) == "1.00 GB"
        assert format_size(int(1.5 * GIB)) == "1.50 GB"

    def test_truncates_instead_of_rounding(self):
        assert format_size(GIB - 1) == "1023.9 MB"
        assert format_size(2 * MIB - 1) == "1.9 MB"
        assert format_size(2 * GIB - 1) == "1.99 GB"

    @pytest.mark.parametrize(
        "size_bytes, unit",
        [
            (1023, "B"),
            (1024, "KB"),
            (1048575, "KB"),
            (1048576, "MB"),
            (1073741823, "MB"),
            (1073741824, "GB"),
        ],
    )
    def test_tier_boundaries(self, size_bytes, unit):
        assert format_size(size_bytes).endswith(f" {unit}")

    def test_negative_clamped(self):
        assert format_size(-5) == "0 B"

    def test_monotonic_within_tier(self):
        values = [float(format_size(n * MIB).split()[0]) for n in range(1, 1000, 37)]
        assert values == sorted(values)
