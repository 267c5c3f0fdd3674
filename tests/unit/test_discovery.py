"""Tests for directory listing and ordinary-file detection."""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

from extsort.errors import (
    DirectoryAccessError,
    DirectoryNotFoundError,
    EmptyDirectoryError,
    InvalidDirectoryError,
)
from extsort.filesystem.discovery import (
    SKIP_DIRECTORY,
    SKIP_OPEN_FAILED,
    SKIP_STAT_FAILED,
    FilterResult,
    extract_ordinary_files,
    is_ordinary_file,
    read_directory,
)


class TestReadDirectory:
    """Tests for read_directory function."""

    def test_lists_files_and_directories(self, scenario_dir):
        """Returns every immediate entry, subdirectories included."""
        names = read_directory(scenario_dir)

        assert sorted(names) == ["README", "a.txt", "b.TXT", "c.jpg", "sub"]

    def test_does_not_recurse(self, scenario_dir):
        """Entries of subdirectories are not listed."""
        names = read_directory(scenario_dir)

        assert "inner.txt" not in names

    def test_missing_directory(self, tmp_path):
        """Raises DirectoryNotFoundError for a missing path."""
        with pytest.raises(DirectoryNotFoundError) as exc_info:
            read_directory(tmp_path / "nonexistent")

        assert exc_info.value.path == tmp_path / "nonexistent"

    def test_not_a_directory(self, tmp_path):
        """Raises InvalidDirectoryError for a regular file."""
        file_path = tmp_path / "file.txt"
        file_path.touch()

        with pytest.raises(InvalidDirectoryError) as exc_info:
            read_directory(file_path)

        assert "file.txt is not a directory" in str(exc_info.value)

    def test_empty_directory(self, empty_dir):
        """Raises EmptyDirectoryError when there are no entries."""
        with pytest.raises(EmptyDirectoryError):
            read_directory(empty_dir)

    def test_stat_permission_error(self, tmp_path):
        """Raises DirectoryAccessError when the path cannot be opened."""
        with patch("extsort.filesystem.discovery.os.stat", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(DirectoryAccessError):
                read_directory(tmp_path)

    def test_listing_error(self, scenario_dir):
        """Raises DirectoryAccessError when the directory cannot be listed."""
        with patch("extsort.filesystem.discovery.os.listdir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(DirectoryAccessError) as exc_info:
                read_directory(scenario_dir)

        assert "Permission denied" in str(exc_info.value)


class TestIsOrdinaryFile:
    """Tests for is_ordinary_file function."""

    def test_regular_file(self, tmp_path):
        """Regular files are ordinary."""
        file_path = tmp_path / "file.txt"
        file_path.write_text("content")

        assert is_ordinary_file(file_path) is True

    def test_empty_file(self, tmp_path):
        """Empty files are ordinary."""
        file_path = tmp_path / "empty"
        file_path.touch()

        assert is_ordinary_file(file_path) is True

    def test_directory(self, tmp_path):
        """Directories are not ordinary files."""
        assert is_ordinary_file(tmp_path) is False

    def test_missing_file(self, tmp_path):
        """Missing paths are not ordinary files."""
        assert is_ordinary_file(tmp_path / "missing") is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlink_to_file(self, tmp_path):
        """Symlinks to files are followed and count as ordinary files."""
        target = tmp_path / "target.txt"
        target.write_text("content")
        link = tmp_path / "link.txt"
        link.symlink_to(target)

        assert is_ordinary_file(link) is True

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlink_to_directory(self, tmp_path):
        """Symlinks to directories are followed and skipped."""
        target = tmp_path / "target.d"
        target.mkdir()
        link = tmp_path / "link.d"
        link.symlink_to(target, target_is_directory=True)

        assert is_ordinary_file(link) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_broken_symlink(self, tmp_path):
        """Broken symlinks cannot be opened and are skipped."""
        link = tmp_path / "broken"
        link.symlink_to(tmp_path / "nowhere")

        assert is_ordinary_file(link) is False

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_fifo_does_not_block(self, tmp_path):
        """A FIFO is checked without blocking and counts as ordinary."""
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)

        assert is_ordinary_file(fifo) is True


class TestExtractOrdinaryFiles:
    """Tests for extract_ordinary_files function."""

    def test_keeps_files_only(self, scenario_dir):
        """Directories are excluded from the output."""
        result = extract_ordinary_files(scenario_dir, ["a.txt", "sub", "c.jpg"])

        assert result.files == [scenario_dir / "a.txt", scenario_dir / "c.jpg"]
        assert result.skipped == [("sub", SKIP_DIRECTORY)]

    def test_preserves_input_order(self, scenario_dir):
        """Output follows input order with skipped entries compacted out."""
        names = ["c.jpg", "sub", "README", "missing", "a.txt"]

        result = extract_ordinary_files(scenario_dir, names)

        assert [p.name for p in result.files] == ["c.jpg", "README", "a.txt"]

    def test_skips_vanished_entries(self, scenario_dir):
        """Entries deleted after listing are skipped silently."""
        result = extract_ordinary_files(scenario_dir, ["gone.txt"])

        assert result.files == []
        assert result.skipped == [("gone.txt", SKIP_OPEN_FAILED)]

    def test_skips_on_stat_failure(self, scenario_dir):
        """Entries whose stat fails are skipped."""
        with patch("extsort.filesystem.discovery.os.fstat", side_effect=OSError(5, "I/O error")):
            result = extract_ordinary_files(scenario_dir, ["a.txt"])

        assert result.files == []
        assert result.skipped == [("a.txt", SKIP_STAT_FAILED)]

    def test_closes_descriptors(self, scenario_dir):
        """Every opened descriptor is closed."""
        with patch("extsort.filesystem.discovery.os.close", wraps=os.close) as mock_close:
            extract_ordinary_files(scenario_dir, ["a.txt", "sub", "c.jpg"])

        assert mock_close.call_count == 3

    def test_empty_input(self, tmp_path):
        """Empty input gives an empty result."""
        result = extract_ordinary_files(tmp_path, [])

        assert result == FilterResult()

    def test_returns_full_paths(self, scenario_dir):
        """Output paths are joined with the base directory."""
        result = extract_ordinary_files(scenario_dir, ["README"])

        assert result.files == [Path(scenario_dir) / "README"]
