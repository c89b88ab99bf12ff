"""Test configuration and fixtures for file_type_enum."""

import os

import pytest


@pytest.fixture
def temp_entries(tmp_path):
    """Create a regular file and a directory inside a temporary directory."""
    (tmp_path / "subdir").mkdir()
    (tmp_path / "file.txt").write_text("content")
    return tmp_path


@pytest.fixture
def temp_entries_with_symlinks(temp_entries):
    """Add symlinks to a file, a directory and a missing target."""
    try:
        os.symlink(temp_entries / "file.txt", temp_entries / "file_link")
        os.symlink(temp_entries / "subdir", temp_entries / "dir_link", target_is_directory=True)
        os.symlink(temp_entries / "missing", temp_entries / "dangling_link")
    except (OSError, NotImplementedError):
        # On some platforms (like Windows) creating symlinks might require special permissions
        pytest.skip("Symlinks are not supported on this platform")
    return temp_entries
