"""Unit tests for raw mode-bit conversion."""

import stat

import pytest

from file_type_enum.exceptions import UnrecognizedFileTypeError
from file_type_enum.mode_bits import MODE_BITS, from_mode_bits, to_mode_bits
from file_type_enum.types import FileType


def test_every_member_has_bits():
    assert set(MODE_BITS) == set(FileType)
    assert len(set(MODE_BITS.values())) == len(FileType)


def test_round_trip():
    for file_type in FileType:
        assert from_mode_bits(to_mode_bits(file_type)) is file_type


@pytest.mark.parametrize(
    "file_type, bits",
    [
        (FileType.FILE, stat.S_IFREG),
        (FileType.DIRECTORY, stat.S_IFDIR),
        (FileType.SYMLINK, stat.S_IFLNK),
        (FileType.BLOCK_DEVICE, stat.S_IFBLK),
        (FileType.CHAR_DEVICE, stat.S_IFCHR),
        (FileType.FIFO, stat.S_IFIFO),
        (FileType.SOCKET, stat.S_IFSOCK),
    ],
)
def test_canonical_bits(file_type, bits):
    assert to_mode_bits(file_type) == bits


def test_bits_match_real_metadata(tmp_path):
    (tmp_path / "file.txt").touch()
    assert stat.S_IFMT((tmp_path / "file.txt").stat().st_mode) == to_mode_bits(FileType.FILE)
    assert stat.S_IFMT(tmp_path.stat().st_mode) == to_mode_bits(FileType.DIRECTORY)


@pytest.mark.parametrize("bits", [0, 0o070000, 0o170000, -1])
def test_unknown_type_bits(bits):
    with pytest.raises(UnrecognizedFileTypeError) as excinfo:
        from_mode_bits(bits)
    assert excinfo.value.mode == bits


def test_permission_bits_rejected():
    # A full st_mode is not raw type bits and must not default to a regular file
    with pytest.raises(UnrecognizedFileTypeError):
        from_mode_bits(stat.S_IFREG | 0o644)


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        MODE_BITS[FileType.FILE] = 0  # type: ignore[index]
