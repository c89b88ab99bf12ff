"""Conversion between FileType and raw ``stat.S_IF*`` type bits.

The type bits are the part of ``st_mode`` selected by ``stat.S_IFMT``; permission bits
are not part of them. This module is kept apart from the classifier so that callers
who never deal with numeric modes do not depend on it.
"""

import stat
from types import MappingProxyType
from typing import Mapping

from file_type_enum.exceptions import UnrecognizedFileTypeError
from file_type_enum.types import FileType

MODE_BITS: Mapping[FileType, int] = MappingProxyType(
    {
        FileType.FILE: stat.S_IFREG,
        FileType.DIRECTORY: stat.S_IFDIR,
        FileType.SYMLINK: stat.S_IFLNK,
        FileType.BLOCK_DEVICE: stat.S_IFBLK,
        FileType.CHAR_DEVICE: stat.S_IFCHR,
        FileType.FIFO: stat.S_IFIFO,
        FileType.SOCKET: stat.S_IFSOCK,
    }
)

_FILE_TYPES_BY_BITS = {bits: file_type for file_type, bits in MODE_BITS.items()}


def to_mode_bits(file_type: FileType) -> int:
    """Return the canonical type bits for ``file_type``.

    Example:
        >>> oct(to_mode_bits(FileType.DIRECTORY))
        '0o40000'
    """
    return MODE_BITS[file_type]


def from_mode_bits(bits: int) -> FileType:
    """Map raw type bits back to a FileType.

    Only exact type constants are accepted. A full ``st_mode`` carrying permission bits
    should go through ``classify_from_mode`` instead.

    Args:
        bits: Integer holding only ``stat.S_IFMT`` bits.

    Returns:
        The matching FileType.

    Raises:
        UnrecognizedFileTypeError: If ``bits`` has bits outside ``stat.S_IFMT`` or does not
            match any known type.

    Example:
        >>> from_mode_bits(stat.S_IFIFO)
        <FileType.FIFO: 'fifo'>
    """
    if bits & ~stat.S_IFMT:
        raise UnrecognizedFileTypeError(bits)
    try:
        return _FILE_TYPES_BY_BITS[bits]
    except KeyError:
        raise UnrecognizedFileTypeError(bits) from None
