import os
from enum import Enum
from functools import total_ordering
from os import PathLike
from typing import Any, Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Block devices, character devices, fifos and sockets only exist on unix-like systems
IS_UNIX = os.name == "posix"


@total_ordering
class FileType(Enum):
    """Enumeration of the categories a filesystem entry can belong to.

    Members are ordered by declaration, so sorting a list of types puts regular files
    first and sockets last.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link, only seen when links are not followed
        BLOCK_DEVICE: Block device (unix only)
        CHAR_DEVICE: Character device (unix only)
        FIFO: Named pipe (unix only)
        SOCKET: Unix domain socket (unix only)

    Example:
        >>> str(FileType.DIRECTORY)
        'directory'
        >>> FileType("fifo").is_fifo()
        True
        >>> sorted([FileType.SOCKET, FileType.FILE])
        [<FileType.FILE: 'file'>, <FileType.SOCKET: 'socket'>]
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    FIFO = "fifo"
    SOCKET = "socket"

    @classmethod
    def supported(cls) -> Tuple["FileType", ...]:
        """Return the members that classification can produce on the running platform."""
        return tuple(member for member in cls if IS_UNIX or member not in UNIX_ONLY)

    @classmethod
    def from_mode_bits(cls, bits: int) -> "FileType":
        """Build a FileType from raw ``stat.S_IF*`` type bits.

        Raises:
            UnrecognizedFileTypeError: If ``bits`` is not one of the known type constants.
        """
        from file_type_enum.mode_bits import from_mode_bits

        return from_mode_bits(bits)

    @property
    def mode_bits(self) -> int:
        """The canonical ``stat.S_IF*`` constant for this type."""
        from file_type_enum.mode_bits import to_mode_bits

        return to_mode_bits(self)

    @property
    def display_name(self) -> str:
        """Human-readable lowercase phrase, e.g. ``"regular file"``."""
        return _DISPLAY_NAMES[self]

    def is_regular(self) -> bool:
        return self is FileType.FILE

    def is_directory(self) -> bool:
        return self is FileType.DIRECTORY

    def is_symlink(self) -> bool:
        return self is FileType.SYMLINK

    def is_block_device(self) -> bool:
        return self is FileType.BLOCK_DEVICE

    def is_char_device(self) -> bool:
        return self is FileType.CHAR_DEVICE

    def is_fifo(self) -> bool:
        return self is FileType.FIFO

    def is_socket(self) -> bool:
        return self is FileType.SOCKET

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, FileType):
            return NotImplemented
        return _DECLARATION_ORDER[self] < _DECLARATION_ORDER[other]

    def __str__(self) -> str:
        return self.display_name


UNIX_ONLY = frozenset({FileType.BLOCK_DEVICE, FileType.CHAR_DEVICE, FileType.FIFO, FileType.SOCKET})

_DECLARATION_ORDER = {member: index for index, member in enumerate(FileType)}

_DISPLAY_NAMES = {
    FileType.FILE: "regular file",
    FileType.DIRECTORY: "directory",
    FileType.SYMLINK: "symbolic link",
    FileType.BLOCK_DEVICE: "block device",
    FileType.CHAR_DEVICE: "character device",
    FileType.FIFO: "named pipe",
    FileType.SOCKET: "socket",
}
