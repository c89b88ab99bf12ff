"""File type classification utilities.

This package maps a filesystem entry, or metadata already read for it, to exactly one
member of the FileType enum: regular file, directory, symbolic link and, on unix-like
systems, block device, character device, named pipe or socket.

``classify_from_path`` follows symbolic links the way ``os.stat`` does, so it never
reports a symlink; use ``classify_from_link_path`` to see the link itself.
"""

from importlib.metadata import PackageNotFoundError, version

from file_type_enum.classifier import (
    classify,
    classify_from_dir_entry,
    classify_from_link_path,
    classify_from_metadata,
    classify_from_mode,
    classify_from_path,
)
from file_type_enum.exceptions import UnrecognizedFileTypeError
from file_type_enum.mode_bits import MODE_BITS, from_mode_bits, to_mode_bits
from file_type_enum.types import IS_UNIX, UNIX_ONLY, FileType, PathType

# Expose the version for programmatic use
try:
    __version__ = version("file-type-enum")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FileType",
    "IS_UNIX",
    "MODE_BITS",
    "PathType",
    "UNIX_ONLY",
    "UnrecognizedFileTypeError",
    "classify",
    "classify_from_dir_entry",
    "classify_from_link_path",
    "classify_from_metadata",
    "classify_from_mode",
    "classify_from_path",
    "from_mode_bits",
    "to_mode_bits",
]
