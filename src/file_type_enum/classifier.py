"""Classification of filesystem entries into FileType members.

All classification goes through ``classify_from_mode``, which checks the ``stat``
predicates in a fixed priority order and returns the first match. The path-based
functions perform exactly one ``os.stat`` call and let any ``OSError`` propagate
unchanged.

Example:
    >>> classify_from_path(".")
    <FileType.DIRECTORY: 'directory'>
"""

import logging
import os
import stat
from typing import Any, Callable, List, Tuple, Union

from file_type_enum.exceptions import UnrecognizedFileTypeError
from file_type_enum.types import FileType, PathType

logger = logging.getLogger(__name__)

_PREDICATES: List[Tuple[Callable[[int], bool], FileType]] = [
    (stat.S_ISDIR, FileType.DIRECTORY),
    (stat.S_ISREG, FileType.FILE),
    (stat.S_ISLNK, FileType.SYMLINK),
    # Only match where the platform reports these bits, e.g. NUL and named pipes on Windows
    (stat.S_ISBLK, FileType.BLOCK_DEVICE),
    (stat.S_ISCHR, FileType.CHAR_DEVICE),
    (stat.S_ISFIFO, FileType.FIFO),
    (stat.S_ISSOCK, FileType.SOCKET),
]


def classify_from_mode(st_mode: int) -> FileType:
    """Classify a full ``st_mode`` word, permission bits included.

    Args:
        st_mode: Mode as found in ``os.stat_result.st_mode``.

    Returns:
        The first FileType whose predicate matches.

    Raises:
        UnrecognizedFileTypeError: If no known type matches, e.g. a mode of 0 or a
            Solaris door.
    """
    for predicate, file_type in _PREDICATES:
        if predicate(st_mode):
            return file_type
    raise UnrecognizedFileTypeError(stat.S_IFMT(st_mode))


def classify_from_metadata(metadata: Any) -> FileType:
    """Classify already-obtained metadata.

    Args:
        metadata: An ``os.stat_result`` or any object exposing ``st_mode``.

    Returns:
        The FileType the metadata describes. Metadata obtained with ``os.stat`` (which
        follows links) never yields ``FileType.SYMLINK``.
    """
    return classify_from_mode(metadata.st_mode)


def classify(path: Union[PathType, int], follow_symlinks: bool = True) -> FileType:
    """Read the metadata of ``path`` and classify it.

    Args:
        path: Path to the entry, or an open file descriptor when following links.
        follow_symlinks: Whether a terminal symbolic link is resolved before classifying.

    Raises:
        FileNotFoundError: If the path does not exist.
        PermissionError: If the metadata cannot be read.
        OSError: For any other failure of the underlying ``os.stat`` call.
    """
    try:
        metadata = os.stat(path, follow_symlinks=follow_symlinks)
    except OSError as e:
        logger.debug("Could not read metadata of %s: %s", path, e)
        raise

    file_type = classify_from_metadata(metadata)
    logger.debug("Classified %s as %s (follow_symlinks=%s)", path, file_type, follow_symlinks)
    return file_type


def classify_from_path(path: Union[PathType, int]) -> FileType:
    """Classify ``path``, following symbolic links. Never returns ``FileType.SYMLINK``."""
    return classify(path, follow_symlinks=True)


def classify_from_link_path(path: PathType) -> FileType:
    """Classify ``path`` itself; a symbolic link is reported as ``FileType.SYMLINK``."""
    return classify(path, follow_symlinks=False)


def classify_from_dir_entry(entry: "os.DirEntry[str]", follow_symlinks: bool = True) -> FileType:
    """Classify an entry produced by ``os.scandir``.

    Uses the stat information cached on the entry where the platform provides it.

    Raises:
        OSError: If the entry's metadata has to be read and that fails.
    """
    return classify_from_metadata(entry.stat(follow_symlinks=follow_symlinks))
