"""Filesystem helpers for repository files."""

import os
import tempfile
from pathlib import Path
from typing import Union

from groot.core.errors import CorruptStore, RepositoryIOError

PathLike = Union[str, Path]


def atomic_write(path: PathLike, data: bytes) -> None:
    """
    Write data to path so readers see either the old or the new content.

    The data is written to a temporary file in the same directory, flushed
    and renamed over the target.

    Args:
        path: Destination file
        data: Bytes to write

    Raises:
        RepositoryIOError: If any step fails
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix='.tmp-', dir=str(path.parent))
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise RepositoryIOError(path, e) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass


def read_bytes(path: PathLike) -> bytes:
    """Read a repository file, wrapping OS errors."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise RepositoryIOError(path, e) from e


def read_text(path: PathLike) -> str:
    """
    Read a repository file as UTF-8 text.

    Raises:
        RepositoryIOError: If the file cannot be read
        CorruptStore: If the content is not valid UTF-8
    """
    data = read_bytes(path)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CorruptStore(f"{path} is not valid UTF-8: {e}") from e
