"""Reference management for Groot."""

import logging
from pathlib import Path
from typing import Optional

from groot.utils.fs import atomic_write, read_text
from .errors import CorruptStore, RepositoryIOError
from .hash import is_valid_hash

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages the repository's references.

    Handles:
    - HEAD: hash of the newest commit, empty before the first commit
    - COMMIT_PENDING: hash of a commit whose head update has not finished
    """

    def __init__(self, groot_dir: Path):
        """
        Initialize reference manager.

        Args:
            groot_dir: Path to the .groot directory
        """
        self.groot_dir = Path(groot_dir)
        self.head_file = self.groot_dir / 'HEAD'
        self.pending_file = self.groot_dir / 'COMMIT_PENDING'

    def _read_hash(self, path: Path) -> Optional[str]:
        if not path.exists():
            return None

        content = read_text(path).strip()
        if not content:
            return None

        if not is_valid_hash(content):
            raise CorruptStore(f"{path.name} does not contain a valid hash: {content!r}")
        return content

    def resolve_head(self) -> Optional[str]:
        """
        Resolve HEAD to a commit hash.

        Returns:
            Commit hash or None if no commit exists yet
        """
        return self._read_hash(self.head_file)

    def update_head(self, commit_hash: str) -> None:
        """
        Point HEAD at a commit.

        Args:
            commit_hash: Commit hash to point to
        """
        if not is_valid_hash(commit_hash):
            raise ValueError(f"Not a valid commit hash: {commit_hash!r}")
        atomic_write(self.head_file, commit_hash.encode())
        logger.debug("HEAD -> %s", commit_hash[:7])

    def read_pending(self) -> Optional[str]:
        """Return the in-flight commit hash, if a commit was interrupted."""
        return self._read_hash(self.pending_file)

    def write_pending(self, commit_hash: str) -> None:
        atomic_write(self.pending_file, commit_hash.encode())

    def clear_pending(self) -> None:
        try:
            self.pending_file.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise RepositoryIOError(self.pending_file, e) from e

    def __repr__(self) -> str:
        return f"RefManager(path={self.groot_dir})"
