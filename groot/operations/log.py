"""History walking along the commit parent chain."""

import logging
from typing import Iterator, Optional

from groot.core.errors import CorruptHistory, NotFound
from groot.core.objects import Commit

logger = logging.getLogger(__name__)


class HistoryWalker:
    """
    Walks commit history from HEAD back to the root commit.

    History is linear: every commit has at most one parent.
    """

    def __init__(self, repo):
        """
        Initialize history walker.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def walk(self, start: Optional[str] = None, max_count: Optional[int] = None) -> Iterator[Commit]:
        """
        Lazily yield commits from start (default HEAD) to the root.

        Args:
            start: Commit hash to start from
            max_count: Stop after this many commits

        Yields:
            Commit objects, newest first

        Raises:
            CorruptHistory: If a commit in the chain is missing or a hash repeats
            CorruptStore: If a commit in the chain is malformed
        """
        current = start if start is not None else self.repo.head()
        seen = set()
        count = 0

        while current is not None:
            if max_count is not None and count >= max_count:
                return

            if current in seen:
                raise CorruptHistory(current, 'appears twice in the parent chain')
            seen.add(current)

            try:
                commit = self.repo.read_commit(current)
            except NotFound as e:
                raise CorruptHistory(current) from e

            logger.debug("Visited commit %s", current[:7])
            yield commit
            count += 1
            current = commit.parent

    def log(self, start: Optional[str] = None) -> Iterator[Commit]:
        """Yield every commit reachable from start (default HEAD)."""
        return self.walk(start)
