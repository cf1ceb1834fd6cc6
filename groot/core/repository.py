"""Repository management for Groot."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from groot.utils.fs import atomic_write
from .config import Config
from .errors import (CorruptStore, EmptyCommit, GrootError, NotFound,
                     RepositoryExists, RepositoryIOError, RepositoryNotFound)
from .index import Index
from .objects import Commit
from .refs import RefManager
from .store import ObjectStore

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 4


class Repository:
    """
    Represents a Groot repository.

    A repository owns the .groot directory: the object store, the staging
    area and the head reference. Every operation goes through an explicit
    Repository instance; nothing is held in module state.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository handle.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.groot_dir = self.work_tree / '.groot'
        self.objects_dir = self.groot_dir / 'objects'
        self.head_file = self.groot_dir / 'HEAD'
        self.index_file = self.groot_dir / 'index'
        self.config_file = self.groot_dir / 'config'

        self._config = None
        self._store = None
        self._index = None
        self._ref_manager = None
        self._history = None
        self._diff_engine = None

    @property
    def config(self) -> Config:
        """Get Config instance."""
        if self._config is None:
            self._config = Config(self.config_file)
        return self._config

    @property
    def store(self) -> ObjectStore:
        """Get ObjectStore instance."""
        if self._store is None:
            verify = self.config.get_bool('core', 'verifyobjects', True)
            self._store = ObjectStore(self.objects_dir, verify=verify)
        return self._store

    @property
    def index(self) -> Index:
        """Get Index (staging area) instance."""
        if self._index is None:
            mode = self.config.get('core', 'stagemode')
            self._index = Index(self.index_file, self.store, self.work_tree, mode=mode)
        return self._index

    @property
    def refs(self) -> RefManager:
        """Get RefManager instance."""
        if self._ref_manager is None:
            self._ref_manager = RefManager(self.groot_dir)
        return self._ref_manager

    @property
    def history(self):
        """Get HistoryWalker instance."""
        if self._history is None:
            from groot.operations.log import HistoryWalker
            self._history = HistoryWalker(self)
        return self._history

    @property
    def diff(self):
        """Get DiffEngine instance."""
        if self._diff_engine is None:
            from groot.operations.diff import DiffEngine
            self._diff_engine = DiffEngine(self)
        return self._diff_engine

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .groot directory structure:
        .groot/
        ├── objects/       # Object database
        ├── HEAD           # Newest commit hash (empty)
        ├── index          # Staging area ([])
        └── config         # Repository configuration

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryExists: If repository already exists
        """
        if self.groot_dir.exists():
            raise RepositoryExists(f"Repository already exists at {self.groot_dir}")

        try:
            self.groot_dir.mkdir(parents=True)
            self.objects_dir.mkdir()
        except OSError as e:
            raise RepositoryIOError(self.groot_dir, e) from e

        atomic_write(self.head_file, b'')
        atomic_write(self.index_file, b'[]')
        atomic_write(self.config_file, b'[core]\n\trepositoryformatversion = 0\n')

        logger.debug("Initialized repository at %s", self.groot_dir)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / '.groot').is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def open(cls, path: str = '.') -> 'Repository':
        """
        Open the repository enclosing path.

        Raises:
            RepositoryNotFound: If no .groot directory is found up the tree
        """
        repo = cls.find_repository(path)
        if repo is None:
            raise RepositoryNotFound(f"Not a groot repository: {Path(path).resolve()}")
        return repo

    def head(self) -> Optional[str]:
        """Return the newest commit hash, or None before the first commit."""
        return self.refs.resolve_head()

    def read_commit(self, commit_hash: str) -> Commit:
        """
        Read a commit from the object store.

        Raises:
            NotFound: If no object is stored under commit_hash
            CorruptStore: If the object is not a valid commit record
        """
        try:
            data = self.store.get(commit_hash)
        except NotFound:
            raise NotFound(commit_hash, 'Commit')
        return Commit.from_bytes(data, commit_hash)

    def read_blob(self, blob_hash: str) -> bytes:
        """
        Read file content from the object store.

        Raises:
            NotFound: If no object is stored under blob_hash
        """
        try:
            return self.store.get(blob_hash)
        except NotFound:
            raise NotFound(blob_hash, 'Blob')

    def commit(self, message: str, timestamp: Optional[datetime] = None) -> str:
        """
        Record the staging area as a new commit.

        The commit is stored first, then HEAD is advanced and the staging
        area cleared. A COMMIT_PENDING marker covers the window between
        storing the commit and clearing the index, so an interrupted commit
        is finished by recover().

        Args:
            message: Commit message
            timestamp: Commit time (defaults to now)

        Returns:
            str: Hash of the new commit

        Raises:
            EmptyCommit: If nothing is staged and core.allowempty is false
        """
        self.recover()

        files = self.index.current()
        if not files and not self.config.get_bool('core', 'allowempty', True):
            raise EmptyCommit("Nothing to commit (staging area is empty)")

        parent = self.head()
        commit = Commit.create(parent=parent, message=message, files=files, timestamp=timestamp)
        commit_hash = self.store.write_object(commit)

        self.refs.write_pending(commit_hash)
        self.refs.update_head(commit_hash)
        self.index.clear()
        self.refs.clear_pending()

        logger.debug("Created commit %s (parent %s, %d files)",
                     commit_hash[:7], parent[:7] if parent else 'none', len(files))
        return commit_hash

    def recover(self) -> Optional[str]:
        """
        Finish a commit that was interrupted before it completed.

        If COMMIT_PENDING names a stored commit whose parent is the current
        HEAD, HEAD is advanced to it. If the staging area still begins with
        that commit's files, those entries are dropped and anything staged
        after them is kept. The marker is removed in every case.

        Returns:
            The recovered commit hash, or None if there was nothing to do
        """
        pending = self.refs.read_pending()
        if pending is None:
            return None

        head = self.head()
        try:
            commit = self.read_commit(pending)
        except (NotFound, CorruptStore) as e:
            logger.warning("Discarding pending commit marker %s: %s", pending[:7], e)
            self.refs.clear_pending()
            return None

        if head != pending:
            if commit.parent != head:
                logger.warning("Discarding pending commit %s: parent %s is not HEAD",
                               pending[:7], commit.parent)
                self.refs.clear_pending()
                return None
            self.refs.update_head(pending)
            logger.debug("Recovered HEAD update to %s", pending[:7])

        # The committed entries lead the staging area; anything after them
        # was staged once the commit had been interrupted.
        staged = self.index.current()
        committed = len(commit.files)
        if staged[:committed] == commit.files:
            self.index.write(list(staged[committed:]))
        self.refs.clear_pending()
        logger.debug("Recovered pending commit %s", pending[:7])
        return pending

    def log(self, start: Optional[str] = None) -> Iterator[Commit]:
        """Iterate commits from HEAD (or start) back to the root."""
        return self.history.walk(start)

    def resolve_commit(self, ref: str) -> str:
        """
        Resolve a full or abbreviated commit hash.

        Args:
            ref: Full hash, unique prefix of at least 4 characters, or 'HEAD'

        Raises:
            NotFound: If nothing matches
            GrootError: If a prefix matches more than one object
        """
        if ref.upper() == 'HEAD':
            head = self.head()
            if head is None:
                raise NotFound('HEAD', 'Commit')
            return head

        ref = ref.lower()
        if self.store.exists(ref):
            return ref

        if len(ref) < MIN_PREFIX_LENGTH:
            raise NotFound(ref, 'Commit')

        matches = self.store.resolve_prefix(ref)
        if len(matches) != 1:
            if matches:
                raise GrootError(f"Ambiguous commit prefix {ref}: {len(matches)} matches")
            raise NotFound(ref, 'Commit')
        return matches[0]

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
