"""Index (staging area) implementation."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from groot.utils.fs import atomic_write, read_text
from .errors import CorruptStore, FileNotFound
from .objects import Blob, IndexEntry, find_entry

logger = logging.getLogger(__name__)

STAGE_APPEND = 'append'
STAGE_REPLACE = 'replace'
STAGE_MODES = (STAGE_APPEND, STAGE_REPLACE)


class Index:
    """
    Groot index (staging area) implementation.

    The index is an ordered list of files to be included in the next
    commit, stored as a JSON array of ``{"path", "hash"}`` objects. Every
    mutation is written to disk before the call returns.

    In ``append`` mode staging a path twice keeps both entries; in
    ``replace`` mode the newer entry takes the place of the older one.
    """

    def __init__(self, index_file: Path, store, work_tree: Optional[Path] = None,
                 mode: str = STAGE_APPEND):
        """
        Initialize index.

        Args:
            index_file: Path to the JSON index file
            store: ObjectStore receiving staged content
            work_tree: Repository root used to relativize staged paths
            mode: 'append' or 'replace'
        """
        if mode not in STAGE_MODES:
            raise ValueError(f"Unknown staging mode: {mode}")
        self.index_file = Path(index_file)
        self.store = store
        self.work_tree = Path(work_tree) if work_tree else None
        self.mode = mode

    def read(self) -> List[IndexEntry]:
        """
        Read entries from disk.

        A missing index file reads as empty.

        Raises:
            CorruptStore: If the file is not a JSON list of entries
        """
        if not self.index_file.exists():
            return []

        content = read_text(self.index_file)
        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except ValueError as e:
            raise CorruptStore(f"Index is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise CorruptStore("Index must be a JSON list")

        return [IndexEntry.from_dict(item) for item in data]

    def write(self, entries: List[IndexEntry]) -> None:
        """Persist entries to disk."""
        data = json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)
        atomic_write(self.index_file, data.encode('utf-8'))

    def _entry_path(self, file_path: Path, original: str) -> str:
        if self.work_tree is not None:
            try:
                return file_path.resolve().relative_to(self.work_tree.resolve()).as_posix()
            except ValueError:
                pass
        return original

    def stage(self, filepath) -> str:
        """
        Stage a file for commit.

        Args:
            filepath: Path to file (absolute, or relative to the current directory)

        Returns:
            str: SHA-1 hash of staged content

        Raises:
            FileNotFound: If the file does not exist or cannot be read
        """
        original = str(filepath)
        file_path = Path(filepath)

        if not file_path.exists():
            raise FileNotFound(original, "no such file")

        if not file_path.is_file():
            raise FileNotFound(original, "not a regular file")

        try:
            blob = Blob.from_file(str(file_path))
        except OSError as e:
            raise FileNotFound(original, e.strerror or str(e)) from e

        obj_hash = self.store.write_object(blob)
        entry = IndexEntry(self._entry_path(file_path, original), obj_hash)

        entries = self.read()
        if self.mode == STAGE_REPLACE:
            # New entry takes the slot of the first existing one; duplicates go
            positions = [i for i, e in enumerate(entries) if e.path == entry.path]
            entries = [e for e in entries if e.path != entry.path]
            entries.insert(positions[0] if positions else len(entries), entry)
        else:
            entries.append(entry)

        self.write(entries)
        logger.debug("Staged %s as %s", entry.path, obj_hash[:7])
        return obj_hash

    def clear(self) -> None:
        """Clear all entries from index."""
        self.write([])
        logger.debug("Cleared staging area")

    def current(self) -> Tuple[IndexEntry, ...]:
        """Return staged entries as currently persisted."""
        return tuple(self.read())

    def find(self, path: str) -> Optional[IndexEntry]:
        """Get the first entry for path."""
        return find_entry(self.read(), path)

    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.read())

    def __repr__(self) -> str:
        """String representation."""
        return f"Index(path={self.index_file}, mode={self.mode})"
