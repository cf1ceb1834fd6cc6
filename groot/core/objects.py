"""Groot objects: blobs, index entries and commits."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Tuple

from .errors import CorruptStore
from .hash import hash_object, is_valid_hash


class GrootObject(ABC):
    """Base class for all Groot objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        Objects are keyed by the hash of their serialized bytes alone, so the
        key of a stored object always equals the hash of the file contents.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(GrootObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath: str) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def text(self) -> str:
        """Decode content as UTF-8, replacing invalid sequences."""
        return self.data.decode('utf-8', errors='replace')

    def __repr__(self) -> str:
        """String representation of blob."""
        size = len(self.data)
        return f"Blob(hash={self.hash[:7]}, size={size})"


@dataclass(frozen=True)
class IndexEntry:
    """
    A file staged for commit: its path and the hash of its content.

    The same record is stored in the index file and in every commit's
    file list.
    """
    path: str
    hash: str

    def to_dict(self) -> dict:
        return {'path': self.path, 'hash': self.hash}

    @classmethod
    def from_dict(cls, data: Any) -> 'IndexEntry':
        """
        Build an entry from a decoded JSON value.

        Raises:
            CorruptStore: If the value is not a well-formed entry
        """
        if not isinstance(data, dict):
            raise CorruptStore(f"Invalid file entry: {data!r}")
        path = data.get('path')
        obj_hash = data.get('hash')
        if not isinstance(path, str) or not path:
            raise CorruptStore(f"Invalid file entry path: {path!r}")
        if not is_valid_hash(obj_hash):
            raise CorruptStore(f"Invalid file entry hash for {path}: {obj_hash!r}")
        return cls(path, obj_hash)

    def __repr__(self) -> str:
        """String representation."""
        return f"IndexEntry({self.hash[:7]} {self.path})"


def find_entry(entries: Iterable[IndexEntry], path: str) -> Optional[IndexEntry]:
    """Return the first entry for path, scanning in order."""
    for entry in entries:
        if entry.path == path:
            return entry
    return None


def format_timestamp(when: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with millisecond precision."""
    when = when.astimezone(timezone.utc)
    return when.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp written by format_timestamp."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.fromisoformat(value)


class Commit(GrootObject):
    """
    Represents a commit.

    A commit captures:
    - Timestamp (``date``)
    - Parent commit hash (None for the root commit)
    - Commit message
    - Ordered list of staged files

    Serialized as a JSON object with the keys ``date``, ``parent``,
    ``message`` and ``files``, in that order.
    """

    FIELDS = ('date', 'parent', 'message', 'files')

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.date: str = ''
        self.parent: Optional[str] = None
        self.message: str = ''
        self.files: Tuple[IndexEntry, ...] = ()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def timestamp(self) -> datetime:
        return parse_timestamp(self.date)

    def to_dict(self) -> dict:
        return {
            'date': self.date,
            'parent': self.parent,
            'message': self.message,
            'files': [entry.to_dict() for entry in self.files],
        }

    def serialize(self) -> bytes:
        """
        Serialize commit to compact UTF-8 JSON.

        Returns:
            bytes: Serialized commit data
        """
        return json.dumps(self.to_dict(), separators=(',', ':'), ensure_ascii=False).encode('utf-8')

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from JSON, validating every field.

        Args:
            data: Serialized commit data

        Raises:
            CorruptStore: If the data is not a well-formed commit record
        """
        try:
            record = json.loads(data.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptStore(f"Commit is not valid JSON: {e}") from e

        if not isinstance(record, dict):
            raise CorruptStore("Commit record must be a JSON object")

        missing = [field for field in self.FIELDS if field not in record]
        if missing:
            raise CorruptStore(f"Commit record missing fields: {', '.join(missing)}")

        date = record['date']
        if not isinstance(date, str):
            raise CorruptStore(f"Invalid commit date: {date!r}")
        try:
            parse_timestamp(date)
        except ValueError as e:
            raise CorruptStore(f"Invalid commit date: {date!r}") from e

        parent = record['parent']
        if parent is not None and not is_valid_hash(parent):
            raise CorruptStore(f"Invalid commit parent: {parent!r}")

        message = record['message']
        if not isinstance(message, str):
            raise CorruptStore(f"Invalid commit message: {message!r}")

        files = record['files']
        if not isinstance(files, list):
            raise CorruptStore(f"Invalid commit file list: {files!r}")

        self.date = date
        self.parent = parent
        self.message = message
        self.files = tuple(IndexEntry.from_dict(item) for item in files)
        self._hash = None

    @classmethod
    def from_bytes(cls, data: bytes, obj_hash: Optional[str] = None) -> 'Commit':
        """
        Load a commit read from the object store.

        Args:
            data: Stored bytes
            obj_hash: Key the bytes were stored under
        """
        commit = cls()
        commit.deserialize(data)
        commit._hash = obj_hash
        return commit

    @classmethod
    def create(
        cls,
        parent: Optional[str],
        message: str,
        files: Iterable[IndexEntry],
        timestamp: Optional[datetime] = None
    ) -> 'Commit':
        """
        Create a new commit.

        Args:
            parent: Parent commit hash, or None for a root commit
            message: Commit message
            files: Staged entries, in staging order
            timestamp: Commit time (defaults to now, UTC)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.parent = parent
        commit.message = message
        commit.files = tuple(files)

        if timestamp is None:
            timestamp = datetime.now(timezone.utc)
        commit.date = format_timestamp(timestamp)

        return commit

    def find_file(self, path: str) -> Optional[IndexEntry]:
        """Return the first file entry for path."""
        return find_entry(self.files, path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Commit):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.hash)

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parent={self.parent[:7]}" if self.parent else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
