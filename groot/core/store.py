"""Content-addressed object store for Groot.

Objects live in a flat directory, one file per object, named by the SHA-1
of the file's bytes. Blobs and commits share the namespace; a reader decides
how to interpret the bytes. The store is append-only: writing the same
content twice is a no-op.
"""

import logging
from pathlib import Path
from typing import Iterator

from groot.utils.fs import atomic_write
from .errors import CorruptStore, NotFound
from .hash import hash_object, is_valid_hash
from .objects import GrootObject

logger = logging.getLogger(__name__)


class ObjectStore:
    """
    Flat, content-addressed object database.

    Every object satisfies ``hash_object(get(key)) == key``.
    """

    def __init__(self, objects_dir: Path, verify: bool = True):
        """
        Initialize object store.

        Args:
            objects_dir: Directory holding one file per object
            verify: Re-hash content on read and reject mismatches
        """
        self.objects_dir = Path(objects_dir)
        self.verify = verify

    def path(self, obj_hash: str) -> Path:
        """
        Get filesystem path for an object.

        Args:
            obj_hash: 40-character SHA-1 hash

        Returns:
            Path: Full path to object file

        Raises:
            NotFound: If obj_hash is not a well-formed hash
        """
        if not is_valid_hash(obj_hash):
            raise NotFound(obj_hash)
        return self.objects_dir / obj_hash

    def put(self, content: bytes) -> str:
        """
        Store content and return its hash.

        Args:
            content: Raw bytes

        Returns:
            str: SHA-1 hash of content
        """
        obj_hash = hash_object(content)
        path = self.path(obj_hash)

        if path.exists():
            logger.debug("Object %s already in store, skipped", obj_hash[:7])
            return obj_hash

        atomic_write(path, content)
        logger.debug("Stored object %s (%d bytes)", obj_hash[:7], len(content))
        return obj_hash

    def write_object(self, obj: GrootObject) -> str:
        """Serialize and store a Groot object."""
        return self.put(obj.serialize())

    def get(self, obj_hash: str) -> bytes:
        """
        Read stored content.

        Args:
            obj_hash: 40-character SHA-1 hash

        Returns:
            bytes: Stored content

        Raises:
            NotFound: If no object is stored under obj_hash
            CorruptStore: If the object cannot be read or fails verification
        """
        path = self.path(obj_hash)

        if not path.is_file():
            raise NotFound(obj_hash)

        try:
            content = path.read_bytes()
        except OSError as e:
            raise CorruptStore(f"Cannot read object {obj_hash}: {e}") from e

        if self.verify and hash_object(content) != obj_hash:
            raise CorruptStore(f"Object {obj_hash} content does not match its hash")

        return content

    def exists(self, obj_hash: str) -> bool:
        """
        Check if object exists in store.

        Args:
            obj_hash: 40-character SHA-1 hash

        Returns:
            bool: True if object exists
        """
        return is_valid_hash(obj_hash) and (self.objects_dir / obj_hash).is_file()

    def resolve_prefix(self, prefix: str) -> list:
        """Return the sorted hashes of all objects starting with prefix."""
        prefix = prefix.lower()
        return sorted(obj_hash for obj_hash in self if obj_hash.startswith(prefix))

    def __iter__(self) -> Iterator[str]:
        if not self.objects_dir.is_dir():
            return
        for item in self.objects_dir.iterdir():
            if item.is_file() and is_valid_hash(item.name):
                yield item.name

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, obj_hash: str) -> bool:
        return self.exists(obj_hash)

    def __repr__(self) -> str:
        return f"ObjectStore(path={self.objects_dir})"
