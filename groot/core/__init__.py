"""Core functionality for Groot.

This module contains the core data structures:
- Groot objects (Blob, Commit, IndexEntry)
- Object store
- Index/staging area
- Reference management (HEAD)
- Repository management
- Configuration management
- Hashing utilities
- Error types

For history walking and diffs, see groot.operations
"""

from groot.core.errors import (GrootError, NotFound, FileNotFound, CorruptStore,
                               CorruptHistory, RepositoryIOError, EmptyCommit,
                               RepositoryNotFound, RepositoryExists)
from groot.core.objects import GrootObject, Blob, Commit, IndexEntry
from groot.core.hash import hash_object
from groot.core.store import ObjectStore
from groot.core.index import Index
from groot.core.refs import RefManager
from groot.core.config import Config, get_config
from groot.core.repository import Repository

__all__ = [
    'GrootError',
    'NotFound',
    'FileNotFound',
    'CorruptStore',
    'CorruptHistory',
    'RepositoryIOError',
    'EmptyCommit',
    'RepositoryNotFound',
    'RepositoryExists',
    'GrootObject',
    'Blob',
    'Commit',
    'IndexEntry',
    'ObjectStore',
    'Index',
    'RefManager',
    'Config',
    'get_config',
    'Repository',
    'hash_object',
]
