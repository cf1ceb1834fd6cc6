"""Groot - a minimal local version control engine."""

__version__ = '0.1.0'

from groot.core.repository import Repository
from groot.core.objects import GrootObject, Blob, Commit, IndexEntry

__all__ = [
    'Repository',
    'GrootObject',
    'Blob',
    'Commit',
    'IndexEntry',
]
