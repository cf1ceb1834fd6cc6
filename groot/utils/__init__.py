"""Utilities module for common helper functions.

This module contains:
- Filesystem utilities (atomic writes, I/O error wrapping)
"""

from groot.utils.fs import atomic_write, read_bytes, read_text

__all__ = [
    'atomic_write', 'read_bytes', 'read_text',
]
