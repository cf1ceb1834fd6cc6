"""Hash utilities for Groot."""

import hashlib
import re

HASH_RE = re.compile(r'[0-9a-f]{40}')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_valid_hash(value: str) -> bool:
    """Check that value looks like a full object hash."""
    return isinstance(value, str) and HASH_RE.fullmatch(value) is not None
