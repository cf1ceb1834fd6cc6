"""Exception types raised by the Groot core."""

from typing import Optional


class GrootError(Exception):
    """Base class for all Groot errors."""


class RepositoryNotFound(GrootError):
    """No .groot directory was found."""


class RepositoryExists(GrootError):
    """A repository already exists at the target path."""


class NotFound(GrootError):
    """
    A hash does not resolve to a stored object.
    
    Attributes:
        hash: The hash that could not be resolved
    """
    
    def __init__(self, obj_hash: str, what: str = 'Object'):
        super().__init__(f"{what} {obj_hash} not found")
        self.hash = obj_hash


class FileNotFound(GrootError, FileNotFoundError):
    """
    A path given for staging cannot be read.
    
    Attributes:
        path: The path that could not be read
    """
    
    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Cannot read file: {path}"
        if reason:
            message += f" ({reason})"
        GrootError.__init__(self, message)
        self.path = path
    
    def __str__(self) -> str:
        return self.args[0]


class CorruptStore(GrootError):
    """Stored bytes are unreadable or do not describe a valid record."""


class CorruptHistory(GrootError):
    """
    The parent chain is broken or cyclic.
    
    Attributes:
        hash: The commit hash at which the chain broke
    """
    
    def __init__(self, obj_hash: str, reason: str = 'cannot be resolved'):
        super().__init__(f"Broken history: commit {obj_hash} {reason}")
        self.hash = obj_hash


class RepositoryIOError(GrootError, OSError):
    """Reading or writing a repository file failed."""
    
    def __init__(self, path, error: OSError):
        GrootError.__init__(self, f"I/O error on {path}: {error}")
        self.path = path
        self.error = error
    
    def __str__(self) -> str:
        return self.args[0]


class EmptyCommit(GrootError):
    """The staging area is empty and empty commits are disabled."""
