"""Diff engine for comparing file versions across commits."""

import difflib
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from groot.core.objects import Blob

logger = logging.getLogger(__name__)

UNCHANGED = 'unchanged'
ADDED = 'added'
REMOVED = 'removed'

STATUS_ADDED = 'added'
STATUS_MODIFIED = 'modified'
STATUS_UNCHANGED = 'unchanged'

_LINE_RE = re.compile(r'[^\n]*\n|[^\n]+')


def split_lines(text: str) -> List[str]:
    """
    Split text into lines, keeping each '\\n' terminator.

    A trailing line without a terminator is kept as its own line, so
    ``''.join(split_lines(text)) == text`` always holds.
    """
    return _LINE_RE.findall(text)


@dataclass
class LineSegment:
    """A run of consecutive lines sharing one tag."""
    tag: str
    value: str

    @property
    def line_count(self) -> int:
        return len(split_lines(self.value))

    def __repr__(self) -> str:
        return f"LineSegment({self.tag}, {self.value!r})"


def _line_ops(old: List[str], new: List[str]) -> List[tuple]:
    """
    Edit script between two line lists from difflib opcodes.

    Returns a list of (tag, line) pairs.
    """
    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)

    ops = []
    for opcode, i1, i2, j1, j2 in matcher.get_opcodes():
        if opcode == 'equal':
            ops.extend((UNCHANGED, line) for line in old[i1:i2])
            continue
        # replace is a delete followed by an insert
        if opcode in ('delete', 'replace'):
            ops.extend((REMOVED, line) for line in old[i1:i2])
        if opcode in ('insert', 'replace'):
            ops.extend((ADDED, line) for line in new[j1:j2])
    return ops


def _group(ops: List[tuple]) -> List[LineSegment]:
    """Merge ops into segments; within a change block removals come first."""
    segments: List[LineSegment] = []
    removed: List[str] = []
    added: List[str] = []

    def flush_changes():
        if removed:
            segments.append(LineSegment(REMOVED, ''.join(removed)))
        if added:
            segments.append(LineSegment(ADDED, ''.join(added)))
        removed.clear()
        added.clear()

    for tag, line in ops:
        if tag == REMOVED:
            removed.append(line)
        elif tag == ADDED:
            added.append(line)
        else:
            flush_changes()
            if segments and segments[-1].tag == UNCHANGED:
                segments[-1].value += line
            else:
                segments.append(LineSegment(UNCHANGED, line))
    flush_changes()
    return segments


def diff_lines(old: str, new: str) -> List[LineSegment]:
    """
    Compute a line-level diff between two texts.

    Joining the ``unchanged`` and ``removed`` segments in order gives back
    ``old``; joining ``unchanged`` and ``added`` gives back ``new``.

    Args:
        old: Older text
        new: Newer text

    Returns:
        List of LineSegment tagged unchanged, added or removed
    """
    old_lines = split_lines(old)
    new_lines = split_lines(new)

    # Common prefix and suffix bypass the matcher
    prefix = 0
    limit = min(len(old_lines), len(new_lines))
    while prefix < limit and old_lines[prefix] == new_lines[prefix]:
        prefix += 1

    suffix = 0
    while (suffix < limit - prefix
           and old_lines[-1 - suffix] == new_lines[-1 - suffix]):
        suffix += 1

    old_mid = old_lines[prefix:len(old_lines) - suffix]
    new_mid = new_lines[prefix:len(new_lines) - suffix]

    ops = [(UNCHANGED, line) for line in old_lines[:prefix]]
    ops.extend(_line_ops(old_mid, new_mid))
    ops.extend((UNCHANGED, line) for line in old_lines[len(old_lines) - suffix:])
    return _group(ops)


def reconstruct(segments: List[LineSegment], side: str) -> str:
    """
    Rebuild one side of a diff.

    Args:
        segments: Diff segments
        side: ADDED to rebuild the newer text, REMOVED for the older one
    """
    return ''.join(s.value for s in segments if s.tag in (UNCHANGED, side))


class FileDiff:
    """Represents the diff for a single file in a commit."""

    def __init__(self, path: str, old_hash: Optional[str], new_hash: str,
                 segments: List[LineSegment]):
        self.path = path
        self.old_hash = old_hash
        self.new_hash = new_hash
        self.segments = segments

    @property
    def is_new(self) -> bool:
        return self.old_hash is None

    @property
    def status(self) -> str:
        if self.is_new:
            return STATUS_ADDED
        if any(s.tag != UNCHANGED for s in self.segments):
            return STATUS_MODIFIED
        return STATUS_UNCHANGED

    @property
    def added(self) -> List[LineSegment]:
        return [s for s in self.segments if s.tag == ADDED]

    @property
    def removed(self) -> List[LineSegment]:
        return [s for s in self.segments if s.tag == REMOVED]

    def __repr__(self) -> str:
        return f"FileDiff({self.status} {self.path}, segments={len(self.segments)})"


class CommitDiff:
    """
    Changes introduced by one commit.

    For a root commit ``is_root`` is True and ``files`` is empty: there is
    no prior state to compare against.
    """

    def __init__(self, commit_hash: str, commit, files: Optional[List[FileDiff]] = None):
        self.commit_hash = commit_hash
        self.commit = commit
        self.files = files or []

    @property
    def is_root(self) -> bool:
        return self.commit.parent is None

    @property
    def parent_hash(self) -> Optional[str]:
        return self.commit.parent

    def get(self, path: str) -> Optional[FileDiff]:
        """Return the first file diff for path."""
        for file_diff in self.files:
            if file_diff.path == path:
                return file_diff
        return None

    def __repr__(self) -> str:
        if self.is_root:
            return f"CommitDiff({self.commit_hash[:7]}, root)"
        return f"CommitDiff({self.commit_hash[:7]}, files={len(self.files)})"


class DiffEngine:
    """
    Engine for computing the changes a commit made against its parent.

    Each file in the commit is matched against the first entry with the
    same path in the parent's file list.
    """

    def __init__(self, repo):
        """
        Initialize diff engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def _text(self, blob_hash: str) -> str:
        return Blob(self.repo.read_blob(blob_hash)).text()

    def diff_blobs(self, path: str, old_hash: Optional[str], new_hash: str) -> FileDiff:
        """
        Compute diff between two stored file versions.

        Args:
            path: File path
            old_hash: Blob hash of the older version (None for new files)
            new_hash: Blob hash of the newer version

        Returns:
            FileDiff object

        Raises:
            NotFound: If either blob is missing
        """
        new_text = self._text(new_hash)

        if old_hash is None:
            segments = [LineSegment(ADDED, new_text)] if new_text else []
            return FileDiff(path, None, new_hash, segments)

        if old_hash == new_hash:
            segments = [LineSegment(UNCHANGED, new_text)] if new_text else []
        else:
            segments = diff_lines(self._text(old_hash), new_text)
        return FileDiff(path, old_hash, new_hash, segments)

    def diff(self, commit_hash: str) -> CommitDiff:
        """
        Compute the changes introduced by a commit.

        Args:
            commit_hash: Commit to inspect

        Returns:
            CommitDiff; for a root commit it has no file diffs

        Raises:
            NotFound: If the commit, its parent or any blob is missing
        """
        commit = self.repo.read_commit(commit_hash)

        if commit.parent is None:
            logger.debug("Commit %s is a root commit, no prior state", commit_hash[:7])
            return CommitDiff(commit_hash, commit)

        parent = self.repo.read_commit(commit.parent)

        files = []
        for entry in commit.files:
            previous = parent.find_file(entry.path)
            old_hash = previous.hash if previous else None
            files.append(self.diff_blobs(entry.path, old_hash, entry.hash))

        return CommitDiff(commit_hash, commit, files)

    def format_diff(self, commit_diff: CommitDiff, color: bool = True) -> str:
        """
        Format a commit diff for display.

        Args:
            commit_diff: Result of diff()
            color: Whether to use color output

        Returns:
            Formatted diff string
        """
        from colorama import Fore, Style

        def paint(text, fore):
            return f"{fore}{text}{Style.RESET_ALL}" if color else text

        output = []

        if commit_diff.is_root:
            output.append(paint("Root commit, no prior state", Fore.YELLOW))
            return '\n'.join(output)

        for file_diff in commit_diff.files:
            output.append(paint(f"diff --groot a/{file_diff.path} b/{file_diff.path}", Style.BRIGHT))
            if file_diff.is_new:
                output.append(paint(f"new file: {file_diff.path}", Fore.GREEN))
                output.append("--- /dev/null")
            else:
                output.append(f"--- a/{file_diff.path}")
            output.append(f"+++ b/{file_diff.path}")

            for segment in file_diff.segments:
                for line in split_lines(segment.value):
                    line = line.rstrip('\n')
                    if segment.tag == ADDED:
                        output.append(paint(f"+{line}", Fore.GREEN))
                    elif segment.tag == REMOVED:
                        output.append(paint(f"-{line}", Fore.RED))
                    else:
                        output.append(f" {line}")

        return '\n'.join(output)
