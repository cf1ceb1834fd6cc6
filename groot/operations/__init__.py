"""Operations module for high-level Groot operations.

This module contains the read-side logic built on committed objects:
- History walking
- Diff computation
"""

from groot.operations.log import HistoryWalker
from groot.operations.diff import (DiffEngine, CommitDiff, FileDiff, LineSegment,
                                   diff_lines, split_lines)

__all__ = [
    'HistoryWalker',
    'DiffEngine', 'CommitDiff', 'FileDiff', 'LineSegment',
    'diff_lines', 'split_lines',
]
