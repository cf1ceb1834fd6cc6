"""Unit tests for the diff engine."""

import pytest
from groot.core.errors import NotFound
from groot.core.objects import Commit, IndexEntry
from groot.operations.diff import (ADDED, REMOVED, UNCHANGED, DiffEngine, LineSegment,
                                   diff_lines, reconstruct, split_lines)


def tags(segments):
    return [s.tag for s in segments]


@pytest.mark.parametrize('text,lines', [
    ('', []),
    ('a', ['a']),
    ('a\n', ['a\n']),
    ('a\nb', ['a\n', 'b']),
    ('a\n\nb\n', ['a\n', '\n', 'b\n']),
    ('a\r\nb\r\n', ['a\r\n', 'b\r\n']),
])
def test_split_lines(text, lines):
    """Test splitting keeps terminators and trailing partial lines."""
    assert split_lines(text) == lines
    assert ''.join(split_lines(text)) == text


def test_diff_lines_append():
    """Test appending a line yields unchanged then added."""
    segments = diff_lines('hello\n', 'hello\nworld\n')
    assert segments == [LineSegment(UNCHANGED, 'hello\n'), LineSegment(ADDED, 'world\n')]


def test_diff_lines_identical():
    """Test identical texts are one unchanged segment."""
    assert diff_lines('a\nb\n', 'a\nb\n') == [LineSegment(UNCHANGED, 'a\nb\n')]


def test_diff_lines_empty_texts():
    """Test empty inputs."""
    assert diff_lines('', '') == []
    assert diff_lines('', 'x\n') == [LineSegment(ADDED, 'x\n')]
    assert diff_lines('x\n', '') == [LineSegment(REMOVED, 'x\n')]


def test_diff_lines_replace_puts_removal_first():
    """Test a changed line is a removal followed by an addition."""
    segments = diff_lines('a\nb\nc\n', 'a\nB\nc\n')
    assert segments == [
        LineSegment(UNCHANGED, 'a\n'),
        LineSegment(REMOVED, 'b\n'),
        LineSegment(ADDED, 'B\n'),
        LineSegment(UNCHANGED, 'c\n'),
    ]


def test_diff_lines_keeps_common_lines():
    """Test lines shared by both texts stay unchanged."""
    old = 'a\nb\nc\nd\ne\n'
    new = 'b\nc\nx\ne\nf\n'
    segments = diff_lines(old, new)
    kept = ''.join(s.value for s in segments if s.tag == UNCHANGED)
    assert kept == 'b\nc\ne\n'


def test_diff_lines_missing_final_newline():
    """Test a change in the trailing newline is a line change."""
    segments = diff_lines('a\nb', 'a\nb\n')
    assert tags(segments) == [UNCHANGED, REMOVED, ADDED]
    assert segments[1].value == 'b'
    assert segments[2].value == 'b\n'


def test_adjacent_segments_have_distinct_tags():
    """Test runs of the same tag are merged."""
    segments = diff_lines('1\n2\n3\n4\n', '1\nx\ny\n4\n5\n6\n')
    for left, right in zip(segments, segments[1:]):
        assert left.tag != right.tag
    assert segments[-1] == LineSegment(ADDED, '5\n6\n')


@pytest.mark.parametrize('old,new', [
    ('', ''),
    ('a\nb\nc\n', 'c\nb\na\n'),
    ('same\n' * 3, 'same\n' * 5),
    ('x\ny\nz', 'y\nz\nw'),
    ('one\ntwo\nthree\nfour\n', 'zero\none\nthree\nfive\nfour'),
    ('ünï\ncödé\n', 'cödé\nünï\n'),
    ('a\n\n\nb\n', '\na\nb\n\n'),
])
def test_reconstruction(old, new):
    """Test both texts are rebuilt exactly from the segments."""
    segments = diff_lines(old, new)
    assert reconstruct(segments, REMOVED) == old
    assert reconstruct(segments, ADDED) == new


def test_diff_lines_full_rewrite_of_large_file():
    """Test thousands of rewritten lines diff as one removal and one addition."""
    old = ''.join(f'old line {i}\n' for i in range(3000))
    new = ''.join(f'new line {i}\n' for i in range(3000))

    segments = diff_lines(old, new)
    assert segments == [LineSegment(REMOVED, old), LineSegment(ADDED, new)]


def test_diff_lines_scattered_edits_in_large_file():
    """Test a few edits in a long file keep everything else unchanged."""
    lines = [f'line {i}\n' for i in range(5000)]
    edited = list(lines)
    for i in (10, 2500, 4990):
        edited[i] = f'edited {i}\n'
    old, new = ''.join(lines), ''.join(edited)

    segments = diff_lines(old, new)
    assert [s.value for s in segments if s.tag == REMOVED] == ['line 10\n', 'line 2500\n', 'line 4990\n']
    assert reconstruct(segments, REMOVED) == old
    assert reconstruct(segments, ADDED) == new


def test_segment_line_count():
    """Test segment line counting."""
    assert LineSegment(ADDED, 'a\nb\nc').line_count == 3


def test_diff_root_commit(repo_with_commits):
    """Test a root commit reports no prior state and no file diffs."""
    repo = repo_with_commits
    result = DiffEngine(repo).diff(repo.commits[0])
    assert result.is_root
    assert result.parent_hash is None
    assert result.files == []


def test_diff_root_commit_never_reads_parent(repo_with_commits, monkeypatch):
    """Test the parent lookup is skipped for root commits."""
    repo = repo_with_commits
    root = repo.commits[0]
    reads = []
    original = repo.read_commit

    def tracking(commit_hash):
        reads.append(commit_hash)
        return original(commit_hash)

    monkeypatch.setattr(repo, 'read_commit', tracking)
    DiffEngine(repo).diff(root)
    assert reads == [root]


def test_diff_modified_and_added_files(repo_with_commits):
    """Test modified files get a line diff and new files are all additions."""
    repo = repo_with_commits
    result = repo.diff.diff(repo.commits[1])

    assert not result.is_root
    a = result.get('a.txt')
    assert a.status == 'modified'
    assert a.segments == [LineSegment(UNCHANGED, 'hello\n'), LineSegment(ADDED, 'world\n')]
    assert a.removed == []

    b = result.get('b.txt')
    assert b.is_new
    assert b.status == 'added'
    assert b.segments == [LineSegment(ADDED, 'new file\n')]


def test_diff_unchanged_file(repo, write_file):
    """Test restaging identical content reports an unchanged file."""
    path = write_file('a.txt', 'same\n')
    repo.index.stage(path)
    repo.commit('first')
    repo.index.stage(path)
    result = repo.diff.diff(repo.commit('second'))

    assert result.get('a.txt').status == 'unchanged'
    assert result.get('a.txt').segments == [LineSegment(UNCHANGED, 'same\n')]


def test_diff_uses_first_parent_match(repo, fixed_time):
    """Test duplicate parent entries resolve to the first one."""
    old_first = repo.store.put(b'first\n')
    old_second = repo.store.put(b'second\n')
    new = repo.store.put(b'first\nmore\n')

    parent = repo.store.write_object(Commit.create(
        parent=None, message='p', timestamp=fixed_time,
        files=[IndexEntry('a.txt', old_first), IndexEntry('a.txt', old_second)]))
    child = repo.store.write_object(Commit.create(
        parent=parent, message='c', timestamp=fixed_time,
        files=[IndexEntry('a.txt', new)]))

    file_diff = repo.diff.diff(child).files[0]
    assert file_diff.old_hash == old_first
    assert file_diff.added == [LineSegment(ADDED, 'more\n')]


def test_diff_empty_new_file(repo, write_file):
    """Test an empty new file has no segments."""
    repo.index.stage(write_file('a.txt', 'a\n'))
    repo.commit('first')
    repo.index.stage(write_file('empty.txt', ''))
    result = repo.diff.diff(repo.commit('second'))
    assert result.get('empty.txt').segments == []


def test_diff_missing_commit(repo):
    """Test an unknown commit hash raises NotFound."""
    with pytest.raises(NotFound) as excinfo:
        repo.diff.diff('a' * 40)
    assert excinfo.value.hash == 'a' * 40


def test_diff_missing_blob(repo, fixed_time):
    """Test a missing blob raises NotFound naming it."""
    parent = repo.store.write_object(Commit.create(
        parent=None, message='p', files=[], timestamp=fixed_time))
    child = repo.store.write_object(Commit.create(
        parent=parent, message='c', files=[IndexEntry('a.txt', 'b' * 40)],
        timestamp=fixed_time))

    with pytest.raises(NotFound) as excinfo:
        repo.diff.diff(child)
    assert excinfo.value.hash == 'b' * 40


def test_format_diff_plain(repo_with_commits):
    """Test uncolored rendering of a commit diff."""
    repo = repo_with_commits
    text = repo.diff.format_diff(repo.diff.diff(repo.commits[1]), color=False)
    lines = text.split('\n')

    assert 'diff --groot a/a.txt b/a.txt' in lines
    assert ' hello' in lines
    assert '+world' in lines
    assert 'new file: b.txt' in lines
    assert '+new file' in lines


def test_format_diff_root(repo_with_commits):
    """Test root commits render as having no prior state."""
    repo = repo_with_commits
    text = repo.diff.format_diff(repo.diff.diff(repo.commits[0]), color=False)
    assert text == 'Root commit, no prior state'
