"""History walker tests."""

import pytest
from types import GeneratorType
from groot.core.errors import CorruptHistory, CorruptStore
from groot.core.objects import Commit
from groot.operations.log import HistoryWalker


def test_log_empty_repository(repo):
    """Test no commits yields nothing."""
    assert list(repo.log()) == []


def test_log_walks_newest_first(repo_with_commits):
    """Test log follows parents from HEAD to the root."""
    repo = repo_with_commits
    commits = list(repo.log())

    assert [c.message for c in commits] == ['second', 'first']
    assert [c.hash for c in commits] == list(reversed(repo.commits))
    assert commits[-1].parent is None


def test_log_is_lazy(repo_with_commits):
    """Test log returns a generator that reads commits on demand."""
    walk = repo_with_commits.log()
    assert isinstance(walk, GeneratorType)
    assert next(walk).message == 'second'


def test_log_length_matches_chain(repo, write_file):
    """Test log terminates with one element per reachable commit."""
    for i in range(5):
        repo.index.stage(write_file('a.txt', f'{i}\n'))
        repo.commit(f'commit {i}')

    commits = list(repo.history.log())
    assert len(commits) == 5
    assert commits[-1].is_root


def test_log_max_count(repo_with_commits):
    """Test max_count limits the walk."""
    assert len(list(repo_with_commits.history.walk(max_count=1))) == 1


def test_log_from_start(repo_with_commits):
    """Test walking from an explicit commit."""
    first = repo_with_commits.commits[0]
    assert [c.hash for c in repo_with_commits.history.walk(first)] == [first]


def test_log_broken_parent_raises(repo, fixed_time):
    """Test a missing parent raises CorruptHistory naming the hash."""
    missing = 'e' * 40
    orphan = Commit.create(parent=missing, message='orphan', files=[], timestamp=fixed_time)
    repo.refs.update_head(repo.store.write_object(orphan))

    walk = repo.log()
    assert next(walk).message == 'orphan'
    with pytest.raises(CorruptHistory) as excinfo:
        next(walk)
    assert excinfo.value.hash == missing
    assert missing in str(excinfo.value)


def test_log_missing_head_raises(repo):
    """Test a HEAD naming a missing commit raises CorruptHistory."""
    repo.refs.update_head('a' * 40)
    with pytest.raises(CorruptHistory):
        list(repo.log())


def test_log_detects_cycle(repo, monkeypatch, fixed_time):
    """Test a repeated hash is reported instead of looping forever."""
    looping = Commit.create(parent=None, message='loop', files=[], timestamp=fixed_time)
    looping_hash = repo.store.write_object(looping)
    looping.parent = looping_hash
    repo.refs.update_head(looping_hash)

    monkeypatch.setattr(repo, 'read_commit', lambda commit_hash: looping)
    with pytest.raises(CorruptHistory, match='twice'):
        list(HistoryWalker(repo).walk())


def test_log_malformed_commit_raises_corrupt_store(repo):
    """Test a non-commit object in the chain surfaces as CorruptStore."""
    blob_hash = repo.store.put(b'just a blob\n')
    repo.refs.update_head(blob_hash)
    with pytest.raises(CorruptStore):
        list(repo.log())
