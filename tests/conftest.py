"""Shared pytest fixtures for Groot tests."""

import pytest
import tempfile
import shutil
from datetime import datetime, timezone
from pathlib import Path
from groot.core.config import Config
from groot.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's global config and GROOT_* variables out of tests."""
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / 'global.grootconfig')
    for key in ('GROOT_CORE_ALLOWEMPTY', 'GROOT_CORE_STAGEMODE',
                'GROOT_CORE_VERIFYOBJECTS', 'GROOT_COLOR_UI'):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def write_file(repo):
    """Write a file into the work tree and return its path."""
    def _write(name, content):
        path = repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode('utf-8'))
        return path
    return _write


@pytest.fixture
def fixed_time():
    """A deterministic commit timestamp."""
    return datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture
def repo_with_commits(repo, write_file):
    """
    Repository with two commits.

    first:  a.txt = "hello\\n"
    second: a.txt = "hello\\nworld\\n", b.txt = "new file\\n"
    """
    repo.index.stage(write_file('a.txt', 'hello\n'))
    first = repo.commit('first')

    repo.index.stage(write_file('a.txt', 'hello\nworld\n'))
    repo.index.stage(write_file('b.txt', 'new file\n'))
    second = repo.commit('second')

    repo.commits = [first, second]
    return repo
