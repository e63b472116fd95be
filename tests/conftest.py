# Shared pytest fixtures for grit tests

import pytest
import os
import sys
import shutil
import tempfile

# Add grit-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'grit-project'))

from utils import repository, history
from utils.refs import MemoryRefStore


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized grit repository in a temporary directory and moves into it
    original_dir = os.getcwd()
    os.chdir(temp_dir)
    repository.init_repository(temp_dir)

    yield temp_dir

    os.chdir(original_dir)


@pytest.fixture
def stores(temp_repo):
    # (ObjectStore, RefStore) of the temporary repository
    return repository.open_stores(temp_repo)


@pytest.fixture
def store(stores):
    return stores[0]


@pytest.fixture
def memory_refs():
    return MemoryRefStore()


@pytest.fixture
def repo_with_commit(temp_repo, store, memory_refs):
    # A working directory with one file, committed once; refs live in memory
    write_file(temp_repo, 'README.md', '# Test Project\n')
    commit_hash = history.commit(store, memory_refs, 'Initial commit', temp_repo)
    return temp_repo, commit_hash


def write_file(root, path, content):
    # Writes `content` (str or bytes) to root/path, creating directories
    full_path = os.path.join(root, *path.split('/'))
    os.makedirs(os.path.dirname(full_path), exist_ok=True)
    mode = 'wb' if isinstance(content, bytes) else 'w'
    with open(full_path, mode) as f:
        f.write(content)
    return full_path


def read_file(root, path):
    with open(os.path.join(root, *path.split('/')), 'rb') as f:
        return f.read()


def snapshot(root):
    # {relative path: bytes} of every file below root, ignoring .grit
    result = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d != repository.GIT_DIR]
        for filename in filenames:
            full_path = os.path.join(dirpath, filename)
            rel = os.path.relpath(full_path, root).replace(os.sep, '/')
            with open(full_path, 'rb') as f:
                result[rel] = f.read()
    return result


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
