# Unit tests for utils/repository.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'grit-project'))

from utils import repository
from utils.objects import ObjectStore
from utils.refs import RefStore


class TestFindRepoRoot:
    # Tests for repository.find_repo_root()

    def test_finds_repo_in_current_dir(self, temp_repo):
        # Should find repo when in root directory
        result = repository.find_repo_root(temp_repo)
        assert result == temp_repo

    def test_finds_repo_in_subdirectory(self, temp_repo):
        # Should find repo when in a subdirectory
        subdir = os.path.join(temp_repo, 'src', 'deep', 'nested')
        os.makedirs(subdir)
        os.chdir(subdir)

        result = repository.find_repo_root()
        # Use realpath to resolve symlinks
        assert os.path.realpath(result) == os.path.realpath(temp_repo)

    def test_returns_none_when_not_in_repo(self, temp_dir):
        # Should return None when not in a repository
        result = repository.find_repo_root(temp_dir)
        assert result is None


class TestInitRepository:
    # Tests for repository.init_repository()

    def test_creates_objects_dir(self, temp_dir):
        repo_path, existed = repository.init_repository(temp_dir)

        assert repo_path == os.path.join(temp_dir, '.grit')
        assert not existed
        assert os.path.isdir(os.path.join(temp_dir, '.grit', 'objects'))

    def test_head_is_unborn(self, temp_dir):
        repository.init_repository(temp_dir)
        assert not os.path.exists(os.path.join(temp_dir, '.grit', 'HEAD'))

    def test_reinitialize_keeps_objects(self, temp_dir):
        repository.init_repository(temp_dir)
        store, _ = repository.open_stores(temp_dir)
        oid = store.put('blob', b'keep me')

        _, existed = repository.init_repository(temp_dir)

        assert existed
        assert store.get(oid) == ('blob', b'keep me')


class TestOpenStores:

    def test_returns_stores_rooted_in_metadata_dir(self, temp_repo):
        store, refs = repository.open_stores(temp_repo)
        assert isinstance(store, ObjectStore)
        assert isinstance(refs, RefStore)
        assert store.objects_dir == os.path.join(temp_repo, '.grit', 'objects')
        assert refs.git_dir == os.path.join(temp_repo, '.grit')
