# What it does: Provides the functions for locating and creating a repository and opening its object and reference stores
# How it does: `find_repo_root` walks up the directory tree to locate the `.grit` directory, `init_repository` creates it
# What data structure it uses: Uses recursion (linear recursion, bounded by the depth of the current path) to find the repo root

import logging
import os

from .errors import RepositoryIOError
from .objects import ObjectStore
from .refs import RefStore

logger = logging.getLogger(__name__)

GIT_DIR = '.grit'


def git_dir(repo_root):
    return os.path.join(repo_root, GIT_DIR)


def find_repo_root(path='.'): # Recursively searches for the .grit directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, GIT_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def init_repository(path='.'): # Creates `.grit/objects`; returns (metadata dir, whether it already existed)
    repo_path = git_dir(os.path.abspath(path))
    existed = os.path.isdir(repo_path)
    objects_path = os.path.join(repo_path, 'objects')
    try:
        os.makedirs(objects_path, exist_ok=True)
    except OSError as e:
        raise RepositoryIOError(objects_path, e.strerror or str(e)) from e
    logger.debug("%s repository at %s", "reused" if existed else "created", repo_path)
    return repo_path, existed


def open_stores(repo_root): # Returns the (ObjectStore, RefStore) pair of a repository
    path = git_dir(repo_root)
    return ObjectStore(path), RefStore(path)
