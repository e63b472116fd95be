# What it does: Stores references, the only mutable state in a repository (HEAD, branches under refs/heads, tags under refs/tags)
# How it does: Each reference is a small text file under `.grit` whose whole content is one object id
# What data structure it uses: Map / Dictionary (reference name -> object id); the names themselves form a tree of namespaces

import logging
import os
from tempfile import NamedTemporaryFile

from .errors import CorruptObjectError, InvalidPathError, RepositoryIOError
from .objects import is_oid

logger = logging.getLogger(__name__)

HEAD = 'HEAD'
HEADS_PREFIX = 'refs/heads/'
TAGS_PREFIX = 'refs/tags/'


def check_ref_name(name):
    # Reference names become file paths, they must stay inside the metadata directory
    parts = name.split('/')
    if not name or name.startswith('/') or any(part in ('', '.', '..') for part in parts):
        raise InvalidPathError(f"invalid reference name '{name}'")
    if '\\' in name or '\0' in name:
        raise InvalidPathError(f"invalid reference name '{name}'")
    return parts


def is_ref_name(name):
    # Only HEAD and the refs/ namespace hold references; objects/, config and the rest of .grit do not
    return name == HEAD or name.startswith('refs/')


def check_writable_ref(name):
    check_ref_name(name)
    if not is_ref_name(name):
        raise InvalidPathError(f"'{name}' is not under HEAD or refs/")


class RefStore:
    """References kept as files below the repository's metadata directory."""

    def __init__(self, git_dir):
        self.git_dir = git_dir

    def _path(self, name):
        return os.path.join(self.git_dir, *check_ref_name(name))

    def set(self, name, oid):
        check_writable_ref(name)
        path = self._path(name)
        directory = os.path.dirname(path)
        try:
            os.makedirs(directory, exist_ok=True)
            with NamedTemporaryFile('w', dir=directory, prefix='.tmp-', delete=False) as tmp:
                tmp.write(oid)
            os.replace(tmp.name, path)
        except OSError as e:
            raise RepositoryIOError(path, e.strerror or str(e)) from e
        logger.debug("updated %s -> %s", name, oid)

    def get(self, name):
        path = self._path(name)
        if not is_ref_name(name) or not os.path.isfile(path):
            return None
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise RepositoryIOError(path, e.strerror or str(e)) from e

        try:
            value = data.decode('utf-8').strip()
        except UnicodeDecodeError:
            raise CorruptObjectError(f"reference {name} is not valid text") from None
        if not value:
            return None
        if not is_oid(value):
            raise CorruptObjectError(f"reference {name} does not hold an object id: {value[:60]!r}")
        return value

    def iter_refs(self, prefix='refs/'):
        """Yield `(name, oid)` for every reference below `prefix`, sorted by name."""
        root = self._path(prefix.rstrip('/'))
        found = []
        for dirpath, dirnames, filenames in os.walk(root):
            for filename in filenames:
                if filename.startswith('.tmp-'):
                    continue
                rel = os.path.relpath(os.path.join(dirpath, filename), self.git_dir)
                found.append(rel.replace(os.sep, '/'))
        for name in sorted(found):
            oid = self.get(name)
            if oid:
                yield name, oid


class MemoryRefStore:
    """RefStore lookalike that keeps everything in a dict."""

    def __init__(self, initial=None):
        self.refs = dict(initial or {})

    def set(self, name, oid):
        check_writable_ref(name)
        self.refs[name] = oid

    def get(self, name):
        check_ref_name(name)
        if not is_ref_name(name):
            return None
        return self.refs.get(name) or None

    def iter_refs(self, prefix='refs/'):
        for name in sorted(self.refs):
            if name.startswith(prefix) and self.refs[name]:
                yield name, self.refs[name]
