# What it does: Converts between directories on disk and tree objects in the object store
# How it does: `write_tree` snapshots a directory into blob and tree objects, `get_tree` flattens a stored tree into {path: blob id} and `read_tree` restores a working directory from a tree
# What data structure it uses: Merkle Tree (each tree id is a hash over the ids of its children), walked with an explicit Stack instead of recursion so deep nesting cannot hit the recursion limit

import logging
import os

from .errors import CorruptObjectError, InvalidPathError, RepositoryIOError
from .objects import is_oid
from .repository import GIT_DIR

logger = logging.getLogger(__name__)

ENTRY_KINDS = ('blob', 'tree')


def is_ignored(name):
    return name == GIT_DIR


def check_entry_name(name):
    # A tree entry must name exactly one thing inside its own directory
    if not name or name in ('.', '..') or is_ignored(name):
        raise InvalidPathError(f"invalid tree entry name '{name}'")
    for sep in ('/', os.sep, os.altsep):
        if sep and sep in name:
            raise InvalidPathError(f"invalid tree entry name '{name}'")
    if '\0' in name or '\n' in name:
        raise InvalidPathError(f"invalid tree entry name {name!r}")


def _scan(directory):
    try:
        with os.scandir(directory) as it:
            entries = [entry for entry in it if not is_ignored(entry.name)]
    except OSError as e:
        raise RepositoryIOError(directory, e.strerror or str(e)) from e
    return sorted(entries, key=lambda entry: entry.name)


def _classify(entry):
    if entry.is_symlink():
        raise InvalidPathError(f"symbolic links are not supported: {entry.path}")
    if '\n' in entry.name:
        raise InvalidPathError(f"file names containing a newline are not supported: {entry.path!r}")
    try:
        entry.name.encode('utf-8')
    except UnicodeEncodeError:
        raise InvalidPathError(f"file name is not valid UTF-8: {entry.path!r}") from None

    if entry.is_dir(follow_symlinks=False):
        return 'tree'
    if entry.is_file(follow_symlinks=False):
        return 'blob'
    return None


def _read_file(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise RepositoryIOError(path, e.strerror or str(e)) from e


def write_tree(store, directory):
    """Snapshot `directory` into the object store and return the root tree id.

    The metadata directory is skipped wherever it appears. Entries are
    written sorted by name so an unchanged directory always hashes to the
    same id.
    """
    directory = os.path.abspath(directory)

    # First pass: list every directory, parents before children
    listings = {}
    order = []
    pending = [directory]
    while pending:
        current = pending.pop()
        order.append(current)
        listing = []
        for entry in _scan(current):
            kind = _classify(entry)
            if kind is None:
                logger.debug("skipping special file %s", entry.path)
                continue
            listing.append((kind, entry.name, entry.path))
            if kind == 'tree':
                pending.append(entry.path)
        listings[current] = listing

    # Second pass: children before parents, so every subtree id is known when its parent is written
    tree_ids = {}
    for current in reversed(order):
        lines = []
        for kind, name, path in listings[current]:
            if kind == 'blob':
                oid = store.put('blob', _read_file(path))
            else:
                oid = tree_ids[path]
            lines.append(f'{kind} {oid} {name}\n')
        tree_ids[current] = store.put('tree', ''.join(lines).encode())
        logger.debug("wrote tree %s for %s", tree_ids[current], current)

    return tree_ids[directory]


def iter_tree_entries(store, oid): # Yields (kind, oid, name) for every line of a tree object
    _, tree = store.get(oid, 'tree')
    try:
        text = tree.decode('utf-8')
    except UnicodeDecodeError:
        raise CorruptObjectError(f"tree {oid} is not valid UTF-8") from None

    for line in text.split('\n'):
        if not line:
            continue
        parts = line.split(' ', 2)
        if len(parts) != 3:
            raise CorruptObjectError(f"malformed entry in tree {oid}: {line!r}")
        kind, entry_oid, name = parts
        if kind not in ENTRY_KINDS or not is_oid(entry_oid):
            raise CorruptObjectError(f"malformed entry in tree {oid}: {line!r}")
        yield kind, entry_oid, name


def get_tree(store, oid, base_path='', directories=None):
    """Flatten tree `oid` into a dict of {relative path: blob id}.

    Paths use '/' and are prefixed with `base_path`. When `directories` is
    a list, the path of every subtree is appended to it as well.
    """
    result = {}
    pending = [(oid, base_path)]
    while pending:
        tree_oid, prefix = pending.pop()
        for kind, entry_oid, name in iter_tree_entries(store, tree_oid):
            check_entry_name(name)
            path = prefix + name
            if kind == 'blob':
                result[path] = entry_oid
            else:
                if directories is not None:
                    directories.append(path)
                pending.append((entry_oid, f'{path}/'))
    return result


def _empty_directory(directory): # Removes everything in `directory` except the metadata directory
    visited = []
    pending = [directory]
    while pending:
        current = pending.pop()
        visited.append(current)
        for entry in _scan(current):
            if entry.is_dir(follow_symlinks=False):
                pending.append(entry.path)
                continue
            try:
                os.remove(entry.path) # Files, symlinks and special files alike
            except OSError as e:
                raise RepositoryIOError(entry.path, e.strerror or str(e)) from e

    # Deepest first; a directory that still holds a nested metadata directory stays
    for current in reversed(visited[1:]):
        try:
            if not os.listdir(current):
                os.rmdir(current)
        except OSError as e:
            raise RepositoryIOError(current, e.strerror or str(e)) from e


def read_tree(store, tree_oid, directory):
    """Replace the contents of `directory` with the snapshot in `tree_oid`.

    Every tree and blob is read and checked before the directory is
    touched, so a missing or malformed object leaves it unchanged. A
    filesystem error while writing can still leave it half restored.
    """
    directory = os.path.abspath(directory)
    subdirs = []
    files = get_tree(store, tree_oid, directories=subdirs)
    contents = {path: store.get(oid, 'blob')[1] for path, oid in files.items()}

    _empty_directory(directory)

    for path in subdirs:
        full_path = os.path.join(directory, path)
        try:
            os.makedirs(full_path, exist_ok=True)
        except OSError as e:
            raise RepositoryIOError(full_path, e.strerror or str(e)) from e

    for path, data in contents.items():
        full_path = os.path.join(directory, path)
        try:
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise RepositoryIOError(full_path, e.strerror or str(e)) from e

    logger.debug("restored %d files from tree %s into %s", len(contents), tree_oid, directory)
