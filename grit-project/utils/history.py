# What it does: Builds and reads the commit history: creating commits, checking them out, tagging, branching and resolving names to object ids
# How it does: A commit object points at one tree and at most one parent commit; HEAD and the refs under refs/ point at commits
# What data structure it uses: Singly Linked List (each commit links only to its parent, so the history is walked with a simple loop)

import logging
from collections import namedtuple

from . import tree as tree_utils
from .errors import InvalidCommitFormatError, InvalidPathError, ObjectNotFoundError
from .objects import is_oid
from .refs import HEAD, HEADS_PREFIX, TAGS_PREFIX

logger = logging.getLogger(__name__)

Commit = namedtuple('Commit', ['tree', 'parent', 'message'])


def format_commit(tree, parent, message):
    lines = [f'tree {tree}\n']
    if parent:
        lines.append(f'parent {parent}\n')
    lines.append('\n')
    lines.append(message)
    return ''.join(lines).encode()


def parse_commit(payload, oid='<unknown>'):
    """Parse a commit payload into a Commit.

    The header is `tree <id>`, then an optional `parent <id>`, then a
    blank line; everything after the blank line is the message, kept
    exactly as stored.
    """
    try:
        text = payload.decode('utf-8')
    except UnicodeDecodeError:
        raise InvalidCommitFormatError(f"commit {oid} is not valid UTF-8") from None

    header, separator, message = text.partition('\n\n')
    if not separator:
        raise InvalidCommitFormatError(f"commit {oid} has no blank line after its header")

    lines = header.split('\n')
    key, _, tree = lines[0].partition(' ')
    if key != 'tree' or not is_oid(tree):
        raise InvalidCommitFormatError(f"commit {oid} does not start with 'tree <id>'")

    parent = None
    if len(lines) == 2:
        key, _, parent = lines[1].partition(' ')
        if key != 'parent' or not is_oid(parent):
            raise InvalidCommitFormatError(f"commit {oid} has a malformed parent line: {lines[1]!r}")
    elif len(lines) > 2:
        raise InvalidCommitFormatError(f"commit {oid} has unexpected header lines")

    return Commit(tree=tree, parent=parent, message=message)


def get_commit(store, oid):
    _, payload = store.get(oid, 'commit')
    return parse_commit(payload, oid)


def commit(store, refs, message, directory): # Snapshots `directory`, records it on top of HEAD and moves HEAD to the new commit
    tree_oid = tree_utils.write_tree(store, directory)
    parent = refs.get(HEAD)
    oid = store.put('commit', format_commit(tree_oid, parent, message))
    refs.set(HEAD, oid)
    logger.debug("committed %s (tree %s, parent %s)", oid, tree_oid, parent)
    return oid


def checkout(store, refs, oid, directory):
    # HEAD only moves once the working directory has been fully restored
    target = get_commit(store, oid)
    tree_utils.read_tree(store, target.tree, directory)
    refs.set(HEAD, oid)


def create_tag(refs, name, oid):
    refs.set(f'{TAGS_PREFIX}{name}', oid)


def create_branch(refs, name, oid):
    refs.set(f'{HEADS_PREFIX}{name}', oid)


def iter_branches(refs): # Yields (branch name, oid)
    for ref, oid in refs.iter_refs(HEADS_PREFIX):
        yield ref[len(HEADS_PREFIX):], oid


def get_oid(refs, name):
    """Resolve a user supplied name to an object id.

    `@` means HEAD. Otherwise the name is tried as a ref, then below
    refs/, refs/tags/ and refs/heads/, and finally as a literal 40 digit
    hex id (either case, returned lowercased). The first match wins; a
    candidate that is not a usable ref name simply does not match.
    """
    if name == '@':
        name = HEAD

    for candidate in (name, f'refs/{name}', f'{TAGS_PREFIX}{name}', f'{HEADS_PREFIX}{name}'):
        try:
            oid = refs.get(candidate)
        except InvalidPathError:
            continue
        if oid:
            logger.debug("resolved %s via %s to %s", name, candidate, oid)
            return oid

    if is_oid(name.lower()):
        return name.lower()

    raise ObjectNotFoundError(f"unknown revision or object '{name}'")


def iter_commits(store, oid): # Yields (oid, Commit) from `oid` back to the root commit
    while oid:
        current = get_commit(store, oid)
        yield oid, current
        oid = current.parent
