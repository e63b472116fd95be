# What it does: Manages the object database, the storage and retrieval of all blobs, trees and commits
# How it does: Each object is saved as `<kind>\0<payload>` in `.grit/objects/<sha1>`, where the sha1 is taken over those exact bytes
# What data structure it uses: Hash Table / Dictionary (the object store maps a SHA-1 id to a (kind, payload) pair)

import hashlib
import logging
import os
import re
from tempfile import NamedTemporaryFile

from .errors import (
    CorruptObjectError,
    ObjectNotFoundError,
    RepositoryIOError,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)

OBJECT_KINDS = ('blob', 'tree', 'commit')

OID_RE = re.compile(r'^[0-9a-f]{40}$')


def is_oid(value):
    return bool(OID_RE.match(value))


def compute_oid(kind, payload):
    """Return the id an object with this kind and payload is stored under."""
    return hashlib.sha1(_tagged(kind, payload)).hexdigest()


def _tagged(kind, payload):
    return kind.encode() + b'\0' + payload


class ObjectStore:
    """Append-only content addressed store rooted at `<metadata dir>/objects`."""

    def __init__(self, git_dir):
        self.objects_dir = os.path.join(git_dir, 'objects')

    def object_path(self, oid):
        return os.path.join(self.objects_dir, oid)

    def contains(self, oid):
        return is_oid(oid) and os.path.isfile(self.object_path(oid))

    def put(self, kind, payload):
        """Store `payload` tagged with `kind` and return its id.

        Storing an object that is already present leaves the existing file
        untouched, so calling this twice with the same arguments is a no-op.
        """
        if kind not in OBJECT_KINDS:
            raise ValueError(f"unknown object kind: {kind}")

        data = _tagged(kind, payload)
        oid = hashlib.sha1(data).hexdigest()
        path = self.object_path(oid)
        if os.path.isfile(path):
            logger.debug("object %s already stored", oid)
            return oid

        # Write next to the final location and rename, so a reader never sees half an object
        try:
            os.makedirs(self.objects_dir, exist_ok=True)
            with NamedTemporaryFile(dir=self.objects_dir, prefix='tmp-', delete=False) as tmp:
                tmp.write(data)
            os.replace(tmp.name, path)
        except OSError as e:
            raise RepositoryIOError(path, e.strerror or str(e)) from e

        logger.debug("stored %s %s (%d bytes)", kind, oid, len(payload))
        return oid

    def get(self, oid, expected_kind=None):
        """Return `(kind, payload)` for `oid`.

        Raises ObjectNotFoundError when nothing is stored under `oid` and
        TypeMismatchError when `expected_kind` is given and differs from
        the stored kind.
        """
        if not is_oid(oid):
            raise ObjectNotFoundError(f"not a valid object id: {oid}")

        path = self.object_path(oid)
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except FileNotFoundError:
            raise ObjectNotFoundError(f"object not found: {oid}") from None
        except OSError as e:
            raise RepositoryIOError(path, e.strerror or str(e)) from e

        null_byte_index = data.find(b'\0')
        if null_byte_index == -1:
            raise CorruptObjectError(f"object {oid} has no kind header")
        kind = data[:null_byte_index].decode('ascii', errors='replace')
        payload = data[null_byte_index + 1:]

        if kind not in OBJECT_KINDS:
            raise CorruptObjectError(f"object {oid} has unknown kind '{kind}'")
        if expected_kind is not None and kind != expected_kind:
            raise TypeMismatchError(oid, expected_kind, kind)

        return kind, payload
