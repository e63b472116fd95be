# The command: grit cat-file [-t] <object>
# What it does: Prints the raw payload of an object, or only its kind with -t
# How it does: Resolves the name (ref, tag, branch or id) and reads the object from the store

import sys
from utils import repository, history
from utils.errors import GritError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    store, refs = repository.open_stores(repo_root)
    try:
        oid = history.get_oid(refs, args.object)
        kind, payload = store.get(oid)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if args.type:
        print(kind)
        return

    # Blobs can hold arbitrary bytes, write them untouched
    sys.stdout.flush()
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()
