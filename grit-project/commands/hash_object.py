# The command: grit hash-object <file>
# What it does: Stores the contents of a file as a blob object and prints its id

import os
import sys
from utils import repository
from utils.errors import GritError, RepositoryIOError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    store, _ = repository.open_stores(repo_root)
    path = os.path.abspath(args.file)
    try:
        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise RepositoryIOError(path, e.strerror or str(e)) from e
        oid = store.put('blob', content)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(oid)
