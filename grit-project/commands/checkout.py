# The command: grit checkout <commit>
# What it does: Restores the working directory to the snapshot of a commit and makes that commit the new HEAD
# How it does: Resolves the name to a commit id, reads the commit, materializes its tree into the working directory and, only once that succeeded, writes the id into `.grit/HEAD`
# What data structure it uses: Dictionary (the flattened tree, path -> blob id), Hash Table (object store lookup)

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
        oid = history.get_oid(refs, args.commit)
        history.checkout(store, refs, oid, repo_root)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"HEAD is now at {oid}")
