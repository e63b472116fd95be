# The command: grit write-tree
# What it does: Snapshots the whole working directory into tree and blob objects and prints the root tree id

import sys
from utils import repository, tree
from utils.errors import GritError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    store, _ = repository.open_stores(repo_root)
    try:
        oid = tree.write_tree(store, repo_root)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(oid)
