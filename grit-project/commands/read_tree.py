# The command: grit read-tree <tree>
# What it does: Replaces the working directory with the contents of a tree object
# How it does: Resolves the name, checks every object the tree needs, empties the working directory (keeping `.grit`) and writes the files back
# Anything not committed is lost, like a hard reset

import sys
from utils import repository, history, tree
from utils.errors import GritError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    store, refs = repository.open_stores(repo_root)
    try:
        oid = history.get_oid(refs, args.tree)
        tree.read_tree(store, oid, repo_root)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Successfully read tree {oid}")
