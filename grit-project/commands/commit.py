# The command: grit commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the working directory
# How it does: It builds a Merkle Tree of the working directory to get a single root hash for the project's state, wraps that tree and the current HEAD (the parent) in a "commit" object, and moves HEAD to the new commit
# What data structure it uses: Merkle Tree (to represent the project's file structure), Linked List (each commit links to its single parent), Hash Table / Dictionary (the underlying object store)

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
        oid = history.commit(store, refs, args.message, repo_root)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(oid)
