# The command: grit log [<commit>]
# What it does: Displays the commit history by starting at a commit (HEAD by default) and walking backward through the parent links
# How it does: It resolves the starting name, then reads one commit at a time, prints it and moves on to its parent until a root commit is reached
# What data structure it uses: It performs a linear traversal of the Linked List formed by the parent pointers

import sys
from utils import repository, history
from utils.errors import GritError
from utils.refs import HEAD

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root: #Check if inside a grit repository
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    store, refs = repository.open_stores(repo_root)

    try:
        if not args.commit and not refs.get(HEAD): # Check if there are any commits
            print("There are no commits yet.")
            return

        oid = history.get_oid(refs, args.commit or '@')
        for commit_hash, commit in history.iter_commits(store, oid):
            print(f"commit {commit_hash}")
            for line in commit.message.splitlines():
                print(f"\t{line}")
            print()
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
