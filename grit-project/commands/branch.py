# The command: grit branch [<branch-name> [<start-point>]]
# What it does: Creates a new branch pointer to a commit (HEAD by default), or if no name is given, it lists all existing branches
# How it does: To create a branch, it resolves the start point and writes its id to `.grit/refs/heads/<branch-name>`
# To list branches, it reads every ref under `refs/heads` and prints them, marking the ones that point at HEAD with an asterisk
# What data structure it uses: Map / Dictionary (conceptually, the `refs/heads` directory maps branch names to commit hashes)

import sys
from utils import repository, history
from utils.errors import GritError
from utils.refs import HEAD

def run(args):
#With no arguments, lists all branches.
#With an argument, creates a new branch.

    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    _, refs = repository.open_stores(repo_root)

    if args.name:
        try:
            oid = history.get_oid(refs, args.start_point or '@')
            history.create_branch(refs, args.name, oid)
        except GritError as e:
            print(f"fatal: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Branch '{args.name}' created at commit {oid[:7]}")
    else:
        head = refs.get(HEAD)
        for name, oid in history.iter_branches(refs):
            if oid == head:
                print(f"* {name}")
            else:
                print(f"  {name}")
