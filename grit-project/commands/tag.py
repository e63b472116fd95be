# The command: grit tag <name> [<commit>]
# What it does: Creates a lightweight tag ref pointing to a commit, HEAD when no commit is given.
# How it does: It resolves the target and writes its id to `.grit/refs/tags/<name>`, replacing any tag of the same name.
# What data structure it uses: Files references (similar to branches).

import sys
from utils import repository, history
from utils.errors import GritError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    _, refs = repository.open_stores(repo_root)
    try:
        oid = history.get_oid(refs, args.commit or '@')
        history.create_tag(refs, args.name, oid)
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Created tag '{args.name}' at {oid[:7]}")
