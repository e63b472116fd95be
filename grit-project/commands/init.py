# The command: grit init
# What it does: Initializes a new, empty repository by creating the hidden `.grit` directory and its `objects` store
# How it does: It creates `.grit/objects`. HEAD is not written, it stays unborn until the first commit
# What data structure it uses: Tree (the file system directory structure is a tree). It lays the foundation for a Hash Table (the object database)

import os
import sys
from utils import repository
from utils.errors import GritError

def run(args):
    try:
        repo_path, existed = repository.init_repository(os.getcwd())
    except GritError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if existed:
        print(f"Reinitialized existing grit repository in {repo_path}")
    else:
        print(f"Initialized empty grit repository in {repo_path}")
