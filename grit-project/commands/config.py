# The command: grit config <key> [<value>]
# What it does: A user-facing command to set or show a configuration key (e.g., core.loglevel)
# How it does: It acts as a simple dispatcher, passing the key and value to the `utils/config.py` module, which handles the file I/O and parsing logic

import sys
from utils import repository
from utils import config as config_utils
from utils.errors import GritError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a grit repository", file=sys.stderr)
        sys.exit(1)

    try:
        if args.value is None:
            value = config_utils.get_config_value(repo_root, args.key)
            if value is None:
                sys.exit(1)
            print(value)
        else:
            config_utils.write_config(repo_root, args.key, args.value)
            print(f"Set {args.key} to '{args.value}'")
    except (GritError, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)
