import argparse
from commands import (
    init, hash_object, cat_file, write_tree, read_tree,
    commit, log, checkout, tag, branch, config
)
from utils import repository
from utils import config as config_utils
from utils.errors import GritError
from utils.logging_config import configure_logging


def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(description="grit: a tiny content-addressable version control system.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug diagnostics to stderr.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository in the current directory.")
    init_parser.set_defaults(func=init.run)

    # Command: hash-object
    hash_object_parser = subparsers.add_parser("hash-object", help="Store a file as a blob and print its id.")
    hash_object_parser.add_argument("file", help="The file to store.")
    hash_object_parser.set_defaults(func=hash_object.run)

    # Command: cat-file
    cat_file_parser = subparsers.add_parser("cat-file", help="Print the contents of an object.")
    cat_file_parser.add_argument("-t", dest="type", action="store_true", help="Print the object's kind instead.")
    cat_file_parser.add_argument("object", help="Object id or name.")
    cat_file_parser.set_defaults(func=cat_file.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Store the working directory as a tree and print its id.")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: read-tree
    read_tree_parser = subparsers.add_parser("read-tree", help="Replace the working directory with a tree.")
    read_tree_parser.add_argument("tree", help="Tree id or name.")
    read_tree_parser.set_defaults(func=read_tree.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the working directory as a new commit.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show commit logs.")
    log_parser.add_argument("commit", nargs="?", help="Where to start (defaults to HEAD).")
    log_parser.set_defaults(func=log.run)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help="Restore a commit into the working directory.")
    checkout_parser.add_argument("commit", help="Commit id or name.")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: tag
    tag_parser = subparsers.add_parser("tag", help="Create a tag.")
    tag_parser.add_argument("name", help="The name of the tag.")
    tag_parser.add_argument("commit", nargs="?", help="What to tag (defaults to HEAD).")
    tag_parser.set_defaults(func=tag.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="List or create branches.")
    branch_parser.add_argument("name", nargs="?", help="The name of the branch to create.")
    branch_parser.add_argument("start_point", nargs="?", help="Where the branch starts (defaults to HEAD).")
    branch_parser.set_defaults(func=branch.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Get or set a repository option.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.loglevel).")
    config_parser.add_argument("value", nargs="?", help="The value to set; omit to print the current one.")
    config_parser.set_defaults(func=config.run)

    return parser


def get_log_level(verbose): # --verbose wins over core.loglevel from the repository config
    if verbose:
        return 'DEBUG'
    repo_root = repository.find_repo_root()
    if repo_root:
        try:
            return config_utils.get_log_level(repo_root) or 'WARNING'
        except GritError:
            return 'WARNING'
    return 'WARNING'


# The main entry point for grit
def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_log_level(args.verbose))

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
