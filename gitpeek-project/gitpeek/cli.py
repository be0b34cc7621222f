import argparse
import logging
import os
import sys

from gitpeek.commands import state, revision, branch, branches, status
from gitpeek.utils.errors import NotARepositoryError


# The main entry point for gitpeek
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(prog="gitpeek", description="gitpeek: read the state of a Git repository from its .git directory.")
    parser.add_argument("-C", dest="path", default=".", help="Look for the repository starting at this path instead of the current directory.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log what the reader is doing.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: state
    state_parser = subparsers.add_parser("state", help="Show NORMAL, DETACHED, MERGING or REBASING.")
    state_parser.set_defaults(func=state.run)

    # Command: revision
    revision_parser = subparsers.add_parser("revision", help="Show the hash of the current revision.")
    revision_parser.set_defaults(func=revision.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="Show the current branch.")
    branch_parser.set_defaults(func=branch.run)

    # Command: branches
    branches_parser = subparsers.add_parser("branches", help="List branches.")
    branches_group = branches_parser.add_mutually_exclusive_group()
    branches_group.add_argument("-r", "--remotes", action="store_true", help="List remote-tracking branches.")
    branches_group.add_argument("-a", "--all", action="store_true", help="List local and remote-tracking branches.")
    branches_parser.set_defaults(func=branches.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Summarize what HEAD is doing.")
    status_parser.set_defaults(func=status.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not os.path.isdir(args.path):
        print(f"fatal: cannot change to '{args.path}': No such directory", file=sys.stderr)
        sys.exit(1)

    try:
        args.func(args)
    except NotARepositoryError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
