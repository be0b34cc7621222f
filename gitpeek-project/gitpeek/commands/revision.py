# The command: gitpeek revision
# What it does: Prints the hash of the commit HEAD resolves to, or fails on an unborn branch (no commits yet)

import sys
from gitpeek.utils import repository

def run(args):
    git_dir = repository.find_git_dir(args.path)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    reader = repository.RepositoryReader(git_dir)
    current_revision = reader.read_current_revision()
    if not current_revision:
        print("fatal: current branch is unborn, no commits yet", file=sys.stderr)
        sys.exit(1)
    print(current_revision)
