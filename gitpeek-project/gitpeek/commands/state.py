# The command: gitpeek state
# What it does: Prints the state of the repository: NORMAL, DETACHED, MERGING or REBASING

import sys
from gitpeek.utils import repository

def run(args):
    git_dir = repository.find_git_dir(args.path)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    reader = repository.RepositoryReader(git_dir)
    print(reader.read_state().value)
