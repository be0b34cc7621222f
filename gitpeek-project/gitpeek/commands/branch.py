# The command: gitpeek branch
# What it does: Prints the short name of the current branch. During a rebase this is the branch being rebased

import sys
from gitpeek.utils import repository

def run(args):
    git_dir = repository.find_git_dir(args.path)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    reader = repository.RepositoryReader(git_dir)
    current_branch = reader.read_current_branch()
    if current_branch is None:
        print("HEAD detached (not on any branch)")
    else:
        print(current_branch.short_name)
