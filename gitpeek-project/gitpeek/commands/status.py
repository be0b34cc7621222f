# The command: gitpeek status
# What it does: Prints a one-line summary of where HEAD is and which operation, if any, is in progress

import sys
from gitpeek.utils import repository
from gitpeek.utils.repository import RepositoryState

def run(args): # Reads a snapshot of the repository and prints the status line
    git_dir = repository.find_git_dir(args.path)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    reader = repository.RepositoryReader(git_dir)
    print(get_status_line(reader.read_snapshot()))

def get_status_line(snapshot): # Returns a user-friendly string describing the snapshot
    branch = snapshot.current_branch
    revision = snapshot.current_revision
    if snapshot.state == RepositoryState.MERGING:
        where = f"on branch {branch.short_name}" if branch else "with HEAD detached"
        return f"Merging {where} (MERGE_HEAD exists)"
    if snapshot.state == RepositoryState.REBASING:
        if branch:
            return f"Rebasing branch {branch.short_name}"
        return "Rebasing (HEAD detached)"
    if snapshot.state == RepositoryState.DETACHED:
        if revision:
            return f"HEAD detached at {revision[:7]}"
        return "HEAD detached (unreadable HEAD)"
    if branch:
        return f"On branch {branch.short_name}"
    return "On an unborn branch (no commits yet)"
