# The command: gitpeek branches [-r | -a]
# What it does: Lists local branches, remote-tracking branches (-r) or both (-a), marking the current one with an asterisk
# How it does: Reads the remotes from .git/config so remote-tracking branches are attached to the configured remotes, then prints the
# branches collection sorted by name together with the short hash each branch points to
# What data structure it uses: Sets (the branches collection), List (to hold the branches for sorting and display)

import sys
from gitpeek.utils import repository, config

def run(args):
    git_dir = repository.find_git_dir(args.path)
    if not git_dir:
        print("fatal: not a git repository", file=sys.stderr)
        sys.exit(1)

    reader = repository.RepositoryReader(git_dir)
    collection = reader.read_branches(config.read_remotes(git_dir))
    current_branch = reader.read_current_branch()

    listed = []
    if not args.remotes:
        listed.extend(collection.local_branches)
    if args.remotes or args.all:
        listed.extend(collection.remote_branches)

    for b in sorted(listed, key=lambda b: b.full_name):
        name = b.short_name
        if args.all and b not in collection.local_branches:
            name = f"remotes/{name}"
        marker = "*" if b == current_branch else " "
        print(f"{marker} {name} {b.hash.short}")
