# What it does: Finds the "loose" refs, i.e. the refs stored as one file each under .git/refs/heads and .git/refs/remotes
# How it does: Walks the subtree with os.walk and keys every regular file by its path relative to the .git directory, always with forward slashes
# What data structure it uses: Tree traversal of the directory structure, producing a Dictionary {ref name: absolute file path}

import logging
import os

logger = logging.getLogger(__name__)


def walk_loose_refs(subtree_root, git_dir, skip_head=False):
    refs = {}
    if not os.path.isdir(subtree_root):
        return refs
    for root, dirs, files in os.walk(subtree_root):
        for name in files:
            # refs/remotes/<remote>/HEAD is a symbolic pointer to the remote's default branch, not a branch
            if skip_head and name.upper() == 'HEAD':
                logger.debug("Skipping %s", os.path.join(root, name))
                continue
            file_path = os.path.abspath(os.path.join(root, name))
            ref_name = os.path.relpath(file_path, os.path.abspath(git_dir))
            refs[ref_name.replace(os.sep, '/')] = file_path
    return refs
