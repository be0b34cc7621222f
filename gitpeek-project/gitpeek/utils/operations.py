# What it does: Detects a merge or a rebase that Git has started but not finished, and recovers the branch a rebase is working on
# How it does: Git leaves sentinel paths behind while these operations run: MERGE_HEAD for a merge, a rebase-apply or rebase-merge directory for a rebase.
# The rebase directories hold a head-name file with the full name of the branch being rebased

import logging
import os

from .branches import LocalBranch, REFS_HEADS_PREFIX
from .errors import RepoStateError
from .files import load_file, try_load_file
from .hashes import validate_hash

logger = logging.getLogger(__name__)

MERGE_HEAD = 'MERGE_HEAD'
REBASE_APPLY = 'rebase-apply'
REBASE_MERGE = 'rebase-merge'
HEAD_NAME = 'head-name'


def is_merge_in_progress(git_dir):
    return os.path.exists(os.path.join(git_dir, MERGE_HEAD))


def is_rebase_in_progress(git_dir):
    return (os.path.exists(os.path.join(git_dir, REBASE_APPLY))
            or os.path.exists(os.path.join(git_dir, REBASE_MERGE)))


def read_rebase_branch(git_dir): # Returns the LocalBranch being rebased, or None if it can't be determined
    for rebase_dir_name in (REBASE_APPLY, REBASE_MERGE):
        branch = _read_rebase_branch_from(git_dir, rebase_dir_name)
        if branch is not None:
            return branch
    return None


def _read_rebase_branch_from(git_dir, rebase_dir_name):
    rebase_dir = os.path.join(git_dir, rebase_dir_name)
    if not os.path.isdir(rebase_dir):
        return None
    head_name_path = os.path.join(rebase_dir, HEAD_NAME)
    if not os.path.exists(head_name_path):
        return None

    try:
        branch_name = load_file(head_name_path)
    except RepoStateError as e:
        logger.error("%s", e)
        return None

    branch_file = os.path.join(git_dir, *branch_name.split('/'))
    # rebasing from a detached HEAD writes "detached HEAD" into head-name, no such ref file exists
    if not os.path.isfile(branch_file):
        logger.debug("No ref file for the rebased branch [%s]", branch_name)
        return None
    commit_hash = validate_hash(try_load_file(branch_file))
    if commit_hash is None:
        return None

    if branch_name.startswith(REFS_HEADS_PREFIX):
        branch_name = branch_name[len(REFS_HEADS_PREFIX):]
    return LocalBranch.from_short_name(branch_name, commit_hash)
