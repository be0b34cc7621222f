# What it does: Provides the RepositoryReader, which answers "what state is the repository in, which revision and branch are checked out,
# and which branches exist" by reading Git's own files under .git. It also finds the .git directory for a path
# How it does: Combines the HEAD parser, the in-progress operation probe, the loose refs walker and the packed-refs scanner. Nothing is cached:
# every call reads the disk again. Read failures are logged and turned into a best-effort answer; only the constructor raises
# What data structure it uses: Uses recursion (linear recursion) to find the .git directory. Branch refs are merged into a Dictionary
# {full ref name: hash}, packed refs first so that loose refs overwrite them

import enum
import logging
import os
from dataclasses import dataclass

from . import operations
from .branches import REFS_HEADS_PREFIX, REFS_REMOTES_PREFIX, LocalBranch, create_branches
from .errors import NotARepositoryError, RepoStateError
from .files import try_load_file
from .hashes import validate_hash
from .head import read_head
from .loose_refs import walk_loose_refs
from .packed_refs import scan_packed_refs

logger = logging.getLogger(__name__)

GIT_DIR_NAME = '.git'


class RepositoryState(enum.Enum):
    NORMAL = 'NORMAL'
    DETACHED = 'DETACHED'
    MERGING = 'MERGING'
    REBASING = 'REBASING'


@dataclass(frozen=True)
class RepositorySnapshot:
    state: RepositoryState
    current_revision: str
    current_branch: LocalBranch
    branches: object


def find_git_dir(path='.'): # Recursively searches for the .git directory, starting at `path` and going up
    path = os.path.abspath(path)
    if os.path.basename(path) == GIT_DIR_NAME and os.path.isdir(path):
        return path
    git_dir = os.path.join(path, GIT_DIR_NAME)
    if os.path.isdir(git_dir):
        return git_dir
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_git_dir(parent_path)


class RepositoryReader:
    """
    Reads information about a Git repository from the service files in its .git directory.

    Works with the files on disk directly and caches nothing, so callers that need
    a consistent view while Git is writing must serialize against it themselves.
    """

    def __init__(self, git_dir):
        self.git_dir = os.path.abspath(git_dir)
        if not os.path.exists(self.git_dir):
            raise NotARepositoryError(".git directory not found", self.git_dir)
        self.head_file = os.path.join(self.git_dir, 'HEAD')
        if not os.path.exists(self.head_file):
            raise NotARepositoryError(".git/HEAD file not found", self.head_file)
        self.refs_heads_dir = os.path.join(self.git_dir, 'refs', 'heads')
        self.refs_remotes_dir = os.path.join(self.git_dir, 'refs', 'remotes')
        self.packed_refs_file = os.path.join(self.git_dir, 'packed-refs')

    def __repr__(self):
        return f"RepositoryReader({self.git_dir!r})"

    def read_head(self):
        return read_head(self.head_file)

    def is_merge_in_progress(self):
        return operations.is_merge_in_progress(self.git_dir)

    def is_rebase_in_progress(self):
        return operations.is_rebase_in_progress(self.git_dir)

    def read_state(self):
        # MERGING > REBASING > DETACHED > NORMAL
        if self.is_merge_in_progress():
            return RepositoryState.MERGING
        if self.is_rebase_in_progress():
            return RepositoryState.REBASING
        if not self.read_head().is_branch:
            return RepositoryState.DETACHED
        return RepositoryState.NORMAL

    def read_current_revision(self): # Returns the current revision hash, or None on an unborn branch (a repository without commits)
        head = self.read_head()
        if not head.is_branch: # HEAD is a commit, or None if it couldn't be parsed
            return head.ref

        branch_file = None
        for ref_name, path in self._find_local_branches().items():
            if ref_name[len(REFS_HEADS_PREFIX):] == head.ref:
                branch_file = path
        if branch_file is not None:
            return try_load_file(branch_file) or None

        return self._find_branch_revision_in_packed_refs(head.ref)

    def read_current_branch(self): # The branch HEAD is on, the branch being rebased, or None for any other detached HEAD
        head = self.read_head()
        if head.is_branch:
            branch_name = head.ref
            commit_hash = validate_hash(self.read_current_revision())
            if branch_name is None or commit_hash is None:
                return None
            return LocalBranch.from_short_name(branch_name, commit_hash)
        if self.is_rebase_in_progress():
            return operations.read_rebase_branch(self.git_dir)
        return None

    def read_branches(self, remotes=()):
        remotes = tuple(remotes)
        return create_branches(self._read_branch_refs(), remotes)

    def read_snapshot(self, remotes=()):
        return RepositorySnapshot(
            state=self.read_state(),
            current_revision=self.read_current_revision(),
            current_branch=self.read_current_branch(),
            branches=self.read_branches(remotes),
        )

    def _find_local_branches(self):
        return walk_loose_refs(self.refs_heads_dir, self.git_dir)

    def _find_remote_branches(self):
        return walk_loose_refs(self.refs_remotes_dir, self.git_dir, skip_head=True)

    def _find_branch_revision_in_packed_refs(self, short_name):
        # HEAD holds the short name, packed-refs the full one; the first suffix match in file order wins
        try:
            entries = scan_packed_refs(self.packed_refs_file, lambda entry: entry.name.endswith(short_name))
        except RepoStateError as e:
            logger.error("%s", e)
            return None
        return entries[0].hash if entries else None

    def _read_packed_branch_refs(self):
        try:
            entries = scan_packed_refs(self.packed_refs_file)
        except RepoStateError as e:
            logger.error("%s", e)
            return {}
        return {
            entry.name: entry.hash
            for entry in entries
            if entry.name.startswith(REFS_HEADS_PREFIX) or entry.name.startswith(REFS_REMOTES_PREFIX)
        }

    def _read_branch_refs(self): # {full ref name: hash text}, loose refs overwriting packed ones
        refs = self._read_packed_branch_refs()
        loose_refs = list(self._find_local_branches().items()) + list(self._find_remote_branches().items())
        for ref_name, path in loose_refs:
            # the file may have been deleted since the walk
            value = try_load_file(path)
            if value is not None:
                refs[ref_name] = value
        return refs
