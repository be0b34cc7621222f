# What it does: The branch model: local branches, remote-tracking branches (standard and git-svn style), remotes and the collection of all of them
# How it does: Branches are immutable values identified by their full ref name. create_branches turns a {ref name: hash text} map into a
# BranchesCollection, validating hashes and sorting refs/heads from refs/remotes. Everything else (tags, notes, ...) is dropped
# What data structure it uses: Frozen dataclasses and frozensets, so two collections read from the same disk state compare equal

import logging
from dataclasses import dataclass, field

from .hashes import validate_hash

logger = logging.getLogger(__name__)

REFS_HEADS_PREFIX = 'refs/heads/'
REFS_REMOTES_PREFIX = 'refs/remotes/'


@dataclass(frozen=True)
class Remote:
    name: str
    urls: tuple = ()
    push_urls: tuple = ()
    fetch_refspecs: tuple = ()
    push_refspecs: tuple = ()

    @classmethod
    def synthetic(cls, name): # Returns a remote with no URLs and no refspecs
        return cls(name)

    def __str__(self):
        return self.name


def find_remote(remotes, name):
    for remote in remotes:
        if remote.name == name:
            return remote
    return None


@dataclass(frozen=True, eq=False)
class LocalBranch:
    """A branch under refs/heads, identified by its full ref name ("refs/heads/main")."""
    full_name: str
    hash: object

    def __post_init__(self):
        if not self.full_name.startswith(REFS_HEADS_PREFIX):
            raise ValueError(f"Not a local branch ref: {self.full_name!r}")

    @classmethod
    def from_short_name(cls, short_name, commit_hash): # Builds refs/heads/<short_name>
        return cls(REFS_HEADS_PREFIX + short_name, commit_hash)

    @property
    def short_name(self):
        return self.full_name[len(REFS_HEADS_PREFIX):]

    @property
    def name(self):
        return self.short_name

    def __eq__(self, other):
        if not isinstance(other, LocalBranch):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self):
        return hash(self.full_name)


@dataclass(frozen=True, eq=False)
class StandardRemoteBranch:
    """A remote-tracking branch refs/remotes/<remote>/<name>."""
    remote: Remote
    name: str
    hash: object

    @property
    def full_name(self):
        return f"{REFS_REMOTES_PREFIX}{self.remote.name}/{self.name}"

    @property
    def short_name(self):
        return f"{self.remote.name}/{self.name}"

    def __eq__(self, other):
        if not isinstance(other, (StandardRemoteBranch, SvnRemoteBranch)):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self):
        return hash(self.full_name)


@dataclass(frozen=True, eq=False)
class SvnRemoteBranch:
    """A ref directly under refs/remotes (no remote part), as git-svn lays them out. The full name is kept as is."""
    full_name: str
    hash: object

    @property
    def short_name(self):
        return self.full_name[len(REFS_REMOTES_PREFIX):]

    def __eq__(self, other):
        if not isinstance(other, (StandardRemoteBranch, SvnRemoteBranch)):
            return NotImplemented
        return self.full_name == other.full_name

    def __hash__(self):
        return hash(self.full_name)


@dataclass(frozen=True)
class BranchesCollection:
    local_branches: frozenset = field(default_factory=frozenset)
    remote_branches: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'local_branches', frozenset(self.local_branches))
        object.__setattr__(self, 'remote_branches', frozenset(self.remote_branches))

    def find_local_branch(self, name): # Accepts "main" as well as "refs/heads/main"; an exact full name wins
        candidates = [REFS_HEADS_PREFIX + name]
        if name.startswith(REFS_HEADS_PREFIX):
            candidates.insert(0, name)
        by_name = {branch.full_name: branch for branch in self.local_branches}
        for wanted in candidates:
            if wanted in by_name:
                return by_name[wanted]
        return None

    def find_remote_branch(self, name): # Accepts "origin/main" as well as "refs/remotes/origin/main"
        if not name.startswith(REFS_REMOTES_PREFIX):
            name = REFS_REMOTES_PREFIX + name
        for branch in self.remote_branches:
            if branch.full_name == name:
                return branch
        return None

    def find_branch(self, name):
        branch = self.find_local_branch(name)
        if branch is None:
            branch = self.find_remote_branch(name)
        return branch


def parse_remote_branch(full_name, commit_hash, remotes):
    std_name = full_name[len(REFS_REMOTES_PREFIX):]
    remote_name, slash, branch_name = std_name.partition('/')
    if not slash: # .git/refs/remotes/trunk => git-svn
        return SvnRemoteBranch(full_name, commit_hash)

    remote = find_remote(remotes, remote_name)
    if remote is None:
        logger.debug("No remote found with the name [%s]. All remotes: %s", remote_name, [str(r) for r in remotes])
        remote = Remote.synthetic(remote_name)
    return StandardRemoteBranch(remote, branch_name, commit_hash)


def create_branches(data, remotes): # Builds a BranchesCollection from a {full ref name: hash text} map
    local_branches = set()
    remote_branches = set()
    for ref_name, hash_text in data.items():
        commit_hash = validate_hash(hash_text)
        if commit_hash is None:
            logger.warning("Couldn't parse hash from [%s] for %s", hash_text, ref_name)
            continue
        if ref_name.startswith(REFS_HEADS_PREFIX):
            local_branches.add(LocalBranch(ref_name, commit_hash))
        elif ref_name.startswith(REFS_REMOTES_PREFIX):
            remote_branches.add(parse_remote_branch(ref_name, commit_hash, remotes))
    return BranchesCollection(local_branches, remote_branches)
