# What it does: Works out what .git/HEAD points to: a branch (symbolic ref) or a commit (detached HEAD)
# How it does: Tries the canonical "ref: refs/heads/<name>" form first, then a bare hex commit id, then a lenient form that forgives
# missing or extra spaces, a missing "ref:" and a leading slash. Whatever is left is reported as invalid

import logging
import re
from dataclasses import dataclass

from .errors import RepoStateError
from .files import load_file

logger = logging.getLogger(__name__)

BRANCH_PATTERN = re.compile(r'ref: refs/heads/(\S+)')
BRANCH_WEAK_PATTERN = re.compile(r' *(?:ref:)? */?refs/heads/(\S+)')
COMMIT_PATTERN = re.compile(r'[0-9a-fA-F]+')

SYMBOLIC = 'symbolic'
DIRECT = 'direct'
INVALID = 'invalid'


@dataclass(frozen=True)
class HeadState:
    kind: str
    ref: str = None # the short branch name for SYMBOLIC, the commit hash for DIRECT

    @property
    def is_branch(self):
        return self.kind == SYMBOLIC

    @property
    def is_valid(self):
        return self.kind != INVALID

    @classmethod
    def symbolic(cls, branch_name):
        return cls(SYMBOLIC, branch_name)

    @classmethod
    def direct(cls, commit_hash):
        return cls(DIRECT, commit_hash)

    @classmethod
    def invalid(cls):
        return cls(INVALID)


def parse_head(content): # Classifies the content of a HEAD file
    content = content.strip()
    match = BRANCH_PATTERN.fullmatch(content)
    if match:
        return HeadState.symbolic(match.group(1))

    if COMMIT_PATTERN.fullmatch(content):
        return HeadState.direct(content)

    match = BRANCH_WEAK_PATTERN.fullmatch(content)
    if match:
        logger.info("HEAD has not standard format: [%s]. Parsed branch [%s]", content, match.group(1))
        return HeadState.symbolic(match.group(1))

    logger.error("Invalid format of the HEAD file: [%s]", content)
    return HeadState.invalid()


def read_head(head_path): # Reads and parses the HEAD file; an unreadable file is reported as invalid
    try:
        content = load_file(head_path)
    except RepoStateError as e:
        logger.error("%s", e)
        return HeadState.invalid()
    return parse_head(content)
