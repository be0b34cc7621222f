# What it does: Small helpers for reading the one-line service files Git keeps under .git
# How it does: Opens the file as UTF-8 text inside a `with` block, reads it whole and strips surrounding whitespace

import logging

from .errors import RepoStateError

logger = logging.getLogger(__name__)


def load_file(path): # Returns the stripped content of the file, raising RepoStateError if it can't be read
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise RepoStateError(f"Couldn't read file: {e}", path) from e


def try_load_file(path, default=None): # Same as load_file, but gives back `default` instead of raising
    try:
        return load_file(path)
    except RepoStateError as e:
        logger.debug("%s", e)
        return default
