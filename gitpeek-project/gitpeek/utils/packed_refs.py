# What it does: Reads the .git/packed-refs file, where `git gc` and `git pack-refs` store refs as "<hash> <ref name>" lines
# How it does: Each line is tokenized by hand: comments (#) and peeled tag lines (^) are skipped, then a run of letters or digits forms the hash and the
# non-whitespace run after a single space forms the ref name. Malformed lines are logged and skipped so one bad line never hides the others
# What data structure it uses: A lazy generator over the lines of the file, so a lookup can stop reading at the first match

import logging
import os
from collections import namedtuple

from .errors import RepoStateError

logger = logging.getLogger(__name__)

PackedRef = namedtuple('PackedRef', ['hash', 'name'])


def parse_packed_refs_line(line): # Returns a PackedRef for one line of packed-refs, or None if the line must be skipped
    line = line.strip()
    if not line:
        return None
    first_char = line[0]
    if first_char == '#': # comment, e.g. "# pack-refs with: peeled fully-peeled"
        return None
    if first_char == '^': # the commit the annotated tag on the previous line points to
        return None

    i = 0
    while i < len(line) and line[i].isalnum():
        i += 1
    hash_text = line[:i]
    if not hash_text or i >= len(line) or line[i] != ' ':
        logger.warning("Ignoring invalid packed-refs line: [%s]", line)
        return None

    start = i + 1
    end = start
    while end < len(line) and not line[end].isspace():
        end += 1
    name = line[start:end]
    if not name:
        logger.warning("Ignoring invalid packed-refs line: [%s]", line)
        return None

    return PackedRef(hash_text, name)


def iter_packed_refs(lines): # Lazily parses an iterable of packed-refs lines, yielding only the valid entries
    for line in lines:
        entry = parse_packed_refs_line(line)
        if entry is not None:
            yield entry


def scan_packed_refs(path, predicate=None): # Reads the entries of the packed-refs file at `path`
    # With a predicate, reading stops at the first entry it accepts and a one-element list is returned
    if not os.path.exists(path):
        return []
    entries = []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for entry in iter_packed_refs(f):
                if predicate is None:
                    entries.append(entry)
                elif predicate(entry):
                    return [entry]
    except (OSError, UnicodeDecodeError) as e:
        raise RepoStateError(f"Couldn't read packed-refs: {e}", path) from e
    return entries
