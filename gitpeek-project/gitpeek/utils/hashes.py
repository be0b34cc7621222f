# What it does: Recognizes a hexadecimal commit id and wraps it into a Hash value
# How it does: The text is stripped and matched against a hex-only pattern. Anything else collapses into None, with an info record in the log
# What data structure it uses: An immutable value object (frozen dataclass), so hashes can live in sets and serve as dict keys

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r'[0-9a-fA-F]+')


@dataclass(frozen=True)
class Hash:
    value: str

    def __post_init__(self):
        if not HEX_PATTERN.fullmatch(self.value):
            raise ValueError(f"Not a hexadecimal hash: {self.value!r}")
        object.__setattr__(self, 'value', self.value.lower())

    @property
    def short(self):
        return self.value[:7]

    def __str__(self):
        return self.value


def validate_hash(text): # Returns a Hash for the given text, or None if it isn't a hex commit id
    if text is None:
        logger.info("No hash given")
        return None
    try:
        return Hash(text.strip())
    except ValueError as e:
        logger.info("%s", e)
        return None
