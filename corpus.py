"""
Corpus tokenization for the affinity poet.

Tokens are whitespace-delimited; punctuation stays attached to its word.
"""

from pathlib import Path
from typing import Iterator, Union
import logging
import re

logger = logging.getLogger(__name__)

# Whitespace runs, except the no-break spaces (U+00A0, U+2007, U+202F),
# which stay inside a token.
_SEPARATOR = re.compile(r"[^\S\u00a0\u2007\u202f]+")


def tokenize(text: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens of text in order."""
    for token in _SEPARATOR.split(text):
        if token:
            yield token


def read_corpus(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """
    Lazily yield tokens from a text file, line by line.

    Raises OSError (e.g. FileNotFoundError) when the file cannot be opened or
    read; the error surfaces on first iteration.
    """
    path = Path(path)
    with path.open("r", encoding=encoding) as f:
        logger.debug("reading corpus %s", path)
        for line in f:
            yield from tokenize(line)
