"""
Tokenizer
=========
Turns the raw text of a legacy VTK ASCII file into a read-once stream of
whitespace-delimited tokens.

The first three lines (version, title, encoding) are not tokenized. They are
kept as header metadata on the stream.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from hexmesh.errors import MalformedInput

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

HEADER_LINE_COUNT = 3


def _to_int(token: str) -> int:
    # int() would also accept digit group separators like "1_000"
    if "_" in token:
        raise ValueError(f"invalid literal '{token}'")
    return int(token)


def _to_float(token: str) -> float:
    if "_" in token:
        raise ValueError(f"could not convert string to float: '{token}'")
    return float(token)


@dataclass(frozen=True)
class Header:
    """The three lines preceding the tokenized body."""
    version: str
    title: str
    encoding: str


class TokenStream:
    """
    Cursor over an immutable tuple of tokens.

    Tokens are consumed strictly front-to-back. A consumed token is never
    returned again.
    """
    def __init__(self, tokens: tuple[str, ...], header: Optional[Header] = None) -> None:
        self._tokens = tokens
        self._position = 0
        self.header = header

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position}, remaining={self.remaining})"

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def position(self) -> int:
        """Index of the next token to be consumed."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of tokens not consumed yet."""
        return len(self._tokens) - self._position

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def peek(self) -> Optional[str]:
        """Return the next token without consuming it, or None at the end."""
        if self.exhausted:
            return None
        return self._tokens[self._position]

    def next(self, what: str = "token") -> str:
        """Consume a single token."""
        if self.exhausted:
            raise MalformedInput(
                f"Unexpected end of input while reading {what} (token #{self._position})."
            )
        token = self._tokens[self._position]
        self._position += 1
        return token

    def take(self, count: int, what: str = "tokens") -> tuple[str, ...]:
        """Consume exactly `count` tokens."""
        if count < 0:
            raise MalformedInput(f"Negative count {count} while reading {what}.")
        if count > self.remaining:
            raise MalformedInput(
                f"Unexpected end of input while reading {what}: "
                f"expected {count} tokens, only {self.remaining} remaining."
            )
        start = self._position
        self._position += count
        return self._tokens[start:self._position]

    def expect(self, keyword: str) -> str:
        """Consume a keyword token, comparing case-insensitively."""
        token = self.next(what=f"keyword '{keyword}'")
        if token.upper() != keyword.upper():
            raise MalformedInput(
                f"Expected keyword '{keyword}' at token #{self._position - 1}, got '{token}'."
            )
        return token

    def read_int(self, what: str = "integer") -> int:
        token = self.next(what=what)
        try:
            return _to_int(token)
        except ValueError as e:
            raise MalformedInput(f"Invalid {what} '{token}' at token #{self._position - 1}.") from e

    def read_count(self, what: str = "count") -> int:
        """Read a non-negative integer."""
        value = self.read_int(what=what)
        if value < 0:
            raise MalformedInput(f"Negative {what} {value} at token #{self._position - 1}.")
        return value

    def read_ints(self, count: int, what: str = "integers") -> npt.NDArray[np.int64]:
        tokens = self.take(count, what=what)
        try:
            return np.array([_to_int(t) for t in tokens], dtype=np.int64)
        except ValueError as e:
            raise MalformedInput(f"Invalid integer while reading {what}: {e}") from e

    def read_floats(self, count: int, what: str = "floats") -> npt.NDArray[np.float64]:
        tokens = self.take(count, what=what)
        try:
            return np.array([_to_float(t) for t in tokens], dtype=np.float64)
        except ValueError as e:
            raise MalformedInput(f"Invalid number while reading {what}: {e}") from e

    def read_vectors(self, count: int, what: str = "vectors") -> npt.NDArray[np.float64]:
        """Read `count` 3-component vectors as a (count, 3) array."""
        return self.read_floats(3 * count, what=what).reshape(count, 3)


def tokenize(text: str) -> TokenStream:
    """
    Split the file text into a token stream.

    The version and title lines are taken as-is. The encoding line is
    expected to say ASCII but this is only logged, not enforced.
    """
    # Only "\n" ends a line; the "\r" of Windows line endings is trimmed
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) < HEADER_LINE_COUNT:
        raise MalformedInput(
            f"Expected at least {HEADER_LINE_COUNT} header lines, got {len(lines)}."
        )

    header = Header(
        version=lines[0].strip(),
        title=lines[1].strip(),
        encoding=lines[2].strip(),
    )
    if header.encoding.upper() != "ASCII":
        logger.warning(f"Expected 'ASCII' encoding line, got '{header.encoding}'.")

    tokens = tuple(token for line in lines[HEADER_LINE_COUNT:] for token in line.split())
    logger.debug(f"Tokenized {len(lines)} lines into {len(tokens)} tokens.")
    return TokenStream(tokens, header=header)
