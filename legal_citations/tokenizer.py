"""
Token stream for citation strings.

The grammars in case_law.py and statute.py never look at raw characters;
they walk the tokens produced here. Each token remembers its offset in the
whitespace-collapsed string and whether whitespace preceded it, which is
what distinguishes "BGE 145 III 229" from "BGE145III229".
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_WHITESPACE_RE = re.compile(r"\s+")

_TOKEN_RE = re.compile(
    r"""
    (?P<number>\d+(?:\.\d+)*)
    | (?P<word>[^\W\d_]+\.?)
    | (?P<punct>[^\s\w])
    | (?P<other>\S)
    """,
    re.VERBOSE,
)


class TokenKind(str, Enum):
    NUMBER = "number"
    WORD = "word"
    PUNCT = "punct"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    spaced: bool  # whitespace (or start of input) before the token

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def is_integer(self) -> bool:
        return self.kind is TokenKind.NUMBER and self.text.isdigit()

    @property
    def is_bare_word(self) -> bool:
        """A word without trailing dot."""
        return self.kind is TokenKind.WORD and not self.text.endswith(".")


def collapse_whitespace(text: str) -> str:
    """Trim and collapse runs of whitespace (tabs, newlines) to one space."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def tokenize(text: str) -> list[Token]:
    """Tokenize an already collapsed citation string."""
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(text):
        start = match.start()
        spaced = start == 0 or text[start - 1] == " "
        if match.lastgroup == "number":
            kind = TokenKind.NUMBER
        elif match.lastgroup == "word":
            kind = TokenKind.WORD
        else:
            kind = TokenKind.PUNCT
        tokens.append(Token(kind=kind, text=match.group(0), position=start, spaced=spaced))
    return tokens


class TokenStream:
    """Cursor over a token list for the recursive-descent grammars."""

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._pos = 0

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def next(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self._pos += 1
        return tok

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)
