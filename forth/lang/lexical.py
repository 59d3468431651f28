"""Lexical analysis for forth. Note that this module does not read input files, but rather tokenizes arbitrary
source strings.

All grammar can be loosely defined as follows:

```
<program> ::= <token>*
<token>   ::= <word> | <number> | "(" <token>* ")"  ; comments do not nest
<word>    ::= "+" | "-" | "*" | "/" | "."
<number>  ::= ["-"] <digit>+                     ; must fit in a signed 32-bit integer
```

Tokens are separated by any run of whitespace, so "(" and ")" only open/close a comment when they stand alone.
"""

import re
from dataclasses import dataclass


COMMENT_OPEN = "("
COMMENT_CLOSE = ")"

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

_TOKEN = re.compile(r"\S+")
_NUMBER = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Token:
    """Maximal run of non-whitespace characters, with its 1-based position in the source."""
    text: str
    line: int = 1
    col: int = 1

    def __str__(self):
        return self.text


def tokenize(source):
    """Lazily yields the Tokens of source, in order."""
    line, line_start, scanned = 1, 0, 0

    for match in _TOKEN.finditer(source):
        start = match.start()

        newlines = source.count("\n", scanned, start)
        if newlines:
            line += newlines
            line_start = source.rindex("\n", scanned, start) + 1
        scanned = match.end()

        yield Token(match.group(), line, start - line_start + 1)


def skip_comment(tokens):
    """Consumes tokens up to and including the next COMMENT_CLOSE. Returns False if tokens ran out first."""
    for token in tokens:
        if token.text == COMMENT_CLOSE:
            return True
    return False


def parse_literal(text):
    """Returns text as an int, or None if it isn't a decimal literal in int32 range."""
    if not _NUMBER.fullmatch(text):
        return None

    value = int(text)
    return value if INT_MIN <= value <= INT_MAX else None
