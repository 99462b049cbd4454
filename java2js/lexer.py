import enum
import typing as t
from dataclasses import dataclass
from typing import Final

from java2js._internal.itertools import Peekable
from java2js.diagnostics import Diagnostic


@enum.unique
class TokenType(enum.IntEnum):
    KEYWORD = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    SEMICOLON = enum.auto()
    STRING = enum.auto()

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str

    def __repr__(self) -> str:
        if self.type in (TokenType.KEYWORD, TokenType.STRING):
            return f"{self.type.name}({self.text!r})"
        return self.type.name


_whitespace: Final = frozenset(" \t\r\n")

# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not Unicode White_Space.
_information_separators: Final = frozenset("\x1c\x1d\x1e\x1f")

_one_char_tokens: Final = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ";": TokenType.SEMICOLON,
}


def _is_unicode_whitespace(c: str) -> bool:
    return c.isspace() and c not in _information_separators


def _is_keyword_char(c: str) -> bool:
    return not (_is_unicode_whitespace(c) or c in _one_char_tokens or c == '"')


def tokenize(source: t.Iterable[str]) -> t.Iterator[Token]:
    """Split ``source`` into tokens.

    Anything that is not whitespace, a parenthesis, a semicolon or a quoted
    string becomes part of a keyword, so dotted names and operators come out
    as a single keyword token. Nothing here raises on malformed input.
    """
    chars = Peekable(source)

    for c in chars:
        if c in _whitespace:
            continue

        if c in _one_char_tokens:
            yield Token(_one_char_tokens[c], c)
        elif c == '"':
            literal = []
            for c in chars:
                if c == '"':
                    break
                literal.append(c)
            else:
                Diagnostic.unterminated_string("".join(literal))
            yield Token(TokenType.STRING, "".join(literal))
        else:
            keyword = [c]
            while chars.peek().map(_is_keyword_char).unwrap_or_else(lambda: False):
                keyword.append(next(chars))
            yield Token(TokenType.KEYWORD, "".join(keyword))
