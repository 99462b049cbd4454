from collections.abc import Iterable, Iterator
from typing import Final

from java2js._internal.itertools import Peekable
from java2js.ast import Node, PrintStatement
from java2js.diagnostics import Diagnostic
from java2js.lexer import Token, TokenType

PRINT_KEYWORD: Final = "System.out.println"


class _Tokens(Iterator[Token]):
    __slots__ = ("tokens",)

    tokens: Peekable[Token]

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = Peekable(tokens)

    def __next__(self) -> Token:
        return next(self.tokens)

    def take(self, type_: TokenType) -> Token | None:
        """Consume the next token, returning it only if it has type ``type_``.

        The token is consumed either way; the cursor never moves backwards.
        """
        if not self.tokens.peek().is_some():
            return None
        tok = next(self)
        return tok if tok.type is type_ else None


def parse(tokens: Iterable[Token]) -> Iterator[Node]:
    tokens = _Tokens(tokens)

    for tok in tokens:
        if tok.type is not TokenType.KEYWORD:
            continue

        if tok.text == PRINT_KEYWORD:
            if statement := _parse_print_statement(tokens):
                yield statement
        else:
            Diagnostic.unknown_statement(tok.text)


def _parse_print_statement(tokens: _Tokens) -> PrintStatement | None:
    if not tokens.take(TokenType.LEFT_PAREN):
        Diagnostic.incomplete_print(TokenType.LEFT_PAREN)
        return None
    if not (literal := tokens.take(TokenType.STRING)):
        Diagnostic.incomplete_print(TokenType.STRING)
        return None
    if not tokens.take(TokenType.RIGHT_PAREN):
        Diagnostic.incomplete_print(TokenType.RIGHT_PAREN)
        return None
    return PrintStatement(literal.text)
