from collections.abc import Iterator, Sequence
from typing import Self

from lox.token import Token, TokenType


class TokenStream(Iterator[Token]):
    """Left-to-right cursor over a finished token sequence.

    ``peek`` never moves past the trailing ``EndOfInput`` token, so a parser
    can look at it as often as it likes. Iteration yields it once and stops.
    """

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind != TokenType.EndOfInput:
            raise ValueError("token sequence must end with an EndOfInput token")
        self._tokens = tuple(tokens)
        self._index = 0

    def __iter__(self) -> Self:
        return self

    def __bool__(self) -> bool:
        return not self.is_at_end()

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenType.EndOfInput

    def peek(self) -> Token:
        return self._tokens[min(self._index, len(self._tokens) - 1)]

    def previous(self) -> Token:
        if self._index == 0:
            raise IndexError("no token has been consumed yet")
        return self._tokens[self._index - 1]

    def check(self, *kinds: TokenType) -> bool:
        return self.peek().kind in kinds

    def match(self, *kinds: TokenType) -> bool:
        if self.check(*kinds) and not self.is_at_end():
            self._index += 1
            return True
        return False

    def __next__(self) -> Token:
        if self._index >= len(self._tokens):
            raise StopIteration
        self._index += 1
        return self._tokens[self._index - 1]
