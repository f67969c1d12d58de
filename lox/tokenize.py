import logging
import string
from typing import Iterator, Optional

from lox.errors import (
    LexError,
    ScanError,
    UnexpectedCharacter,
    UnterminatedComment,
    UnterminatedString,
)
from lox.token import (
    EQUAL_SUFFIXED_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Literal,
    Token,
    TokenType,
    end_of_input,
    new_token,
)
from lox.utils import TokenStream

log = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_PART = IDENTIFIER_START | DIGITS
WHITESPACE = frozenset(" \t\r")


class Scanner(Iterator[Token]):
    """Single-pass scanner over one complete source string.

    Iterating yields one token per step and ends with exactly one
    ``EndOfInput`` token. Lexical errors never stop the scan; they are
    collected in ``errors`` in source order.
    """

    source: str
    errors: list[LexError]

    def __init__(self, source: str) -> None:
        self.source = source
        self.errors = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self._started = False
        self._finished = False

    @classmethod
    def from_source(cls, source: str) -> "Scanner":
        return cls(source)

    def __iter__(self) -> "Scanner":
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        if not self._started:
            self._started = True
            log.debug("scanning %d characters", len(self.source))
        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            token = self.scan_token()
            if token is not None:
                return token
        self._finished = True
        log.debug(
            "reached end of input on line %d with %d error(s)",
            self.end_line(),
            len(self.errors),
        )
        return end_of_input(self.end_line(), self.current)

    def scan_tokens(self) -> list[Token]:
        if self._started:
            raise RuntimeError("scanner has already been consumed")
        tokens = list(self)
        if self.errors:
            raise ScanError(self.errors, tokens)
        return tokens

    def scan_token(self) -> Optional[Token]:
        char = self.advance()
        if char in SINGLE_CHAR_TOKENS:
            return self.make_token(SINGLE_CHAR_TOKENS[char])
        if char in EQUAL_SUFFIXED_TOKENS:
            single, double = EQUAL_SUFFIXED_TOKENS[char]
            return self.make_token(double if self.match_next("=") else single)
        match char:
            case "/":
                if self.match_next("/"):
                    self.skip_line_comment()
                    return None
                if self.match_next("*"):
                    self.skip_block_comment()
                    return None
                return self.make_token(TokenType.Slash)
            case "\n":
                self.line += 1
                return None
            case '"':
                return self.read_string()
            case _ if char in WHITESPACE:
                return None
            case _ if char in DIGITS:
                return self.read_number()
            case _ if char in IDENTIFIER_START:
                return self.read_identifier()
        self.report(UnexpectedCharacter(char, self.line, self.start))
        return None

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def end_line(self) -> int:
        # An unterminated last line is closed implicitly.
        if self.source and not self.source.endswith("\n"):
            return self.line + 1
        return self.line

    def advance(self) -> str:
        self.current += 1
        return self.source[self.current - 1]

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def match_next(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def make_token(self, kind: TokenType, literal: Optional[Literal] = None) -> Token:
        return new_token(
            kind, self.source, self.start, self.current, self.start_line, literal
        )

    def report(self, error: LexError) -> None:
        log.debug("lexical error: %s", error)
        self.errors.append(error)

    def skip_line_comment(self) -> None:
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def skip_block_comment(self) -> None:
        while not (self.peek() == "*" and self.peek_next() == "/"):
            if self.is_at_end():
                self.report(UnterminatedComment(self.start_line, self.start))
                return
            if self.peek() == "\n":
                self.line += 1
            self.advance()
        self.current += 2

    def read_string(self) -> Optional[Token]:
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.report(UnterminatedString(self.start_line, self.start))
            return None
        self.advance()
        return self.make_token(
            TokenType.String, self.source[self.start + 1 : self.current - 1]
        )

    def read_number(self) -> Token:
        while self.peek() in DIGITS:
            self.advance()
        if self.peek() == "." and self.peek_next() in DIGITS:
            self.advance()
            while self.peek() in DIGITS:
                self.advance()
        # Only ASCII digits and one inner dot get here, so float() cannot fail.
        value = float(self.source[self.start : self.current])
        return self.make_token(TokenType.Number, value)

    def read_identifier(self) -> Token:
        while self.peek() in IDENTIFIER_PART:
            self.advance()
        text = self.source[self.start : self.current]
        if (kind := KEYWORDS.get(text)) is not None:
            return self.make_token(kind)
        return self.make_token(TokenType.Identifier, text)


def tokenize(source: str) -> TokenStream:
    return TokenStream(Scanner.from_source(source).scan_tokens())
