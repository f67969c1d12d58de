from typing import Optional, Sequence

from lox.token import Token


class LexError(Exception):
    def __init__(self, message: str, line: int, location: int = 0) -> None:
        self.message = message
        self.line = line
        self.location = location
        super().__init__(f"[line {line}] Error: {message}")


class UnterminatedString(LexError):
    def __init__(self, line: int, location: int = 0) -> None:
        super().__init__("unterminated string", line, location)


class UnterminatedComment(LexError):
    def __init__(self, line: int, location: int = 0) -> None:
        super().__init__("unterminated comment", line, location)


class UnexpectedCharacter(LexError):
    def __init__(self, character: str, line: int, location: int = 0) -> None:
        self.character = character
        super().__init__(f"unexpected character {character!r}", line, location)


class ScanError(Exception):
    """Every lexical error found in one pass, plus the tokens that did scan."""

    def __init__(
        self, errors: Sequence[LexError], tokens: Optional[Sequence[Token]] = None
    ) -> None:
        if not errors:
            raise ValueError("ScanError needs at least one error")
        self.errors = list(errors)
        self.tokens = list(tokens or [])
        super().__init__("\n".join(str(error) for error in self.errors))
