from dataclasses import dataclass, field
from enum import IntEnum, auto
from types import MappingProxyType
from typing import Optional


class TokenType(IntEnum):
    # Single-character tokens.
    LeftParen = auto()
    RightParen = auto()
    LeftBrace = auto()
    RightBrace = auto()
    Comma = auto()
    Dot = auto()
    Minus = auto()
    Plus = auto()
    Semicolon = auto()
    Slash = auto()
    Star = auto()

    # One or two character tokens.
    Bang = auto()
    BangEqual = auto()
    Equal = auto()
    EqualEqual = auto()
    Greater = auto()
    GreaterEqual = auto()
    Less = auto()
    LessEqual = auto()

    # Literals.
    Identifier = auto()
    String = auto()
    Number = auto()

    # Keywords.
    And = auto()
    Class = auto()
    Else = auto()
    False_ = auto()
    Fun = auto()
    For = auto()
    If = auto()
    Nil = auto()
    Or = auto()
    Print = auto()
    Return = auto()
    Super = auto()
    This = auto()
    True_ = auto()
    Var = auto()
    While = auto()

    EndOfInput = auto()


Literal = float | str

LITERAL_KINDS = frozenset({TokenType.Identifier, TokenType.String, TokenType.Number})

SINGLE_CHAR_TOKENS = MappingProxyType(
    {
        "(": TokenType.LeftParen,
        ")": TokenType.RightParen,
        "{": TokenType.LeftBrace,
        "}": TokenType.RightBrace,
        ",": TokenType.Comma,
        ".": TokenType.Dot,
        "-": TokenType.Minus,
        "+": TokenType.Plus,
        ";": TokenType.Semicolon,
        "*": TokenType.Star,
    }
)

# operator -> (kind alone, kind when followed by "=")
EQUAL_SUFFIXED_TOKENS = MappingProxyType(
    {
        "!": (TokenType.Bang, TokenType.BangEqual),
        "=": (TokenType.Equal, TokenType.EqualEqual),
        "<": (TokenType.Less, TokenType.LessEqual),
        ">": (TokenType.Greater, TokenType.GreaterEqual),
    }
)

KEYWORDS = MappingProxyType(
    {
        "and": TokenType.And,
        "class": TokenType.Class,
        "else": TokenType.Else,
        "false": TokenType.False_,
        "for": TokenType.For,
        "fun": TokenType.Fun,
        "if": TokenType.If,
        "nil": TokenType.Nil,
        "or": TokenType.Or,
        "print": TokenType.Print,
        "return": TokenType.Return,
        "super": TokenType.Super,
        "this": TokenType.This,
        "true": TokenType.True_,
        "var": TokenType.Var,
        "while": TokenType.While,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenType
    lexeme: str
    literal: Optional[Literal] = None
    line: int = 1
    location: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if (self.literal is not None) != (self.kind in LITERAL_KINDS):
            raise ValueError(f"{self.kind.name} token cannot carry literal {self.literal!r}")

    def __str__(self) -> str:
        parts = [self.kind.name]
        if self.lexeme:
            parts.append(self.lexeme)
        if self.literal is not None:
            parts.append(str(self.literal))
        return " ".join(parts)


def new_token(
    kind: TokenType,
    source: str,
    start: int,
    end: int,
    line: int,
    literal: Optional[Literal] = None,
) -> Token:
    return Token(kind, source[start:end], literal, line, start)


def end_of_input(line: int, location: int = 0) -> Token:
    return Token(TokenType.EndOfInput, "", None, line, location)
