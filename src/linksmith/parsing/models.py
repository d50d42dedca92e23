"""
Intermediate data models for the Link header parser.

These types live for the duration of one processing call only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..models.report import Issue


class TokenType(Enum):
    """
    Token types produced by the lexer.
    """
    LT = "<"
    GT = ">"
    SEMICOLON = ";"
    EQUALS = "="
    COMMA = ","
    URI = "uri"          # text between '<' and '>', verbatim
    IDENT = "ident"      # unquoted token (parameter name or token value)
    QUOTED = "quoted"    # quoted-string content, escapes decoded
    ERROR = "error"      # lexer fault marker, message in Token.message
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """
    One lexical unit and the offset where it starts in the input.

    ``lexeme`` is the source text for every token type except QUOTED, whose
    lexeme is the decoded content: surrounding quotes dropped and ``\\X``
    escapes resolved. The source text of a quoted-string starts at ``offset``
    (its opening quote). ERROR tokens carry the offending text and a
    ``message``.
    """
    type: TokenType
    lexeme: str
    offset: int
    message: Optional[str] = None


@dataclass(frozen=True)
class RawParam:
    """
    A link-param as written: ``name`` with an optional value.

    ``value`` is None for a bare parameter (``;crossorigin``) and ``""`` for an
    explicit empty value (``;title=""``).
    """
    name: str
    value: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Parameter name must not be empty")

    @classmethod
    def without_value(cls, name: str) -> "RawParam":
        return cls(name=name, value=None)

    @classmethod
    def with_value(cls, name: str, value: str) -> "RawParam":
        if value is None:
            raise ValueError("Value cannot be None; use RawParam.without_value()")
        return cls(name=name, value=value)


@dataclass(frozen=True)
class RawLinkValue:
    """
    One syntactically valid link-value: target text plus raw parameters.

    ``index`` is the position of the comma-separated segment in the header,
    counting malformed segments too, so issues can point back at the source.
    """
    target: str
    params: tuple[RawParam, ...] = ()
    index: int = 0


@dataclass
class ParseResult:
    """
    Parser output: recovered link-values and syntax issues, both in header order.
    """
    link_values: list[RawLinkValue] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)
