"""Lexing, parsing and model building for HTTP ``Link`` header values."""

from .builder import BuildResult, WebLinkBuilder
from .lexer import WebLinkLexer
from .models import ParseResult, RawLinkValue, RawParam, Token, TokenType
from .parser import WebLinkParser

__all__ = [
    "BuildResult",
    "ParseResult",
    "RawLinkValue",
    "RawParam",
    "Token",
    "TokenType",
    "WebLinkBuilder",
    "WebLinkLexer",
    "WebLinkParser",
]
