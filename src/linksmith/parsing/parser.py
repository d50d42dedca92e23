"""
Grammar-level parser for the HTTP ``Link`` header (RFC 8288 §3).

GRAMMAR
-------

    Link      = LinkValue *( "," LinkValue )
    LinkValue = "<" target ">" *( ";" Param )
    Param     = name [ "=" ( token / quoted-string ) ]

RECOVERY POLICY
---------------
A fault is local to one link-value. When a segment has no ``<target>``, an
unbalanced bracket, a lexer ERROR token, a ``=`` without a value, or any
unexpected token, exactly one ERROR issue is recorded, tokens are discarded
up to the next top-level ``,`` (or EOF), and parsing resumes. Valid
neighbours in the same header are always recovered.

Empty list elements (``<a>, , <b>``) are skipped, as the HTTP list syntax
allows. An empty parameter slot (``<a>;;rel=x``) is tolerated with a WARNING.

NON-RESPONSIBILITY
------------------
The parser does not interpret parameters: no deduplication, no cardinality
checks, no known/unknown classification. That belongs to the validator.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ..logging import logger
from ..models.report import Issue, IssueCode
from .models import ParseResult, RawLinkValue, RawParam, Token, TokenType

_SEGMENT_END = (TokenType.COMMA, TokenType.EOF)


class _SyntaxFault(Exception):
    """Aborts the current link-value; never escapes the parser."""

    def __init__(self, code: IssueCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class _Cursor:
    """One-token lookahead over a token stream."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self.current: Token = self._next()

    def _next(self) -> Token:
        # A stream without EOF is closed off so the parser always terminates.
        return next(self._tokens, Token(TokenType.EOF, "", -1))

    def advance(self) -> Token:
        previous = self.current
        if previous.type is not TokenType.EOF:
            self.current = self._next()
        return previous

    def at(self, *types: TokenType) -> bool:
        return self.current.type in types


def _describe(token: Token) -> str:
    if token.type is TokenType.EOF:
        return "end of input"
    if token.type is TokenType.QUOTED:
        return f"quoted-string at offset {token.offset}"
    return f"'{token.lexeme}' at offset {token.offset}"


class WebLinkParser:
    """
    Recover link-values from a token stream.

    ``parse`` never raises for malformed content; every fault becomes an
    Issue in the returned ``ParseResult``.
    """

    def parse(self, tokens: Iterable[Token]) -> ParseResult:
        cursor = _Cursor(tokens)
        result = ParseResult()
        index = 0
        while not cursor.at(TokenType.EOF):
            if cursor.at(TokenType.COMMA):
                cursor.advance()
                continue
            warnings: list[Issue] = []
            try:
                link_value = self._link_value(cursor, index, warnings)
            except _SyntaxFault as fault:
                logger.debug(f"Link-value {index} discarded: {fault.message}")
                result.issues.append(Issue.error(fault.code, fault.message, link_index=index))
                self._recover(cursor)
            else:
                result.issues.extend(warnings)
                result.link_values.append(link_value)
            index += 1

        logger.debug(
            f"Parsed {len(result.link_values)} of {index} link-values "
            f"({len(result.issues)} syntax issues)"
        )
        return result

    def _link_value(self, cursor: _Cursor, index: int, warnings: list[Issue]) -> RawLinkValue:
        start = cursor.current
        if start.type is TokenType.ERROR:
            raise _SyntaxFault(IssueCode.SYNTAX_ERROR, f"{start.message} at offset {start.offset}")
        if start.type is not TokenType.LT:
            raise _SyntaxFault(
                IssueCode.MISSING_TARGET,
                f"Link-value must start with '<target>', found {_describe(start)}",
            )
        cursor.advance()

        token = cursor.advance()
        if token.type is TokenType.ERROR:
            raise _SyntaxFault(IssueCode.SYNTAX_ERROR, f"{token.message} at offset {token.offset}")
        target = token.lexeme
        if not cursor.at(TokenType.GT):
            raise _SyntaxFault(IssueCode.SYNTAX_ERROR, f"Expected '>' but found {_describe(cursor.current)}")
        cursor.advance()

        params: list[RawParam] = []
        while not cursor.at(*_SEGMENT_END):
            token = cursor.current
            if token.type is not TokenType.SEMICOLON:
                raise _SyntaxFault(
                    IssueCode.SYNTAX_ERROR,
                    f"Expected ';' or ',' but found {_describe(token)}",
                )
            cursor.advance()
            if cursor.at(TokenType.SEMICOLON, *_SEGMENT_END):
                warnings.append(
                    Issue.warning(
                        IssueCode.EMPTY_PARAMETER,
                        f"Empty parameter after ';' at offset {token.offset}",
                        link_index=index,
                    )
                )
                continue
            params.append(self._param(cursor))

        if cursor.at(TokenType.COMMA):
            cursor.advance()
        return RawLinkValue(target=target, params=tuple(params), index=index)

    def _param(self, cursor: _Cursor) -> RawParam:
        token = cursor.current
        if token.type is TokenType.ERROR:
            raise _SyntaxFault(IssueCode.SYNTAX_ERROR, f"{token.message} at offset {token.offset}")
        if token.type is not TokenType.IDENT:
            raise _SyntaxFault(
                IssueCode.SYNTAX_ERROR,
                f"Expected parameter name but found {_describe(token)}",
            )
        name = cursor.advance().lexeme
        if not cursor.at(TokenType.EQUALS):
            return RawParam.without_value(name)
        cursor.advance()

        value = cursor.current
        if value.type is TokenType.ERROR:
            raise _SyntaxFault(IssueCode.SYNTAX_ERROR, f"{value.message} at offset {value.offset}")
        if value.type not in (TokenType.IDENT, TokenType.QUOTED):
            raise _SyntaxFault(
                IssueCode.SYNTAX_ERROR,
                f"Expected value for parameter '{name}' but found {_describe(value)}",
            )
        cursor.advance()
        return RawParam.with_value(name, value.lexeme)

    @staticmethod
    def _recover(cursor: _Cursor) -> None:
        """Discard tokens up to and including the next top-level ','."""
        while not cursor.at(*_SEGMENT_END):
            cursor.advance()
        if cursor.at(TokenType.COMMA):
            cursor.advance()
