"""
Tokenizer for the HTTP ``Link`` header field value (RFC 8288 §3).

RECOGNITION RULES
-----------------
- ``<`` ``>`` ``;`` ``=`` ``,`` are single-character tokens.
- After ``<`` everything up to the next ``>`` is one URI token, verbatim.
  Only ``>`` terminates it.
- A quoted-string runs from ``"`` to the next unescaped ``"``. ``\\X``
  decodes to ``X``. The token carries the decoded content.
- IDENT is a maximal run of visible ASCII excluding the delimiters above and
  ``"``.
- Whitespace outside URI and quoted-string tokens is skipped.

FAULTS
------
The lexer never raises on content. An unterminated quoted-string, an
unterminated ``<...>`` or a character matching no token class produces an
ERROR token tied to its source offset, and scanning goes on so the parser can
resynchronize. Unterminated constructs consume the rest of the input.
"""

from __future__ import annotations

from typing import Iterator

from .models import Token, TokenType

_SINGLE_CHAR_TOKENS = {
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUALS,
    ",": TokenType.COMMA,
}
_WHITESPACE = frozenset(" \t\r\n")
_NON_IDENT = frozenset('<>;=,"')


def _is_ident_char(char: str) -> bool:
    return "!" <= char <= "~" and char not in _NON_IDENT


class WebLinkLexer:
    """
    Lazy, restartable token stream over one header field value.

    Every iteration scans the input from the start and ends with exactly one
    EOF token.
    """

    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        return self._scan()

    def tokens(self) -> list[Token]:
        return list(self)

    def _scan(self) -> Iterator[Token]:
        text = self.text
        length = len(text)
        pos = 0
        while pos < length:
            char = text[pos]
            if char in _WHITESPACE:
                pos += 1
            elif char == "<":
                yield Token(TokenType.LT, char, pos)
                end = text.find(">", pos + 1)
                if end == -1:
                    yield Token(TokenType.ERROR, text[pos:], pos, "unterminated URI reference, missing '>'")
                    pos = length
                else:
                    yield Token(TokenType.URI, text[pos + 1:end], pos + 1)
                    yield Token(TokenType.GT, ">", end)
                    pos = end + 1
            elif char in _SINGLE_CHAR_TOKENS:
                yield Token(_SINGLE_CHAR_TOKENS[char], char, pos)
                pos += 1
            elif char == '"':
                token, pos = self._quoted_string(pos)
                yield token
            elif _is_ident_char(char):
                end = pos + 1
                while end < length and _is_ident_char(text[end]):
                    end += 1
                yield Token(TokenType.IDENT, text[pos:end], pos)
                pos = end
            else:
                yield Token(TokenType.ERROR, char, pos, f"unexpected character {char!r}")
                pos += 1
        yield Token(TokenType.EOF, "", length)

    def _quoted_string(self, start: int) -> tuple[Token, int]:
        text = self.text
        length = len(text)
        chars: list[str] = []
        pos = start + 1
        while pos < length:
            char = text[pos]
            if char == "\\":
                if pos + 1 >= length:
                    break
                chars.append(text[pos + 1])
                pos += 2
                continue
            if char == '"':
                return Token(TokenType.QUOTED, "".join(chars), start), pos + 1
            chars.append(char)
            pos += 1
        return Token(TokenType.ERROR, text[start:], start, "unterminated quoted-string"), length
