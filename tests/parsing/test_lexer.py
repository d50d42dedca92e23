from linksmith.parsing.lexer import WebLinkLexer
from linksmith.parsing.models import TokenType


def _types(text: str) -> list[TokenType]:
    return [token.type for token in WebLinkLexer(text)]


def test_simple_link_value():
    tokens = WebLinkLexer('<https://example.org/>; rel="self"').tokens()
    assert [t.type for t in tokens] == [
        TokenType.LT,
        TokenType.URI,
        TokenType.GT,
        TokenType.SEMICOLON,
        TokenType.IDENT,
        TokenType.EQUALS,
        TokenType.QUOTED,
        TokenType.EOF,
    ]
    assert tokens[1].lexeme == "https://example.org/"
    assert tokens[1].offset == 1
    assert tokens[4].lexeme == "rel"
    assert tokens[6].lexeme == "self"


def test_empty_input_yields_only_eof():
    assert _types("") == [TokenType.EOF]
    assert _types("   \t ") == [TokenType.EOF]


def test_whitespace_around_delimiters_is_skipped():
    assert _types("<a> ;  rel = x ,<b>") == _types("<a>;rel=x,<b>")


def test_uri_token_is_verbatim():
    tokens = WebLinkLexer('<https://e.org/a;b=c,d "q">').tokens()
    assert tokens[1].type is TokenType.URI
    assert tokens[1].lexeme == 'https://e.org/a;b=c,d "q"'


def test_empty_uri_token_is_emitted():
    assert _types("<>") == [TokenType.LT, TokenType.URI, TokenType.GT, TokenType.EOF]


def test_quoted_string_decodes_escapes():
    tokens = WebLinkLexer(r'"a \"quoted\" \\ value"').tokens()
    assert tokens[0].type is TokenType.QUOTED
    assert tokens[0].lexeme == 'a "quoted" \\ value'


def test_quoted_lexeme_is_decoded_and_offset_marks_opening_quote():
    text = '<https://a/>; title="say \\"hi\\""'
    quoted = [t for t in WebLinkLexer(text) if t.type is TokenType.QUOTED][0]
    assert quoted.lexeme == 'say "hi"'
    assert text[quoted.offset] == '"'
    assert text[quoted.offset:] == '"say \\"hi\\""'


def test_quoted_string_keeps_delimiters():
    tokens = WebLinkLexer('"a, b; c=<d>"').tokens()
    assert [t.type for t in tokens] == [TokenType.QUOTED, TokenType.EOF]
    assert tokens[0].lexeme == "a, b; c=<d>"


def test_ident_covers_visible_ascii_token_characters():
    tokens = WebLinkLexer("title*=UTF-8'de'n%c3%a4chstes type=application/ld+json").tokens()
    assert tokens[0].lexeme == "title*"
    assert tokens[2].lexeme == "UTF-8'de'n%c3%a4chstes"
    assert tokens[5].lexeme == "application/ld+json"


def test_unterminated_quoted_string_emits_error_then_eof():
    tokens = WebLinkLexer('<a>; title="open').tokens()
    assert tokens[-2].type is TokenType.ERROR
    assert tokens[-2].offset == 11
    assert "unterminated quoted-string" in tokens[-2].message
    assert tokens[-1].type is TokenType.EOF


def test_trailing_backslash_in_quoted_string_is_unterminated():
    tokens = WebLinkLexer('"abc\\').tokens()
    assert tokens[0].type is TokenType.ERROR


def test_unterminated_uri_emits_error():
    tokens = WebLinkLexer("<https://example.org; rel=self").tokens()
    assert [t.type for t in tokens] == [TokenType.LT, TokenType.ERROR, TokenType.EOF]
    assert "missing '>'" in tokens[1].message


def test_unexpected_character_does_not_stop_scanning():
    tokens = WebLinkLexer("<a>; rel=xé, <b>").tokens()
    types = [t.type for t in tokens]
    assert TokenType.ERROR in types
    error = next(t for t in tokens if t.type is TokenType.ERROR)
    assert error.lexeme == "é"
    assert types[-4:] == [TokenType.LT, TokenType.URI, TokenType.GT, TokenType.EOF]


def test_lexer_is_restartable():
    lexer = WebLinkLexer('<a>; rel="x"')
    first = list(lexer)
    second = list(lexer)
    assert first == second
    assert first[-1].type is TokenType.EOF
