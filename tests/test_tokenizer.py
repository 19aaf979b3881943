from proto_tags.parser.tokenizer import ProtoTokenizer, ProtoTokenType
from proto_tags.source import CharSource


def _tokens(text: str):
    tokenizer = ProtoTokenizer(CharSource(text))
    result = []
    while True:
        tok = tokenizer.next_token()
        if tok.type == ProtoTokenType.EOF:
            result.append((tok.type, None))
            return result
        value = tok.value if tok.type == ProtoTokenType.IDENT else None
        result.append((tok.type, value))


class TestNextToken:
    def test_identifiers_and_punctuation(self):
        assert _tokens("message Foo { int32 x_1 = 1; }") == [
            (ProtoTokenType.IDENT, "message"),
            (ProtoTokenType.IDENT, "Foo"),
            (ProtoTokenType.LBRACE, None),
            (ProtoTokenType.IDENT, "int32"),
            (ProtoTokenType.IDENT, "x_1"),
            (ProtoTokenType.EQUALS, None),
            (ProtoTokenType.IDENT, "1"),
            (ProtoTokenType.SEMICOLON, None),
            (ProtoTokenType.RBRACE, None),
            (ProtoTokenType.EOF, None),
        ]

    def test_dotted_name(self):
        assert _tokens("foo.Bar") == [
            (ProtoTokenType.IDENT, "foo"),
            (ProtoTokenType.DOT, None),
            (ProtoTokenType.IDENT, "Bar"),
            (ProtoTokenType.EOF, None),
        ]

    def test_other_characters_are_dropped(self):
        assert _tokens("(Req) returns [x] -> <y>, 'z'") == [
            (ProtoTokenType.IDENT, "Req"),
            (ProtoTokenType.IDENT, "returns"),
            (ProtoTokenType.IDENT, "x"),
            (ProtoTokenType.IDENT, "y"),
            (ProtoTokenType.EOF, None),
        ]

    def test_whitespace_only_yields_single_eof(self):
        assert _tokens("  \t\n\r\n ") == [(ProtoTokenType.EOF, None)]

    def test_comment_only_yields_single_eof(self):
        assert _tokens("// message Foo\n/* enum Bar { A = 1; } */\n") == [
            (ProtoTokenType.EOF, None),
        ]

    def test_eof_repeats(self):
        tokenizer = ProtoTokenizer(CharSource(""))
        assert tokenizer.next_token().type == ProtoTokenType.EOF
        assert tokenizer.next_token().type == ProtoTokenType.EOF

    def test_identifier_at_end_of_input(self):
        assert _tokens("Foo") == [
            (ProtoTokenType.IDENT, "Foo"),
            (ProtoTokenType.EOF, None),
        ]

    def test_token_line(self):
        tokenizer = ProtoTokenizer(CharSource("\n\n  Foo\n;"))
        tok = tokenizer.next_token()
        assert tok.value == "Foo"
        assert tok.line == 3
        assert tokenizer.next_token().line == 4


class TestSkipUntil:
    def test_stops_at_requested_punctuation(self):
        tokenizer = ProtoTokenizer(CharSource("a b = c ; d"))
        tokenizer.next_token()
        tokenizer.skip_until((ProtoTokenType.SEMICOLON,))
        assert tokenizer.token.type == ProtoTokenType.SEMICOLON

    def test_does_not_move_when_already_matching(self):
        tokenizer = ProtoTokenizer(CharSource("{ a ;"))
        tokenizer.next_token()
        tokenizer.skip_until((ProtoTokenType.LBRACE, ProtoTokenType.SEMICOLON))
        assert tokenizer.token.type == ProtoTokenType.LBRACE

    def test_stops_at_eof(self):
        tokenizer = ProtoTokenizer(CharSource("a b c"))
        tokenizer.next_token()
        tokenizer.skip_until((ProtoTokenType.RBRACE,))
        assert tokenizer.token.type == ProtoTokenType.EOF


class TestIsKeyword:
    def test_exact_match_only(self):
        tokenizer = ProtoTokenizer(CharSource("messages"))
        tokenizer.next_token()
        assert not tokenizer.is_keyword("message")
        assert tokenizer.is_keyword("messages")

    def test_case_sensitive(self):
        tokenizer = ProtoTokenizer(CharSource("Message"))
        tokenizer.next_token()
        assert not tokenizer.is_keyword("message")

    def test_punctuation_is_never_a_keyword(self):
        tokenizer = ProtoTokenizer(CharSource("option ;"))
        tokenizer.next_token()
        tokenizer.next_token()
        assert not tokenizer.is_keyword("option")
