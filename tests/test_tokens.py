"""
Token Model Tests
=================

Tests for TokenType, the keyword table, keyword classification and the
Token value class.
"""

import dataclasses
import json

import pytest

from miniada.tokens import (
    KEYWORDS,
    ErrorKind,
    Token,
    TokenType,
    classify_as_keyword_or_identifier,
)


# =============================================================================
# Keyword Table Tests
# =============================================================================

class TestKeywordTable:
    """Tests for the reserved-word table."""

    @pytest.mark.parametrize("word,token_type", [
        ("true", TokenType.BOOLEAN_LITERAL),
        ("false", TokenType.BOOLEAN_LITERAL),
        ("procedure", TokenType.PROCEDURE),
        ("is", TokenType.IS),
        ("declare", TokenType.DECLARE),
        ("constant", TokenType.CONSTANT),
        ("integer", TokenType.TYPE),
        ("real", TokenType.TYPE),
        ("boolean", TokenType.TYPE),
        ("or", TokenType.ADDOP),
        ("mod", TokenType.MULOP),
        ("and", TokenType.MULOP),
        ("not", TokenType.NOT),
        ("if", TokenType.IF),
        ("then", TokenType.THEN),
        ("while", TokenType.WHILE),
        ("put", TokenType.WRITE),
        ("put_line", TokenType.WRITE),
        ("get", TokenType.READ),
        ("begin", TokenType.BEGIN),
        ("end", TokenType.END),
        ("loop", TokenType.LOOP),
    ])
    def test_keyword_classes(self, word, token_type):
        assert KEYWORDS[word] == token_type
        assert classify_as_keyword_or_identifier(word) == token_type

    def test_table_size(self):
        assert len(KEYWORDS) == 22

    def test_keys_are_lower_case(self):
        assert all(key == key.lower() for key in KEYWORDS)

    @pytest.mark.parametrize("word", ["BEGIN", "Begin", "bEGIN"])
    def test_case_insensitive(self, word):
        assert classify_as_keyword_or_identifier(word) == TokenType.BEGIN

    @pytest.mark.parametrize("word", ["beginx", "x", "else", "Put_Lines", "ends"])
    def test_identifiers(self, word):
        assert classify_as_keyword_or_identifier(word) == TokenType.IDENTIFIER

    def test_ascii_only_folding(self):
        """Unicode case rules are not applied ('İS' does not fold to 'is')."""
        assert classify_as_keyword_or_identifier("İS") == TokenType.IDENTIFIER


# =============================================================================
# Token Tests
# =============================================================================

class TestToken:
    """Tests for the Token value class."""

    def test_fixed_token(self):
        token = Token(TokenType.SEMICOLON, 3, ";")
        assert token.type == TokenType.SEMICOLON
        assert token.line == 3
        assert token.lexeme == ";"
        assert token.error_kind is None

    def test_bare_token(self):
        token = Token(TokenType.EOF, 7)
        assert token.lexeme == ""
        assert token.is_eof

    def test_word_keeps_casing(self):
        token = Token.word("WHILE", 2)
        assert token.type == TokenType.WHILE
        assert token.lexeme == "WHILE"
        assert token.is_keyword

    def test_word_identifier(self):
        token = Token.word("Total", 1)
        assert token.type == TokenType.IDENTIFIER
        assert not token.is_keyword

    def test_symbol_is_not_keyword(self):
        """'+' shares the addop class with 'or' but is not a reserved word."""
        assert not Token(TokenType.ADDOP, 1, "+").is_keyword
        assert Token(TokenType.ADDOP, 1, "Or").is_keyword

    def test_error_token(self):
        token = Token.error(4, "3.", ErrorKind.MALFORMED_NUMBER)
        assert token.is_error
        assert token.type == TokenType.ERROR
        assert token.error_kind == ErrorKind.MALFORMED_NUMBER

    def test_frozen(self):
        token = Token(TokenType.LPAREN, 1, "(")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_equality(self):
        assert Token(TokenType.RELOP, 1, "<") == Token(TokenType.RELOP, 1, "<")
        assert Token(TokenType.RELOP, 1, "<") != Token(TokenType.RELOP, 2, "<")

    def test_is_real(self):
        assert Token(TokenType.NUMERIC_LITERAL, 1, "4.5").is_real
        assert not Token(TokenType.NUMERIC_LITERAL, 1, "45").is_real
        assert not Token(TokenType.STRING_LITERAL, 1, '"4.5"').is_real


# =============================================================================
# Rendering Tests
# =============================================================================

class TestRendering:
    """Tests for text and JSON rendering."""

    def test_str(self):
        token = Token(TokenType.ASSIGN, 12, ":=")
        assert str(token) == "(line 12): assign : :="

    def test_str_eof(self):
        assert str(Token(TokenType.EOF, 5)) == "(line 5): eof : "

    def test_repr(self):
        token = Token(TokenType.IDENTIFIER, 1, "x")
        assert repr(token) == "Token(IDENTIFIER, 'x', line 1)"

    def test_repr_error(self):
        token = Token.error(2, "@", ErrorKind.INVALID_CHARACTER)
        assert repr(token) == "Token(ERROR, '@', line 2, invalid_character)"

    def test_to_dict(self):
        data = Token(TokenType.NUMERIC_LITERAL, 3, "1.5").to_dict()
        assert data == {"type": "numeric_literal", "line": 3, "lexeme": "1.5"}

    def test_to_dict_error(self):
        data = Token.error(1, '"ab', ErrorKind.UNTERMINATED_STRING).to_dict()
        assert data["type"] == "error"
        assert data["error"] == "unterminated_string"

    def test_to_dict_is_json_serializable(self):
        json.dumps(Token(TokenType.STRING_LITERAL, 1, '"a""b"').to_dict())

    def test_class_names(self):
        """Rendered class names are the lower-case enum values."""
        assert TokenType.NUMERIC_LITERAL.value == "numeric_literal"
        assert len(TokenType) == 28
