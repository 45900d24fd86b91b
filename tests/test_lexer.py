import pytest

from minishlex.lexer import (
    LexerError,
    is_whitespace,
    operator_length,
    operator_type,
    tokenize,
)
from minishlex.tokens import QuoteType, TokenType


@pytest.mark.parametrize("char,expected", [(" ", True), ("\t", True), ("a", False), ("\n", False)])
def test_is_whitespace(char, expected):
    assert is_whitespace(char) is expected


@pytest.mark.parametrize(
    "text,pos,expected",
    [("|", 0, 1), (">", 0, 1), (">>", 0, 2), ("<", 0, 1), ("<<", 0, 2), ("a|", 0, 0), ("a|", 1, 1), ("a", 1, 0)],
)
def test_operator_length(text, pos, expected):
    assert operator_length(text, pos) == expected


@pytest.mark.parametrize(
    "value,kind",
    [
        ("|", TokenType.PIPE),
        ("<", TokenType.REDIR_IN),
        (">", TokenType.REDIR_OUT),
        ("<<", TokenType.REDIR_HEREDOC),
        (">>", TokenType.REDIR_APPEND),
    ],
)
def test_operator_type(value, kind):
    assert operator_type(value) is kind


def test_operator_type_unknown():
    with pytest.raises(LexerError):
        operator_type("&")


def test_simple_pipeline():
    tokens = tokenize("ls -l | wc")
    assert [t.value for t in tokens] == ["ls", "-l", "|", "wc"]
    assert [t.type for t in tokens] == [
        TokenType.WORD,
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
    ]


def test_operators_need_no_spaces():
    tokens = tokenize("cat<in>>out")
    assert [t.value for t in tokens] == ["cat", "<", "in", ">>", "out"]
    assert tokens[3].type is TokenType.REDIR_APPEND


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_blank_input_gives_no_tokens(text):
    assert tokenize(text) == []


def test_quoted_pieces_join_into_one_word():
    tokens = tokenize("a\"b c\"d")
    assert len(tokens) == 1
    assert tokens[0].value == "ab cd"
    assert tokens[0].quote_type is QuoteType.DOUBLE


def test_last_quote_kind_wins():
    tokens = tokenize("\"x\"'y'")
    assert tokens[0].quote_type is QuoteType.SINGLE


def test_unquoted_word_has_no_quote_type():
    assert tokenize("echo")[0].quote_type is QuoteType.NONE


def test_empty_quotes_give_empty_word():
    tokens = tokenize("echo ''")
    assert [t.value for t in tokens] == ["echo", ""]


def test_quoted_operator_is_a_word():
    tokens = tokenize("echo '|'")
    assert tokens[1].type is TokenType.WORD
    assert tokens[1].value == "|"


@pytest.mark.parametrize("text", ["echo 'abc", "echo \"abc", "'"])
def test_unclosed_quote(text):
    with pytest.raises(LexerError, match="Unclosed quote"):
        tokenize(text)