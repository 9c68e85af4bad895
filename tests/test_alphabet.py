import pytest

from src.lexicon.alphabet import DEFAULT_SYMBOLS, DEFAULT_WILDCARD, Alphabet
from src.lexicon.errors import InvalidArgumentError, InvalidSymbolError


def test_default_alphabet():
    alphabet = Alphabet()
    assert len(alphabet) == 26
    assert "".join(alphabet) == DEFAULT_SYMBOLS
    assert alphabet.wildcard == DEFAULT_WILDCARD
    assert "q" in alphabet
    assert "Q" not in alphabet
    assert "*" not in alphabet


def test_alphabet_keeps_order():
    alphabet = Alphabet("zyx", "?")
    assert list(alphabet) == ["z", "y", "x"]
    assert repr(alphabet) == "Alphabet(symbols='zyx', wildcard='?')"


@pytest.mark.parametrize(
    "symbols,wildcard,message",
    [
        ("", "*", "must not be empty"),
        ("abca", "*", "duplicate symbols"),
        (["a", "bc"], "*", "single characters"),
        ("abc", "", "wildcard must be a single character"),
        ("abc", "**", "wildcard must be a single character"),
        ("ab*", "*", "must not be an alphabet symbol"),
    ],
)
def test_invalid_alphabet(symbols, wildcard, message):
    with pytest.raises(InvalidArgumentError) as excinfo:
        Alphabet(symbols, wildcard)
    assert message in str(excinfo.value)


def test_validate_word():
    alphabet = Alphabet()
    alphabet.validate_word("hello")
    alphabet.validate_word("")
    with pytest.raises(InvalidSymbolError) as excinfo:
        alphabet.validate_word("he*lo")
    assert excinfo.value.symbol == "*"
    assert excinfo.value.position == 2


def test_validate_pattern():
    alphabet = Alphabet()
    alphabet.validate_pattern("he*lo")
    alphabet.validate_pattern("***")
    with pytest.raises(InvalidSymbolError) as excinfo:
        alphabet.validate_pattern("he?lo")
    assert excinfo.value.symbol == "?"
