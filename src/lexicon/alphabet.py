"""The fixed symbol set the trie is built over."""

import string
from collections.abc import Iterable, Iterator

from .errors import InvalidArgumentError, InvalidSymbolError

DEFAULT_SYMBOLS = string.ascii_lowercase
DEFAULT_WILDCARD = "*"


class Alphabet:
    """An ordered set of single-character symbols plus a wildcard marker."""

    def __init__(
        self,
        symbols: Iterable[str] = DEFAULT_SYMBOLS,
        wildcard: str = DEFAULT_WILDCARD,
    ) -> None:
        """Initialize and validate the alphabet.

        Args:
            symbols (Iterable[str]): The distinct single-character symbols
            vocabulary words may be spelled with.
            wildcard (str): The marker matching any one symbol in
            partial-match patterns.

        Raises:
            InvalidArgumentError: If the symbols are empty, duplicated,
            longer than one character, or if the wildcard collides
            with one of them.

        """
        ordered = list(symbols)
        if not ordered:
            raise InvalidArgumentError("The alphabet must not be empty.")

        for symbol in ordered:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidArgumentError(
                    f"Alphabet symbols must be single characters, "
                    f"got {symbol!r}.",
                )

        if len(set(ordered)) != len(ordered):
            raise InvalidArgumentError(
                "The alphabet must not contain duplicate symbols.",
            )

        if not isinstance(wildcard, str) or len(wildcard) != 1:
            raise InvalidArgumentError(
                f"The wildcard must be a single character, got {wildcard!r}.",
            )

        if wildcard in ordered:
            raise InvalidArgumentError(
                f"The wildcard {wildcard!r} must not be an alphabet symbol.",
            )

        self.symbols: tuple[str, ...] = tuple(ordered)
        self.wildcard = wildcard
        self._lookup = frozenset(ordered)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __repr__(self) -> str:
        return (
            f"Alphabet(symbols={''.join(self.symbols)!r}, "
            f"wildcard={self.wildcard!r})"
        )

    def validate_word(self, word: str) -> None:
        """Check that every symbol of `word` belongs to the alphabet.

        Args:
            word (str): The word to check.

        Raises:
            InvalidSymbolError: On the first unsupported symbol.

        """
        for position, symbol in enumerate(word):
            if symbol not in self._lookup:
                raise InvalidSymbolError(word, symbol, position)

    def validate_pattern(self, pattern: str) -> None:
        """Check a partial-match pattern, accepting the wildcard marker.

        Args:
            pattern (str): The pattern to check.

        Raises:
            InvalidSymbolError: On the first symbol that is neither an
            alphabet symbol nor the wildcard.

        """
        for position, symbol in enumerate(pattern):
            if symbol != self.wildcard and symbol not in self._lookup:
                raise InvalidSymbolError(pattern, symbol, position)
