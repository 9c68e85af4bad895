"""Exceptions raised by the lexicon engine for malformed caller input."""


class InvalidArgumentError(ValueError):
    """Raised when a caller hands the engine a malformed argument."""


class InvalidSymbolError(InvalidArgumentError):
    """Raised when a word or pattern holds a symbol outside the alphabet."""

    def __init__(self, text: str, symbol: str, position: int) -> None:
        """Initialize the error with the offending symbol.

        Args:
            text (str): The word or pattern that was rejected.
            symbol (str): The first symbol not accepted by the alphabet.
            position (int): The index of `symbol` inside `text`.

        """
        self.text = text
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Unsupported symbol {symbol!r} at position {position} in "
            f"{text!r}. Only symbols of the configured alphabet are allowed.",
        )


class EmptyWordError(InvalidArgumentError):
    """Raised when the empty word is inserted into the trie."""
