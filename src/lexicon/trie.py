"""This module represents the implementation of a Trie structure that's
used for exact lookups, prefix completion, single-edit corrections and
wildcard matching over a fixed vocabulary.

The nodes live in a flat list (the arena) and refer to their children
by index. Every traversal runs on an explicit stack, so the depth of
the longest word never limits the Python call stack.
"""

import time
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, Optional, Union

from .alphabet import Alphabet
from .config import DEFAULT_PREDICT_MIN_LENGTH
from .edits import single_edits
from .errors import EmptyWordError, InvalidSymbolError
from .logger import log, logger

if TYPE_CHECKING:
    from .config import EngineConfig

ROOT_SYMBOL = "^"
ROOT_INDEX = 0

WordEntry = Union[str, tuple[str, int]]


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children", "is_terminal", "payload", "symbol")

    def __init__(self, symbol: str) -> None:
        """Initialize a new Trie node.

        Attributes:
            symbol (str): The symbol on the edge from the parent node.
            is_terminal (bool): Indicates whether this node marks
            the end of a vocabulary word.
            payload (int): The value stored with the word ending here.
            children (dict): A dictionary mapping symbols to the arena
            indexes of the corresponding child nodes.

        """
        self.symbol = symbol
        self.is_terminal = False
        self.payload = 0
        self.children: dict[str, int] = {}

    def __repr__(self) -> str:
        return (
            f"TrieNode(symbol={self.symbol!r}, "
            f"is_terminal={self.is_terminal}, payload={self.payload}, "
            f"children={sorted(self.children)})"
        )


class Trie:
    """Represents the prefix tree dictionary engine."""

    def __init__(
        self,
        alphabet: Optional[Alphabet] = None,
        log_details: bool = False,
        predict_min_length: int = DEFAULT_PREDICT_MIN_LENGTH,
    ) -> None:
        """Initialize an empty trie holding only the root node.

        Args:
            alphabet (Alphabet, optional): The accepted symbols and the
            wildcard marker. Defaults to lowercase ASCII and "*".
            log_details (bool): Whether each query is timed and logged.
            predict_min_length (int): Inputs shorter than this get no
            predictions from `predict`.

        """
        self.alphabet = alphabet if alphabet is not None else Alphabet()
        self.log_details = log_details
        self.predict_min_length = predict_min_length
        self._nodes: list[TrieNode] = [TrieNode(ROOT_SYMBOL)]
        self._word_count = 0

    @classmethod
    def build(
        cls,
        words: Iterable[WordEntry],
        alphabet: Optional[Alphabet] = None,
        log_details: bool = False,
        predict_min_length: int = DEFAULT_PREDICT_MIN_LENGTH,
    ) -> "Trie":
        """Create a trie and insert a whole vocabulary into it.

        Args:
            words (Iterable): `(word, payload)` pairs. A bare string
            is inserted with a payload of 0.
            alphabet (Alphabet, optional): See `Trie.__init__`.
            log_details (bool): See `Trie.__init__`.
            predict_min_length (int): See `Trie.__init__`.

        Raises:
            InvalidSymbolError: If a word uses a symbol
            outside the alphabet.
            EmptyWordError: If a word is empty.

        Returns:
            Trie: The populated trie.

        """
        trie = cls(alphabet, log_details, predict_min_length)
        start_time = time.perf_counter()

        for entry in words:
            if isinstance(entry, str):
                trie.insert(entry)
            else:
                word, payload = entry
                trie.insert(word, payload)

        if trie.log_details:
            duration = (time.perf_counter() - start_time) * 1000
            logger.info(
                "Built trie with %d words and %d nodes in %.2f ms",
                len(trie),
                trie.node_count,
                duration,
            )
        return trie

    @classmethod
    def from_config(
        cls,
        config: "EngineConfig",
        words: Iterable[WordEntry],
    ) -> "Trie":
        """Build a trie using the settings of a loaded configuration.

        Args:
            config (EngineConfig): The parsed engine configuration.
            words (Iterable): The vocabulary, as accepted by `build`.

        Returns:
            Trie: The populated trie.

        """
        return cls.build(
            words,
            alphabet=config.alphabet,
            log_details=config.log_details,
            predict_min_length=config.predict_min_length,
        )

    @property
    def root(self) -> TrieNode:
        return self._nodes[ROOT_INDEX]

    @property
    def node_count(self) -> int:
        """The number of nodes in the arena, root included."""
        return len(self._nodes)

    def __len__(self) -> int:
        return self._word_count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._is_word(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._collect(ROOT_INDEX, ""))

    def insert(self, word: str, payload: int = 0) -> None:
        """Insert a new word into the trie structure.

        Inserting a word that is already present only replaces its payload.

        Args:
            word (str): The word to be inserted into the trie structure.
            payload (int): The value stored with the word.

        Raises:
            EmptyWordError: If `word` is empty.
            InvalidSymbolError: If `word` uses a symbol
            outside the alphabet.

        """
        if not word:
            logger.warning("Rejected insertion of the empty word")
            raise EmptyWordError(
                "The empty word cannot be inserted into the trie.",
            )

        try:
            self.alphabet.validate_word(word)
        except InvalidSymbolError as e:
            logger.warning("Rejected insertion: %s", e)
            raise

        index = ROOT_INDEX
        for symbol in word:
            node = self._nodes[index]
            child = node.children.get(symbol)
            # If the symbol is not already a child, add a new node
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode(symbol))
                node.children[symbol] = child
            index = child

        node = self._nodes[index]
        if not node.is_terminal:
            self._word_count += 1
        node.is_terminal = True
        node.payload = payload

    def contains(self, word: str) -> bool:
        """Check for the existence of a given word in the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the exact `word` is present
            in the trie as a complete word, False otherwise.

        """
        start_time = time.perf_counter()
        found = self._is_word(word)
        self._report("contains", word, int(found), start_time)
        return found

    def has_prefix(self, prefix: str) -> bool:
        """Check whether any vocabulary word starts with `prefix`.

        Args:
            prefix (str): The prefix to look for. The empty prefix
            is always present.

        Returns:
            bool: True if a path for the whole prefix exists.

        """
        start_time = time.perf_counter()
        found = self._walk(prefix) is not None
        self._report("has_prefix", prefix, int(found), start_time)
        return found

    def get(self, word: str, default: Any = None) -> Any:
        """Return the payload stored with `word`, or `default`.

        Args:
            word (str): The word to look up.
            default (Any): Returned when `word` is not in the vocabulary.

        Returns:
            Any: The payload of `word` or `default`.

        """
        index = self._walk(word)
        if index is None or not self._nodes[index].is_terminal:
            return default
        return self._nodes[index].payload

    def autocomplete(self, prefix: str) -> list[str]:
        """List every vocabulary word starting with `prefix`.

        Args:
            prefix (str): The prefix to complete. The empty prefix
            lists the whole vocabulary.

        Returns:
            list[str]: The completions, `prefix` itself included if it
            is a word. The order is unspecified.

        """
        start_time = time.perf_counter()
        index = self._walk(prefix)
        completions = [] if index is None else self._collect(index, prefix)
        self._report("autocomplete", prefix, len(completions), start_time)
        return completions

    def autocorrect(self, word: str) -> list[str]:
        """List the vocabulary words exactly one edit away from `word`.

        Every deletion, insertion, substitution and adjacent
        transposition of `word` is generated over the alphabet and
        tested for membership.

        Args:
            word (str): The possibly misspelled word. It may contain
            symbols outside the alphabet.

        Returns:
            list[str]: The corrections without duplicates, in the order
            they were generated. `word` itself is never included.

        """
        start_time = time.perf_counter()
        corrections: list[str] = []
        seen: set[str] = set()

        for candidate in single_edits(word, self.alphabet):
            if candidate in seen:
                continue
            seen.add(candidate)
            if self._is_word(candidate):
                corrections.append(candidate)

        self._report("autocorrect", word, len(corrections), start_time)
        return corrections

    def predict(self, word: str) -> list[str]:
        """Suggest words with a fast walk guided by the tree.

        The walk follows the child matching each input symbol in turn,
        then lists every word below the node where the input runs out.
        It never tries substitutions or transpositions, so it is a
        predictive shortcut rather than a spelling corrector.

        Args:
            word (str): The typed input.

        Returns:
            list[str]: The predictions, or an empty list when `word` is
            shorter than `predict_min_length` or leaves the tree.

        """
        start_time = time.perf_counter()
        predictions: list[str] = []

        if len(word) >= self.predict_min_length:
            index = ROOT_INDEX
            for symbol in word:
                child = self._nodes[index].children.get(symbol)
                if child is None:
                    break
                index = child
            else:
                predictions = self._collect(index, word)

        self._report("predict", word, len(predictions), start_time)
        return predictions

    def partial_match(self, pattern: str) -> list[str]:
        """List the words matching a fixed-length wildcard pattern.

        Args:
            pattern (str): Alphabet symbols and wildcard markers. Each
            wildcard stands for exactly one symbol.

        Raises:
            InvalidSymbolError: If the pattern holds a symbol that is
            neither in the alphabet nor the wildcard.

        Returns:
            list[str]: The words of the same length as `pattern` that
            agree with it on every literal position. The order is
            unspecified.

        """
        start_time = time.perf_counter()

        try:
            self.alphabet.validate_pattern(pattern)
        except InvalidSymbolError as e:
            logger.warning("Rejected pattern: %s", e)
            raise

        wildcard = self.alphabet.wildcard
        length = len(pattern)
        matches: list[str] = []
        stack: list[tuple[int, str]] = [(ROOT_INDEX, "")]

        while stack:
            index, spelled = stack.pop()
            node = self._nodes[index]
            depth = len(spelled)

            if depth == length:
                if node.is_terminal:
                    matches.append(spelled)
                continue

            symbol = pattern[depth]
            if symbol == wildcard:
                for child in reversed(node.children.values()):
                    stack.append((child, spelled + self._nodes[child].symbol))
            else:
                child = node.children.get(symbol)
                if child is not None:
                    stack.append((child, spelled + symbol))

        self._report("partial_match", pattern, len(matches), start_time)
        return matches

    def _walk(self, text: str) -> Optional[int]:
        """Return the arena index of the node spelling `text`, if any."""
        index = ROOT_INDEX
        for symbol in text:
            child = self._nodes[index].children.get(symbol)
            if child is None:
                return None
            index = child
        return index

    def _is_word(self, word: str) -> bool:
        index = self._walk(word)
        return index is not None and self._nodes[index].is_terminal

    def _collect(self, start: int, prefix: str) -> list[str]:
        """Gather every word in the subtree rooted at `start`.

        Args:
            start (int): The arena index of the subtree root.
            prefix (str): The word spelled by the path to `start`.

        Returns:
            list[str]: The words in depth-first, insertion order.

        """
        words: list[str] = []
        stack: list[tuple[int, str]] = [(start, prefix)]

        while stack:
            index, spelled = stack.pop()
            node = self._nodes[index]
            if node.is_terminal:
                words.append(spelled)
            # Push in reverse so children pop in insertion order
            for child in reversed(node.children.values()):
                stack.append((child, spelled + self._nodes[child].symbol))

        return words

    def _report(
        self,
        query_kind: str,
        query: str,
        result_count: int,
        start_time: float,
    ) -> None:
        if self.log_details:
            duration = (time.perf_counter() - start_time) * 1000
            log(query_kind, query, result_count, duration)
