"""Generation of every string one edit away from a given word.

An edit is a single deletion, insertion, substitution, or transposition
of two adjacent symbols. Insertions and substitutions draw their symbols
from the alphabet the trie is built over.
"""

from collections.abc import Iterable, Iterator


def deletions(word: str) -> Iterator[str]:
    """Yield the `len(word)` strings obtained by removing one symbol."""
    for i in range(len(word)):
        yield word[:i] + word[i + 1 :]


def insertions(word: str, symbols: Iterable[str]) -> Iterator[str]:
    """Yield every string obtained by inserting one symbol anywhere."""
    symbols = tuple(symbols)
    for i in range(len(word) + 1):
        for symbol in symbols:
            yield word[:i] + symbol + word[i:]


def substitutions(word: str, symbols: Iterable[str]) -> Iterator[str]:
    """Yield every string obtained by replacing one symbol with another.

    Replacing a symbol with itself is skipped.
    """
    symbols = tuple(symbols)
    for i, current in enumerate(word):
        for symbol in symbols:
            if symbol == current:
                continue
            yield word[:i] + symbol + word[i + 1 :]


def transpositions(word: str) -> Iterator[str]:
    """Yield every string obtained by swapping two adjacent symbols.

    Swapping two equal symbols gives back `word` and is skipped.
    """
    for i in range(len(word) - 1):
        if word[i] == word[i + 1]:
            continue
        yield word[:i] + word[i + 1] + word[i] + word[i + 2 :]


def single_edits(word: str, symbols: Iterable[str]) -> Iterator[str]:
    """Yield all edit-distance-1 candidates of `word`.

    Candidates come in the order deletions, insertions, substitutions,
    transpositions. The same string may be produced more than once
    (e.g. deleting either "o" of "book"), callers de-duplicate.

    Args:
        word (str): The word to edit.
        symbols (Iterable[str]): The symbols to insert and substitute.

    Yields:
        str: One candidate string at a time.

    """
    symbols = tuple(symbols)
    yield from deletions(word)
    yield from insertions(word, symbols)
    yield from substitutions(word, symbols)
    yield from transpositions(word)


def is_single_edit(source: str, target: str) -> bool:
    """Check whether `target` is exactly one edit away from `source`.

    Args:
        source (str): The word the edit is applied to.
        target (str): The candidate result of the edit.

    Returns:
        bool: True if one deletion, insertion, substitution or
        adjacent transposition turns `source` into `target`.

    """
    if source == target:
        return False

    source_length = len(source)
    target_length = len(target)

    if abs(source_length - target_length) > 1:
        return False

    if source_length == target_length:
        mismatches = [
            i for i in range(source_length) if source[i] != target[i]
        ]
        if len(mismatches) == 1:
            return True
        if len(mismatches) == 2:
            i, j = mismatches
            return (
                j == i + 1
                and source[i] == target[j]
                and source[j] == target[i]
            )
        return False

    # Lengths differ by one: the shorter must be the longer minus a symbol
    shorter, longer = (
        (source, target) if source_length < target_length else (target, source)
    )
    i = 0
    while i < len(shorter) and shorter[i] == longer[i]:
        i += 1
    return shorter[i:] == longer[i + 1 :]
