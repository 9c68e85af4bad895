"""Brute-force query algorithms over a flat word list, used to verify
the trie engine's answers in tests and benchmarks.

Every function here scans or probes the whole vocabulary instead of
walking a tree.
"""

from collections.abc import Iterable, Sequence

from src.lexicon.alphabet import DEFAULT_SYMBOLS, DEFAULT_WILDCARD
from src.lexicon.edits import is_single_edit, single_edits


def linear_contains(words: Sequence[str], query: str) -> bool:
    """Perform a linear search on the word list for an exact word.

    Args:
        words (Sequence[str]): The vocabulary to search in.
        query (str): The word to look for.

    Returns:
        bool: True if `query` is one of the words. Otherwise, False.

    """
    for word in words:
        if word == query:
            return True
    return False


def linear_has_prefix(words: Sequence[str], prefix: str) -> bool:
    """Check whether any word of the list starts with `prefix`.

    Args:
        words (Sequence[str]): The vocabulary to search in.
        prefix (str): The prefix to look for.

    Returns:
        bool: True if some word starts with `prefix`, or if `prefix`
        is empty. Otherwise, False.

    """
    if not prefix:
        return True
    return any(word.startswith(prefix) for word in words)


def linear_autocomplete(words: Sequence[str], prefix: str) -> list[str]:
    """Filter the word list down to the words starting with `prefix`.

    Args:
        words (Sequence[str]): The vocabulary to search in.
        prefix (str): The prefix to complete.

    Returns:
        list[str]: The distinct matching words in list order.

    """
    return list(
        dict.fromkeys(word for word in words if word.startswith(prefix)),
    )


def hash_set_autocorrect(
    words: Iterable[str],
    query: str,
    symbols: Iterable[str] = DEFAULT_SYMBOLS,
) -> list[str]:
    """Generate every single-edit candidate and probe a hash set with it.

    Args:
        words (Iterable[str]): The vocabulary, loaded into a set.
        query (str): The possibly misspelled word.
        symbols (Iterable[str]): The symbols to insert and substitute.

    Returns:
        list[str]: The distinct corrections, in generation order.

    """
    vocabulary = set(words)
    corrections: list[str] = []
    for candidate in single_edits(query, symbols):
        if candidate in vocabulary and candidate not in corrections:
            corrections.append(candidate)
    return corrections


def linear_autocorrect(words: Sequence[str], query: str) -> list[str]:
    """Scan the word list for words exactly one edit away from `query`.

    Unlike `hash_set_autocorrect`, nothing is generated: each word of
    the list is compared against the query directly.

    Args:
        words (Sequence[str]): The vocabulary to search in.
        query (str): The possibly misspelled word.

    Returns:
        list[str]: The distinct corrections in list order.

    """
    return list(
        dict.fromkeys(word for word in words if is_single_edit(query, word)),
    )


def linear_partial_match(
    words: Sequence[str],
    pattern: str,
    wildcard: str = DEFAULT_WILDCARD,
) -> list[str]:
    """Scan the word list for words matching a wildcard pattern.

    Args:
        words (Sequence[str]): The vocabulary to search in.
        pattern (str): The pattern, where `wildcard` matches
        any one symbol.
        wildcard (str): The wildcard marker.

    Returns:
        list[str]: The distinct matching words in list order.

    """
    matches: list[str] = []
    for word in words:
        # Only words of the pattern's length can match
        if len(word) != len(pattern):
            continue

        is_match = True
        for expected, actual in zip(pattern, word):
            if expected != wildcard and expected != actual:
                is_match = False
                break

        if is_match and word not in matches:
            matches.append(word)
    return matches
