import pytest

from src.reference.brute_force import (
    hash_set_autocorrect,
    linear_autocomplete,
    linear_autocorrect,
    linear_contains,
    linear_has_prefix,
    linear_partial_match,
)
from tests.vocabulary import DICTIONARY_WORDS

ABSENT_WORDS = [
    "",
    "ba",
    "bok",
    "cta",
    "helo",
    "hellp",
    "jelo",
    "mellon",
    "reda",
    "teh",
    "xyz",
    "zebar",
]


# Test exact membership and prefixes
@pytest.mark.parametrize("word", DICTIONARY_WORDS + ABSENT_WORDS)
def test_contains_matches_linear_search(dictionary_trie, word):
    assert dictionary_trie.contains(word) == linear_contains(
        DICTIONARY_WORDS,
        word,
    )


@pytest.mark.parametrize(
    "prefix",
    ["", "a", "ab", "be", "bea", "c", "ca", "he", "hel", "the", "x", "zz"],
)
def test_has_prefix_matches_linear_search(dictionary_trie, prefix):
    assert dictionary_trie.has_prefix(prefix) == linear_has_prefix(
        DICTIONARY_WORDS,
        prefix,
    )


# Test autocomplete
@pytest.mark.parametrize(
    "prefix",
    ["", "a", "ab", "b", "be", "bea", "ca", "cat", "go", "hel", "t", "q"],
)
def test_autocomplete_matches_linear_filter(dictionary_trie, prefix):
    assert sorted(dictionary_trie.autocomplete(prefix)) == sorted(
        linear_autocomplete(DICTIONARY_WORDS, prefix),
    )


# Test autocorrect
@pytest.mark.parametrize("word", DICTIONARY_WORDS + ABSENT_WORDS)
def test_autocorrect_matches_brute_force(dictionary_trie, word):
    expected = sorted(linear_autocorrect(DICTIONARY_WORDS, word))
    for func in [linear_autocorrect, hash_set_autocorrect]:
        assert sorted(func(DICTIONARY_WORDS, word)) == expected
    assert sorted(dictionary_trie.autocorrect(word)) == expected


def test_autocorrect_brute_force_known_answers():
    words = ["bead", "bear", "bread", "read", "beard"]
    for func in [linear_autocorrect, hash_set_autocorrect]:
        assert sorted(func(words, "bead")) == [
            "bear",
            "beard",
            "bread",
            "read",
        ]


# Test partial match
@pytest.mark.parametrize(
    "pattern",
    [
        "",
        "*",
        "**",
        "***",
        "****",
        "*****",
        "b**d",
        "*ea*",
        "c*t",
        "h***o",
        "the**",
        "zebra",
        "q***",
    ],
)
def test_partial_match_matches_linear_scan(dictionary_trie, pattern):
    assert sorted(dictionary_trie.partial_match(pattern)) == sorted(
        linear_partial_match(DICTIONARY_WORDS, pattern),
    )


def test_linear_partial_match_custom_wildcard():
    assert linear_partial_match(["cat", "cot", "cut"], "c?t", "?") == [
        "cat",
        "cot",
        "cut",
    ]
    assert linear_partial_match(["cat", "c?t"], "c?t") == ["c?t"]


def test_brute_force_empty_vocabulary():
    assert linear_contains([], "cat") is False
    assert linear_has_prefix([], "") is True
    assert linear_autocomplete([], "") == []
    assert linear_autocorrect([], "cat") == []
    assert hash_set_autocorrect([], "cat") == []
    assert linear_partial_match([], "***") == []
