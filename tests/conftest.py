import pytest

from src.lexicon import logger
from src.lexicon.trie import Trie
from tests.vocabulary import DICTIONARY_WORDS, SCENARIO_WORDS


@pytest.fixture
def scenario_trie():
    """The five-word vocabulary used throughout the query examples."""
    return Trie.build((word, i) for i, word in enumerate(SCENARIO_WORDS))


@pytest.fixture
def dictionary_trie():
    """A larger vocabulary for cross-checking against brute force."""
    return Trie.build(DICTIONARY_WORDS)


@pytest.fixture
def log_file(tmp_path):
    """Route the engine's log records to a temporary file."""
    log_path = tmp_path / "logs" / "lexicon.log"
    logger.setup_logging(log_path)
    yield log_path
    logger.stop_logging()
