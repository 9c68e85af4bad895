"""Configuration parser for the lexicon engine."""

from pathlib import Path
from typing import cast

from .alphabet import Alphabet

DEFAULT_PREDICT_MIN_LENGTH = 1


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings
    is not provided.
    """


class EngineConfig:
    """A class to save engine configuration settings."""

    def __init__(
        self,
        alphabet: Alphabet,
        log_details: bool,
        predict_min_length: int = DEFAULT_PREDICT_MIN_LENGTH,
    ) -> None:
        """Initialize the engine configuration.

        Args:
            alphabet (Alphabet): The symbol set and wildcard marker.
            log_details (bool): Whether every query should be timed
            and logged.
            predict_min_length (int): The shortest input the
            tree-guided prediction walk answers.

        """
        self.alphabet = alphabet
        self.log_details = log_details
        self.predict_min_length = predict_min_length

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Engine configuration settings:
                Alphabet: {"".join(self.alphabet.symbols)}
                Wildcard: {self.alphabet.wildcard}
                Log details: {"YES" if self.log_details else "NO"}
                Predict minimum length: {self.predict_min_length}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def load_config_file(config_file_path: Path) -> EngineConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        FileNotFoundError: If the config file does not exist.
        ValueError: If `predict_min_length` is not a
        non-negative integer.
        InvalidArgumentError: If the alphabet or wildcard is malformed.

    Returns:
        EngineConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    # Initialize variables for required config values
    symbols = wildcard = log_details = None
    predict_min_length = DEFAULT_PREDICT_MIN_LENGTH

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "alphabet":
                symbols = value
            elif key == "wildcard":
                wildcard = value
            elif key == "log_details":
                log_details = parse_bool("log_details", value)
            elif key == "predict_min_length":
                predict_min_length = int(value)
                if predict_min_length < 0:
                    raise ValueError(
                        "Invalid value for key 'predict_min_length': "
                        f"{predict_min_length}. Expected a non-negative "
                        "integer.",
                    )

    required = {
        "alphabet": symbols,
        "wildcard": wildcard,
        "log_details": log_details,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                f"Please ensure the config file includes a valid line "
                f"for '{key}'.",
            )

    return EngineConfig(
        Alphabet(cast("str", symbols), cast("str", wildcard)),
        cast("bool", log_details),
        predict_min_length,
    )
