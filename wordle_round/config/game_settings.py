"""
Game Rules Module

Fixed rules of a round (word length, attempt limit, player-facing messages)
and the dictionary of valid words. The dictionary doubles as the answer pool.
"""

import json
import os
import re
from collections import Counter
from typing import Dict, Final, List, Optional

from .app_config import Config

WORD_LENGTH: Final[int] = 5
"""Number of letters in the answer and in every accepted guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Player-facing messages
INVALID_LENGTH_MESSAGE: Final[str] = f"Enter a {WORD_LENGTH}-letter word."
NOT_IN_DICTIONARY_MESSAGE: Final[str] = "Not in word list!"
WIN_MESSAGE: Final[str] = "Congratulations! You guessed it!"
LOSS_MESSAGE_TEMPLATE: Final[str] = 'Game over! The word was "{answer}".'

_WORD_PATTERN = re.compile(f"[a-z]{{{WORD_LENGTH}}}")


def _default_word_list_path() -> str:
    config_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(config_dir, 'words.json')


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON file.

    Args:
        path: JSON file holding an array of words; defaults to Config.WORD_LIST_PATH,
              then to the bundled words.json

    Returns:
        List[str]: List of lowercase words, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = path or Config.WORD_LIST_PATH or _default_word_list_path()

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    words = [str(word).strip().lower() for word in word_list]
    validate_word_list_integrity(words)
    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only lowercase a-z allowed
    3. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not _WORD_PATTERN.fullmatch(word):
            raise ValueError(f"Word at index {index} '{word}' must contain only lowercase letters a-z")

    if len(words) != len(set(words)):
        duplicates = sorted(word for word, count in Counter(words).items() if count > 1)
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = load_word_list()
