"""
Game Configuration Constants Module

This module defines all game configuration constants and the loader for the
start-word list. All game parameters are centralized here to enable easy
modification.
"""

import os
from typing import Final, Iterable, List, Optional

# Core Game Configuration Constants
MIN_WORD_LENGTH: Final[int] = 3
"""
Shortest candidate (in letters) that can be accepted.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_ROOT_WORD: Final[str] = "silkworm"
"""
Root word used when the start-word list is present but contains no words.
"""

START_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'start.txt'
)

SCORE_TITLE: Final[str] = "This is your score"
SCORE_MESSAGE: Final[str] = (
    "Score works by adding the number of all letters in all the words you got"
)


class WordListUnavailableError(RuntimeError):
    """Raised when the start-word list cannot be read. No game can start without it."""


def clean_word_list(lines: Iterable[str]) -> List[str]:
    """Strip and lowercase every entry, dropping blank lines."""
    return [line.strip().lower() for line in lines if line.strip()]


def load_start_words(path: Optional[str] = None) -> List[str]:
    """
    Load the newline-delimited start-word list.

    Args:
        path: File to read; defaults to the packaged start.txt

    Returns:
        List[str]: Lowercase candidate root words (may be empty)

    Raises:
        WordListUnavailableError: If the file is missing or unreadable
    """
    path = path or START_WORDS_FILE

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return clean_word_list(f.read().split('\n'))
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailableError(f"Could not load start words from {path}: {e}") from e


def validate_word_list_integrity(word_list: List[str]) -> bool:
    """
    Validates the integrity and consistency of a start-word list.

    This function performs validation to ensure:
    1. Length validation: Every word is longer than the minimum word length
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) <= MIN_WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is too short to be a root word")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: List[str]) -> dict:
    """
    Analyzes a start-word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_length: Average root word length
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters
    """
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_length": round(sum(len(word) for word in word_list) / len(word_list), 2),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        words = load_start_words()
        validate_word_list_integrity(words)
        print(" Word list validation passed")
        print(f" Word list statistics: {get_word_statistics(words)}")
    except (WordListUnavailableError, ValueError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
