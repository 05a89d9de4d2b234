"""
Game Configuration Constants Module

Word-length limits, default round settings and the integrity checks
applied to every word list before it is served to players.
"""

import os
from collections import Counter
from typing import Dict, Final, Iterable, List

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 8
"""Inclusive range of target word lengths offered to players."""

DEFAULT_CATEGORY: Final[str] = "burble"
DEFAULT_WORD_LENGTH: Final[int] = 5
DEFAULT_DIFFICULTY: Final[str] = "medium"

WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'burble_words.json'
)
"""Bundled word list: a JSON object mapping category name to an array of words."""


def validate_word_list_integrity(category: str, words: Iterable[str]) -> List[str]:
    """
    Validates one category's words and returns them lowercased.

    This function performs validation to ensure:
    1. Length validation: every word is MIN_WORD_LENGTH..MAX_WORD_LENGTH letters
    2. Character validation: only alphabetic characters allowed
    3. Uniqueness validation: no duplicate entries (case-insensitive)

    Raises:
        ValueError: naming the first offending word
    """
    normalized = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ValueError(f"Word at index {index} in '{category}' is not a string")

        if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
            raise ValueError(
                f"Word at index {index} '{word}' in '{category}' must be "
                f"{MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters long"
            )

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' in '{category}' contains non-alphabetic characters")

        normalized.append(word.lower())

    duplicates = sorted(word for word, count in Counter(normalized).items() if count > 1)
    if duplicates:
        raise ValueError(f"Duplicate words found in '{category}': {duplicates}")

    return normalized


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Summarises a word pool for game balancing.

    Returns:
        dict: total_words, words_by_length, avg_vowel_count and the five
        most common letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(1 for word in words for char in word if char in vowels)
    letter_frequency = Counter(char for word in words for char in word)
    words_by_length = Counter(len(word) for word in words)

    return {
        "total_words": len(words),
        "words_by_length": dict(sorted(words_by_length.items())),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "most_common_letters": letter_frequency.most_common(5)
    }
