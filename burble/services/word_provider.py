"""
Word Providers

Supply target words to the game service. The scoring engine never sees a
word list; anything implementing ``words_for`` can be injected.
"""

import json
import logging
import random
from typing import Dict, Iterable, List, Mapping, Optional, Protocol, Sequence

from ..config.game_settings import WORD_LIST_PATH, validate_word_list_integrity

logger = logging.getLogger(__name__)


class WordProvider(Protocol):
    """Source of candidate target words grouped by category and length."""

    def words_for(self, category: str, length: int) -> Sequence[str]:
        ...


class StaticWordProvider:
    """In-memory provider built from a ``{category: words}`` mapping."""

    def __init__(self, words_by_category: Mapping[str, Iterable[str]]):
        self._words: Dict[str, List[str]] = {
            category.lower(): validate_word_list_integrity(category, words)
            for category, words in words_by_category.items()
        }

    @property
    def categories(self) -> List[str]:
        return sorted(self._words)

    def words_for(self, category: str, length: int) -> Sequence[str]:
        return [word for word in self._words.get(category.lower(), []) if len(word) == length]

    def lengths_for(self, category: str) -> List[int]:
        return sorted({len(word) for word in self._words.get(category.lower(), [])})


class JsonWordProvider(StaticWordProvider):
    """
    Provider backed by a JSON file mapping category names to word arrays.

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the JSON is malformed or any word fails validation
    """

    def __init__(self, path: str = WORD_LIST_PATH):
        self.path = path
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Word list file not found: {path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict) or not data:
            raise ValueError("Word list file must contain a non-empty object of categories")

        super().__init__(data)
        logger.info("Loaded %d word categories from %s", len(data), path)


def choose_word(provider: WordProvider, category: str, length: int,
                rng: Optional[random.Random] = None) -> str:
    """
    Picks a target word uniformly at random.

    Raises:
        LookupError: If the provider has no words for this category and length
    """
    words = provider.words_for(category, length)
    if not words:
        raise LookupError(f"No {length}-letter words available in category '{category}'")
    return (rng or random).choice(list(words))
