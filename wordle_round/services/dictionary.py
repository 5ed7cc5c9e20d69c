"""
Word Dictionary

Read-only collection of valid words, used both to validate guesses and as the
pool answers are drawn from.
"""

from typing import Iterable, Iterator, List

from ..config.game_settings import validate_word_list_integrity


class WordDictionary:
    """Ordered, validated word list with set-speed membership tests."""

    def __init__(self, words: Iterable[str]):
        self._words: List[str] = [word.strip().lower() for word in words]
        validate_word_list_integrity(self._words)
        self._lookup = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def choose(self, rng) -> str:
        """Pick a word uniformly at random using rng.choice."""
        return rng.choice(self._words)
