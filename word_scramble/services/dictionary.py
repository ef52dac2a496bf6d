"""
Dictionary Service

Answers one question for the game: is this word misspelled?
The game only depends on DictionaryOracle; the backends below are swappable.
"""

from typing import Iterable, Optional

from wordfreq import zipf_frequency


class DictionaryOracle:
    """Base interface for dictionary lookups."""

    def is_misspelled(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")


class WordfreqOracle(DictionaryOracle):
    """
    Treats a word as real when wordfreq has seen it often enough.

    min_zipf is on the Zipf scale (log10 of occurrences per billion words);
    words missing from wordfreq's lists score 0.
    """

    def __init__(self, min_zipf: float = 1.0):
        self.min_zipf = min_zipf

    def is_misspelled(self, word: str, language: str) -> bool:
        if not word:
            return True
        return zipf_frequency(word, language) < self.min_zipf


class WordSetOracle(DictionaryOracle):
    """Treats membership in a fixed word collection as real, for any language."""

    def __init__(self, words: Iterable[str]):
        self.words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: str) -> "WordSetOracle":
        """Build an oracle from a newline-delimited word file."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls(f)

    def is_misspelled(self, word: str, language: str) -> bool:
        return word.lower() not in self.words


def create_oracle(dictionary_path: Optional[str] = None, min_zipf: float = 1.0) -> DictionaryOracle:
    """
    Factory: word-file oracle when a path is configured, wordfreq otherwise.
    """
    if dictionary_path:
        return WordSetOracle.from_file(dictionary_path)
    return WordfreqOracle(min_zipf=min_zipf)
