"""
Word Validator

Decides whether a candidate word may be added to a game. Checks run in a
fixed order and the first failure is reported, so the player always sees
the same message for the same mistake.
"""

from typing import Optional, Tuple

from ..config.game_settings import MIN_WORD_LENGTH
from ..models.game import GameState, RejectionReason
from .dictionary import DictionaryOracle


def normalize(candidate: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return candidate.strip().lower()


class WordValidator:
    """
    Runs the five acceptance checks against a game's current state.

    Every check expects an already normalized candidate.
    """

    def __init__(self, oracle: DictionaryOracle, language: str = "en"):
        self.oracle = oracle
        self.language = language

    def is_original(self, word: str, state: GameState) -> bool:
        return word.lower() not in {used.lower() for used in state.used_words}

    def is_possible(self, word: str, state: GameState) -> bool:
        """Every letter of word must be taken from a distinct letter of the root word."""
        remaining = list(state.root_word)

        for letter in word:
            if letter not in remaining:
                return False
            remaining.remove(letter)

        return True

    def is_real(self, word: str) -> bool:
        return not self.oracle.is_misspelled(word, self.language)

    def is_long_enough(self, word: str) -> bool:
        return len(word) >= MIN_WORD_LENGTH

    def is_not_root(self, word: str, state: GameState) -> bool:
        return word != state.root_word

    def validate(self, word: str, state: GameState) -> Tuple[bool, Optional[RejectionReason]]:
        """
        Validates a normalized candidate against a game.

        Args:
            word: Normalized candidate word
            state: Game the word is submitted to

        Returns:
            Tuple of (is_valid, rejection_reason)
        """
        if not self.is_original(word, state):
            return False, RejectionReason.ALREADY_USED

        if not self.is_possible(word, state):
            return False, RejectionReason.NOT_POSSIBLE

        if not self.is_real(word):
            return False, RejectionReason.NOT_REAL

        if not self.is_long_enough(word):
            return False, RejectionReason.TOO_SHORT

        if not self.is_not_root(word, state):
            return False, RejectionReason.IS_ROOT_WORD

        return True, None
