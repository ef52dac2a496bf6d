"""
Game Data Models

Contains all game-related data structures and enums.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config.game_settings import DEFAULT_ROOT_WORD


class RejectionReason(Enum):
    """Why a candidate word was turned down, in the order the checks run."""
    ALREADY_USED = "ALREADY_USED"
    NOT_POSSIBLE = "NOT_POSSIBLE"
    NOT_REAL = "NOT_REAL"
    TOO_SHORT = "TOO_SHORT"
    IS_ROOT_WORD = "IS_ROOT_WORD"

    def describe(self, root_word: str = "") -> Tuple[str, str]:
        """Return the (title, message) pair shown to the player."""
        title, message = _REJECTION_TEXT[self]
        return title, message.format(root_word=root_word)


_REJECTION_TEXT = {
    RejectionReason.ALREADY_USED: ("Word used already", "Be more original"),
    RejectionReason.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from {root_word}"),
    RejectionReason.NOT_REAL: ("Word not recognized", "You can't just make them up, you know"),
    RejectionReason.TOO_SHORT: ("Word less than 3 letters", "Think bigger"),
    RejectionReason.IS_ROOT_WORD: ("You can't enter the root word", "Be more creative"),
}


@dataclass
class GameView:
    """Serializable snapshot of a game sent to clients."""
    game_id: str
    root_word: str
    used_words: List[str]
    score: int


@dataclass
class SubmissionResult:
    """Outcome of submitting a candidate word."""
    accepted: bool
    word: str
    reason: Optional[RejectionReason] = None

    @property
    def ignored(self) -> bool:
        """Empty submissions are neither accepted nor rejected."""
        return not self.accepted and self.reason is None


@dataclass
class GameState:
    """Server-side state of one game: the root word and accepted words, newest first."""
    game_id: str
    root_word: str = ""
    used_words: List[str] = field(default_factory=list)

    @property
    def score(self) -> int:
        return sum(len(word) for word in self.used_words)

    def start_game(self, word_list: Optional[Sequence[str]], rng: Optional[random.Random] = None) -> None:
        """
        Pick a new root word and clear the accepted words.

        Falls back to DEFAULT_ROOT_WORD when the list is empty or missing.
        """
        rng = rng or random.Random()
        self.root_word = rng.choice(word_list) if word_list else DEFAULT_ROOT_WORD
        self.used_words = []

    def accept_word(self, word: str) -> None:
        # Caller has already validated the word
        self.used_words.insert(0, word)

    def to_view(self) -> GameView:
        return GameView(
            game_id=self.game_id,
            root_word=self.root_word,
            used_words=self.used_words.copy(),
            score=self.score
        )
