"""
Game Service

Contains the core game logic: session management and word submission.
"""

import random
import uuid
from typing import Dict, List, Optional

from ..config.game_settings import load_start_words
from ..models.game import GameState, GameView, SubmissionResult
from .dictionary import DictionaryOracle, create_oracle
from .validator import WordValidator, normalize


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Root word selection from the start-word list
    - Word validation and acceptance
    - Restarting a session with a fresh root word
    """

    def __init__(self,
                 word_list: List[str],
                 oracle: DictionaryOracle,
                 language: str = "en",
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.word_list = list(word_list)
        self.validator = WordValidator(oracle, language)
        self.rng = rng or random.Random()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected root word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        game = GameState(game_id=game_id)
        game.start_game(self.word_list, self.rng)

        self.games[game_id] = game
        return game_id

    def restart_game(self, game_id: str) -> Optional[GameView]:
        """
        Starts the session over with a new root word and no accepted words.

        Returns:
            GameView of the fresh game or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        game.start_game(self.word_list, self.rng)
        return game.to_view()

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameView object or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None
        return game.to_view()

    def add_word(self, game_id: str, candidate: str) -> Optional[SubmissionResult]:
        """
        Validates a candidate and, if it passes, adds it to the game.

        Empty candidates are ignored: nothing changes and no reason is given.

        Args:
            game_id: Unique game identifier
            candidate: Raw text submitted by the player

        Returns:
            SubmissionResult or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        word = normalize(candidate)
        if not word:
            return SubmissionResult(accepted=False, word=word)

        is_valid, reason = self.validator.validate(word, game)
        if not is_valid:
            return SubmissionResult(accepted=False, word=word, reason=reason)

        game.accept_word(word)
        return SubmissionResult(accepted=True, word=word)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class) -> GameService:
    """
    Initialize the global game service instance from a config class.

    Raises:
        WordListUnavailableError: If the start-word list cannot be loaded
    """
    global _game_service

    word_list = load_start_words(config_class.START_WORDS_PATH)
    oracle = create_oracle(config_class.DICTIONARY_PATH, config_class.DICTIONARY_MIN_ZIPF)

    _game_service = GameService(
        word_list,
        oracle,
        language=config_class.DICTIONARY_LANGUAGE,
        rng=random.Random(config_class.RANDOM_SEED)
    )
    return _game_service
