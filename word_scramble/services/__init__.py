"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import DictionaryOracle, WordfreqOracle, WordSetOracle, create_oracle
from .game_service import GameService, get_game_service, initialize_game_service
from .validator import WordValidator, normalize

__all__ = [
    'DictionaryOracle', 'WordfreqOracle', 'WordSetOracle', 'create_oracle',
    'GameService', 'get_game_service', 'initialize_game_service',
    'WordValidator', 'normalize'
]
