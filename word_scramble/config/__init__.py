"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the start-word list loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MIN_WORD_LENGTH, DEFAULT_ROOT_WORD, WordListUnavailableError,
    load_start_words, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MIN_WORD_LENGTH', 'DEFAULT_ROOT_WORD', 'WordListUnavailableError',
    'load_start_words', 'validate_word_list_integrity', 'get_word_statistics'
]
