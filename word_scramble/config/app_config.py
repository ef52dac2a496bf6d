"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module (if present)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name: str):
    value = os.getenv(name)
    return int(value) if value not in (None, '') else None


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Word List Settings
    START_WORDS_PATH = os.getenv('START_WORDS_PATH')  # None -> packaged start.txt
    RANDOM_SEED = _optional_int('RANDOM_SEED')

    # Dictionary Settings
    DICTIONARY_LANGUAGE = os.getenv('DICTIONARY_LANGUAGE', 'en')
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH')  # None -> wordfreq lookup
    DICTIONARY_MIN_ZIPF = float(os.getenv('DICTIONARY_MIN_ZIPF', 1.0))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 7


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
