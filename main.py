"""
Word Scramble Game Server - Main Entry Point

This is the main entry point for the game server.
It loads the start-word list, initializes the game service and starts
the Flask application.
"""

from word_scramble import create_app
from word_scramble.config import Config, WordListUnavailableError
from word_scramble.services.game_service import initialize_game_service
from word_scramble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # A game cannot start without root words, so this failure is fatal
        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized with {len(game_service.word_list)} start words")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Scramble Server Starting")

        print(f"\nStarting Word Scramble Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Scramble Server shutting down (KeyboardInterrupt)")
    except WordListUnavailableError as e:
        print(f"Cannot start without a start-word list: {e}")
        game_logger.logger.critical(f"Start-word list unavailable: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
