"""
Unscramble Game Server - Main Entry Point

This is the main entry point for the Unscramble game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

import os

from unscramble import create_app
from unscramble.config import config, validate_word_list_integrity, get_word_statistics
from unscramble.services.game_service import initialize_game_service
from unscramble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        print("Initializing services...")

        validate_word_list_integrity(config_class.MAX_NO_OF_WORDS)
        stats = get_word_statistics()
        print(f"✓ Word list loaded: {stats['total_words']} words")

        initialize_game_service(config_class)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Unscramble Server Starting")

        print(f"\nStarting Unscramble Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Words per game: {config_class.MAX_NO_OF_WORDS}, points per word: {config_class.SCORE_INCREASE}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Unscramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
