"""
Burble Game Server - Main Entry Point

This is the main entry point for the Burble game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import os

from burble import create_app
from burble.config import config
from burble.config.game_settings import get_word_statistics
from burble.services.game_service import get_game_service
from burble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('BURBLE_ENV', 'default')]
    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        word_provider = get_game_service().word_provider
        for category in word_provider.categories:
            words = [w for length in word_provider.lengths_for(category)
                     for w in word_provider.words_for(category, length)]
            print(f"✓ Category '{category}': {get_word_statistics(words)['words_by_length']}")

        game_logger.logger.info("Burble Server Starting")

        print(f"\nStarting Burble Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Burble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
