"""
Burble Game Server Application Package

Word-guessing game server: a pure scoring engine, an in-memory game
service, and thin HTTP and WebSocket layers on top of them.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, word_provider=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        word_provider: Optional word source; defaults to the JSON word list
            named by ``WORD_LIST_PATH``

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .services.game_service import initialize_game_service
    from .utils.game_logger import game_logger

    game_logger.configure(app.config['LOG_DIR'], app.config['LOG_LEVEL'])
    initialize_game_service(word_provider, app.config.get('WORD_LIST_PATH'))

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
