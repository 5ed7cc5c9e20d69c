"""
Wordle Round Application Package

Rules engine and state machine for a single-player Wordle round, with a thin
Flask and Socket.IO layer that forwards player intents and returns snapshots.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance and its SocketIO server
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    round_broadcasters = register_websocket_handlers(socketio)

    # Store socketio instance and its room broadcasters for use in other modules
    app.socketio = socketio
    app.round_broadcasters = round_broadcasters

    return app, socketio
