from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

from kings_valley.services.games.rooms import RoomRegistry

socketio = SocketIO(async_mode=None)


def get_registry() -> RoomRegistry:
    """Room registry owned by the running application."""
    return current_app.extensions['kings_valley_rooms']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS', [])
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per application; rooms live as long as the process
    registry = RoomRegistry()
    flask_app.extensions['kings_valley_rooms'] = registry

    # Import and register blueprints here
    from kings_valley.main import main
    flask_app.register_blueprint(main)

    from kings_valley.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    from kings_valley.socketio_events import register_socketio_handlers
    register_socketio_handlers(registry, namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    from kings_valley.console import play
    flask_app.cli.add_command(play)

    return flask_app
