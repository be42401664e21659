import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')


def _expected_pair(value):
    """Validate the configured scoring target: two strings of two ASCII digits."""
    if isinstance(value, str):
        value = value.split(',')
    pair = tuple(str(v).strip() for v in value)
    if len(pair) != 2 or not all(len(n) == 2 and n.isascii() and n.isdigit() for n in pair):
        raise ValueError(f"EXPECTED_NUMBERS must be two two-digit numbers, got {value!r}")
    return pair


def _allowed_origins(value):
    origins = [value] if isinstance(value, str) else list(value or [])
    if not origins or '*' in origins:
        return '*'
    return origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.config['EXPECTED_NUMBERS'] = _expected_pair(flask_app.config.get('EXPECTED_NUMBERS', ('34', '67')))
    origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db, directory=MIGRATIONS_DIR)
    CORS(flask_app, resources={r'/api/*': {'origins': origins}})
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from numguess.main import main
    flask_app.register_blueprint(main)

    from numguess.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from numguess.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('init-db')
    def init_db_command():
        """Creates any missing tables. Existing rows are left alone."""
        import numguess.models  # noqa: F401
        with flask_app.app_context():
            db.create_all()
        click.echo('Database tables are ready.')

    flask_app.cli.add_command(init_db_command)

    flask_app.logger.info(f"[startup] expected_numbers={flask_app.config['EXPECTED_NUMBERS']} origins={origins}")
    return flask_app
