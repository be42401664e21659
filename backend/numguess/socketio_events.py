from flask import current_app
from flask_socketio import emit

from numguess import socketio
from numguess.services.game.attempts import get_leaderboard
from numguess.services.game.errors import InternalError


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_ping(data=None):
    emit('pong', data or {})


def handle_get_leaderboard(data=None):
    try:
        board = get_leaderboard(current_app.config['EXPECTED_NUMBERS'])
    except InternalError as exc:
        emit('error', {'message': exc.message})
        return
    emit('leaderboard', board)


def broadcast_leaderboard(expected) -> None:
    """Push the current leaderboard to every client on /ws.

    The attempt is already committed when this runs, so a failed read or
    emit is logged and skipped rather than failing the request.
    """
    try:
        board = get_leaderboard(expected)
    except InternalError:
        current_app.logger.warning("[broadcast-skip] leaderboard unavailable")
        return
    try:
        socketio.emit('leaderboard_update', board, namespace='/ws')
    except Exception:
        current_app.logger.exception("[broadcast-skip] leaderboard_update emit failed")


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
    socketio.on_event('get_leaderboard', handle_get_leaderboard, namespace='/ws')

    if testing:
        socketio.on_event('connect', handle_connect, namespace='/')
        socketio.on_event('ping', handle_ping, namespace='/')
        socketio.on_event('get_leaderboard', handle_get_leaderboard, namespace='/')
