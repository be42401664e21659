from flask import Blueprint, jsonify, request, current_app
from werkzeug.exceptions import HTTPException

from numguess.services.game.attempts import get_leaderboard, submit_guess
from numguess.services.game.errors import GameError, InternalError, InvalidInput
from numguess.socketio_events import broadcast_leaderboard


game = Blueprint('game', __name__)


@game.errorhandler(GameError)
def handle_game_error(err):
    if err.status_code < 500:
        current_app.logger.info(f"[guess-rejected] {request.method} {request.path} -> {err.status_code} {err.message}")
    return jsonify({'error': err.message}), err.status_code


@game.errorhandler(Exception)
def handle_unexpected_error(err):
    if isinstance(err, HTTPException):
        return err
    current_app.logger.exception(f"[server-error] {request.method} {request.path}")
    return jsonify({'error': InternalError.message}), InternalError.status_code


@game.route('/guess', methods=['POST'])
def guess():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput()
    expected = current_app.config['EXPECTED_NUMBERS']
    result = submit_guess(data.get('name'), data.get('guess1'), data.get('guess2'), expected)
    broadcast_leaderboard(expected)
    return jsonify(result)


@game.route('/master', methods=['GET'])
def master():
    return jsonify(get_leaderboard(current_app.config['EXPECTED_NUMBERS']))
