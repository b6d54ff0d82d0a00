from flask import Blueprint, jsonify, request, current_app

from numguess.guarded import GameNotFound, GuardedGameStore
from numguess.models import MAX_GAME_ID
from numguess.persistence import PersistenceError


games = Blueprint('games', __name__)


def get_store() -> GuardedGameStore:
    return current_app.extensions['game_store']


def _as_int(value):
    # bool is an int subclass; true/false are not guesses or ids
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@games.errorhandler(GameNotFound)
def handle_game_not_found(exc):
    return jsonify({'error': 'Game not found'}), 404


@games.errorhandler(PersistenceError)
def handle_persistence_error(exc):
    # Already logged by the store
    return jsonify({'error': 'Failed to persist game state'}), 500


@games.route('', methods=['POST'])
@games.route('/', methods=['POST'])
def create_game():
    # Only the id is taken from the client; secret, hint and status are computed
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    game_id = _as_int(data.get('id'))
    if game_id is None:
        return jsonify({'error': 'Game id is required and must be an integer'}), 400
    if not 0 <= game_id <= MAX_GAME_ID:
        return jsonify({'error': 'Game id must be an unsigned 64-bit integer'}), 400

    record = get_store().create(game_id)
    return jsonify(record.to_dict())


@games.route('/<int:game_id>', methods=['PUT'])
def guess_number(game_id):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    raw = data.get('guess')
    if raw is None:
        raw = data.get('last_guess')
    value = _as_int(raw)
    if value is None:
        return jsonify({'error': 'Guess is required and must be an integer'}), 400

    record = get_store().guess(game_id, value)
    return jsonify(record.to_dict())


@games.route('/<int:game_id>', methods=['GET'])
def get_game(game_id):
    record = get_store().get(game_id)
    if record is None:
        raise GameNotFound(game_id)
    return jsonify(record.to_dict())
