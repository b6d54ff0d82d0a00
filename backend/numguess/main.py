from flask import Blueprint, jsonify

from numguess.api.games import get_store

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the number guessing game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'games': get_store().count()})
