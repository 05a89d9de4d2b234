"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, current_app, jsonify, request

from ..models.errors import BurbleError, GameNotFoundError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _failure(action, error, game_id=None):
    """Translate an exception into a logged JSON error response."""
    if isinstance(error, GameNotFoundError):
        status_code = 404
    elif isinstance(error, (BurbleError, ValueError, LookupError)):
        status_code = 400
    else:
        game_logger.log_error(request, error, action, game_id)
        status_code = 500

    body = error_response(error)
    game_logger.log_server_response(request, action, False, body, game_id)
    return jsonify(body), status_code


def _log_round_end(game_id, state, guess):
    if not state.game_over:
        return
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, request.remote_addr,
        attempts_used=state.attempts_used, target_word=state.answer,
        final_guess=guess, points=state.points
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        body = {
            'success': False,
            'error': 'Request body must be a JSON object'
        }
        game_logger.log_server_response(request, 'new_game', False, body)
        return jsonify(body), 400

    difficulty = data.get('difficulty', current_app.config.get('DEFAULT_DIFFICULTY', 'medium'))
    category = data.get('category', 'burble')
    length = data.get('length', current_app.config.get('DEFAULT_WORD_LENGTH', 5))

    game_logger.log_user_action(
        request, 'new_game', difficulty=difficulty, category=category, length=length
    )

    try:
        if not isinstance(category, str):
            raise ValueError('Category must be a string')
        game_id = game_service.create_new_game(difficulty, category, length)
        state = game_service.get_game_state(game_id)
    except Exception as e:
        return _failure('new_game', e)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        word_length=state.word_length, max_attempts=state.max_attempts
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'get_state', game_id)

    try:
        state = game_service.get_game_state(game_id)
    except Exception as e:
        return _failure('get_state', e, game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        attempts_used=state.attempts_used, game_over=state.game_over
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for scoring."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'guess' not in data:
        body = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, body, game_id)
        return jsonify(body), 400

    guess = data['guess']
    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

    try:
        state = game_service.make_guess(game_id, guess)
    except Exception as e:
        return _failure('submit_guess', e, game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=guess, score=state.scores[-1], status=state.status
    )
    _log_round_end(game_id, state, guess)
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
def take_hint(game_id):
    """Reveal one letter of the target word; costs an attempt."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'take_hint', game_id)

    try:
        hint, state = game_service.take_hint(game_id)
    except Exception as e:
        return _failure('take_hint', e, game_id)

    response_data = {
        'success': True,
        'hint': hint,
        'state': asdict(state)
    }

    game_logger.log_server_response(request, 'take_hint', True, response_data, game_id)
    game_logger.log_game_event(
        game_id, 'hint_used', request.remote_addr,
        hints_used=state.hints_used, attempts_remaining=state.attempts_remaining
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    if not success:
        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': game_service.active_game_count() if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
