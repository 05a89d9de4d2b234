"""
WebSocket Event Handlers

Real-time guess submission. Every client watching a game joins the room
``game_<id>`` and receives the updated state after each guess.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit, join_room, leave_room

from ..models.errors import BurbleError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_response


def game_room(game_id):
    return f"game_{game_id}"


def _payload(data):
    return data if isinstance(data, dict) else {}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room and receive its current state."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = _payload(data).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            state = game_service.get_game_state(game_id)
        except BurbleError as e:
            emit('error', error_response(e))
            return

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        game_id = _payload(data).get('game_id')
        if game_id:
            leave_room(game_room(game_id))
            game_logger.log_user_action(request, 'leave_game', game_id)

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Score a guess and broadcast the new state to the game room."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = _payload(data)
        game_id = data.get('game_id')
        guess = data.get('guess')
        if not game_id or guess is None:
            emit('error', {'error': 'Game ID and guess are required'})
            return

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        try:
            state = game_service.make_guess(game_id, guess)
        except BurbleError as e:
            body = error_response(e)
            game_logger.log_server_response(request, 'submit_guess', False, body, game_id)
            emit('error', body)
            return

        payload = {'game_id': game_id, 'state': asdict(state)}
        game_logger.log_server_response(
            request, 'submit_guess', True, payload, game_id,
            score=state.scores[-1], status=state.status, transport='websocket'
        )
        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                attempts_used=state.attempts_used, target_word=state.answer, points=state.points
            )

        # The sender always gets the update, even if it never joined the room
        emit('game_state_update', payload, room=game_room(game_id), include_self=False)
        emit('game_state_update', payload)
