"""
WebSocket Event Handlers

Pushes game state to clients as it changes and accepts the same game
actions as the HTTP API.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit, join_room, leave_room

from ..services.game_service import GAME_OVER, get_game_service
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger
from ..utils.helpers import outcome_payload

# (game_service, listener) currently pushing state updates; one per service
_broadcast_registration = None


def game_room(game_id):
    return f"game_{game_id}"


def _subscribe_broadcasts(socketio, game_service):
    """Route service updates to ``socketio``, replacing any earlier subscription."""
    global _broadcast_registration

    if _broadcast_registration is not None:
        previous_service, previous_listener = _broadcast_registration
        previous_service.remove_listener(previous_listener)

    def listener(game_id, event, state):
        broadcast_game_state_update(socketio, game_service, game_id, event, state)

    game_service.add_listener(listener)
    _broadcast_registration = (game_service, listener)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    game_service = get_game_service()
    if game_service:
        _subscribe_broadcasts(socketio, game_service)

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket connected: {request.sid}")

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Create a game and subscribe the caller to its updates."""
        try:
            game_id = game_service.create_new_game()
            join_room(game_room(game_id))

            game_logger.log_user_action(request, 'new_game', game_id, transport='websocket')

            emit('game_created', {
                'success': True,
                'game_id': game_id,
                'state': asdict(game_service.get_game_state(game_id))
            })

        except Exception as e:
            game_logger.log_error(request, e, 'new_game')
            emit('error', {'error': str(e)})

    @socketio.on('join_game')
    @websocket_game_service_required
    def handle_join_game(data=None, game_service=None):
        """Subscribe to updates for an existing game."""
        game_id = (data or {}).get('game_id')
        try:
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            join_room(game_room(game_id))
            game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

            emit('game_state_update', {
                'success': True,
                'event': 'joined',
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'join_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    def handle_leave_game(data=None):
        """Stop receiving updates for a game."""
        game_id = (data or {}).get('game_id')
        try:
            if game_id:
                leave_room(game_room(game_id))
        except Exception as e:
            game_logger.log_error(request, e, 'leave_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('submit_guess')
    @websocket_game_service_required
    def handle_submit_guess(data=None, game_service=None):
        """Check the player's word; the answer goes back as guess_result."""
        data = data or {}
        game_id = data.get('game_id')
        guess = data.get('guess')
        if isinstance(guess, str):
            guess = guess.strip()

        try:
            game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

            is_valid, error = game_service.is_valid_guess(game_id, guess)
            if not is_valid:
                emit('error', {'error': error})
                return

            outcome = game_service.submit_guess(game_id, guess)
            emit('guess_result', outcome_payload(outcome))

        except Exception as e:
            game_logger.log_error(request, e, 'submit_guess', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('skip_word')
    @websocket_game_service_required
    def handle_skip_word(data=None, game_service=None):
        """Skip the current word without changing the score."""
        game_id = (data or {}).get('game_id')
        try:
            game_logger.log_user_action(request, 'skip_word', game_id, transport='websocket')

            playable, error = game_service.can_play(game_id)
            if not playable:
                emit('error', {'error': error})
                return

            outcome = game_service.skip_word(game_id)
            emit('skip_result', outcome_payload(outcome))

        except Exception as e:
            game_logger.log_error(request, e, 'skip_word', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('restart_game')
    @websocket_game_service_required
    def handle_restart_game(data=None, game_service=None):
        """Start the game over ("Play Again"); the new state goes back as restart_result."""
        game_id = (data or {}).get('game_id')
        try:
            game_logger.log_user_action(request, 'restart_game', game_id, transport='websocket')

            state = game_service.restart_game(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)

            emit('restart_result', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'restart_game', game_id)
            emit('error', {'error': str(e)})


def broadcast_game_state_update(socketio, game_service, game_id, event, state):
    """Broadcast a game state change to everyone watching the game."""
    try:
        socketio.emit('game_state_update', {
            'success': True,
            'event': event,
            'state': asdict(state)
        }, to=game_room(game_id))

        if event == GAME_OVER:
            summary = game_service.get_final_summary(game_id)
            socketio.emit('game_over', {
                'game_id': game_id,
                'summary': asdict(summary)
            }, to=game_room(game_id))

    except Exception as e:
        game_logger.logger.error(f"Error broadcasting game state for {game_id}: {e}")
