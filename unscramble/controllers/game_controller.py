"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, request, jsonify

from ..services.game_session import WordPoolExhaustedError
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import outcome_payload

game_bp = Blueprint('game', __name__)


def _error_response(action, error, status, game_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': error
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status


def _exhausted_response(action, game_id, error):
    game_logger.log_error(request, error, action, game_id)
    game_logger.log_game_event(game_id, 'word_pool_exhausted', request.remote_addr)
    return _error_response(action, str(error), 409, game_id)


def _log_game_over(game_id, outcome):
    if outcome.game_over:
        game_logger.log_game_event(
            game_id, 'game_over', request.remote_addr,
            final_score=outcome.state.score,
            words_played=outcome.state.current_word_count,
        )


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error_response('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _error_response('get_state', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_word_count=state.current_word_count, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error_response('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def submit_guess(game_id, game_service):
    """Check the player's word; a right answer moves to the next word."""
    try:
        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            return _error_response('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']
        if isinstance(guess, str):
            guess = guess.strip()

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            status = 404 if error == 'Game not found' else 400
            return _error_response(
                'submit_guess', error, status, game_id,
                validation_error=error, attempted_guess=guess
            )

        outcome = game_service.submit_guess(game_id, guess)
        if outcome is None:
            return _error_response('submit_guess', 'Failed to process guess', 500, game_id)

        response_data = outcome_payload(outcome)

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            correct=outcome.correct, game_over=outcome.game_over
        )
        _log_game_over(game_id, outcome)

        return jsonify(response_data)

    except WordPoolExhaustedError as e:
        return _exhausted_response('submit_guess', game_id, e)
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error_response('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/skip', methods=['POST'])
@require_game_service
def skip_word(game_id, game_service):
    """Skip the current word without changing the score."""
    try:
        game_logger.log_user_action(request, 'skip_word', game_id)

        playable, error = game_service.can_play(game_id)
        if not playable:
            status = 404 if error == 'Game not found' else 400
            return _error_response('skip_word', error, status, game_id)

        outcome = game_service.skip_word(game_id)
        response_data = outcome_payload(outcome)

        game_logger.log_server_response(
            request, 'skip_word', True, response_data, game_id,
            game_over=outcome.game_over
        )
        _log_game_over(game_id, outcome)

        return jsonify(response_data)

    except WordPoolExhaustedError as e:
        return _exhausted_response('skip_word', game_id, e)
    except Exception as e:
        game_logger.log_error(request, e, 'skip_word', game_id)
        return _error_response('skip_word', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Start the game over ("Play Again")."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        if state is None:
            return _error_response('restart_game', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_restarted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        return _error_response('restart_game', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/summary', methods=['GET'])
@require_game_service
def get_summary(game_id, game_service):
    """Get the final score dialog for a game."""
    try:
        game_logger.log_user_action(request, 'get_summary', game_id)

        summary = game_service.get_final_summary(game_id)
        if summary is None:
            return _error_response('get_summary', 'Game not found', 404, game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_over': state.game_over,
            'summary': asdict(summary)
        }

        game_logger.log_server_response(request, 'get_summary', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_summary', game_id)
        return _error_response('get_summary', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Discard a game session ("Exit")."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        if not success:
            return _error_response('delete_game', 'Game not found', 404, game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error_response('delete_game', str(e), 500, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.game_service import get_game_service

    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': len(game_service.games) if game_service else 0,
            'word_pool_size': len(game_service.word_list) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
