"""
Game Controller

Handles all game-related HTTP endpoints. Each endpoint forwards one player
intent to the round's GameService and returns the resulting snapshot.
"""

from flask import Blueprint, current_app, request, jsonify
from ..config.game_settings import WORD_LENGTH, MAX_ATTEMPTS, get_word_statistics
from ..models.game import GameState
from ..services.session_store import get_session_store
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


def log_round_end(game_id, state, final_guess):
    """Emit a game_won/game_lost event once a submission ends the round."""
    if state.game_state is GameState.WON:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            attempts_used=state.attempt_count, target_word=state.answer,
            winning_guess=final_guess
        )
    elif state.game_state is GameState.LOST:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            attempts_used=state.attempt_count, target_word=state.answer,
            final_guess=final_guess
        )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = store.create_game()
        state = store.get_game(game_id).snapshot()

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': state.to_dict()
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, max_attempts=MAX_ATTEMPTS
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current round state."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        game = store.get_game(game_id)
        if game is None:
            return _game_not_found('get_state', game_id)

        state = game.snapshot()
        response_data = {
            'success': True,
            'state': state.to_dict()
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempt_count=state.attempt_count, game_state=state.game_state.value
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['PUT'])
def set_guess(game_id):
    """Replace the in-progress guess with text typed by the player."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'text' not in data:
            error_response = {
                'success': False,
                'error': 'Text is required'
            }
            game_logger.log_server_response(request, 'set_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        text = data['text']
        game_logger.log_user_action(request, 'set_guess', game_id, text_length=len(str(text)))

        game = store.get_game(game_id)
        if game is None:
            return _game_not_found('set_guess', game_id)

        applied = game.set_current_guess(text)
        response_data = {
            'success': True,
            'applied': applied,
            'state': game.snapshot().to_dict()
        }

        game_logger.log_server_response(request, 'set_guess', True, response_data, game_id, applied=applied)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('set_guess', e, game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Virtual keyboard input: a letter, Enter or Backspace."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('key'), str):
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'press_key', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        game = store.get_game(game_id)
        if game is None:
            return _game_not_found('press_key', game_id)

        pending_guess = game.snapshot().current_guess
        applied = game.press_key(key)
        state = game.snapshot()
        response_data = {
            'success': True,
            'applied': applied,
            'state': state.to_dict()
        }

        game_logger.log_server_response(request, 'press_key', True, response_data, game_id, applied=applied)
        if applied and state.game_over:
            log_round_end(game_id, state, pending_guess)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('press_key', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
def submit_guess(game_id):
    """Submit the in-progress guess for validation and evaluation."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        game = store.get_game(game_id)
        if game is None:
            return _game_not_found('submit_guess', game_id)

        guess = game.snapshot().current_guess
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, guess_length=len(guess))

        result = game.submit_guess()
        response_data = {
            'success': True,
            'outcome': result.outcome.value,
            'state': result.state.to_dict()
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            outcome=result.outcome.value, attempt_count=result.state.attempt_count
        )
        if result.accepted:
            log_round_end(game_id, result.state, guess)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Discard the current round and start a new one under the same id."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        game = store.get_game(game_id)
        if game is None:
            return _game_not_found('reset_game', game_id)

        state = game.reset_game()
        response_data = {
            'success': True,
            'state': state.to_dict()
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('reset_game', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        store = get_session_store()
        if store is None:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = store.delete_game(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            broadcasters = getattr(current_app, 'round_broadcasters', None)
            if broadcasters is not None:
                broadcasters.release(game_id)
            return jsonify(response_data)

        return jsonify(response_data), 404

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        store = get_session_store()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(store) if store is not None else 0,
            'dictionary': get_word_statistics(store.dictionary.words) if store is not None else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('health_check', e)
