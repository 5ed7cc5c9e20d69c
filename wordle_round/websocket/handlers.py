"""
WebSocket Event Handlers

Forwards player intents over Socket.IO and pushes every round change to the
clients that joined the game's room.
"""

import threading

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.session_store import get_session_store
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


class RoundBroadcasters:
    """
    One observer per game relaying snapshots to the game's room.

    Bound to a single SocketIO server; the lock keeps concurrent joins from
    subscribing the same game twice.
    """

    def __init__(self, socketio):
        self.socketio = socketio
        self._unsubscribers = {}  # game_id -> unsubscribe function
        self._lock = threading.Lock()

    def ensure(self, game_id, game):
        with self._lock:
            if game_id in self._unsubscribers:
                return

            def broadcast(state):
                self.socketio.emit('round_update', {'game_id': game_id, 'state': state.to_dict()},
                                   room=game_room(game_id))

            self._unsubscribers[game_id] = game.subscribe(broadcast)

    def release(self, game_id):
        """Drop the broadcaster of a deleted game."""
        with self._lock:
            unsubscribe = self._unsubscribers.pop(game_id, None)
        if unsubscribe is not None:
            unsubscribe()

    def __contains__(self, game_id):
        with self._lock:
            return game_id in self._unsubscribers


def register_websocket_handlers(socketio):
    """
    Register all WebSocket event handlers.

    Returns:
        RoundBroadcasters registry owned by this SocketIO server
    """
    broadcasters = RoundBroadcasters(socketio)

    def resolve_game(data):
        """Look up the game named in an event payload, emitting an error if it is missing."""
        store = get_session_store()
        if store is None:
            emit('error', {'error': 'Game service unavailable'})
            return None, None

        game_id = data.get('game_id') if isinstance(data, dict) else None
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return None, None

        game = store.get_game(game_id)
        if game is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return None, None

        return game_id, game

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room to receive round updates."""
        game_id, game = resolve_game(data)
        if game is None:
            return

        game_logger.log_user_action(request, 'join_game', game_id, sid=request.sid)
        join_room(game_room(game_id))
        broadcasters.ensure(game_id, game)

        emit('round_update', {'game_id': game_id, 'state': game.snapshot().to_dict()})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        if game_id:
            game_logger.log_user_action(request, 'leave_game', game_id, sid=request.sid)
            leave_room(game_room(game_id))

    @socketio.on('key')
    def handle_key(data):
        """Virtual keyboard input."""
        game_id, game = resolve_game(data)
        if game is None:
            return

        key = data.get('key')
        if not isinstance(key, str):
            emit('error', {'error': 'Key is required', 'game_id': game_id})
            return

        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        was_playing = not game.snapshot().game_over
        game.press_key(key)
        state = game.snapshot()
        if was_playing and state.game_over:
            game_logger.log_game_event(
                game_id, f'game_{state.game_state.value}', request.remote_addr,
                attempts_used=state.attempt_count, target_word=state.answer
            )

    @socketio.on('set_guess')
    def handle_set_guess(data):
        """Direct text input."""
        game_id, game = resolve_game(data)
        if game is None:
            return

        text = data.get('text')
        game_logger.log_user_action(request, 'set_guess', game_id, text_length=len(str(text or '')))
        game.set_current_guess(text)

    @socketio.on('reset')
    def handle_reset(data):
        """Start a new round for the game."""
        game_id, game = resolve_game(data)
        if game is None:
            return

        game_logger.log_user_action(request, 'reset_game', game_id)
        game.reset_game()
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

    return broadcasters
