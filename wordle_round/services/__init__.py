"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import WordDictionary
from .feedback import evaluate
from .game_service import GameService, start_round
from .session_store import SessionStore, get_session_store, initialize_session_store

__all__ = [
    'WordDictionary', 'evaluate',
    'GameService', 'start_round',
    'SessionStore', 'get_session_store', 'initialize_session_store'
]
