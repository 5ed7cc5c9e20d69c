"""
Session Store

Keeps one GameService per game id in memory so each client owns its own round.
"""

import threading
import uuid
from typing import Dict, Optional

from ..config.app_config import Config
from ..config.game_settings import WORD_LIST
from .dictionary import WordDictionary
from .game_service import GameService


class SessionStore:
    """
    In-memory registry of active games.

    Nothing is persisted; games live until deleted or the process exits.
    """

    def __init__(self, dictionary: Optional[WordDictionary] = None, rng=None,
                 letter_budget: bool = False):
        self.dictionary = dictionary or WordDictionary(WORD_LIST)
        self.rng = rng
        self.letter_budget = letter_budget
        self.games: Dict[str, GameService] = {}
        self._lock = threading.Lock()

    def create_game(self) -> str:
        """
        Starts a new round under a fresh id.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        game = GameService(self.dictionary, rng=self.rng, letter_budget=self.letter_budget)
        with self._lock:
            self.games[game_id] = game
        return game_id

    def get_game(self, game_id: str) -> Optional[GameService]:
        with self._lock:
            return self.games.get(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self.games)


# Global store instance
_session_store = None


def get_session_store() -> Optional[SessionStore]:
    """Get the global session store instance."""
    return _session_store


def initialize_session_store(dictionary: Optional[WordDictionary] = None, rng=None) -> SessionStore:
    """Initialize the global session store instance."""
    global _session_store
    _session_store = SessionStore(dictionary, rng=rng, letter_budget=Config.LETTER_BUDGET_FEEDBACK)
    return _session_store
