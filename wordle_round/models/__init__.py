"""
Data Models Package

Contains all data models used throughout the application.
"""

from .game import (
    BoardRow, GameState, GuessOutcome, LetterStatus, Round, RoundSnapshot, SubmitOutcome
)

__all__ = [
    'BoardRow', 'GameState', 'GuessOutcome', 'LetterStatus', 'Round', 'RoundSnapshot', 'SubmitOutcome'
]
