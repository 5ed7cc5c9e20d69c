"""
Game Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Feedback for a single letter position."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Precedence used by keyboard hints: absent < present < correct."""
        return _LETTER_STATUS_RANK[self]


_LETTER_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


class GameState(Enum):
    """Round outcome. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class SubmitOutcome(Enum):
    """Result of a guess submission."""
    ACCEPTED = "accepted"
    INVALID_LENGTH = "invalid_length"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class BoardRow:
    """A submitted guess paired with its feedback."""
    guess: str
    result: Tuple[LetterStatus, ...]

    def to_dict(self) -> Dict:
        return {
            "guess": self.guess,
            "result": [status.value for status in self.result]
        }


@dataclass
class Round:
    """Mutable state of one round, owned by a GameService."""
    answer: str
    board: List[BoardRow] = field(default_factory=list)
    current_guess: str = ""
    attempt_count: int = 0
    game_state: GameState = GameState.PLAYING
    message: str = ""
    keyboard_hints: Dict[str, LetterStatus] = field(default_factory=dict)

    @property
    def is_playing(self) -> bool:
        return self.game_state is GameState.PLAYING


@dataclass(frozen=True)
class RoundSnapshot:
    """
    Read-only view of a Round handed to the presentation layer.

    The answer is only filled in once the round is over.
    """
    board: Tuple[BoardRow, ...]
    current_guess: str
    attempt_count: int
    game_state: GameState
    message: str
    keyboard_hints: Dict[str, LetterStatus]
    word_length: int
    max_attempts: int
    answer: Optional[str] = None

    @property
    def game_over(self) -> bool:
        return self.game_state is not GameState.PLAYING

    def to_dict(self) -> Dict:
        """Serialize to plain JSON-compatible types."""
        return {
            "board": [row.to_dict() for row in self.board],
            "current_guess": self.current_guess,
            "attempt_count": self.attempt_count,
            "game_state": self.game_state.value,
            "message": self.message,
            "keyboard_hints": {letter: status.value for letter, status in self.keyboard_hints.items()},
            "word_length": self.word_length,
            "max_attempts": self.max_attempts,
            "answer": self.answer
        }


@dataclass(frozen=True)
class GuessOutcome:
    """What submit_guess hands back: the outcome plus the snapshot to render."""
    outcome: SubmitOutcome
    state: RoundSnapshot

    @property
    def accepted(self) -> bool:
        return self.outcome is SubmitOutcome.ACCEPTED
