"""
Game Service

Contains the rules engine and state machine for a single round of Wordle.
"""

import random
import re
from typing import Callable, List, Optional

from ..config.game_settings import (
    WORD_LENGTH, MAX_ATTEMPTS,
    INVALID_LENGTH_MESSAGE, NOT_IN_DICTIONARY_MESSAGE, WIN_MESSAGE, LOSS_MESSAGE_TEMPLATE
)
from ..models.game import (
    BoardRow, GameState, GuessOutcome, LetterStatus, Round, RoundSnapshot, SubmitOutcome
)
from ..utils.game_logger import game_logger
from .dictionary import WordDictionary
from .feedback import evaluate

RoundObserver = Callable[[RoundSnapshot], None]

_GUESS_TEXT_PATTERN = re.compile(f"[a-z]{{0,{WORD_LENGTH}}}")
_LETTER_PATTERN = re.compile("[a-zA-Z]")

ENTER_KEY = "Enter"
BACKSPACE_KEY = "Backspace"


def start_round(dictionary: WordDictionary, rng=None) -> Round:
    """
    Creates a fresh round with an answer drawn from the dictionary.

    Args:
        dictionary: Valid words, also the answer pool
        rng: Source of randomness exposing choice(); defaults to the random module

    Returns:
        Round in the PLAYING state with an empty board
    """
    answer = dictionary.choose(rng or random)
    return Round(answer=answer)


class GameService:
    """
    State machine driving one round at a time.

    This class handles:
    - Answer selection through an injectable random source
    - Current guess editing (direct text, virtual keyboard)
    - Guess validation and evaluation
    - Keyboard hint tracking and win/loss determination
    - Pushing a snapshot to observers after every operation
    """

    def __init__(self, dictionary: WordDictionary, rng=None, letter_budget: bool = False):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.letter_budget = letter_budget
        self._observers: List[RoundObserver] = []
        self.round = start_round(self.dictionary, self.rng)

    def subscribe(self, observer: RoundObserver) -> Callable[[], None]:
        """Registers an observer; returns a function that removes it again."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def snapshot(self) -> RoundSnapshot:
        """Returns a read-only copy of the round, hiding the answer while playing."""
        current = self.round
        return RoundSnapshot(
            board=tuple(current.board),
            current_guess=current.current_guess,
            attempt_count=current.attempt_count,
            game_state=current.game_state,
            message=current.message,
            keyboard_hints=dict(current.keyboard_hints),
            word_length=WORD_LENGTH,
            max_attempts=MAX_ATTEMPTS,
            answer=None if current.is_playing else current.answer
        )

    def set_current_guess(self, text: str) -> bool:
        """
        Replaces the in-progress guess with text typed directly by the player.

        Text is lowercased and rejected unless it is at most WORD_LENGTH letters a-z.
        """
        applied = False
        if self.round.is_playing and isinstance(text, str):
            value = text.lower()
            if _GUESS_TEXT_PATTERN.fullmatch(value):
                self.round.current_guess = value
                applied = True
        self._notify()
        return applied

    def append_letter(self, ch: str) -> bool:
        """Adds one letter to the guess, stored lowercase."""
        applied = False
        if (self.round.is_playing
                and len(self.round.current_guess) < WORD_LENGTH
                and isinstance(ch, str)
                and _LETTER_PATTERN.fullmatch(ch)):
            self.round.current_guess += ch.lower()
            applied = True
        self._notify()
        return applied

    def delete_last_letter(self) -> bool:
        applied = False
        if self.round.is_playing and self.round.current_guess:
            self.round.current_guess = self.round.current_guess[:-1]
            applied = True
        self._notify()
        return applied

    def press_key(self, key: str) -> bool:
        """
        Virtual keyboard input: Enter submits, Backspace deletes, a letter appends.

        Returns:
            bool: True if the key changed the round
        """
        if key == ENTER_KEY:
            return self.submit_guess().accepted
        if key == BACKSPACE_KEY:
            return self.delete_last_letter()
        return self.append_letter(key)

    def submit_guess(self) -> GuessOutcome:
        """
        Validates the current guess and, if valid, plays it.

        Returns:
            GuessOutcome with the submission outcome and the new snapshot
        """
        outcome = self._apply_guess()
        state = self.snapshot()
        self._notify(state)
        return GuessOutcome(outcome=outcome, state=state)

    def reset_game(self) -> RoundSnapshot:
        """Discards the current round and starts a new one."""
        self.round = start_round(self.dictionary, self.rng)
        state = self.snapshot()
        self._notify(state)
        return state

    def _apply_guess(self) -> SubmitOutcome:
        current = self.round
        if not current.is_playing:
            return SubmitOutcome.INVALID_INPUT

        guess = current.current_guess
        if len(guess) != WORD_LENGTH:
            current.message = INVALID_LENGTH_MESSAGE
            return SubmitOutcome.INVALID_LENGTH

        if guess not in self.dictionary:
            current.message = NOT_IN_DICTIONARY_MESSAGE
            return SubmitOutcome.NOT_IN_DICTIONARY

        result = evaluate(guess, current.answer, letter_budget=self.letter_budget)
        current.board.append(BoardRow(guess=guess, result=result))
        self._update_keyboard_hints(guess, result)
        current.attempt_count += 1
        current.current_guess = ""

        if guess == current.answer:
            current.game_state = GameState.WON
            current.message = WIN_MESSAGE
        elif current.attempt_count >= MAX_ATTEMPTS:
            current.game_state = GameState.LOST
            current.message = LOSS_MESSAGE_TEMPLATE.format(answer=current.answer)
        else:
            current.message = ""

        return SubmitOutcome.ACCEPTED

    def _update_keyboard_hints(self, guess: str, result) -> None:
        """
        Records the best status seen per letter. Status can only progress
        along absent -> present -> correct.
        """
        hints = self.round.keyboard_hints
        for letter, new_status in zip(guess, result):
            previous: Optional[LetterStatus] = hints.get(letter)
            if previous is None or new_status.rank > previous.rank:
                hints[letter] = new_status

    def _notify(self, state: Optional[RoundSnapshot] = None) -> None:
        if not self._observers:
            return
        state = state or self.snapshot()
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception as e:
                # Observers never affect the outcome of an operation
                game_logger.logger.error(f"Round observer {observer!r} failed: {e}")
