"""
Feedback Engine

Per-letter evaluation of a guess against the answer.
"""

from typing import Dict, List, Optional, Tuple

from ..models.game import LetterStatus


def evaluate(guess: str, answer: str, letter_budget: bool = False) -> Tuple[LetterStatus, ...]:
    """
    Computes the feedback for each position of a guess.

    By default a letter that is not in place is PRESENT whenever the answer
    contains it anywhere, so a repeated guess letter can be marked PRESENT
    more times than it occurs in the answer. With letter_budget=True the
    usual Wordle counting applies and surplus copies come back ABSENT.

    Args:
        guess: The guessed word
        answer: The secret word, same length as guess
        letter_budget: Limit PRESENT marks to the unmatched letter counts of the answer

    Returns:
        Tuple of LetterStatus, one per position

    Raises:
        ValueError: If guess and answer lengths differ
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess '{guess}' and answer must have the same length")

    if letter_budget:
        return _evaluate_with_letter_budget(guess, answer)

    result = []
    for guessed, expected in zip(guess, answer):
        if guessed == expected:
            result.append(LetterStatus.CORRECT)
        elif guessed in answer:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return tuple(result)


def _evaluate_with_letter_budget(guess: str, answer: str) -> Tuple[LetterStatus, ...]:
    result: List[Optional[LetterStatus]] = []
    remaining_counts: Dict[str, int] = {}

    # First pass: exact matches, count what is left of the answer
    for guessed, expected in zip(guess, answer):
        if guessed == expected:
            result.append(LetterStatus.CORRECT)
        else:
            result.append(None)
            remaining_counts[expected] = remaining_counts.get(expected, 0) + 1

    # Second pass: spend the remaining letters left to right
    for i, guessed in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining_counts.get(guessed, 0) > 0:
            result[i] = LetterStatus.PRESENT
            remaining_counts[guessed] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return tuple(result)
