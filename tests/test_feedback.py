import pytest

from wordle_round.config.game_settings import WORD_LIST
from wordle_round.models.game import LetterStatus
from wordle_round.services.feedback import evaluate

CORRECT = LetterStatus.CORRECT
PRESENT = LetterStatus.PRESENT
ABSENT = LetterStatus.ABSENT


def test_evaluate_examples():
    assert evaluate("crate", "crane") == (CORRECT, CORRECT, CORRECT, ABSENT, CORRECT)
    assert evaluate("raise", "steep") == (ABSENT, ABSENT, ABSENT, PRESENT, PRESENT)
    assert evaluate("sleek", "steep") == (CORRECT, ABSENT, CORRECT, CORRECT, ABSENT)
    assert evaluate("drool", "steep") == (ABSENT,) * 5


def test_shuffled_letters_are_never_absent():
    result = evaluate("kulcy", "lucky")
    assert result == (PRESENT, CORRECT, PRESENT, PRESENT, CORRECT)
    assert ABSENT not in result


def test_exact_match_is_all_correct():
    assert evaluate("crane", "crane") == (CORRECT,) * 5


def test_repeated_letters_can_be_overcounted():
    # "crane" has a single e, yet every e out of place is marked present
    assert evaluate("eerie", "crane") == (PRESENT, PRESENT, PRESENT, ABSENT, CORRECT)


def test_letter_budget_limits_present_marks():
    assert evaluate("eerie", "crane", letter_budget=True) == (ABSENT, ABSENT, PRESENT, ABSENT, CORRECT)
    assert evaluate("sleek", "steep", letter_budget=True) == (CORRECT, ABSENT, CORRECT, CORRECT, ABSENT)
    assert evaluate("eeeee", "steep", letter_budget=True) == (ABSENT, ABSENT, CORRECT, CORRECT, ABSENT)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        evaluate("cran", "crane")


@pytest.mark.parametrize("answer", WORD_LIST[::25])
@pytest.mark.parametrize("letter_budget", [False, True])
def test_feedback_properties(answer, letter_budget):
    for guess in WORD_LIST[::40]:
        result = evaluate(guess, answer, letter_budget=letter_budget)
        assert len(result) == len(answer)
        for letter, status in zip(guess, result):
            if letter not in answer:
                assert status is ABSENT
        assert evaluate(guess, answer, letter_budget=letter_budget) == result
