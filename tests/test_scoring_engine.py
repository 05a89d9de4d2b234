"""
Testing pure scoring and attempt bookkeeping.
"""

import pytest

from burble.models.errors import (
    AttemptsExhaustedError,
    HintUnavailableError,
    InvalidLengthError,
    SessionTerminatedError,
)
from burble.models.game import Attempt, Difficulty, GameSession, GameStatus
from burble.services import scoring_engine
from burble.services.scoring_engine import (
    attempts_remaining,
    calculate_points,
    evaluate,
    record_attempt,
    score,
    use_hint,
)


@pytest.mark.parametrize("word", ["frog", "apple", "garden", "airplane"])
def test_identical_guess_scores_maximum(word):
    assert score(word, word) == 2 * len(word)


@pytest.mark.parametrize("target, guess", [
    ("abcd", "aaaa"),
    ("abcd", "dcba"),
    ("apple", "paper"),
    ("there", "eerie"),
    ("aabb", "bbaa"),
    ("level", "lever"),
    ("banana", "ananas"),
])
def test_score_stays_within_range(target, guess):
    assert 0 <= score(target, guess) <= 2 * len(target)


def test_disjoint_letters_score_zero():
    assert score("abcd", "wxyz") == 0
    assert evaluate("frog", "mild") == (0, 0, 0, 0)


def test_repeated_guess_letters_credited_once_per_target_letter():
    assert score("abcd", "aaaa") == 2
    assert evaluate("abcd", "aaaa") == (2, 0, 0, 0)


def test_all_letters_misplaced():
    assert evaluate("abcd", "dcba") == (1, 1, 1, 1)
    assert score("abcd", "dcba") == 4


def test_exact_matches_consumed_before_misplaced_pass():
    # The 'p' at index 2 is exact, so only one 'p' is left for the first guess letter
    assert evaluate("apple", "paper") == (1, 1, 2, 1, 0)
    assert score("apple", "paper") == 5

    # Trailing exact 'e' consumes one target 'e'; only one left for the leading 'e's
    assert evaluate("there", "eerie") == (1, 0, 1, 0, 2)
    assert score("there", "eerie") == 4


def test_score_is_sum_of_feedback():
    assert score("garden", "danger") == sum(evaluate("garden", "danger"))


def test_scoring_is_case_insensitive():
    assert score("FROG", "frog") == 8
    assert score("frog", "FrOg") == 8
    assert evaluate("Apple", "PAPER") == evaluate("apple", "paper")


def test_length_mismatch_fails_closed():
    with pytest.raises(InvalidLengthError) as exc_info:
        score("cat", "cats")
    assert exc_info.value.expected == 3
    assert exc_info.value.actual == 4


def test_empty_words_are_rejected():
    with pytest.raises(InvalidLengthError):
        score("", "")


def test_winning_round():
    session = GameSession(target_word="frog", max_attempts=3)

    record_attempt(session, "frog")

    assert session.attempts == [Attempt(guess="frog", score=8, feedback=(2, 2, 2, 2))]
    assert session.status is GameStatus.WON


def test_losing_round():
    session = GameSession(target_word="frog", max_attempts=2)

    record_attempt(session, "blob")
    # 'o' sits at index 2 in both words: an exact match
    assert session.attempts[-1].score == 2
    assert session.status is GameStatus.IN_PROGRESS

    record_attempt(session, "drag")
    assert session.attempts[-1].score == 4
    assert session.status is GameStatus.LOST
    assert [a.guess for a in session.attempts] == ["blob", "drag"]


def test_guess_recorded_lowercase_and_wins_case_insensitively():
    session = GameSession(target_word="Frog", max_attempts=3)

    record_attempt(session, "FROG")

    assert session.target_word == "frog"
    assert session.attempts[0].guess == "frog"
    assert session.status is GameStatus.WON


@pytest.mark.parametrize("final_guess", ["frog", "drag"])
def test_no_attempts_after_round_ends(final_guess):
    session = GameSession(target_word="frog", max_attempts=1)
    record_attempt(session, final_guess)
    assert session.status.is_terminal

    with pytest.raises(SessionTerminatedError):
        record_attempt(session, "frog")
    assert len(session.attempts) == 1


def test_wrong_length_guess_leaves_session_untouched():
    session = GameSession(target_word="frog", max_attempts=3)

    with pytest.raises(InvalidLengthError):
        record_attempt(session, "frogs")

    assert session.attempts == []
    assert session.status is GameStatus.IN_PROGRESS


def test_exhausted_budget_is_guarded():
    session = GameSession(
        target_word="frog",
        max_attempts=1,
        attempts=[Attempt(guess="drag", score=4, feedback=(0, 2, 0, 2))],
    )

    with pytest.raises(AttemptsExhaustedError):
        record_attempt(session, "frog")
    assert len(session.attempts) == 1


def test_terminal_check_runs_before_length_check():
    session = GameSession(target_word="frog", max_attempts=3, status=GameStatus.WON)

    with pytest.raises(SessionTerminatedError):
        record_attempt(session, "toolong")


def test_recorded_scores_are_never_recomputed():
    session = GameSession(target_word="frog", max_attempts=5)
    record_attempt(session, "drag")
    first = session.attempts[0]

    record_attempt(session, "grog")

    assert session.attempts[0] is first
    assert first.score == 4


def test_session_rejects_invalid_construction():
    with pytest.raises(ValueError):
        GameSession(target_word="", max_attempts=3)
    with pytest.raises(ValueError):
        GameSession(target_word="fr0g", max_attempts=3)
    with pytest.raises(ValueError):
        GameSession(target_word="frog", max_attempts=0)


def test_hint_reveals_first_unplaced_letter_and_costs_an_attempt():
    session = GameSession(target_word="frog", max_attempts=10)
    record_attempt(session, "drag")

    assert use_hint(session) == "Letter 1 is 'F'"
    assert use_hint(session) == "Letter 3 is 'O'"
    assert session.hinted_positions == [0, 2]
    assert attempts_remaining(session) == 7

    with pytest.raises(HintUnavailableError):
        use_hint(session)


def test_hint_refused_when_it_would_spend_last_attempt():
    session = GameSession(target_word="frog", max_attempts=2)
    record_attempt(session, "mild")

    with pytest.raises(HintUnavailableError):
        use_hint(session)
    assert session.hints_used == 0


def test_hints_count_against_attempt_budget():
    session = GameSession(target_word="frog", max_attempts=3)
    use_hint(session)
    record_attempt(session, "drag")

    record_attempt(session, "grog")

    assert session.status is GameStatus.LOST
    assert len(session.attempts) == 2


def test_hint_after_round_ends():
    session = GameSession(target_word="frog", max_attempts=3)
    record_attempt(session, "frog")

    with pytest.raises(SessionTerminatedError):
        use_hint(session)


def test_points_for_a_quick_win():
    medium = GameSession(target_word="frog", max_attempts=10, difficulty=Difficulty.MEDIUM)
    record_attempt(medium, "frog")
    assert calculate_points(medium) == 68

    hard = GameSession(target_word="frog", max_attempts=5, difficulty=Difficulty.HARD)
    record_attempt(hard, "frog")
    assert calculate_points(hard) == 95


def test_points_penalise_hints():
    session = GameSession(target_word="frog", max_attempts=10, difficulty=Difficulty.MEDIUM)
    use_hint(session)
    use_hint(session)
    record_attempt(session, "frog")

    assert calculate_points(session) == 55


def test_points_never_below_half_base():
    session = GameSession(target_word="airplane", max_attempts=15, difficulty=Difficulty.EASY)
    for _ in range(8):
        use_hint(session)
    record_attempt(session, "airplane")

    assert calculate_points(session) == 12


def test_no_points_unless_won():
    session = GameSession(target_word="frog", max_attempts=1)
    assert calculate_points(session) == 0

    record_attempt(session, "drag")
    assert calculate_points(session) == 0


def test_difficulty_tiers():
    assert Difficulty.parse("easy").max_attempts == 15
    assert Difficulty.parse(" Medium ").max_attempts == 10
    assert Difficulty.parse("HARD").max_attempts == 5
    assert Difficulty.parse(Difficulty.EASY) is Difficulty.EASY
    with pytest.raises(ValueError):
        Difficulty.parse("nightmare")


def test_module_exposes_scoring_weights():
    assert scoring_engine.EXACT_POINTS == 2
    assert scoring_engine.PRESENT_POINTS == 1


def test_points_round_halves_up():
    # 35 * (1 + (1 - 2 / 20)) = 66.5
    medium = GameSession(target_word="frog", max_attempts=10, difficulty=Difficulty.MEDIUM)
    record_attempt(medium, "drag")
    record_attempt(medium, "frog")
    assert calculate_points(medium) == 67

    # 25 * (1 + (1 - 9 / 30)) = 42.5
    easy = GameSession(target_word="frog", max_attempts=15, difficulty=Difficulty.EASY)
    for _ in range(8):
        record_attempt(easy, "drag")
    record_attempt(easy, "frog")
    assert calculate_points(easy) == 43


def test_consumed_target_letters_never_match_again():
    assert evaluate("aa", "a*") == (2, 0)
    assert score("aa", "a*") == 2
    assert score("a#", "#a") == 2
    assert score("**", "**") == 4


def test_feedback_codes_map_to_letter_status():
    from burble.models.game import LetterStatus

    assert LetterStatus.from_code(scoring_engine.EXACT_POINTS) is LetterStatus.HIT
    assert LetterStatus.from_code(scoring_engine.PRESENT_POINTS) is LetterStatus.PRESENT
    assert LetterStatus.from_code(scoring_engine.ABSENT_POINTS) is LetterStatus.MISS
