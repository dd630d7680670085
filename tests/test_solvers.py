import pytest
from wordlestrat.datasets import WordUniverse
from wordlestrat.engine import (
    ConfigurationError, ExhaustedError, GuessFeedback, InvalidStateError, NO_GUESS_YET, score,
)
from wordlestrat.solvers import (
    GuessSolver, LetterFreqSolver, PositionalFreqSolver, create_solver, get_solver_ids,
)

UNIVERSE = WordUniverse.from_words(["canoe", "crane", "raise", "stare", "trace", "cared", "slate"])
SOLVER_IDS = ["first_remaining", "letter_freq", "positional_freq"]


def _after(guesses, guess, answer):
    return GuessFeedback.from_pattern(guess, score(guess, answer), guesses=guesses)


def test_registry_lists_solvers():
    assert get_solver_ids() == sorted(SOLVER_IDS)
    with pytest.raises(ValueError):
        create_solver("nope", UNIVERSE)


@pytest.mark.parametrize("solver_id", SOLVER_IDS)
def test_first_guess_is_opening_word(solver_id):
    solver = create_solver(solver_id, UNIVERSE)
    solver.reset()
    assert solver.pick_next_guess(NO_GUESS_YET) == "canoe"
    assert "canoe" in UNIVERSE
    assert "canoe" not in solver.remaining_words


def test_opening_word_must_be_in_universe():
    with pytest.raises(ConfigurationError):
        GuessSolver(UNIVERSE, opening_word="adieu")
    with pytest.raises(ConfigurationError):
        GuessSolver(WordUniverse([]))
    assert GuessSolver(UNIVERSE, opening_word="SLATE").pick_next_guess(NO_GUESS_YET) == "slate"


def test_invalid_feedback_rejected():
    solver = GuessSolver(UNIVERSE)
    bad = GuessFeedback(word="", statuses=(), is_valid=False, guesses=())
    with pytest.raises(InvalidStateError):
        solver.pick_next_guess(bad)


def test_second_guess_filters_then_picks_first():
    solver = GuessSolver(UNIVERSE)
    solver.reset()
    first = solver.pick_next_guess(NO_GUESS_YET)
    nxt = solver.pick_next_guess(_after((first,), first, "slate"))
    # canoe vs slate -> "-Y--G" leaves [stare, slate] in order
    assert nxt == "stare"
    assert solver.remaining_words == ["slate"]


def test_reset_restores_full_copy():
    solver = GuessSolver(UNIVERSE)
    solver.pick_next_guess(NO_GUESS_YET)
    solver.pick_next_guess(_after(("canoe",), "canoe", "crane"))
    assert len(solver.remaining_words) < len(UNIVERSE)

    solver.reset()
    assert solver.remaining_words == list(UNIVERSE)
    solver.reset()
    assert solver.remaining_words == list(UNIVERSE)
    solver.remaining_words.clear()
    assert len(UNIVERSE) == 7


def test_solvers_do_not_share_state():
    a, b = GuessSolver(UNIVERSE), LetterFreqSolver(UNIVERSE)
    a.pick_next_guess(NO_GUESS_YET)
    a.pick_next_guess(_after(("canoe",), "canoe", "crane"))
    assert b.remaining_words == list(UNIVERSE)


def test_contradictory_feedback_exhausts():
    solver = GuessSolver(UNIVERSE)
    solver.pick_next_guess(NO_GUESS_YET)
    fb = GuessFeedback.from_pattern("zzzzz", "YYYYY", guesses=("canoe", "zzzzz"))
    with pytest.raises(ExhaustedError):
        solver.pick_next_guess(fb)
    assert solver.remaining_words == []


def test_answer_outside_universe_exhausts():
    solver = GuessSolver(UNIVERSE)
    solver.pick_next_guess(NO_GUESS_YET)
    # feedback as if the answer were "canon", which the universe lacks
    fb = _after(("canoe",), "canoe", "canon")
    with pytest.raises(ExhaustedError):
        solver.pick_next_guess(fb)


@pytest.mark.parametrize("solver_id", SOLVER_IDS)
def test_never_repeats_within_a_game(solver_id):
    solver = create_solver(solver_id, UNIVERSE)
    solver.reset()
    seen = []
    feedback = NO_GUESS_YET
    for _ in range(len(UNIVERSE)):
        guess = solver.pick_next_guess(feedback)
        assert guess not in seen and guess in UNIVERSE
        seen.append(guess)
        if guess == "slate":
            break
        feedback = _after(tuple(seen), guess, "slate")
    assert seen[-1] == "slate"


@pytest.mark.parametrize("cls", [GuessSolver, LetterFreqSolver, PositionalFreqSolver])
def test_choose_best_member_and_deterministic(cls):
    solver = cls(UNIVERSE)
    remaining = ["crane", "raise", "stare", "trace", "cared", "slate"]
    fb = _after(("canoe",), "canoe", "stare")
    pick = solver.choose_best(remaining, fb)
    assert pick in remaining
    assert solver.choose_best(list(remaining), fb) == pick
    assert remaining == ["crane", "raise", "stare", "trace", "cared", "slate"]
    with pytest.raises(ExhaustedError):
        solver.choose_best([], fb)


@pytest.mark.parametrize("cls", [LetterFreqSolver, PositionalFreqSolver])
def test_frequency_scoring_and_ties(cls):
    solver = cls(UNIVERSE)
    fb = _after(("canoe",), "canoe", "crane")
    # all-distinct words tie: earliest wins
    assert solver.choose_best(["abcde", "fghij"], fb) == "abcde"
    # "aabbc" and "abcab" tie above "zzzzz": earliest of the two wins
    assert solver.choose_best(["zzzzz", "aabbc", "abcab"], fb) == "aabbc"
