import pytest
from wordlestrat.engine import (
    GuessFeedback, LetterStatus, derive_constraints, filter_candidates, score,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "slate", "spicy", "sissy",
         "level", "belle", "apace", "apple", "angle", "ankle", "scoop", "cools"]


def _fb(word, pattern):
    return GuessFeedback.from_pattern(word, pattern, guesses=[word])


def test_derive_rules_per_status():
    c = derive_constraints(_fb("canoe", "GYY-G"))
    assert dict(c.exact) == {0: "c", 4: "e"}
    assert c.forbidden == {("a", 1), ("n", 2)}
    assert c.required == {"a", "n"}
    assert dict(c.min_counts) == {"c": 1, "a": 1, "n": 1, "e": 1}
    assert c.banned == {"o"}


def test_duplicate_letter_not_globally_banned():
    # "sissy" against a word with one 's': first 's' is CORRECT, the others UNUSED
    fb = _fb("sissy", score("sissy", "spicy"))
    assert fb.statuses[2] is LetterStatus.UNUSED and fb.statuses[3] is LetterStatus.UNUSED

    c = derive_constraints(fb)
    assert "s" not in c.banned
    assert ("s", 2) in c.forbidden and ("s", 3) in c.forbidden
    assert c.admits("spicy")
    assert not c.admits("sissy")


def test_apple_scenario_literal_rules():
    c = derive_constraints(_fb("apple", "GG--G"))
    assert "p" not in c.banned and ("p", 2) in c.forbidden
    assert c.banned == {"l"}
    assert filter_candidates(["apple", "angle", "ankle"], c) == []
    assert filter_candidates(["apple", "angle", "ankle", "apace"], c) == ["apace"]


def test_repeated_letter_min_count():
    # two 'l' marked positively -> survivors must hold at least two
    c = derive_constraints(_fb("belle", score("belle", "level")))
    assert dict(c.min_counts)["l"] == 2
    assert dict(c.min_counts)["e"] == 2
    assert filter_candidates(WORDS, c) == ["level"]


def test_filter_is_non_mutating_and_ordered():
    words = list(WORDS)
    c = derive_constraints(_fb("raise", "YY--G"))
    out = filter_candidates(words, c)
    assert words == WORDS
    assert out is not words
    assert out == [w for w in WORDS if w in out]
    assert "crane" in out and "stare" not in out and "scoop" not in out


@pytest.mark.parametrize("guess,answer", [
    ("canoe", "crane"), ("raise", "crane"), ("sissy", "spicy"),
    ("belle", "level"), ("cools", "scoop"), ("stare", "slate"), ("apple", "apace"),
])
def test_answer_always_survives(guess, answer):
    c = derive_constraints(_fb(guess, score(guess, answer)))
    assert answer in filter_candidates(WORDS, c)


@pytest.mark.parametrize("guess,pattern", [
    ("canoe", "GYY-G"), ("sissy", "GY--G"), ("apple", "GG--G"), ("crane", "-----"),
])
def test_filter_idempotent_and_monotone(guess, pattern):
    c = derive_constraints(_fb(guess, pattern))
    once = filter_candidates(WORDS, c)
    assert len(once) <= len(WORDS)
    assert filter_candidates(once, c) == once
    assert filter_candidates(WORDS, derive_constraints(_fb(guess, pattern))) == once


def test_contradictory_feedback_empties_set():
    # five misplaced 'z' require five z's while forbidding z everywhere
    c = derive_constraints(_fb("zzzzz", "YYYYY"))
    assert filter_candidates(WORDS + ["zzzzz"], c) == []


def test_misaligned_feedback_rejected():
    fb = GuessFeedback(word="crane", statuses=(LetterStatus.CORRECT,), guesses=("crane",))
    with pytest.raises(ValueError):
        derive_constraints(fb)


def test_constraints_are_immutable_values():
    c = derive_constraints(_fb("canoe", "GYY-G"))
    assert c == derive_constraints(_fb("canoe", "GYY-G"))
    assert hash(c) == hash(derive_constraints(_fb("canoe", "GYY-G")))
    with pytest.raises(AttributeError):
        c.exact = ()
    with pytest.raises(TypeError):
        c.exact[0] = (0, "z")
    with pytest.raises(TypeError):
        c.min_counts[0] = ("z", 9)
