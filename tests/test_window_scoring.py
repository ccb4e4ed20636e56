from viral_clip_factory.domain.clip_scanner import (
    clarity_score,
    emotional_score,
    hook_score,
    score_window,
    viral_score,
)
from viral_clip_factory.domain.scan_rules import ScanRuleConfig

RULES = ScanRuleConfig()


def test_hook_score_counts_single_viral_phrase_once():
    assert hook_score("this is a pro tip for everyone", RULES) == 2
    assert hook_score("pro tip after pro tip after pro tip", RULES) == 2


def test_hook_score_adds_question_words_from_opening_tokens_only():
    assert hook_score("why does this work", RULES) == 1
    assert hook_score("what happened when nobody tells you", RULES) == 4
    assert hook_score("so listen to this why does it work", RULES) == 0


def test_emotional_score_is_presence_not_frequency():
    assert emotional_score("love love love and hate", RULES) == 2
    assert emotional_score("nothing special here", RULES) == 0


def test_clarity_score_full_marks_for_two_to_five_sentences():
    assert clarity_score("first point. second point! third?") == 3


def test_clarity_score_without_punctuation_is_zero():
    assert clarity_score("no punctuation here") == 0


def test_clarity_score_too_many_sentences_keeps_punctuation_point():
    assert clarity_score("a. b. c. d. e. f.") == 1
    assert clarity_score("one thought only.") == 1


def test_score_window_matches_case_insensitively():
    scores = score_window("AMAZING. I Love IT!", RULES)

    assert scores.hook == 2
    assert scores.emotional == 1
    assert scores.clarity == 3
    assert scores.total == 6


def test_viral_score_scales_and_caps():
    assert viral_score(0) == 0
    assert viral_score(1) == 1
    assert viral_score(3) == 4
    assert viral_score(4) == 5
    assert viral_score(8) == 10
    assert viral_score(25) == 10


def test_viral_score_is_monotonic():
    scores = [viral_score(total) for total in range(0, 30)]

    assert scores == sorted(scores)
    assert max(scores) == 10
