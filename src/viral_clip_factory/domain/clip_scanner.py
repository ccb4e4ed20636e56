from __future__ import annotations

import math
import re
from collections.abc import Sequence

from .models import ClipCandidate, TranscriptSegment, WindowScores
from .scan_rules import ScanRuleConfig

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_TERMINATORS = (".", "!", "?")

MAX_VIRAL_SCORE = 10
VIRAL_SCORE_WEIGHT = 1.2


def hook_score(text: str, rules: ScanRuleConfig) -> int:
    """Viral phrases count once each; question words only when they open the window."""
    score = sum(rules.hook_phrase_points for phrase in rules.viral_phrases if phrase in text)
    opening = " ".join(text.split(" ")[: rules.question_prefix_tokens])
    score += sum(1 for word in rules.question_words if word in opening)
    return score


def emotional_score(text: str, rules: ScanRuleConfig) -> int:
    # presence per lexicon word, repeated occurrences do not add up
    return sum(1 for word in rules.emotional_words if word in text)


def clarity_score(text: str) -> int:
    fragments = [part for part in _SENTENCE_SPLIT.split(text) if part.strip()]
    score = 0
    if 2 <= len(fragments) <= 5:
        score += 2
    if any(mark in text for mark in _TERMINATORS):
        score += 1
    return score


def score_window(text: str, rules: ScanRuleConfig) -> WindowScores:
    lowered = text.lower()
    return WindowScores(
        hook=hook_score(lowered, rules),
        emotional=emotional_score(lowered, rules),
        clarity=clarity_score(lowered),
    )


def viral_score(total_score: int) -> int:
    scaled = math.floor(max(0, total_score) * VIRAL_SCORE_WEIGHT + 0.5)
    return min(MAX_VIRAL_SCORE, scaled)


class ClipScanner:
    def __init__(self, rules: ScanRuleConfig | None = None) -> None:
        self.rules = rules or ScanRuleConfig()

    def scan(self, transcript: Sequence[TranscriptSegment]) -> list[ClipCandidate]:
        rules = self.rules
        accepted: list[ClipCandidate] = []
        last_start = len(transcript) - rules.window_size

        for idx in range(0, last_start + 1, rules.stride):
            window = transcript[idx : idx + rules.window_size]
            start_sec = window[0].offset_millis / 1000
            end_sec = window[-1].offset_millis / 1000 + window[-1].duration_millis / 1000
            duration = end_sec - start_sec
            if duration < rules.min_clip_sec or duration > rules.max_clip_sec:
                continue

            text = " ".join(seg.text for seg in window)
            scores = score_window(text, rules)
            if scores.total <= rules.score_threshold:
                continue

            accepted.append(
                ClipCandidate(
                    start_sec=start_sec,
                    end_sec=end_sec,
                    transcript_text=text,
                    hook_score=scores.hook,
                    emotional_score=scores.emotional,
                    clarity_score=scores.clarity,
                )
            )

        accepted.sort(key=lambda c: c.total_score, reverse=True)
        return accepted[: rules.top_k]
