from __future__ import annotations

from dataclasses import dataclass

VIRAL_PHRASES: tuple[str, ...] = (
    "you won't believe",
    "shocked",
    "amazing",
    "incredible",
    "secret",
    "truth about",
    "exposed",
    "revealed",
    "changed my life",
    "blew my mind",
    "game changer",
    "nobody tells you",
    "wish i knew",
    "biggest mistake",
    "life hack",
    "pro tip",
    "controversial",
    "unpopular opinion",
)

EMOTIONAL_WORDS: tuple[str, ...] = (
    "love",
    "hate",
    "fear",
    "angry",
    "excited",
    "surprised",
    "shocked",
    "devastated",
    "thrilled",
    "terrified",
    "furious",
    "passionate",
)

QUESTION_WORDS: tuple[str, ...] = ("why", "how", "what", "when", "where", "who")


@dataclass(slots=True)
class ScanRuleConfig:
    window_size: int = 20
    stride: int = 5
    min_clip_sec: float = 15.0
    max_clip_sec: float = 60.0
    top_k: int = 5
    score_threshold: int = 3
    hook_phrase_points: int = 2
    question_prefix_tokens: int = 3
    viral_phrases: tuple[str, ...] = VIRAL_PHRASES
    emotional_words: tuple[str, ...] = EMOTIONAL_WORDS
    question_words: tuple[str, ...] = QUESTION_WORDS
