from __future__ import annotations

import re

from viral_clip_factory.domain.models import Captions

SEED_HASHTAGS = ("#Shorts", "#Viral", "#Podcast")
TRAILING_HASHTAG = "#Trending"
STOPWORDS = frozenset(
    {"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


class LocalCaptionProvider:
    """Deterministic captions used when no remote provider answers."""

    name = "local"

    def __init__(
        self,
        title_words: int = 8,
        title_max_chars: int = 80,
        description_max_chars: int = 450,
        keyword_count: int = 3,
        hashtag_count: int = 5,
    ) -> None:
        self.title_words = title_words
        self.title_max_chars = title_max_chars
        self.description_max_chars = description_max_chars
        self.keyword_count = keyword_count
        self.hashtag_count = hashtag_count

    def is_configured(self) -> bool:
        return True

    def generate(self, transcript_text: str) -> Captions:
        words = transcript_text.split(" ")
        return Captions(
            title=self._build_title(words),
            description=self._build_description(transcript_text),
            hashtags=self._build_hashtags(words),
            source=self.name,
        )

    def _build_title(self, words: list[str]) -> str:
        first_words = " ".join(words[: self.title_words])
        if len(first_words) > self.title_max_chars:
            return first_words[: self.title_max_chars - 3] + "..."
        return first_words + "!"

    def _build_description(self, text: str) -> str:
        if len(text) > self.description_max_chars:
            return text[: self.description_max_chars - 3] + "..."
        return text

    def _build_hashtags(self, words: list[str]) -> list[str]:
        keywords = [_NON_ALNUM.sub("", w.lower()) for w in words]
        keywords = [k for k in keywords if len(k) > 4 and k not in STOPWORDS][: self.keyword_count]
        # seed tags first, so "#Trending" falls off once two keywords are found
        tags = [*SEED_HASHTAGS, *(f"#{k[0].upper()}{k[1:]}" for k in keywords), TRAILING_HASHTAG]
        return tags[: self.hashtag_count]
