from types import SimpleNamespace

import pytest

from viral_clip_factory.domain.errors import TranscriptUnavailable
from viral_clip_factory.infrastructure.transcript.youtube_transcript import YouTubeTranscriptSource


class FakeApi:
    def __init__(self, snippets=None, error: Exception | None = None):
        self.snippets = snippets or []
        self.error = error
        self.calls = []

    def fetch(self, video_id, languages=("en",)):
        self.calls.append((video_id, list(languages)))
        if self.error is not None:
            raise self.error
        return self.snippets


def test_fetch_converts_seconds_to_millis():
    api = FakeApi(
        [
            SimpleNamespace(text="hello there", start=0.0, duration=1.5),
            SimpleNamespace(text="general", start=1.5, duration=2.25),
        ]
    )
    source = YouTubeTranscriptSource(languages=["en", "de"], api=api)

    segments = source.fetch("dQw4w9WgXcQ")

    assert api.calls == [("dQw4w9WgXcQ", ["en", "de"])]
    assert segments[1].text == "general"
    assert segments[1].offset_millis == 1500
    assert segments[1].duration_millis == 2250
    assert segments[1].end_sec == 3.75


def test_fetch_failure_becomes_transcript_unavailable():
    source = YouTubeTranscriptSource(api=FakeApi(error=RuntimeError("Subtitles are disabled")))

    with pytest.raises(TranscriptUnavailable, match="captions enabled"):
        source.fetch("dQw4w9WgXcQ")


def test_empty_transcript_is_unavailable():
    source = YouTubeTranscriptSource(api=FakeApi([]))

    with pytest.raises(TranscriptUnavailable):
        source.fetch("dQw4w9WgXcQ")
