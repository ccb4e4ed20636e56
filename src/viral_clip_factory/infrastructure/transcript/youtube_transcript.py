from __future__ import annotations

from collections.abc import Sequence

from youtube_transcript_api import YouTubeTranscriptApi

from viral_clip_factory.domain.errors import TranscriptUnavailable
from viral_clip_factory.domain.models import TranscriptSegment

TRANSCRIPT_UNAVAILABLE_MESSAGE = "Could not fetch transcript. Make sure the video has captions enabled."


class YouTubeTranscriptSource:
    def __init__(self, languages: Sequence[str] = ("en",), api=None, logger=None) -> None:
        self.languages = list(languages) or ["en"]
        self.api = api if api is not None else YouTubeTranscriptApi()
        self.logger = logger

    def fetch(self, video_id: str) -> list[TranscriptSegment]:
        try:
            fetched = self.api.fetch(video_id, languages=self.languages)
            segments = [
                TranscriptSegment(
                    text=str(snippet.text),
                    offset_millis=float(snippet.start) * 1000,
                    duration_millis=float(snippet.duration) * 1000,
                )
                for snippet in fetched
            ]
        except Exception as exc:
            if self.logger is not None:
                self.logger.warning("transcript.fetch_failed", video_id=video_id, error=str(exc))
            raise TranscriptUnavailable(TRANSCRIPT_UNAVAILABLE_MESSAGE) from exc

        if not segments:
            raise TranscriptUnavailable(TRANSCRIPT_UNAVAILABLE_MESSAGE)
        return segments
