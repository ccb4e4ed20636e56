from __future__ import annotations

from typing import Protocol

from .models import Captions, TranscriptSegment


class TranscriptSource(Protocol):
    def fetch(self, video_id: str) -> list[TranscriptSegment]:
        """Return ordered transcript segments or raise TranscriptUnavailable."""


class CaptionProvider(Protocol):
    name: str

    def is_configured(self) -> bool:
        """Return False when the provider lacks credentials and must be skipped."""

    def generate(self, transcript_text: str) -> Captions:
        """Return captions or raise SynthesisProviderFailure."""
