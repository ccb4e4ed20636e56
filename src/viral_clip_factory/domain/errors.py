from __future__ import annotations


class ViralClipError(RuntimeError):
    pass


class InvalidInput(ViralClipError):
    """Missing or unparseable video URL / clip payload."""


class TranscriptUnavailable(ViralClipError):
    """The video has no captions or the transcript fetch failed."""


class SynthesisProviderFailure(ViralClipError):
    """A remote caption provider could not produce usable captions."""
