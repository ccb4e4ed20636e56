from __future__ import annotations

from collections.abc import Sequence

from viral_clip_factory.domain.models import Captions
from viral_clip_factory.domain.protocols import CaptionProvider


class CaptionSynthesizer:
    def __init__(self, providers: Sequence[CaptionProvider], fallback: CaptionProvider, logger) -> None:
        self.providers = list(providers)
        self.fallback = fallback
        self.logger = logger

    def synthesize(self, transcript_text: str) -> Captions:
        for provider in self.providers:
            captions = self._attempt(provider, transcript_text)
            if captions is not None:
                return captions

        captions = self.fallback.generate(transcript_text)
        self.logger.info("captions.resolved", provider=self.fallback.name)
        return captions

    def _attempt(self, provider: CaptionProvider, transcript_text: str) -> Captions | None:
        if not provider.is_configured():
            self.logger.info("captions.provider_skipped", provider=provider.name, reason="not_configured")
            return None
        try:
            captions = provider.generate(transcript_text)
        except Exception as exc:
            self.logger.warning("captions.provider_failed", provider=provider.name, error=str(exc))
            return None
        self.logger.info("captions.resolved", provider=provider.name)
        return captions
