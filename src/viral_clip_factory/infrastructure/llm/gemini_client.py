from __future__ import annotations

from typing import Any

from viral_clip_factory.domain.errors import SynthesisProviderFailure
from viral_clip_factory.domain.models import Captions
from viral_clip_factory.infrastructure.llm.http_json import build_ssl_context, captions_from_text, post_json
from viral_clip_factory.infrastructure.llm.prompts import build_caption_prompt


class GeminiCaptionProvider:
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout_sec: float = 30.0,
        title_max_chars: int = 100,
        description_max_chars: int = 500,
        hashtag_count: int = 5,
    ) -> None:
        self.api_key = api_key.strip()
        self.model = model
        self.timeout_sec = timeout_sec
        self.title_max_chars = title_max_chars
        self.description_max_chars = description_max_chars
        self.hashtag_count = hashtag_count
        self.ssl_context = build_ssl_context()

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, transcript_text: str) -> Captions:
        if not self.api_key:
            raise SynthesisProviderFailure("GEMINI_API_KEY is empty")

        url = (
            f"https://generativelanguage.googleapis.com/v1beta/models/"
            f"{self.model}:generateContent?key={self.api_key}"
        )
        response_json = post_json(
            url,
            self._build_payload(transcript_text),
            provider="Gemini",
            timeout_sec=self.timeout_sec,
            ssl_context=self.ssl_context,
        )
        return self._parse_captions(response_json)

    def _build_payload(self, transcript_text: str) -> dict[str, Any]:
        return {"contents": [{"parts": [{"text": build_caption_prompt(transcript_text)}]}]}

    def _parse_captions(self, response_json: dict[str, Any]) -> Captions:
        text = self._extract_text(response_json)
        if not text:
            prompt_feedback = response_json.get("promptFeedback", {})
            block_reason = prompt_feedback.get("blockReason")
            finish_reason = (
                response_json.get("candidates", [{}])[0].get("finishReason")
                if response_json.get("candidates")
                else ""
            )
            raise SynthesisProviderFailure(
                f"Gemini response body was empty (blockReason={block_reason}, finishReason={finish_reason})"
            )
        return captions_from_text(
            text,
            source=self.name,
            title_max_chars=self.title_max_chars,
            description_max_chars=self.description_max_chars,
            hashtag_count=self.hashtag_count,
        )

    def _extract_text(self, response_json: dict[str, Any]) -> str:
        candidates = response_json.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts", [])
        for part in parts:
            text = part.get("text")
            if isinstance(text, str) and text.strip():
                return text.strip()
        return ""
