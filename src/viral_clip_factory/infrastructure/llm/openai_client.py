from __future__ import annotations

from typing import Any

from viral_clip_factory.domain.errors import SynthesisProviderFailure
from viral_clip_factory.domain.models import Captions
from viral_clip_factory.infrastructure.llm.http_json import build_ssl_context, captions_from_text, post_json
from viral_clip_factory.infrastructure.llm.prompts import build_caption_prompt

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAICaptionProvider:
    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout_sec: float = 30.0,
        title_max_chars: int = 100,
        description_max_chars: int = 500,
        hashtag_count: int = 5,
        temperature: float = 0.8,
        max_tokens: int = 300,
    ) -> None:
        self.api_key = api_key.strip()
        self.model = model
        self.timeout_sec = timeout_sec
        self.title_max_chars = title_max_chars
        self.description_max_chars = description_max_chars
        self.hashtag_count = hashtag_count
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.ssl_context = build_ssl_context()

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def generate(self, transcript_text: str) -> Captions:
        if not self.api_key:
            raise SynthesisProviderFailure("OPENAI_API_KEY is empty")

        response_json = post_json(
            OPENAI_CHAT_URL,
            self._build_payload(transcript_text),
            provider="OpenAI",
            timeout_sec=self.timeout_sec,
            ssl_context=self.ssl_context,
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        return self._parse_captions(response_json)

    def _build_payload(self, transcript_text: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": build_caption_prompt(transcript_text)}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def _parse_captions(self, response_json: dict[str, Any]) -> Captions:
        try:
            content = response_json["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise SynthesisProviderFailure("OpenAI response had no message content") from exc
        if not isinstance(content, str) or not content.strip():
            raise SynthesisProviderFailure("OpenAI returned an empty message")

        return captions_from_text(
            content.strip(),
            source=self.name,
            title_max_chars=self.title_max_chars,
            description_max_chars=self.description_max_chars,
            hashtag_count=self.hashtag_count,
        )
