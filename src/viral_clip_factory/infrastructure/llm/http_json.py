from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from typing import Any

import certifi

from viral_clip_factory.domain.errors import SynthesisProviderFailure
from viral_clip_factory.domain.models import Captions


def build_ssl_context() -> ssl.SSLContext:
    return ssl.create_default_context(cafile=certifi.where())


def post_json(
    url: str,
    payload: dict[str, Any],
    *,
    provider: str,
    timeout_sec: float,
    ssl_context: ssl.SSLContext,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    req = urllib.request.Request(
        url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json", **(headers or {})},
        method="POST",
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout_sec, context=ssl_context) as res:
            body = res.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        detail = ""
        try:
            error_body = exc.read().decode("utf-8")
            parsed = json.loads(error_body)
            message = parsed.get("error", {}).get("message")
            detail = message or error_body
        except (UnicodeDecodeError, json.JSONDecodeError, AttributeError):
            detail = str(exc)
        raise SynthesisProviderFailure(f"{provider} HTTP {exc.code}: {detail}") from exc
    except (urllib.error.URLError, TimeoutError) as exc:
        raise SynthesisProviderFailure(f"{provider} request failed: {exc}") from exc

    try:
        parsed_body = json.loads(body)
    except json.JSONDecodeError as exc:
        raise SynthesisProviderFailure(f"{provider} response was not valid JSON") from exc
    if not isinstance(parsed_body, dict):
        raise SynthesisProviderFailure(f"{provider} response was not a JSON object")
    return parsed_body


def extract_json_object(text: str) -> dict[str, Any]:
    """Return the first JSON object embedded in free text.

    Models tend to wrap the object in prose or markdown fences, so every ``{``
    is tried as a decode start until one yields an object.
    """
    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            payload, _ = decoder.raw_decode(text[start:])
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict):
            return payload
        start = text.find("{", start + 1)
    raise SynthesisProviderFailure("response did not contain a JSON object")


def captions_from_text(
    text: str,
    *,
    source: str,
    title_max_chars: int = 100,
    description_max_chars: int = 500,
    hashtag_count: int = 5,
) -> Captions:
    payload = extract_json_object(text)

    title = payload.get("title")
    description = payload.get("description")
    hashtags = payload.get("hashtags")
    if not isinstance(title, str) or not title.strip():
        raise SynthesisProviderFailure(f"{source} JSON is missing a title")
    if not isinstance(description, str):
        raise SynthesisProviderFailure(f"{source} JSON is missing a description")
    if not isinstance(hashtags, list):
        raise SynthesisProviderFailure(f"{source} JSON is missing hashtags")

    return Captions(
        title=title.strip()[:title_max_chars],
        description=description.strip()[:description_max_chars],
        hashtags=[str(tag).strip() for tag in hashtags if str(tag).strip()][:hashtag_count],
        source=source,
    )
