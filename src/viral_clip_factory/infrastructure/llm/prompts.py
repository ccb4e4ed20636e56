CAPTION_PROMPT_TEMPLATE = """Create a viral YouTube Shorts title, description, and hashtags for this clip:

"{transcript}"

Return ONLY a JSON object with this format:
{{
  "title": "engaging title under 100 chars",
  "description": "compelling description under 500 chars",
  "hashtags": ["hashtag1", "hashtag2", "hashtag3", "hashtag4", "hashtag5"]
}}

Make it attention-grabbing and optimized for virality."""


def build_caption_prompt(transcript_text: str) -> str:
    return CAPTION_PROMPT_TEMPLATE.format(transcript=transcript_text)
