from __future__ import annotations

import re


def sanitize_filename(name: str) -> str:
    sanitized = re.sub(r"[^0-9A-Za-z_\- ]+", "", name).strip()
    sanitized = re.sub(r"\s+", "_", sanitized)
    return sanitized[:64] or "clip"
