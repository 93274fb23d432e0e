"""
Text cleanup utilities for model output.
"""

from __future__ import annotations

import re

# A whole reply wrapped in one ```json ... ``` (or bare ```) fence
_FENCED_BLOCK = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$", re.S)


def strip_code_fence(text: str) -> str:
    """Remove a Markdown code fence around the whole text, if there is one."""
    stripped = text.strip()
    match = _FENCED_BLOCK.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def split_comma_separated(text: str) -> list[str]:
    """Split "React, Node.js,  Docker" into trimmed, non-empty parts."""
    return [part.strip() for part in text.split(",") if part.strip()]
