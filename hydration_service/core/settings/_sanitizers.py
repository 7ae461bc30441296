"""Clean-up of raw environment values before pydantic sees them."""

from __future__ import annotations

import re
from typing import Any

# "45  # minutes" -> "45"; a "#" glued to the value ("45#a") is left alone
_INLINE_COMMENT = re.compile(r"(^|\s+)#.*$")


def sanitize_inline_numeric(value: Any) -> Any:
    """Drop a trailing ``# comment`` that some .env loaders leave in the value.

    Non-strings, and strings that would be empty after stripping, pass
    through unchanged so pydantic reports the original value.
    """
    if not isinstance(value, str):
        return value
    cleaned = _INLINE_COMMENT.sub("", value).strip()
    return cleaned or value
