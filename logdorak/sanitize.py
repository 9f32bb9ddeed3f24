"""Message rendering for log calls.

Every fragment is rendered with str() and stripped of carriage returns and
line feeds before concatenation, so a value like ``"x\\nFAKE ERROR ..."``
cannot forge an extra log line.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from logdorak.config import LINE_ENDING_CHARACTERS, NULL_PLACEHOLDER

LINE_ENDINGS = re.compile(f"[{re.escape(LINE_ENDING_CHARACTERS)}]")


def to_text(value: Any, placeholder: str = NULL_PLACEHOLDER) -> str:
    """Render a fragment, using ``placeholder`` for None."""
    if value is None:
        return placeholder
    return str(value)


def strip_line_endings(text: str) -> str:
    return LINE_ENDINGS.sub("", text)


def concat_sanitized(parts: Iterable[Any], placeholder: str = NULL_PLACEHOLDER) -> str:
    """Join the sanitized text of each part, in order, with no separator."""
    return "".join(strip_line_endings(to_text(part, placeholder)) for part in parts)
