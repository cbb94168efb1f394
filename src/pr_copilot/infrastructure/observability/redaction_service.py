"""Masks credentials before prompt text reaches the log.

Diffs routinely carry config files, so prompt logging runs every value through
``redact_text`` first.
"""

import re

REDACTED = "[REDACTED]"

# Each pattern captures (prefix)(secret); only the secret group is replaced.
SECRET_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(Bearer\s+)([\w\-.~+/=]+)",
        r"(Authorization:\s*)([\w\-.~+/=]+)",
        r"((?:api[_-]?key|api[_-]?token|password|secret)['\"]?\s*[:=]\s*)(['\"]?[\w\-.~+/=]+['\"]?)",
        r"()(sk-(?:ant-|proj-)?[\w\-]{16,})",
        r"()(AIza[\w\-]{30,})",
    )
)

MAX_LOG_TEXT_LENGTH = 10_000


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(rf"\g<1>{REDACTED}", text)
    return text


def truncate_for_log(text: str, limit: int = MAX_LOG_TEXT_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [TRUNCATED {len(text) - limit} chars]"
