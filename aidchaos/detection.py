"""External automation detection and result-marker cleanup.

Other scripts (story-card generators and similar) share the same text
channel. When their commands or structured output show up in a pass, the
resolver steps aside instead of rolling on, or rewriting, text it does not
own.
"""

import logging
import re

logger = logging.getLogger(__name__)

MARKER_TAG = "AIDCHAOS"

_AUTOMATION_PATTERNS = [
    re.compile(r"/\s*A\s*C", re.IGNORECASE),  # "/ac" commands
    re.compile(r"CONFIRM\s*DELETE", re.IGNORECASE),
    re.compile(r'>>>\s*please\s*select\s*"continue"', re.IGNORECASE),
    re.compile(r"{title:\s*[\s\S]*?}", re.IGNORECASE),  # card title headers
    re.compile(r">>>\s*[\s\S]*?<<<"),  # bracketed system messages
    re.compile(r"summariz(ing|ed)\s+.*\s+memories", re.IGNORECASE),
    re.compile(r"Auto(?:-|\s*)Cards\s+(?:has\s+been|will)", re.IGNORECASE),
]

_COMMAND_START_RE = re.compile(r"^\s*[/{]")

_MARKER_RE = re.compile(r"^\[" + MARKER_TAG + r"\s+[^\]]*\]\s*", re.MULTILINE)


def is_automation_activity(text: str) -> bool:
    """True when text looks like another tool's command or output."""
    if not isinstance(text, str):
        return False
    for pattern in _AUTOMATION_PATTERNS:
        if pattern.search(text):
            logger.debug("automation pattern matched: %s", pattern.pattern)
            return True
    if _COMMAND_START_RE.match(text):
        logger.debug("automation command marker at start of text")
        return True
    return False


def strip_markers(text: str) -> str:
    """Remove every [AIDCHAOS ...] line-leading marker. Idempotent."""
    if not isinstance(text, str):
        return text
    # A removal can pull the next marker onto a line start; repeat until stable.
    cleaned = _MARKER_RE.sub("", text)
    while cleaned != text:
        text = cleaned
        cleaned = _MARKER_RE.sub("", text)
    return cleaned
