import re
from typing import List

STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "how",
    "in", "into", "is", "it", "of", "on", "or", "our", "that", "the", "their",
    "this", "to", "with", "your", "you", "we", "vs",
})

_WORD_RE = re.compile(r"[\w']+", re.UNICODE)


def clean(text: str) -> str:
    """Collapse whitespace and strip the ends."""
    return " ".join(text.split())


def truncate(text: str, limit: int, ellipsis: str = "…") -> str:
    """Shorten text to at most ``limit`` characters, cutting on a word boundary."""
    text = clean(text)
    if len(text) <= limit:
        return text
    if limit <= len(ellipsis):
        return text[:limit]

    cut = text[: limit - len(ellipsis)]
    space = cut.rfind(" ")
    if space > 0:
        cut = cut[:space]
    return cut.rstrip(" ,.;:-") + ellipsis


def words(text: str) -> List[str]:
    return _WORD_RE.findall(text.lower())


def terms(text: str) -> List[str]:
    """Meaningful lowercase words, stop-words and single characters removed."""
    return [w for w in words(text) if w not in STOP_WORDS and len(w) > 1]


def split_list(text: str) -> List[str]:
    """Split a free-text list like "creators, agencies + founders" into items."""
    parts = re.split(r"\s*(?:,|/|\+|&|;|\band\b)\s*", clean(text))
    return [p for p in parts if p]


def sentence(text: str) -> str:
    """Capitalise the first letter and make sure the text ends with punctuation."""
    text = clean(text)
    if not text:
        return text
    text = text[0].upper() + text[1:]
    if text[-1] not in ".!?…":
        text += "."
    return text


def format_timestamp(seconds: int) -> str:
    """Render seconds as M:SS, or H:MM:SS past the hour."""
    hours, rest = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


_DURATION_UNITS = {
    "h": 3600, "hr": 3600, "hrs": 3600, "hour": 3600, "hours": 3600,
    "m": 60, "min": 60, "mins": 60, "minute": 60, "minutes": 60,
    "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
}
MAX_DURATION_SECONDS = 12 * 3600
_CLOCK_RE = re.compile(r"^(?:(\d+):)?(\d{1,2}):(\d{2})$")
_AMOUNT_RE = re.compile(r"(\d+(?:\.\d+)?)[\s-]*([a-z]+)")


def parse_duration_seconds(text: str, default: int) -> int:
    """Read a human duration ("3 minutes", "90s", "1:30", "1h 5m").

    Falls back to ``default`` when nothing recognisable is found.
    """
    text = clean(text).lower()
    total = 0.0
    clock = _CLOCK_RE.match(text)
    if clock:
        hours, minutes, secs = clock.groups()
        total = float(hours or 0) * 3600 + int(minutes) * 60 + int(secs)
    else:
        for amount, unit in _AMOUNT_RE.findall(text):
            if unit in _DURATION_UNITS:
                total += float(amount) * _DURATION_UNITS[unit]
    if total <= 0 and re.fullmatch(r"\d{1,4}", text):
        # A bare number reads as minutes
        total = float(text) * 60
    if total <= 0:
        return default
    return int(min(total, MAX_DURATION_SECONDS))
