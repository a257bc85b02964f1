import re
from typing import Optional


# printable ASCII plus tab, newline and carriage return
_NON_ASCII = re.compile(r"[^\t\n\r\x20-\x7E]")


def sanitize_to_ascii(s: Optional[str]) -> str:
    """Drop every character outside printable ASCII, keeping tab/LF/CR.

    Removed characters are not replaced, so the result is never longer than
    the input. ``None`` maps to an empty string.
    """
    if s is None:
        return ""
    return _NON_ASCII.sub("", str(s))


def truncate(s: Optional[str], limit: int) -> str:
    if not s:
        return ""
    return s[:limit]
