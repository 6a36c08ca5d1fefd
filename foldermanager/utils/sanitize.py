# foldermanager/utils/sanitize.py
"""
Folder name sanitization.
Output never contains a forbidden character, a control character or
whitespace, and is at most MAX_NAME_LENGTH characters long.
"""
import unicodedata

from foldermanager.core.constants import FORBIDDEN_CHARS, MAX_NAME_LENGTH, RESERVED_NAMES


def sanitize(raw: str, max_len: int = MAX_NAME_LENGTH) -> str:
    """
    Turn an arbitrary string into a filesystem-legal folder name.

    1. Drop control characters (checked first, so tab/newline are dropped).
    2. Drop characters in FORBIDDEN_CHARS.
    3. Replace remaining whitespace with "_".
    4. Keep everything else, in order, up to max_len characters.

    Idempotent: sanitize(sanitize(x)) == sanitize(x).
    """
    out = []
    for ch in raw:
        if len(out) >= max_len:
            break
        if _is_control(ch) or ch in FORBIDDEN_CHARS:
            continue
        out.append("_" if ch.isspace() else ch)
    return "".join(out)


def is_usable_name(name: str) -> bool:
    """False for names that would resolve to the base directory or its parent."""
    return name not in RESERVED_NAMES


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"
