"""Small text helpers."""

CHAR_SOFT_LIMIT = 9000


def truncate(text: str, limit: int = CHAR_SOFT_LIMIT) -> str:
    """Return at most ``limit`` characters from the start of ``text``.

    Slicing a str counts code points, so a character is never split.
    """
    if len(text) <= limit:
        return text
    return text[:limit]
