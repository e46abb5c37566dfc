"""Sanitisation helpers.

Strip potentially unsafe HTML tags from user-supplied text and trim
surrounding whitespace before storing it.
"""
import re

TAG_RE = re.compile(r"<[^>]+>")


def clean_text(text) -> str:
    """Remove HTML tags from ``text`` and trim whitespace.

    Non-string values are converted with ``str`` first; ``None``
    becomes an empty string.
    """
    if text is None:
        return ""
    no_tags = TAG_RE.sub("", str(text))
    return no_tags.strip()
