"""Classification of the text found between '<' and '>'."""

from __future__ import annotations

import logging

from .models import MentionKind, MentionRecord

logger = logging.getLogger(__name__)

ASCII_DIGITS = frozenset("0123456789")

# Longest prefix first so '@!' and '@&' win over a bare '@'
SNOWFLAKE_PREFIXES: tuple[tuple[str, MentionKind], ...] = (
    ("@!", MentionKind.USER),
    ("@&", MentionKind.ROLE),
    ("@", MentionKind.USER),
    ("#", MentionKind.CHANNEL),
)

EMOJI_MARKERS = ("a", ":")


def is_snowflake(value: str) -> bool:
    """True if every character is an ASCII digit.

    An empty string passes: empty identifiers are accepted.
    """
    return all(char in ASCII_DIGITS for char in value)


def classify(inner: str) -> MentionRecord | None:
    """Classify a token interior.

    Args:
        inner: Text strictly between the delimiters, e.g. '@!42' or ':blob:99'.

    Returns:
        MentionRecord, or None if the token is not a mention.
    """
    for prefix, kind in SNOWFLAKE_PREFIXES:
        if inner.startswith(prefix):
            identifier = inner[len(prefix) :]
            if not is_snowflake(identifier):
                logger.debug(f"Rejected {kind.value} token with non-digit id: {inner!r}")
                return None
            return MentionRecord(kind=kind, identifier=identifier)

    if inner.startswith(EMOJI_MARKERS):
        return MentionRecord(kind=MentionKind.EMOJI, identifier=inner)

    logger.debug(f"Rejected unrecognized token: {inner!r}")
    return None
