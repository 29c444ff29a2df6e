"""Custom emoji decoding.

The scanner passes emoji tokens through verbatim. This module splits such an
identifier into its parts when it has the usual shape:

    a:partyblob:123456789012345678  -> animated, 'partyblob', '123456789012345678'
    :blob:123456789012345678        -> static,   'blob',      '123456789012345678'
"""

from __future__ import annotations

import logging
import re

from .models import EmojiReference

logger = logging.getLogger(__name__)

# Emoji names are word characters; ids are ASCII digits
EMOJI_PATTERN = re.compile(r"(?P<animated>a?):(?P<name>\w+):(?P<id>[0-9]+)", re.ASCII)


def parse_emoji(identifier: str) -> EmojiReference | None:
    """Decode an emoji mention identifier.

    Args:
        identifier: Interior of an emoji token, e.g. 'a:blob:99'.

    Returns:
        EmojiReference, or None if the identifier is not '[a]:name:id'.
    """
    match = EMOJI_PATTERN.fullmatch(identifier)
    if match is None:
        logger.debug(f"Not a decodable emoji: {identifier!r}")
        return None

    return EmojiReference(
        animated=match.group("animated") == "a",
        name=match.group("name"),
        id=match.group("id"),
    )
