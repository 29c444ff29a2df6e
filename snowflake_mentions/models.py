"""Data models for chat mention records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MentionKind(Enum):
    """Categories of mention tokens."""

    USER = "user"
    """User mention (`<@id>` or nickname-style `<@!id>`)."""

    ROLE = "role"
    """Role mention (`<@&id>`)."""

    CHANNEL = "channel"
    """Channel mention (`<#id>`)."""

    EMOJI = "emoji"
    """Custom emoji (`<:name:id>` or animated `<a:name:id>`)."""


@dataclass(frozen=True)
class EmojiReference:
    """A custom emoji decoded from an emoji mention identifier."""

    animated: bool
    name: str
    id: str  # snowflake, kept as text


@dataclass(frozen=True)
class MentionRecord:
    """A single mention found in a message.

    Attributes:
        kind: What the mention refers to.
        identifier: Snowflake digits for users, roles and channels (possibly
            empty). For emoji, the verbatim token interior including its
            leading 'a' or ':' marker.
    """

    kind: MentionKind
    identifier: str

    def as_pair(self) -> tuple[str, str]:
        """Return the (tag, identifier) pair, e.g. ('user', '42')."""
        return (self.kind.value, self.identifier)

    def as_tuple(self) -> tuple[MentionKind, str]:
        return (self.kind, self.identifier)

    @property
    def emoji(self) -> EmojiReference | None:
        """Decoded emoji for EMOJI records, None otherwise or if malformed."""
        if self.kind is not MentionKind.EMOJI:
            return None

        from .emoji import parse_emoji

        return parse_emoji(self.identifier)
