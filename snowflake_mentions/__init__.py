"""Chat mention extraction (users, roles, channels, custom emoji)."""

from .classifier import classify
from .classifier import is_snowflake
from .config import ScanConfig
from .config import UnmatchedClosePolicy
from .emoji import parse_emoji
from .errors import InvalidInputError
from .models import EmojiReference
from .models import MentionKind
from .models import MentionRecord
from .scanner import MentionScanner
from .scanner import scan
from .scanner import scan_first

__all__ = [
    "scan",
    "scan_first",
    "classify",
    "is_snowflake",
    "parse_emoji",
    "MentionScanner",
    "MentionKind",
    "MentionRecord",
    "EmojiReference",
    "ScanConfig",
    "UnmatchedClosePolicy",
    "InvalidInputError",
]
