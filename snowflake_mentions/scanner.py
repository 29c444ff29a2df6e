"""
Mention scanning.

Walks a message left to right, pairing each '>' with the nearest '<' before
it that has not been consumed yet, and classifies what lies between them.

Example:
    scan("hi <@!42>, see <#8> <:blob:99>")
    # [MentionRecord(USER, '42'), MentionRecord(CHANNEL, '8'),
    #  MentionRecord(EMOJI, ':blob:99')]
"""

from __future__ import annotations

import logging

from .classifier import classify
from .config import ScanConfig, UnmatchedClosePolicy
from .errors import InvalidInputError
from .models import MentionRecord

logger = logging.getLogger(__name__)

OPEN_DELIMITER = "<"
CLOSE_DELIMITER = ">"


class MentionScanner:
    """
    Extracts mention records from message text.

    The scanner holds only its configuration, so one instance can be shared
    freely between threads.

    Example:
        scanner = MentionScanner(ScanConfig(unmatched_close=UnmatchedClosePolicy.SKIP))
        records = scanner.scan("a > b <@1>")
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config = config or ScanConfig()

    def scan(self, text: str) -> list[MentionRecord]:
        """Extract all mentions from text, in order of appearance.

        Args:
            text: Message body.

        Returns:
            Records for every valid token. Malformed tokens are dropped.

        Raises:
            InvalidInputError: If text is not a str.
        """
        if not isinstance(text, str):
            raise InvalidInputError(text)

        records: list[MentionRecord] = []
        cursor = 0

        while True:
            close = text.find(CLOSE_DELIMITER, cursor)
            if close == -1:
                break

            # Never look back past the cursor
            open_ = text.rfind(OPEN_DELIMITER, cursor, close)
            if open_ == -1:
                if self.config.unmatched_close is UnmatchedClosePolicy.STOP:
                    logger.debug(
                        f"Unmatched '>' at {close}, stopping with {len(records)} mentions"
                    )
                    break
                logger.debug(f"Skipping unmatched '>' at {close}")
                cursor = close + 1
                continue

            record = classify(text[open_ + 1 : close])
            if record is not None:
                records.append(record)

            cursor = close + 1

        return records

    def scan_first(self, text: str) -> MentionRecord | None:
        """Return the first mention in text, or None if there is none."""
        records = self.scan(text)
        return records[0] if records else None


def scan(text: str, config: ScanConfig | None = None) -> list[MentionRecord]:
    """Extract all mentions from text. See MentionScanner.scan."""
    return MentionScanner(config).scan(text)


def scan_first(text: str, config: ScanConfig | None = None) -> MentionRecord | None:
    """Return the first mention in text. See MentionScanner.scan_first."""
    return MentionScanner(config).scan_first(text)
