"""Scanner configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UnmatchedClosePolicy(Enum):
    """What to do with a '>' that has no '<' between it and the cursor."""

    STOP = "stop"
    """End the scan and return what was found so far."""

    SKIP = "skip"
    """Ignore the stray '>' and keep scanning after it."""


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a mention scan.

    Example:
        config = ScanConfig.from_dict({"unmatched_close": "skip"})
        scanner = MentionScanner(config)
    """

    unmatched_close: UnmatchedClosePolicy = UnmatchedClosePolicy.STOP
    """Handling of a stray closing delimiter."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScanConfig:
        """Build a config from a plain mapping.

        Args:
            data: Mapping such as {"unmatched_close": "skip"}. Unknown keys
                are ignored.

        Returns:
            ScanConfig instance

        Raises:
            ValueError: If a value is not recognized
        """
        policy = data.get("unmatched_close", UnmatchedClosePolicy.STOP)
        if not isinstance(policy, UnmatchedClosePolicy):
            try:
                policy = UnmatchedClosePolicy(str(policy).lower())
            except ValueError:
                raise ValueError(f"Unknown unmatched_close policy: {policy}") from None

        return cls(unmatched_close=policy)
