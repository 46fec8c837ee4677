"""
Append-only narration log shown on the shared screen.
"""

import logging
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Iterator, Optional, Dict


logger = logging.getLogger(__name__)


class Severity(Enum):
    """How a log entry is styled."""
    INFO = "info"
    WARNING = "warning"
    DEATH = "death"


@dataclass(frozen=True)
class LogEntry:
    """A single narrated event."""
    text: str
    severity: Severity = Severity.INFO

    def to_dict(self) -> Dict[str, str]:
        return {"text": self.text, "severity": self.severity.value}


@dataclass
class EventLog:
    """Keeps every entry; consumers usually look at the last few."""
    view_size: int = 10
    _entries: List[LogEntry] = field(default_factory=list)

    def append(self, text: str, severity: Severity = Severity.INFO) -> LogEntry:
        entry = LogEntry(text=text, severity=severity)
        self._entries.append(entry)
        logger.debug("[%s] %s", severity.value, text)
        return entry

    def recent(self, k: Optional[int] = None) -> List[LogEntry]:
        """Get the most recent k entries (defaults to the view size)."""
        k = self.view_size if k is None else k
        if k <= 0:
            return []
        return self._entries[-k:]

    @property
    def entries(self) -> List[LogEntry]:
        """Full history, as a copy."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))
