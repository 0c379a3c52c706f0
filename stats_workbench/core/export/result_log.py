"""Ordered log of analysis results shown on the results page and exported."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from .tables import ChartPayload, ResultTable, has_error_payload

logger = logging.getLogger(__name__)


@dataclass
class ResultEntry:
    analysis: str
    title: str
    tables: list[ResultTable] = field(default_factory=list)
    charts: list[ChartPayload] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().strftime("%H:%M:%S"))


class ResultLog:
    def __init__(self):
        self._entries: list[ResultEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    @property
    def entries(self) -> list[ResultEntry]:
        return list(self._entries)

    def add(self, entry: ResultEntry) -> bool:
        """Append an entry unless one of its tables is an error payload."""
        if any(has_error_payload(t) for t in entry.tables):
            logger.info(f"Not logging '{entry.title}': output carries an error table")
            return False
        self._entries.append(entry)
        return True

    def remove(self, index: int):
        del self._entries[index]

    def clear(self):
        self._entries.clear()
