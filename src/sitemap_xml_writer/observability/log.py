"""Event log — recent writer events plus running per-kind totals.

The log keeps the most recent events in a bounded buffer for lookup by
type or location, and folds every event into a :class:`KindTotals` per
document kind.  Totals are never trimmed, so they stay exact however
many entries a writer streams.

Thread Safety:
    All methods take the log's lock.  One log may be shared by writers
    running on different threads.

"""

import threading
from collections import deque
from dataclasses import dataclass, replace

from sitemap_xml_writer._types import DocumentKind
from sitemap_xml_writer.observability.events import (
    DocumentEnded,
    DocumentStarted,
    EntryWritten,
    WriteFailed,
    WriterEvent,
)


@dataclass(slots=True)
class KindTotals:
    """Running counts for every document of one kind.

    Attributes:
        documents_started: Documents whose root open tag was written.
        documents_ended: Documents closed cleanly.
        failures: Documents abandoned after a sink failure.
        entries: Entries written, across all documents.
        entry_bytes: Bytes spent on entry elements, across all documents.
        largest_entry_bytes: Size of the biggest single entry element.
        largest_entry_loc: Location of that entry.

    """

    documents_started: int = 0
    documents_ended: int = 0
    failures: int = 0
    entries: int = 0
    entry_bytes: int = 0
    largest_entry_bytes: int = 0
    largest_entry_loc: str = ""

    def add(self, event: WriterEvent) -> None:
        match event:
            case DocumentStarted():
                self.documents_started += 1
            case EntryWritten(loc=loc, bytes_written=size):
                self.entries += 1
                self.entry_bytes += size
                if size > self.largest_entry_bytes:
                    self.largest_entry_bytes = size
                    self.largest_entry_loc = loc
            case DocumentEnded():
                self.documents_ended += 1
            case WriteFailed():
                self.failures += 1


class EventLog:
    """Bounded buffer of recent events with exact per-kind totals.

    Args:
        max_events: How many recent events to keep for :meth:`query`.
            Totals are unaffected by this limit.

    """

    __slots__ = ("_events", "_lock", "_totals")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[WriterEvent] = deque(maxlen=max_events)
        self._totals: dict[DocumentKind, KindTotals] = {}
        self._lock = threading.Lock()

    def append(self, event: WriterEvent) -> None:
        """Record an event and fold it into its kind's totals."""
        with self._lock:
            self._events.append(event)
            self._totals.setdefault(event.kind, KindTotals()).add(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        loc: str | None = None,
        limit: int = 100,
    ) -> list[WriterEvent]:
        """Return retained events, most recent first.

        Args:
            event_type: Only events of this type.
            loc: Only entry events whose location contains this text.
            limit: Maximum number of events to return.

        """
        with self._lock:
            results: list[WriterEvent] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break
                if event_type is not None and not isinstance(event, event_type):
                    continue
                if loc is not None and loc not in getattr(event, "loc", ""):
                    continue
                results.append(event)
            return results

    def totals(self, kind: DocumentKind) -> KindTotals:
        """Return a snapshot of the running totals for *kind*."""
        with self._lock:
            return replace(self._totals.get(kind) or KindTotals())

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
