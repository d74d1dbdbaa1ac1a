"""Writer observability — what each document writer did, as events.

Writers record lifecycle events (start, each entry, end, sink failure)
into an optional :class:`EventLog`.  Events are frozen dataclasses with
nanosecond timestamps.

Quick Start:
    >>> from io import BytesIO
    >>> from sitemap_xml_writer import SitemapWriter
    >>> from sitemap_xml_writer.observability import EventLog
    >>> log = EventLog()
    >>> writer = SitemapWriter.start(BytesIO(), event_log=log)
    >>> writer.write("http://www.example.com/")
    >>> _ = writer.end()
    >>> log.totals("urlset").entries
    1

"""

from sitemap_xml_writer.observability.events import (
    DocumentEnded,
    DocumentStarted,
    EntryWritten,
    WriteFailed,
    WriterEvent,
    now_ns,
)
from sitemap_xml_writer.observability.log import EventLog, KindTotals

__all__ = [
    "DocumentEnded",
    "DocumentStarted",
    "EntryWritten",
    "EventLog",
    "KindTotals",
    "WriteFailed",
    "WriterEvent",
    "now_ns",
]
