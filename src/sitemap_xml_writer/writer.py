"""Document writers — stream a sitemap or sitemap index to a sink.

A writer is a small state machine::

    NOT_STARTED --start()--> IN_BODY --write()*--> IN_BODY --end()--> ENDED

:meth:`~SitemapWriter.start` writes the XML declaration and the root
open tag, each :meth:`~SitemapWriter.write` writes one complete entry,
and :meth:`~SitemapWriter.end` closes the root and hands the sink back.
Every call goes straight through to the sink, so memory use does not
grow with the number of entries.

Calling a method in the wrong state (``write`` after ``end``, ``end``
twice) raises :class:`~sitemap_xml_writer._errors.WriterStateError`,
every time.  If the sink fails, the writer moves to ``FAILED`` and
refuses further calls; whatever reached the sink stays there.

Thread Safety:
    A writer must be driven from one thread at a time.  Entries may be
    built anywhere.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum, auto
from types import TracebackType
from typing import TYPE_CHECKING, ClassVar, Self

from sitemap_xml_writer._errors import IoFailure, WriterStateError
from sitemap_xml_writer.emitter import IndentingEmitter, XmlEmitter
from sitemap_xml_writer.entries import Sitemap, Url
from sitemap_xml_writer.observability.events import (
    DocumentEnded,
    DocumentStarted,
    EntryWritten,
    WriteFailed,
    now_ns,
)

if TYPE_CHECKING:
    from sitemap_xml_writer._types import ByteSink, DocumentKind
    from sitemap_xml_writer.observability.log import EventLog

# XML namespace for sitemaps and sitemap indexes
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class WriterState(Enum):
    """Lifecycle state of a document writer."""

    NOT_STARTED = auto()
    IN_BODY = auto()
    ENDED = auto()
    FAILED = auto()


class _DocumentWriter:
    """Shared state machine for both document kinds.

    Subclasses set the root tag, the entry tag and the entry type.
    """

    _KIND: ClassVar[DocumentKind]
    _ROOT_TAG: ClassVar[str]
    _ENTRY_TAG: ClassVar[str]
    _ENTRY_TYPE: ClassVar[type[Url] | type[Sitemap]]

    __slots__ = ("_emitter", "_entries", "_event_log", "_largest_entry", "_state")

    def __init__(
        self,
        sink: ByteSink,
        *,
        indent: bool = False,
        event_log: EventLog | None = None,
    ) -> None:
        self._emitter = IndentingEmitter(sink) if indent else XmlEmitter(sink)
        self._event_log = event_log
        self._entries = 0
        self._largest_entry = 0
        self._state = WriterState.NOT_STARTED

    @classmethod
    def start(
        cls,
        sink: ByteSink,
        *,
        indent: bool = False,
        event_log: EventLog | None = None,
    ) -> Self:
        """Write the declaration and root open tag, and return the writer.

        Args:
            sink: Byte destination, owned by the writer until :meth:`end`.
            indent: Put each element on its own indented line.
            event_log: Where to record writer events, if anywhere.

        Raises:
            IoFailure: The sink failed.

        """
        writer = cls(sink, indent=indent, event_log=event_log)
        writer._begin()
        return writer

    @property
    def kind(self) -> DocumentKind:
        return self._KIND

    @property
    def state(self) -> WriterState:
        return self._state

    @property
    def entries_written(self) -> int:
        return self._entries

    @property
    def bytes_written(self) -> int:
        return self._emitter.bytes_written

    @property
    def largest_entry_bytes(self) -> int:
        """Size of the biggest entry element written so far."""
        return self._largest_entry

    def write(self, entry: Url | Sitemap | str) -> None:
        """Write one complete entry element.

        A plain string is taken as the entry's ``loc``.  The entry is
        fully validated before any of its bytes reach the sink.

        Raises:
            WriterStateError: The writer is not in ``IN_BODY``.
            TypeError: *entry* is the wrong entry type for this document.
            ValidationError: *entry* is a string that is not a valid loc.
            IoFailure: The sink failed.

        """
        self._require(WriterState.IN_BODY, "write")
        entry = self._coerce(entry)

        before = self._emitter.bytes_written
        with self._guard():
            self._emitter.write_open(self._ENTRY_TAG)
            for tag, text in entry.fields():
                self._emitter.write_element(tag, text)
            self._emitter.write_close(self._ENTRY_TAG)
        self._entries += 1
        size = self._emitter.bytes_written - before
        self._largest_entry = max(self._largest_entry, size)

        self._record(EntryWritten(
            kind=self._KIND,
            loc=entry.location,
            bytes_written=size,
            timestamp_ns=now_ns(),
        ))

    def flush(self) -> None:
        """Flush the sink, if it can be flushed."""
        self._require(WriterState.IN_BODY, "flush")
        with self._guard():
            self._emitter.flush()

    def end(self) -> ByteSink:
        """Close the root element and return the sink to the caller.

        Raises:
            WriterStateError: The writer is not in ``IN_BODY``.
            IoFailure: The sink failed.

        """
        self._require(WriterState.IN_BODY, "end")
        with self._guard():
            self._emitter.write_close(self._ROOT_TAG)
        self._state = WriterState.ENDED

        self._record(DocumentEnded(
            kind=self._KIND,
            entries=self._entries,
            bytes_written=self._emitter.bytes_written,
            timestamp_ns=now_ns(),
        ))
        return self._emitter.sink

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        # On error the document is left open for the caller to inspect
        if exc_type is None and self._state is WriterState.IN_BODY:
            self.end()

    # -- internals ----------------------------------------------------------

    def _begin(self) -> None:
        self._require(WriterState.NOT_STARTED, "start")
        with self._guard():
            self._emitter.write_declaration()
            self._emitter.write_open(self._ROOT_TAG, {"xmlns": SITEMAP_NS})
        self._state = WriterState.IN_BODY
        self._record(DocumentStarted(kind=self._KIND, timestamp_ns=now_ns()))

    def _coerce(self, entry: Url | Sitemap | str) -> Url | Sitemap:
        if isinstance(entry, str):
            return self._ENTRY_TYPE.loc(entry)
        if not isinstance(entry, self._ENTRY_TYPE):
            msg = (
                f"{type(self).__name__} writes {self._ENTRY_TYPE.__name__} entries, "
                f"not {type(entry).__name__}"
            )
            raise TypeError(msg)
        return entry

    def _require(self, expected: WriterState, action: str) -> None:
        if self._state is not expected:
            msg = (
                f"cannot {action}: {type(self).__name__} is {self._state.name}, "
                f"expected {expected.name}"
            )
            raise WriterStateError(msg)

    @contextmanager
    def _guard(self) -> Iterator[None]:
        """Move to FAILED when the sink fails, then re-raise."""
        try:
            yield
        except IoFailure as exc:
            self._state = WriterState.FAILED
            self._record(WriteFailed(kind=self._KIND, error=str(exc), timestamp_ns=now_ns()))
            raise

    def _record(self, event: DocumentStarted | EntryWritten | DocumentEnded | WriteFailed) -> None:
        if self._event_log is not None:
            self._event_log.append(event)


class SitemapWriter(_DocumentWriter):
    """Streaming writer for a ``sitemap.xml`` document of ``<url>`` entries.

    Example::

        writer = SitemapWriter.start(io.BytesIO())
        writer.write(
            Url.loc("http://www.example.com/")
            .lastmod("2005-01-01")
            .changefreq("monthly")
            .priority("0.8")
        )
        buffer = writer.end()

    """

    __slots__ = ()

    _KIND = "urlset"
    _ROOT_TAG = "urlset"
    _ENTRY_TAG = "url"
    _ENTRY_TYPE = Url


class SitemapIndexWriter(_DocumentWriter):
    """Streaming writer for a sitemap index of ``<sitemap>`` entries.

    Example::

        writer = SitemapIndexWriter.start(io.BytesIO())
        writer.write(
            Sitemap.loc("http://www.example.com/sitemap1.xml.gz")
            .lastmod("2004-10-01T18:23:17+00:00")
        )
        buffer = writer.end()

    """

    __slots__ = ()

    _KIND = "index"
    _ROOT_TAG = "sitemapindex"
    _ENTRY_TAG = "sitemap"
    _ENTRY_TYPE = Sitemap
