"""Writer event model.

Document writers report what they did as small event records instead of
log lines.  Every event is a frozen dataclass carrying:

- ``kind``: which document kind produced it (``"urlset"`` or ``"index"``)
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass

from sitemap_xml_writer._types import DocumentKind


@dataclass(frozen=True, slots=True)
class DocumentStarted:
    """The declaration and root open tag were written.

    Attributes:
        kind: Document kind.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: DocumentKind
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class EntryWritten:
    """One ``<url>`` or ``<sitemap>`` element was written.

    Attributes:
        kind: Document kind.
        loc: Location of the written entry.
        bytes_written: Bytes written for this entry alone.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: DocumentKind
    loc: str
    bytes_written: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class DocumentEnded:
    """The root close tag was written; the document is complete.

    Attributes:
        kind: Document kind.
        entries: Number of entries in the document.
        bytes_written: Size of the whole document in bytes.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: DocumentKind
    entries: int
    bytes_written: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class WriteFailed:
    """The sink failed; the document is left partially written.

    Attributes:
        kind: Document kind.
        error: Message of the underlying I/O error.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: DocumentKind
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type WriterEvent = DocumentStarted | EntryWritten | DocumentEnded | WriteFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
