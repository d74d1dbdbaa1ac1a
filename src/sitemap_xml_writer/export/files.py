"""File export — stream entries into sitemap files on disk.

Thin glue over the writers: open the output file, start the right
writer, write every entry, end the document, and report what was
written.  A failure part-way leaves a truncated file behind; nothing is
rolled back.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sitemap_xml_writer._errors import IoFailure
from sitemap_xml_writer.writer import SitemapIndexWriter, SitemapWriter

if TYPE_CHECKING:
    from sitemap_xml_writer._types import DocumentKind
    from sitemap_xml_writer.entries import Sitemap, Url
    from sitemap_xml_writer.observability.log import EventLog


@dataclass(frozen=True, slots=True)
class WrittenFile:
    """Record of a sitemap file written to disk.

    Attributes:
        output_path: Filesystem path of the written file.
        kind: Document kind.
        entries: Number of entries in the document.
        size_bytes: Size of the written file in bytes.
        largest_entry_bytes: Size of the biggest entry element.
        duration_ms: Time taken to write the file.

    """

    output_path: Path
    kind: DocumentKind
    entries: int
    size_bytes: int
    largest_entry_bytes: int
    duration_ms: float


def write_sitemap(
    entries: Iterable[Url | str],
    output_path: Path,
    *,
    indent: bool = False,
    event_log: EventLog | None = None,
) -> WrittenFile:
    """Write a ``sitemap.xml`` file from *entries*.

    Args:
        entries: Url entries, or plain location strings.
        output_path: File to create or overwrite.
        indent: Write one element per line, indented.
        event_log: Where to record writer events, if anywhere.

    Raises:
        IoFailure: The file could not be opened or written.
        ValidationError: A plain-string entry is not a valid location.

    """
    return _write(SitemapWriter, entries, output_path, indent=indent, event_log=event_log)


def write_sitemap_index(
    entries: Iterable[Sitemap | str],
    output_path: Path,
    *,
    indent: bool = False,
    event_log: EventLog | None = None,
) -> WrittenFile:
    """Write a sitemap index file from *entries*.

    Same contract as :func:`write_sitemap`, with ``Sitemap`` entries.
    """
    return _write(SitemapIndexWriter, entries, output_path, indent=indent, event_log=event_log)


def _write(
    writer_cls: type[SitemapWriter] | type[SitemapIndexWriter],
    entries: Iterable[Url | Sitemap | str],
    output_path: Path,
    *,
    indent: bool,
    event_log: EventLog | None,
) -> WrittenFile:
    t0 = time.perf_counter()
    try:
        handle = output_path.open("wb")
    except OSError as exc:
        msg = f"cannot open {output_path} for writing: {exc}"
        raise IoFailure(msg) from exc

    with handle:
        writer = writer_cls.start(handle, indent=indent, event_log=event_log)
        for entry in entries:
            writer.write(entry)  # type: ignore[arg-type]
        writer.end()
        kind = writer.kind
        count = writer.entries_written
        size = writer.bytes_written
        largest = writer.largest_entry_bytes

    elapsed = (time.perf_counter() - t0) * 1000
    return WrittenFile(
        output_path=output_path,
        kind=kind,
        entries=count,
        size_bytes=size,
        largest_entry_bytes=largest,
        duration_ms=elapsed,
    )
