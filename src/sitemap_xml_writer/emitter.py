"""XML emitter — escaped XML fragments written straight to a byte sink.

The emitter knows nothing about sitemaps.  It writes a declaration,
open and close tags, and escaped text, encoding each piece as UTF-8 and
handing it to the sink immediately.  Nothing is buffered here; any
buffering is the sink's business.

Sink errors (any ``OSError``) surface as
:class:`~sitemap_xml_writer._errors.IoFailure` chained to the original.
"""

from __future__ import annotations

from collections.abc import Mapping
from xml.sax.saxutils import escape as _sax_escape

from sitemap_xml_writer._errors import IoFailure, WriterStateError
from sitemap_xml_writer._types import ByteSink

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# saxutils handles &, < and >; quotes need explicit entities
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape(text: str) -> str:
    """Escape ``& < > " '`` as XML entities, ``&`` first.

    Input is raw text: an existing ``&amp;`` becomes ``&amp;amp;``.
    """
    return _sax_escape(text, _QUOTE_ENTITIES)


class XmlEmitter:
    """Compact XML writer over a byte sink.

    Args:
        sink: Destination for the UTF-8 encoded output.

    """

    __slots__ = ("_bytes_written", "_sink")

    def __init__(self, sink: ByteSink) -> None:
        self._sink = sink
        self._bytes_written = 0

    @property
    def sink(self) -> ByteSink:
        return self._sink

    @property
    def bytes_written(self) -> int:
        """Total bytes the sink has accepted from this emitter."""
        return self._bytes_written

    def write_declaration(self) -> None:
        """Write the XML declaration.  Must be the first thing written."""
        if self._bytes_written:
            msg = "XML declaration must be the first bytes of the document"
            raise WriterStateError(msg)
        self._write(XML_DECLARATION)

    def write_open(self, tag: str, attrs: Mapping[str, str] | None = None) -> None:
        self._write(self._open_tag(tag, attrs))

    def write_close(self, tag: str) -> None:
        self._write(self._close_tag(tag))

    def write_text(self, content: str) -> None:
        self._write(escape(content))

    def write_element(self, tag: str, content: str) -> None:
        """Write ``<tag>content</tag>`` as one leaf element."""
        self._write(self._open_tag(tag) + escape(content) + self._close_tag(tag))

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        flush = getattr(self._sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except OSError as exc:
            msg = f"failed to flush output: {exc}"
            raise IoFailure(msg) from exc

    # -- internals ----------------------------------------------------------

    @staticmethod
    def _open_tag(tag: str, attrs: Mapping[str, str] | None = None) -> str:
        if not attrs:
            return f"<{tag}>"
        rendered = "".join(f' {name}="{escape(value)}"' for name, value in attrs.items())
        return f"<{tag}{rendered}>"

    @staticmethod
    def _close_tag(tag: str) -> str:
        return f"</{tag}>"

    def _write(self, text: str) -> None:
        data = text.encode("utf-8")
        try:
            self._sink.write(data)
        except OSError as exc:
            msg = f"failed to write output: {exc}"
            raise IoFailure(msg) from exc
        self._bytes_written += len(data)


class IndentingEmitter(XmlEmitter):
    """XmlEmitter that puts every element on its own indented line.

    Leaf elements stay on one line.  The declaration and each tag line
    end with a newline, so the finished document ends with one too.

    Args:
        sink: Destination for the UTF-8 encoded output.
        indent: Text repeated once per nesting level.

    """

    __slots__ = ("_depth", "_indent")

    def __init__(self, sink: ByteSink, indent: str = "  ") -> None:
        super().__init__(sink)
        self._indent = indent
        self._depth = 0

    def write_declaration(self) -> None:
        super().write_declaration()
        self._write("\n")

    def write_open(self, tag: str, attrs: Mapping[str, str] | None = None) -> None:
        self._write(self._margin() + self._open_tag(tag, attrs) + "\n")
        self._depth += 1

    def write_close(self, tag: str) -> None:
        self._depth -= 1
        self._write(self._margin() + self._close_tag(tag) + "\n")

    def write_element(self, tag: str, content: str) -> None:
        self._write(
            self._margin() + self._open_tag(tag) + escape(content) + self._close_tag(tag) + "\n",
        )

    def _margin(self) -> str:
        return self._indent * self._depth
