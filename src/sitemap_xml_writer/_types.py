"""Shared type definitions for sitemap-xml-writer."""

from datetime import date
from decimal import Decimal
from typing import Literal, Protocol
from urllib.parse import ParseResult, SplitResult

# Kind of document a writer produces
type DocumentKind = Literal["urlset", "index"]

# Raw input accepted for a ``loc`` field
type RawLoc = str | SplitResult | ParseResult

# Raw input accepted for a ``lastmod`` field (datetime is a date subclass)
type RawDate = str | date

# Raw input accepted for a ``priority`` field
type RawPriority = str | int | float | Decimal


class ByteSink(Protocol):
    """Anything that accepts bytes: an open binary file, ``io.BytesIO``, a socket file."""

    def write(self, data: bytes, /) -> object: ...
