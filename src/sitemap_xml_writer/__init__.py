"""sitemap-xml-writer — stream sitemap.xml and sitemap index files.

Validates each entry as it is built and writes it straight to a byte
sink, so a sitemap of any size is produced without holding the document
in memory.

Quick start::

    from io import BytesIO
    from sitemap_xml_writer import SitemapWriter, Url

    writer = SitemapWriter.start(BytesIO())
    writer.write(
        Url.loc("http://www.example.com/")
        .lastmod("2005-01-01")
        .changefreq("monthly")
        .priority("0.8")
    )
    xml = writer.end().getvalue()

Sitemap index::

    from sitemap_xml_writer import Sitemap, SitemapIndexWriter

    with SitemapIndexWriter.start(open("sitemap-index.xml", "wb")) as writer:
        writer.write(Sitemap.loc("http://www.example.com/sitemap1.xml.gz"))

"""

from sitemap_xml_writer._errors import (
    ConfigError,
    EmptyLocation,
    InvalidDateSyntax,
    InvalidDecimalSyntax,
    InvalidUrlSyntax,
    IoFailure,
    PriorityOutOfRange,
    SitemapError,
    UnknownChangefreq,
    ValidationError,
    WriterStateError,
)
from sitemap_xml_writer.entries import Sitemap, Url
from sitemap_xml_writer.fields import Changefreq

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "Changefreq",
    "ConfigError",
    "EmptyLocation",
    "InvalidDateSyntax",
    "InvalidDecimalSyntax",
    "InvalidUrlSyntax",
    "IoFailure",
    "PriorityOutOfRange",
    "Sitemap",
    "SitemapConfig",
    "SitemapError",
    "SitemapIndexWriter",
    "SitemapWriter",
    "UnknownChangefreq",
    "Url",
    "ValidationError",
    "WriterStateError",
    "__version__",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the writers and configuration.

    Keeps ``import sitemap_xml_writer`` light for callers that only
    validate entries.
    """
    if name == "SitemapWriter":
        from sitemap_xml_writer.writer import SitemapWriter

        return SitemapWriter

    if name == "SitemapIndexWriter":
        from sitemap_xml_writer.writer import SitemapIndexWriter

        return SitemapIndexWriter

    if name == "SitemapConfig":
        from sitemap_xml_writer.config import SitemapConfig

        return SitemapConfig

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
