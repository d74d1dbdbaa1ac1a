"""Shared test fixtures for sitemap-xml-writer."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest

NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


class FailingSink:
    """Byte sink that accepts *budget* writes and then raises OSError."""

    def __init__(self, budget: int = 0) -> None:
        self.budget = budget
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        if self.budget <= 0:
            msg = "disk full"
            raise OSError(28, msg)
        self.budget -= 1
        self.chunks.append(data)
        return len(data)

    def flush(self) -> None:
        msg = "flush failed"
        raise OSError(5, msg)

    def getvalue(self) -> bytes:
        return b"".join(self.chunks)


@pytest.fixture
def buffer() -> BytesIO:
    """Fresh in-memory byte sink."""
    return BytesIO()


@pytest.fixture
def urls_file(tmp_path: Path) -> Path:
    """A YAML entries file with one bare and one fully specified URL."""
    path = tmp_path / "urls.yaml"
    path.write_text(
        "urls:\n"
        "  - http://www.example.com/\n"
        "  - loc: /about/\n"
        "    lastmod: 2005-01-01\n"
        "    changefreq: monthly\n"
        "    priority: 0.8\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sitemaps_file(tmp_path: Path) -> Path:
    """A TOML entries file for a sitemap index."""
    path = tmp_path / "parts.toml"
    path.write_text(
        "[[sitemaps]]\n"
        'loc = "http://www.example.com/sitemap1.xml.gz"\n'
        'lastmod = "2004-10-01T18:23:17+00:00"\n'
        "\n"
        "[[sitemaps]]\n"
        'loc = "http://www.example.com/sitemap2.xml.gz"\n',
        encoding="utf-8",
    )
    return path
