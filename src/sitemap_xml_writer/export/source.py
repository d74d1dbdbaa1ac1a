"""Entries files — read sitemap entries from YAML, JSON or TOML.

An entries file holds a ``urls`` list (for a sitemap) or a ``sitemaps``
list (for a sitemap index).  Each item is either a bare location string
or a mapping::

    urls:
      - http://www.example.com/
      - loc: /about/
        lastmod: 2005-01-01
        changefreq: monthly
        priority: 0.8

YAML turns unquoted dates and numbers into ``date`` and ``float``
values; the entry builders accept those directly.
"""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

import yaml

from sitemap_xml_writer._errors import ConfigError, ValidationError
from sitemap_xml_writer._types import DocumentKind
from sitemap_xml_writer.entries import Sitemap, Url

# RFC 3986 scheme followed by a colon
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")

_LIST_KEYS: dict[str, str] = {"urlset": "urls", "index": "sitemaps"}

_ITEM_KEYS: dict[str, frozenset[str]] = {
    "urlset": frozenset({"loc", "lastmod", "changefreq", "priority"}),
    "index": frozenset({"loc", "lastmod"}),
}


def load_entries(
    path: Path,
    *,
    kind: DocumentKind = "urlset",
    base_url: str = "",
    check_syntax: bool = True,
) -> list[Url] | list[Sitemap]:
    """Read and validate every entry in an entries file.

    Args:
        path: ``.toml`` files are read as TOML, anything else as YAML
            (which also covers JSON).
        kind: Which list to read, and which entry type to build.
        base_url: Prefix for relative locations.
        check_syntax: Require absolute URLs (after joining *base_url*).

    Raises:
        ConfigError: The file is unreadable, the list is missing, or an
            item is malformed or invalid.  Validation errors are chained.

    """
    data = _read(path)
    list_key = _LIST_KEYS[kind]
    items = data.get(list_key)
    if not isinstance(items, list):
        msg = f"{path}: expected a {list_key!r} list"
        raise ConfigError(msg)

    entries = []
    for index, item in enumerate(items):
        try:
            entries.append(_build(item, kind, base_url, check_syntax))
        except (ValidationError, ConfigError) as exc:
            msg = f"{path}: {list_key}[{index}]: {exc}"
            raise ConfigError(msg) from exc
    return entries


def _read(path: Path) -> dict[str, object]:
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".toml":
            data = tomllib.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return data


def _build(item: object, kind: DocumentKind, base_url: str, check_syntax: bool) -> Url | Sitemap:
    if isinstance(item, str):
        item = {"loc": item}
    if not isinstance(item, dict):
        msg = f"expected a string or mapping, got {type(item).__name__}"
        raise ConfigError(msg)

    unknown = set(item) - _ITEM_KEYS[kind]
    if unknown:
        msg = f"unknown keys: {', '.join(sorted(map(str, unknown)))}"
        raise ConfigError(msg)
    if "loc" not in item:
        msg = "missing 'loc'"
        raise ConfigError(msg)

    fields = dict(item)
    fields["loc"] = _absolute(fields["loc"], base_url)
    if kind == "index":
        return Sitemap(**fields, check_syntax=check_syntax)
    return Url(**fields, check_syntax=check_syntax)


def _absolute(loc: object, base_url: str) -> object:
    """Join a relative location onto *base_url*; leave everything else alone."""
    if not base_url or not isinstance(loc, str) or not loc or _SCHEME_RE.match(loc):
        return loc
    return base_url.rstrip("/") + "/" + loc.lstrip("/")
