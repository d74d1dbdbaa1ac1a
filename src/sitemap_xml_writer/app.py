"""Build orchestration — config + entries file -> sitemap file.

Two entry points, shared by the CLI and by scripts::

    build("urls.yaml")                 # write sitemap.xml
    build("parts.yaml", kind="index")  # write a sitemap index
    check("urls.yaml")                 # validate only
"""

from __future__ import annotations

import sys
from pathlib import Path

from sitemap_xml_writer.config_loader import load_config
from sitemap_xml_writer.export.files import WrittenFile, write_sitemap, write_sitemap_index
from sitemap_xml_writer.export.source import load_entries
from sitemap_xml_writer.observability.log import EventLog


def build(source: str | Path, root: str | Path = ".", **overrides: object) -> WrittenFile:
    """Validate every entry in *source* and write the document.

    Args:
        source: Entries file (YAML, JSON or TOML).
        root: Directory holding the optional sitemap.yaml / sitemap.toml.
        **overrides: SitemapConfig fields that take precedence over the file.

    Raises:
        SitemapError: Configuration, validation or output failure.

    """
    config = load_config(Path(root), **overrides)
    entries = load_entries(
        Path(source),
        kind=config.kind,
        base_url=config.base_url,
        check_syntax=config.check_url_syntax,
    )

    event_log = EventLog()
    output = config.output_path
    output.parent.mkdir(parents=True, exist_ok=True)
    if config.kind == "index":
        result = write_sitemap_index(entries, output, indent=config.indent, event_log=event_log)  # type: ignore[arg-type]
    else:
        result = write_sitemap(entries, output, indent=config.indent, event_log=event_log)  # type: ignore[arg-type]

    _print_build_summary(result, event_log)
    return result


def check(source: str | Path, root: str | Path = ".", **overrides: object) -> int:
    """Validate every entry in *source* without writing anything.

    Returns:
        Number of valid entries.

    Raises:
        SitemapError: Configuration or validation failure.

    """
    config = load_config(Path(root), **overrides)
    entries = load_entries(
        Path(source),
        kind=config.kind,
        base_url=config.base_url,
        check_syntax=config.check_url_syntax,
    )
    count = len(entries)
    print(f"  {count} entr{'ies' if count != 1 else 'y'} OK in {source}", file=sys.stderr)
    return count


def _print_build_summary(result: WrittenFile, event_log: EventLog) -> None:
    """Print build completion summary to stderr."""
    noun = "sitemap" if result.kind == "index" else "URL"
    largest_loc = event_log.totals(result.kind).largest_entry_loc
    lines = [
        "",
        "─" * 41,
        f"  Wrote {result.entries} {noun}{'s' if result.entries != 1 else ''}",
        f"  Output: {result.output_path} ({result.size_bytes} bytes)",
        f"  Largest entry: {result.largest_entry_bytes} bytes"
        + (f" ({largest_loc})" if largest_loc else ""),
        f"  Done in {result.duration_ms:.0f}ms",
    ]
    print("\n".join(lines), file=sys.stderr)
