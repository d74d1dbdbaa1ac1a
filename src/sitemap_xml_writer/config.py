"""sitemap-xml-writer configuration.

SitemapConfig drives the command-line build, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from sitemap_xml_writer._errors import ConfigError
from sitemap_xml_writer._types import DocumentKind

_KINDS: frozenset[str] = frozenset({"urlset", "index"})

_FIELD_TYPES: dict[str, type] = {
    "root": Path,
    "output": Path,
    "kind": str,
    "indent": bool,
    "check_url_syntax": bool,
    "base_url": str,
}


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Configuration for one sitemap build.

    Attributes:
        root: Directory holding the config file; relative paths resolve
              against it.  Always resolved to an absolute path on construction.
        output: Output file for the generated document.
        kind: ``"urlset"`` for a sitemap, ``"index"`` for a sitemap index.
        indent: Write one element per line, indented.
        check_url_syntax: Require every ``loc`` to be an absolute URL.
        base_url: Prefix joined to relative ``loc`` values in entry files.

    """

    root: Path = field(default_factory=Path.cwd)
    output: Path = field(default_factory=lambda: Path("sitemap.xml"))
    kind: DocumentKind = "urlset"
    indent: bool = False
    check_url_syntax: bool = True
    base_url: str = ""

    def __post_init__(self) -> None:
        # Values may come straight from a YAML or TOML file
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if not isinstance(value, expected):
                msg = (
                    f"{name} must be a {expected.__name__}, "
                    f"got {type(value).__name__} {value!r}"
                )
                raise ConfigError(msg)
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if self.kind not in _KINDS:
            msg = f"kind must be 'urlset' or 'index', got {self.kind!r}"
            raise ConfigError(msg)

    @property
    def output_path(self) -> Path:
        """Absolute path to the output file."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
