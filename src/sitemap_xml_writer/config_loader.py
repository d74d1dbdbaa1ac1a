"""Load SitemapConfig from sitemap.yaml or sitemap.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from sitemap_xml_writer._errors import ConfigError
from sitemap_xml_writer.config import SitemapConfig

_KEYS = frozenset({"output", "kind", "indent", "check_url_syntax", "base_url"})


def load_config(root: Path, **overrides: object) -> SitemapConfig:
    """Load SitemapConfig from root, optionally merging sitemap.yaml.

    Looks for sitemap.yaml, sitemap.yml, or sitemap.toml in root. If
    found, loads and merges with overrides. Overrides take precedence;
    an override of ``None`` means "not given" and is ignored.

    Raises:
        ConfigError: A config file exists but cannot be parsed.

    """
    file_config = _read_sitemap_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if isinstance(merged.get("output"), str):
        merged["output"] = Path(merged["output"])
    return SitemapConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_sitemap_config(root: Path) -> dict[str, object]:
    """Read sitemap config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("sitemap.yaml", "sitemap.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "sitemap.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_sitemap_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sitemap_section(data)


def _flatten_sitemap_section(data: dict[str, object]) -> dict[str, object]:
    """Extract sitemap.* keys (or known top-level keys) into one flat dict."""
    result: dict[str, object] = {}
    section = data.get("sitemap")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _KEYS:
                result[k] = v
    for k, v in data.items():
        if k != "sitemap" and k in _KEYS:
            result[k] = v
    return result
