"""Export layer — entries files in, sitemap files out.

Reads entries from YAML/JSON/TOML files and streams them into
``sitemap.xml`` or sitemap index files on disk.
"""

from sitemap_xml_writer.export.files import WrittenFile, write_sitemap, write_sitemap_index
from sitemap_xml_writer.export.source import load_entries

__all__ = ["WrittenFile", "load_entries", "write_sitemap", "write_sitemap_index"]
