"""
Infrastructure layer for p2site.

Thin wrappers around external libraries:
- xml_tree: lxml parsing, path queries and the read-only MetadataDocument
- archive: sequential entry reading over zip archives
- file_store: atomic file writes
"""

from .xml_tree import MetadataDocument, parse_xml, XmlParseError
from .archive import ArchiveEntry, ArchiveError, iter_entries, read_first_entry
from .file_store import write_atomic

__all__ = [
    'MetadataDocument',
    'parse_xml',
    'XmlParseError',
    'ArchiveEntry',
    'ArchiveError',
    'iter_entries',
    'read_first_entry',
    'write_atomic',
]
