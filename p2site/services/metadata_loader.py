"""
Repository metadata loading for p2site.

p2 repositories describe their installable units in ``content.xml``, or
in the first entry of a compressed ``content.jar``. Repositories with
neither get an empty document.
"""

import logging
from pathlib import Path

from ..exit_codes import MetadataError
from ..infra.archive import ArchiveError, read_first_entry
from ..infra.xml_tree import MetadataDocument, XmlParseError, parse_xml

logger = logging.getLogger(__name__)

CONTENT_XML = "content.xml"
CONTENT_JAR = "content.jar"


def _parse(data: bytes, path: Path, source: str) -> MetadataDocument:
    try:
        return MetadataDocument(parse_xml(data), source=source)
    except XmlParseError as e:
        raise MetadataError(f"Unable to parse repository metadata {path}: {e}", path=str(path)) from e


def load_metadata(root: Path) -> MetadataDocument:
    """
    Load the repository's unit metadata.

    Tries ``content.xml`` first, then the first entry of ``content.jar``,
    and falls back to an empty document when neither file exists.

    Args:
        root: Repository root directory

    Returns:
        Parsed metadata document (possibly empty)

    Raises:
        MetadataError: If an existing metadata file cannot be read or parsed
    """
    content_xml = root / CONTENT_XML
    if content_xml.is_file():
        logger.info(f"Reading repository metadata from {content_xml}")
        try:
            data = content_xml.read_bytes()
        except OSError as e:
            raise MetadataError(f"Unable to read {content_xml}: {e}", path=str(content_xml)) from e
        return _parse(data, content_xml, CONTENT_XML)

    content_jar = root / CONTENT_JAR
    if content_jar.is_file():
        logger.info(f"Reading repository metadata from {content_jar}")
        try:
            data = read_first_entry(content_jar)
        except ArchiveError as e:
            raise MetadataError(f"Unable to read {content_jar}: {e}", path=str(content_jar)) from e
        return _parse(data, content_jar, CONTENT_JAR)

    logger.info("No content.xml or content.jar found, categories will not be inferred")
    return MetadataDocument.empty()
