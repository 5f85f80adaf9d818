"""
Feature identity extraction for p2site.

Two interchangeable strategies read a feature's id and version:
- MetadataExtractor: reads the ``feature.xml`` packaged inside the archive
- FilenameExtractor: parses ``<id>_<version>.jar`` archive names

Both raise FeatureFormatError when an archive carries no usable identity.
"""

import logging
import re
from abc import ABC, abstractmethod
from contextlib import closing
from pathlib import Path
from typing import Dict, Type

from ..domain.feature import FeatureIdentity
from ..exit_codes import ConfigurationError, FeatureFormatError
from ..infra.archive import ArchiveError, iter_entries
from ..infra.xml_tree import XmlParseError, parse_xml

logger = logging.getLogger(__name__)

FEATURE_XML = "feature.xml"

# id has no underscore; version runs up to the final extension separator
FILENAME_PATTERN = re.compile(r'^(?P<id>[^_]+)_(?P<version>.+)\.[^.]+$')


class FeatureIdentityExtractor(ABC):
    """Reads a FeatureIdentity out of a feature archive."""

    name: str = ""

    @abstractmethod
    def extract(self, archive: Path) -> FeatureIdentity:
        """
        Extract the identity of one feature archive.

        Raises:
            FeatureFormatError: If the archive has no usable identity
        """


class MetadataExtractor(FeatureIdentityExtractor):
    """Reads ``id`` and ``version`` off the root of the packaged feature.xml."""

    name = "metadata"

    def extract(self, archive: Path) -> FeatureIdentity:
        try:
            with closing(iter_entries(archive)) as entries:
                for entry in entries:
                    if entry.name == FEATURE_XML:
                        return self._identity_from(entry.read(), archive)
        except ArchiveError as e:
            raise FeatureFormatError(f"Unable to read feature archive {archive}: {e}",
                                     archive=str(archive)) from e

        raise FeatureFormatError(f"No {FEATURE_XML} found in {archive}", archive=str(archive))

    @staticmethod
    def _identity_from(data: bytes, archive: Path) -> FeatureIdentity:
        try:
            root = parse_xml(data)
        except XmlParseError as e:
            raise FeatureFormatError(f"Unable to parse {FEATURE_XML} in {archive}: {e}",
                                     archive=str(archive)) from e

        feature_id = root.get("id", "")
        version = root.get("version", "")
        if not feature_id or not version:
            raise FeatureFormatError(
                f"{FEATURE_XML} in {archive} is missing its id or version attribute",
                archive=str(archive))
        return FeatureIdentity(id=feature_id, version=version)


class FilenameExtractor(FeatureIdentityExtractor):
    """Parses ``<id>_<version>.<ext>`` archive file names."""

    name = "filename"

    def extract(self, archive: Path) -> FeatureIdentity:
        match = FILENAME_PATTERN.match(archive.name)
        if not match:
            raise FeatureFormatError(
                f"Feature archive name {archive.name} does not match <id>_<version>.jar",
                archive=str(archive))
        return FeatureIdentity(id=match.group('id'), version=match.group('version'))


EXTRACTORS: Dict[str, Type[FeatureIdentityExtractor]] = {
    MetadataExtractor.name: MetadataExtractor,
    FilenameExtractor.name: FilenameExtractor,
}


def get_extractor(mode: str) -> FeatureIdentityExtractor:
    """
    Get the extractor for a configured mode.

    Args:
        mode: "metadata" or "filename"

    Raises:
        ConfigurationError: If the mode is unknown
    """
    try:
        return EXTRACTORS[mode]()
    except KeyError:
        choices = ", ".join(sorted(EXTRACTORS))
        raise ConfigurationError(f"Unknown extractor '{mode}' (expected one of: {choices})") from None
