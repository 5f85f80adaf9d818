"""
site.xml document assembly for p2site.

The builder owns the output tree and the set of categories already
defined in it, so each category gets exactly one ``category-def`` no
matter how many features reference it.
"""

import logging
from typing import Dict, List, Optional

from lxml import etree

from ..domain.feature import FeatureEntry, FeatureIdentity

logger = logging.getLogger(__name__)


class SiteBuilder:
    """
    Incrementally builds a p2 update-site descriptor.

    Example:
        builder = SiteBuilder()
        builder.add_explicit_category("Main")
        builder.add_feature(identity, "features/a_1.0.jar", "Main")
        data = builder.to_bytes()
    """

    def __init__(self):
        self.root = etree.Element("site")
        self._defined: Dict[str, etree._Element] = {}
        self.features: List[FeatureEntry] = []

    @property
    def categories(self) -> List[str]:
        """Defined category names, in emission order."""
        return list(self._defined)

    def _define_category(self, name: str) -> etree._Element:
        category_def = etree.SubElement(self.root, "category-def")
        category_def.set("name", name)
        category_def.set("label", name)
        self._defined[name] = category_def
        logger.debug(f"Defined category {name}")
        return category_def

    def add_explicit_category(self, name: str) -> None:
        """Define the run-wide category up front."""
        self._define_category(name)

    def add_feature(self, identity: FeatureIdentity, url: str,
                    category: Optional[str] = None) -> FeatureEntry:
        """
        Append a ``feature`` element, defining its category if new.

        Args:
            identity: Feature id and version
            url: Archive path relative to the repository root
            category: Category to list the feature under, if any

        Returns:
            The FeatureEntry that was added
        """
        if category and category not in self._defined:
            self._define_category(category)

        feature = etree.SubElement(self.root, "feature")
        feature.set("url", url)
        feature.set("id", identity.id)
        feature.set("version", identity.version)
        if category:
            etree.SubElement(feature, "category").set("name", category)

        entry = FeatureEntry(identity=identity, url=url, category=category)
        self.features.append(entry)
        return entry

    def to_bytes(self) -> bytes:
        """Serialize the document as UTF-8 XML with a declaration."""
        return etree.tostring(
            self.root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )
