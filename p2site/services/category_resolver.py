"""
Category resolution for p2site.

A feature belongs to a category when a category unit in the repository
metadata requires the feature's group unit:

    <unit id='tools.category'>
      <properties>
        <property name='org.eclipse.equinox.p2.name' value='Tools'/>
        <property name='org.eclipse.equinox.p2.type.category' value='true'/>
      </properties>
      <requires>
        <required namespace='org.eclipse.equinox.p2.iu' name='featureA.feature.group'/>
      </requires>
    </unit>
"""

import logging
from typing import Optional

from ..exit_codes import MetadataError
from ..infra.xml_tree import MetadataDocument

logger = logging.getLogger(__name__)

REQUIRED_PATH = "/repository/units/unit/requires/required[@name=$name]"
CATEGORY_TYPE_PROPERTY = "org.eclipse.equinox.p2.type.category"
NAME_PROPERTY = "org.eclipse.equinox.p2.name"

# required -> requires -> unit
UNIT_DEPTH = 2


def resolve_category(metadata: MetadataDocument, feature_id: str) -> Optional[str]:
    """
    Find the category a feature is listed under in the repository metadata.

    Matches are checked in document order and the first category unit wins.
    Units that require the feature but are not categories are skipped; the
    first category unit decides, later ones are never consulted.

    Args:
        metadata: Repository metadata document
        feature_id: Feature id (without the ``.feature.group`` suffix)

    Returns:
        Category name, or None when no category requires the feature

    Raises:
        MetadataError: If the first category unit requiring the feature has no name
    """
    group_name = f"{feature_id}.feature.group"

    for required in metadata.select(REQUIRED_PATH, name=group_name):
        unit = metadata.ancestor(required, UNIT_DEPTH)
        if unit is None:
            continue
        if metadata.property(unit, CATEGORY_TYPE_PROPERTY) != "true":
            continue

        name = metadata.property(unit, NAME_PROPERTY)
        if not name:
            raise MetadataError(
                f"Category unit {unit.get('id')} requiring {group_name} has no {NAME_PROPERTY} property",
                path=metadata.source)
        logger.debug(f"{group_name} is listed under category {name}")
        return name

    return None
