"""
Feature domain objects for p2site.

A feature is a named, versioned archive under a repository's ``features``
directory. Identities are immutable value objects; entries add the
placement details that end up in site.xml.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FeatureIdentity:
    """
    Identity of one feature archive.

    Attributes:
        id: Feature id (e.g., "org.example.tools")
        version: Feature version (e.g., "1.0.0.202401011200")
    """

    id: str
    version: str

    def __post_init__(self):
        if not self.id or not self.version:
            raise ValueError(f"Feature identity needs id and version, got {self.id!r}/{self.version!r}")

    def __str__(self) -> str:
        return f"{self.id}_{self.version}"


@dataclass(frozen=True)
class FeatureEntry:
    """
    A feature as listed in site.xml.

    Attributes:
        identity: Feature id and version
        url: Archive path relative to the repository root, forward-slash form
        category: Category name the feature is listed under, if any
    """

    identity: FeatureIdentity
    url: str
    category: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.identity.id,
            'version': self.identity.version,
            'url': self.url,
            'category': self.category,
        }
