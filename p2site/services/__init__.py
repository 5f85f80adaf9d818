"""
Service layer for p2site.

One module per pipeline stage, coordinated by SiteService:
- repository_locator: validate the repository and list feature archives
- metadata_loader: load content.xml / content.jar
- feature_extractor: read feature id and version from archives
- category_resolver: find a feature's category in the metadata
- site_builder: assemble the site.xml tree
- site_service: run the pipeline and write site.xml
"""

from .category_resolver import resolve_category
from .feature_extractor import (
    FeatureIdentityExtractor,
    FilenameExtractor,
    MetadataExtractor,
    get_extractor,
)
from .metadata_loader import load_metadata
from .repository_locator import RepositoryLayout, locate_repository
from .site_builder import SiteBuilder
from .site_service import GenerateOptions, GenerateResult, SiteService, write_site

__all__ = [
    'resolve_category',
    'FeatureIdentityExtractor',
    'FilenameExtractor',
    'MetadataExtractor',
    'get_extractor',
    'load_metadata',
    'RepositoryLayout',
    'locate_repository',
    'SiteBuilder',
    'GenerateOptions',
    'GenerateResult',
    'SiteService',
    'write_site',
]
