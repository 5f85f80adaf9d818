"""
p2site - Generate p2 update-site descriptors.

Builds a site.xml for a p2 repository directory from the feature archives
under ``features/`` and the categories recorded in ``content.xml`` or
``content.jar``.

Quick Start:
    from pathlib import Path
    from p2site import SiteService, GenerateOptions

    service = SiteService()
    options = GenerateOptions(repository=Path("target/repository"))
    for message in service.generate(options):
        print(message)

    result = service.last_result
    print(result.output_path, result.features_written)

Pipeline:
    locate_repository - validate the repository and list feature archives
    load_metadata     - content.xml, else content.jar, else empty
    get_extractor     - "metadata" (feature.xml) or "filename" identities
    resolve_category  - category unit requiring <id>.feature.group
    SiteBuilder       - site.xml tree with deduplicated category-defs
    write_site        - write <repository>/site.xml
"""

__version__ = "0.1.0"

from .domain import FeatureIdentity, FeatureEntry

from .services import (
    SiteService,
    GenerateOptions,
    GenerateResult,
    SiteBuilder,
    get_extractor,
    load_metadata,
    locate_repository,
    resolve_category,
    write_site,
)

from .exit_codes import (
    SiteError,
    ConfigurationError,
    MetadataError,
    FeatureFormatError,
    WriteError,
)

from .config import load_config

__all__ = [
    "__version__",
    "FeatureIdentity",
    "FeatureEntry",
    "SiteService",
    "GenerateOptions",
    "GenerateResult",
    "SiteBuilder",
    "get_extractor",
    "load_metadata",
    "locate_repository",
    "resolve_category",
    "write_site",
    "SiteError",
    "ConfigurationError",
    "MetadataError",
    "FeatureFormatError",
    "WriteError",
    "load_config",
]
