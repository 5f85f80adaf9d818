"""
Site generation service for p2site.

Runs the whole pipeline for one repository:

    locate -> load metadata -> (extract identity -> resolve category) per
    archive -> build document -> write site.xml

Any failure aborts the run before site.xml is touched; a repository with
one malformed feature gets no descriptor at all.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator, Iterator, List, Optional

from ..config import get_default_config
from ..domain.feature import FeatureEntry
from ..exit_codes import WriteError
from ..infra.file_store import write_atomic
from ..infra.xml_tree import MetadataDocument
from .category_resolver import resolve_category
from .feature_extractor import FeatureIdentityExtractor, get_extractor
from .metadata_loader import load_metadata
from .repository_locator import RepositoryLayout, locate_repository
from .site_builder import SiteBuilder

logger = logging.getLogger(__name__)

SITE_XML = "site.xml"


@dataclass
class GenerateOptions:
    """Options for a site.xml run."""
    repository: Path
    category: str = ""            # Overrides inferred categories when non-empty
    extractor: str = "metadata"   # "metadata" or "filename"
    dry_run: bool = False         # Build the document but do not write it

    @classmethod
    def from_config(cls, config: Dict[str, Any], **overrides) -> 'GenerateOptions':
        """Build options from a config dict, letting non-None overrides win."""
        values = {
            'repository': Path(config.get('repository_directory', 'target/repository')),
            'category': config.get('category') or "",
            'extractor': config.get('extractor') or "metadata",
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        values['repository'] = Path(values['repository'])
        return cls(**values)


@dataclass
class GenerateResult:
    """Result of a site.xml run."""
    features: List[FeatureEntry] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    metadata_source: str = "none"
    output_path: Optional[Path] = None
    document: bytes = b""

    @property
    def features_written(self) -> int:
        return len(self.features)

    @property
    def categorized(self) -> int:
        return sum(1 for f in self.features if f.category)

    @property
    def uncategorized(self) -> int:
        return self.features_written - self.categorized


class SiteService:
    """
    Service for generating p2 update-site descriptors.

    Example:
        service = SiteService()
        options = GenerateOptions(repository=Path("target/repository"))

        for progress in service.generate(options):
            print(progress)  # "Processing features/a_1.0.jar..."

        result = service.last_result
        print(f"Wrote {result.features_written} features to {result.output_path}")
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or get_default_config()
        self.last_result: Optional[GenerateResult] = None

    def generate(self, options: GenerateOptions) -> Generator[str, None, GenerateResult]:
        """
        Generate site.xml for a repository.

        Yields progress messages, returns GenerateResult.

        Raises:
            ConfigurationError: Repository layout or extractor mode invalid
            MetadataError: content.xml/content.jar unreadable
            FeatureFormatError: A feature archive has no usable identity
            WriteError: site.xml could not be written
        """
        result = GenerateResult()
        self.last_result = None

        extractor = get_extractor(options.extractor)
        layout = locate_repository(options.repository)

        builder = SiteBuilder()
        if options.category:
            yield f"Using category {options.category} for all features"
            builder.add_explicit_category(options.category)
            metadata = MetadataDocument.empty()
        else:
            yield "Loading repository metadata..."
            metadata = load_metadata(layout.root)
        result.metadata_source = metadata.source

        for entry in self.iter_features(layout, extractor, metadata, options.category):
            yield f"Processing {entry.url}..."
            builder.add_feature(entry.identity, entry.url, entry.category)

        result.features = list(builder.features)
        result.categories = builder.categories
        result.document = builder.to_bytes()

        if not options.dry_run:
            yield f"Writing {SITE_XML}..."
            result.output_path = write_site(layout.root, result.document)

        self.last_result = result
        return result

    def iter_features(
        self,
        layout: RepositoryLayout,
        extractor: FeatureIdentityExtractor,
        metadata: MetadataDocument,
        category: str = "",
    ) -> Iterator[FeatureEntry]:
        """
        Yield one FeatureEntry per archive, in archive order.

        The explicit category, when given, is used for every feature and the
        metadata is not consulted.
        """
        for archive in layout.archives:
            identity = extractor.extract(archive)
            feature_category = category or resolve_category(metadata, identity.id)
            logger.debug(f"Feature {identity.id} {identity.version} -> category {feature_category}")
            yield FeatureEntry(
                identity=identity,
                url=layout.relative_url(archive),
                category=feature_category,
            )

    def list_features(self, options: GenerateOptions) -> Iterator[FeatureEntry]:
        """Yield feature entries for a repository without building site.xml."""
        extractor = get_extractor(options.extractor)
        layout = locate_repository(options.repository)
        metadata = MetadataDocument.empty() if options.category else load_metadata(layout.root)
        yield from self.iter_features(layout, extractor, metadata, options.category)


def write_site(root: Path, data: bytes) -> Path:
    """
    Write site.xml into the repository root, replacing any existing file.

    Raises:
        WriteError: If the file cannot be written
    """
    path = root / SITE_XML
    try:
        return write_atomic(path, data)
    except OSError as e:
        raise WriteError(f"Unable to write {path}: {e}", path=str(path)) from e
