"""
Repository discovery for p2site.

Validates a p2 repository directory and lists the feature archives
under its ``features`` directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..exit_codes import ConfigurationError

logger = logging.getLogger(__name__)

FEATURES_DIR = "features"
ARCHIVE_SUFFIX = ".jar"


@dataclass
class RepositoryLayout:
    """A validated repository root and its candidate feature archives."""
    root: Path
    archives: List[Path] = field(default_factory=list)

    def relative_url(self, archive: Path) -> str:
        """Archive path relative to the root, forward-slash separated."""
        return archive.relative_to(self.root).as_posix()


def is_feature_archive(path: Path) -> bool:
    """Check whether a path is an eligible feature archive (``*.jar``, any case)."""
    return path.is_file() and path.name.lower().endswith(ARCHIVE_SUFFIX)


def locate_repository(path: Union[str, Path]) -> RepositoryLayout:
    """
    Validate a repository directory and list its feature archives.

    Archives are returned sorted by file name so repeated runs over an
    unchanged repository see them in the same order.

    Args:
        path: Repository root directory

    Returns:
        RepositoryLayout with the resolved root and archive paths

    Raises:
        ConfigurationError: If the root or its features directory is missing
    """
    root = Path(path).expanduser()
    logger.info(f"Looking at {root}")

    if not root.is_dir():
        raise ConfigurationError(f"Repository directory does not exist: {root}")

    root = root.resolve()
    features = root / FEATURES_DIR
    if not features.is_dir():
        raise ConfigurationError(f"Unable to find features directory: {features}")

    archives = sorted(
        (p for p in features.iterdir() if is_feature_archive(p)),
        key=lambda p: p.name,
    )
    logger.info(f"Found {len(archives)} feature archive(s) in {features}")
    return RepositoryLayout(root=root, archives=archives)
