"""
Archive infrastructure for p2site.

Feature archives and content.jar are plain zip files. Entries are read
sequentially: iter_entries yields entries lazily and can only be consumed
once; reopen the archive to scan again.
"""

import logging
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

_READ_ERRORS = (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, EOFError, zlib.error)


class ArchiveError(Exception):
    """Raised when an archive or one of its entries cannot be read."""


@dataclass
class ArchiveEntry:
    """One entry of an open archive; only valid while the archive is open."""
    name: str
    _archive: zipfile.ZipFile
    _info: zipfile.ZipInfo

    def read(self) -> bytes:
        """Read the entry's uncompressed bytes."""
        try:
            return self._archive.read(self._info)
        except (RuntimeError, NotImplementedError, *_READ_ERRORS) as e:
            raise ArchiveError(f"Cannot read entry {self.name}: {e}") from e


def iter_entries(path: Path) -> Iterator[ArchiveEntry]:
    """
    Yield the entries of a zip archive in stored order.

    Order follows the central directory, which matches the local-header
    order of archives written by jar tools and zipfile.

    The archive is closed when the generator is exhausted or closed, so
    consumers that stop early should wrap it in ``contextlib.closing``.

    Raises:
        ArchiveError: If the file is not a readable zip archive
    """
    try:
        archive = zipfile.ZipFile(path)
    except _READ_ERRORS as e:
        raise ArchiveError(f"Cannot open archive {path}: {e}") from e

    with archive:
        for info in archive.infolist():
            yield ArchiveEntry(info.filename, archive, info)


def read_first_entry(path: Path) -> bytes:
    """
    Read the bytes of the first entry of a zip archive, whatever its name.

    Raises:
        ArchiveError: If the archive is unreadable or has no entries
    """
    entries = iter_entries(path)
    try:
        first = next(entries, None)
        if first is None:
            raise ArchiveError(f"Archive {path} has no entries")
        logger.debug(f"Reading first entry {first.name} of {path}")
        return first.read()
    finally:
        entries.close()
