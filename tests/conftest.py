"""
Shared fixtures for p2site tests.

Repositories, feature archives and content metadata are built on the fly
under tmp_path.
"""

import logging
import os
import zipfile
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import pytest


FEATURE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feature id="{id}" label="{id} label" version="{version}" provider-name="Example">
  <plugin id="{id}.core" version="{version}"/>
</feature>
"""


def feature_xml(feature_id: str, version: str) -> bytes:
    return FEATURE_XML.format(id=feature_id, version=version).encode("utf-8")


def make_jar(path: Path, entries: Iterable[Tuple[str, bytes]]) -> Path:
    """Write a zip archive with entries in the given order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries:
            zf.writestr(name, data)
    return path


def unit_xml(unit_id: str, requires: Iterable[str] = (), properties: Optional[Dict[str, str]] = None) -> str:
    props = "".join(
        f"<property name='{name}' value='{value}'/>" for name, value in (properties or {}).items()
    )
    reqs = "".join(
        f"<required namespace='org.eclipse.equinox.p2.iu' name='{name}' range='0.0.0'/>"
        for name in requires
    )
    return (
        f"<unit id='{unit_id}' version='1.0.0'>"
        f"<properties size='{len(properties or {})}'>{props}</properties>"
        f"<requires>{reqs}</requires>"
        f"</unit>"
    )


def category_unit(unit_id: str, name: str, requires: Iterable[str]) -> str:
    return unit_xml(unit_id, requires, {
        "org.eclipse.equinox.p2.name": name,
        "org.eclipse.equinox.p2.type.category": "true",
    })


def content_xml(*units: str) -> bytes:
    return (
        "<?xml version='1.0' encoding='UTF-8'?>"
        "<?metadataRepository version='1.1.0'?>"
        "<repository name='test' type='org.eclipse.equinox.internal.p2.metadata.repository.LocalMetadataRepository' version='1'>"
        f"<units size='{len(units)}'>{''.join(units)}</units>"
        "</repository>"
    ).encode("utf-8")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("P2SITE_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def repository(tmp_path):
    """Empty p2 repository with a features directory."""
    root = tmp_path / "repository"
    (root / "features").mkdir(parents=True)
    return root


@pytest.fixture
def add_feature(repository):
    """Factory adding a feature archive with a packaged feature.xml."""
    def _add(feature_id: str, version: str, filename: Optional[str] = None) -> Path:
        name = filename or f"{feature_id}_{version}.jar"
        return make_jar(repository / "features" / name, [
            ("META-INF/MANIFEST.MF", b"Manifest-Version: 1.0\n"),
            ("feature.xml", feature_xml(feature_id, version)),
            ("feature.properties", b"label=x\n"),
        ])
    return _add


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop stream handlers installed by CLI runs once a test ends."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
