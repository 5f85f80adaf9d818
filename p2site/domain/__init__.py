"""
Domain layer for p2site.

Contains pure domain objects with no I/O or side effects:
- FeatureIdentity: id and version of one packaged feature
- FeatureEntry: a feature placed in the site, with its url and category
"""

from .feature import FeatureIdentity, FeatureEntry

__all__ = [
    'FeatureIdentity',
    'FeatureEntry',
]
