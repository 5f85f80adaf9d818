"""
Features command for p2site.

Lists the features of a p2 repository as JSONL without writing site.xml.
"""

import click
from typing import Optional

from ..cli_utils import handle_errors, print_jsonl
from ..config import load_config, configure_logging
from ..services.feature_extractor import EXTRACTORS
from ..services.site_service import SiteService, GenerateOptions


@click.command('features')
@click.argument('repository', type=click.Path(file_okay=False), required=False)
@click.option('--category', '-c', default=None, help='Category for every feature')
@click.option('--extractor', type=click.Choice(sorted(EXTRACTORS)), default=None,
              help='Read feature identity from feature.xml (metadata) or the archive name (filename)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@handle_errors
def features_handler(
    repository: Optional[str],
    category: Optional[str],
    extractor: Optional[str],
    debug: bool,
):
    """
    List feature archives with their id, version, url and category.

    Outputs one JSON object per line:

    \b
        {"id": "featureA", "version": "1.0.0", "url": "features/featureA_1.0.0.jar", "category": "Tools"}
    """
    config = load_config()
    configure_logging(config, debug)

    options = GenerateOptions.from_config(
        config,
        repository=repository,
        category=category,
        extractor=extractor,
    )

    for entry in SiteService(config=config).list_features(options):
        print_jsonl(entry.to_dict())
