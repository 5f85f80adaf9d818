"""
Generate command for p2site.

Builds site.xml for a p2 repository from its feature archives and
content metadata.
"""

import click
import sys
from typing import Optional

from ..cli_utils import handle_errors
from ..config import load_config, configure_logging
from ..services.feature_extractor import EXTRACTORS
from ..services.site_service import SiteService, GenerateOptions, GenerateResult


@click.command('generate')
@click.argument('repository', type=click.Path(file_okay=False), required=False)
@click.option('--category', '-c', default=None,
              help='Category for every feature (overrides content.xml categories)')
@click.option('--extractor', type=click.Choice(sorted(EXTRACTORS)), default=None,
              help='Read feature identity from feature.xml (metadata) or the archive name (filename)')
@click.option('--dry-run', is_flag=True, help='Print site.xml to stdout instead of writing it')
@click.option('--pretty', is_flag=True, help='Show a summary table with rich formatting')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@handle_errors
def generate_handler(
    repository: Optional[str],
    category: Optional[str],
    extractor: Optional[str],
    dry_run: bool,
    pretty: bool,
    debug: bool,
):
    """
    Generate site.xml for a p2 repository.

    REPOSITORY is the p2 repository directory containing a features/
    directory (default: the configured repository_directory, normally
    target/repository).

    Each feature archive gets a feature entry. Features are listed under
    --category when given, otherwise under the category that requires them
    in content.xml or content.jar.

    \b
    Examples:
        p2site generate target/repository
        p2site generate target/repository --category "Main Features"
        p2site generate --extractor filename --dry-run
    """
    config = load_config()
    configure_logging(config, debug)

    options = GenerateOptions.from_config(
        config,
        repository=repository,
        category=category,
        extractor=extractor,
        dry_run=dry_run,
    )
    service = SiteService(config=config)

    if pretty:
        _generate_pretty(service, options)
    else:
        _generate_simple(service, options)

    result = service.last_result
    if options.dry_run and result is not None:
        click.echo(result.document, nl=False)


def _generate_simple(service: SiteService, options: GenerateOptions):
    """Simple text output for generate."""
    mode = "[dry run] " if options.dry_run else ""

    for progress in service.generate(options):
        print(f"{mode}{progress}", file=sys.stderr)

    result: GenerateResult = service.last_result
    print(f"\n{mode}Site generated:", file=sys.stderr)
    print(f"  Features: {result.features_written}", file=sys.stderr)
    print(f"  Categories: {len(result.categories)}", file=sys.stderr)
    print(f"  Metadata: {result.metadata_source}", file=sys.stderr)
    if result.output_path:
        print(f"\nOutput: {result.output_path}", file=sys.stderr)


def _generate_pretty(service: SiteService, options: GenerateOptions):
    """Rich formatted output for generate."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn
    from rich.table import Table

    console = Console(stderr=True)
    mode = "[bold yellow]DRY RUN[/bold yellow] " if options.dry_run else ""

    console.print(f"\n{mode}[bold]Repository:[/bold] {options.repository}\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Starting...", total=None)

        for message in service.generate(options):
            progress.update(task, description=message)

    result: GenerateResult = service.last_result

    table = Table(title=f"{mode}Features", show_header=True)
    table.add_column("Feature", style="cyan")
    table.add_column("Version")
    table.add_column("Category", style="green")

    for entry in result.features:
        table.add_row(entry.identity.id, entry.identity.version, entry.category or "-")

    console.print(table)
    console.print(f"[bold]Categories:[/bold] {', '.join(result.categories) or 'none'}")
    console.print(f"[bold]Metadata:[/bold] {result.metadata_source}")

    if result.output_path:
        console.print(f"\n[bold green]✓[/bold green] Wrote {result.output_path}")
