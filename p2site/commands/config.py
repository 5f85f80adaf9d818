import click
import json

from ..cli_utils import handle_errors
from ..config import load_config, get_config_path


@click.group("config")
def config_cmd():
    """Configuration commands."""
    pass


@config_cmd.command("show")
@click.option("--pretty", is_flag=True, help="Display as formatted JSON instead of single-line JSONL")
@handle_errors
def show_config(pretty):
    """Show the current configuration with file and environment overrides applied."""
    config = load_config()

    if pretty:
        print(json.dumps(config, indent=2, ensure_ascii=False))
    else:
        print(json.dumps(config, ensure_ascii=False))


@config_cmd.command("path")
@handle_errors
def config_path():
    """Show the config file path being used."""
    path = get_config_path()
    print(json.dumps({"config_path": str(path), "exists": path.exists()}))
