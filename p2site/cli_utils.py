"""
Common CLI utilities and decorators for consistent command behavior.
"""

import json
import logging
import sys
import click
from functools import wraps

from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)

logger = logging.getLogger(__name__)


def handle_errors(func):
    """
    Decorator that turns failures into an error message and exit code:
    - CommandError subclasses exit with their own code
    - Click exceptions keep Click's handling
    - Ctrl+C exits with 130
    - Anything else exits with the code mapped for its type
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except CommandError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            click.echo(f"Error: command failed: {e}", err=True)
            sys.exit(get_exit_code_for_exception(e))
        sys.exit(SUCCESS)

    return wrapper


def print_jsonl(item: dict):
    """Print one JSON object per line on stdout."""
    print(json.dumps(item, ensure_ascii=False), flush=True)
