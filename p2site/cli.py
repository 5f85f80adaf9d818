#!/usr/bin/env python3

import click

from p2site.commands.generate import generate_handler
from p2site.commands.features import features_handler
from p2site.commands.config import config_cmd


@click.group()
@click.version_option(package_name='p2site')
def cli():
    """p2site - Generate p2 update-site descriptors (site.xml).

    Reads the feature archives of a p2 repository and its content.xml or
    content.jar, and writes a site.xml listing every feature and category.
    """
    pass


cli.add_command(generate_handler, name='generate')
cli.add_command(features_handler, name='features')
cli.add_command(config_cmd)


def main():
    cli()

if __name__ == "__main__":
    main()
