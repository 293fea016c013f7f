#!/usr/bin/env python3
"""
Main CLI Entry Point for the Cash Drawer Reconciler

Provides the `cashdrawer` command group; drawer commands live in
`cashdrawer.cli.drawer`.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Cash Drawer Reconciler - end-of-shift cash counting.

    Enter bills, coins, channel amounts and expenses, then see the totals
    and which pieces go into the envelope. Entries are kept for an hour
    between commands.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["CASHDRAWER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("cashdrawer").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = reload_config() if config_env else get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")


@main.command()
def version() -> None:
    """Show version information."""
    from cashdrawer import __author__, __version__

    click.echo(f"Cash Drawer Reconciler v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    click.echo("Current Configuration:")
    for name, value in ctx.obj["config"].to_dict().items():
        if isinstance(value, dict):
            click.echo(f"  {_setting_label(name)}:")
            for sub_name, sub_value in value.items():
                click.echo(f"    {_setting_label(sub_name)}: {sub_value}")
        else:
            click.echo(f"  {_setting_label(name)}: {value}")


def _setting_label(name: str) -> str:
    return name.replace("_", " ").title()


from .drawer import register_drawer_commands  # noqa: E402

register_drawer_commands(main)


if __name__ == "__main__":
    main()
