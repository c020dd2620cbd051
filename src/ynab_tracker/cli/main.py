#!/usr/bin/env python3
"""
Main CLI Entry Point for the YNAB Price Tracker

Provides unified command-line interface for all tracker tools.
"""

import logging
import os

import click

from ..core.config import get_config


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
    YNAB Price Tracker

    Keeps YNAB transaction amounts in step with market prices for the
    instruments named in their memos (e.g. "$AAPL 2.5$").
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["TRACKER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("ynab_tracker").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    try:
        ctx.obj["config"] = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from ynab_tracker import __author__, __version__

    click.echo(f"YNAB Price Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  State File: {config_obj.tracker.state_file}")
    click.echo(f"  YNAB API: {config_obj.ynab.base_url}")
    click.echo(f"  YNAB Token: {'configured' if config_obj.ynab.api_token else 'not set'}")
    click.echo(f"  Quotes API: {config_obj.quotes.base_url}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .tracker import tracker  # noqa: E402

main.add_command(tracker)


if __name__ == "__main__":
    main()
