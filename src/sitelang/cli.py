"""CLI interface for sitelang.

Command-line tool for resolving language-equivalent paths and serving the
language context API.
"""

import json
import logging
import sys
from pathlib import Path

import click

from sitelang.config import Config
from sitelang.core.articles import Article, load_articles
from sitelang.core.context import assemble_language_context
from sitelang.core.detection import PageDetectionManager


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (show detection and mapping diagnostics)",
)
def cli(verbose: bool) -> None:
    """sitelang - Cross-language URL resolution for multilingual sites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover sitelang.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--content",
    "articles_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Content listing TOML file (overrides config)",
)
@click.option(
    "--env",
    "environment",
    default=None,
    help="Environment name, 'production' silences tag fallback warnings",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    articles_file: Path | None,
    environment: str | None,
) -> None:
    """Start the language context server."""
    from sitelang.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        articles_file=articles_file,
        environment=environment,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Languages: {', '.join(lang.code for lang in config.i18n.languages)}")
    if config.content.articles_file:
        click.echo(f"Content listing: {config.content.articles_file}")
    else:
        click.echo("Content listing: none (article translations disabled)")

    run_server(config)


@cli.command()
@click.argument("path")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover sitelang.toml)",
)
@click.option(
    "--content",
    "articles_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Content listing TOML file (overrides config)",
)
def resolve(path: str, config_path: Path | None, articles_file: Path | None) -> None:
    """Print the language context of PATH as JSON."""
    config = _load_config(config_path).with_overrides(articles_file=articles_file)
    manager = PageDetectionManager.create(config.to_settings())

    try:
        articles = _load_articles(config)
        context = assemble_language_context(manager, path, articles)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(context.to_dict(config.site.base_url), indent=2, ensure_ascii=False))


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, exiting with a message when invalid."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _load_articles(config: Config) -> list[Article] | None:
    if config.content.articles_file is None:
        return None
    return load_articles(config.content.articles_file)


if __name__ == "__main__":
    cli()
