from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import yaml
from loguru import logger

from wei_amounts.core.codec import format_amount, parse_amount
from wei_amounts.core.config import get_log_level, load_config
from wei_amounts.core.documents import normalize_document
from wei_amounts.core.errors import WeiAmountError
from wei_amounts.core.units import UNIT_ALIASES, from_wei


@click.group(name="wei-amounts", help="Parse and format wei amounts.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a JSON config file (defaults to config.json at the project root).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Overrides logging.level from config.",
)
def cli(config_path: Path | None, log_level: str | None) -> None:
    if config_path is not None:
        load_config(config_path, require_exists=True)
    logger.remove()
    logger.add(sys.stderr, level=(log_level or get_log_level()).upper())


@cli.command(name="parse", help="Print each VALUE as a canonical wei string.")
@click.argument("values", nargs=-1, required=True)
def parse_cmd(values: tuple[str, ...]) -> None:
    for value in values:
        try:
            wei = parse_amount(value)
        except WeiAmountError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(format_amount(wei))


@cli.command(name="format", help="Render a wei VALUE in another unit.")
@click.argument("value")
@click.option(
    "--unit",
    type=click.Choice(sorted(UNIT_ALIASES), case_sensitive=False),
    default="wei",
    show_default=True,
)
def format_cmd(value: str, unit: str) -> None:
    try:
        click.echo(from_wei(parse_amount(value), unit))
    except WeiAmountError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command(name="normalize", help="Rewrite amount fields of a JSON/YAML document.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--field",
    "fields",
    multiple=True,
    help="Amount field name (repeatable). Defaults to amounts.fields from config.",
)
@click.option(
    "--output",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
)
def normalize_cmd(path: Path, fields: tuple[str, ...], output: str) -> None:
    try:
        data = normalize_document(path, fields or None)
    except WeiAmountError as exc:
        notes = " ".join(getattr(exc, "__notes__", []))
        raise click.ClickException(f"{exc} {notes}".strip()) from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Cannot parse {path}: {exc}") from exc
    except OSError as exc:
        raise click.ClickException(f"Cannot read {path}: {exc}") from exc
    if output == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(data, indent=2))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
