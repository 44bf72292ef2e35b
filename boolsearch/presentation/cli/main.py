"""
Command line entry point.

Wires configuration, logging and the selected driver into the search,
index, delete and ping commands.
"""

import sys
from typing import Optional, Tuple

import click

from .commands.search_commands import build_commands
from .formatters.output_formatter import OutputFormatter
from ...application.services.search_application_service import SearchApplicationService
from ...infrastructure.config import ConfigManager
from ...infrastructure.drivers import DriverFactory, SUPPORTED_DRIVERS
from ...shared.logging import LogLevel, configure_logging


@click.group()
@click.option("--config-dir", default="config", show_default=True,
              help="Directory holding base.yaml and <env>.yaml.")
@click.option("--env", "environment", default=None,
              help="Configuration environment (defaults to $APP_ENV).")
@click.option("--driver", type=click.Choice(SUPPORTED_DRIVERS), default=None,
              help="Override the configured search driver.")
@click.option("--plain", is_flag=True, help="Plain text output instead of rich.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_dir: str,
    environment: Optional[str],
    driver: Optional[str],
    plain: bool
) -> None:
    """Compose and run boolean search queries."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("formatter", OutputFormatter(use_rich=not plain))
    if "service" in ctx.obj:
        return

    try:
        config = ConfigManager(config_dir, environment).load_config()
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e))

    configure_logging(
        level=LogLevel(config.get_log_level()),
        output=sys.stderr,
        json_format=config.get_log_format() == "json",
        log_file=config.get_log_file()
    )

    factory = DriverFactory(config)
    ctx.call_on_close(factory.close)
    ctx.obj["service"] = SearchApplicationService(
        factory.create_driver(driver),
        default_per_page=config.get_default_per_page(),
        max_per_page=config.get_max_per_page()
    )


def _run(ctx: click.Context, name: str, **kwargs) -> None:
    commands = build_commands(ctx.obj["formatter"], ctx.obj["service"])
    result = commands[name].execute(**kwargs)
    if not result.success:
        ctx.exit(1)


@cli.command()
@click.argument("types", nargs=-1)
@click.option("--must", multiple=True, metavar="DIRECTIVE", help="Directive for the must bucket.")
@click.option("--should", multiple=True, metavar="DIRECTIVE", help="Directive for the should bucket.")
@click.option("--must-not", multiple=True, metavar="DIRECTIVE", help="Directive for the must_not bucket.")
@click.option("--page", type=int, default=None, help="Page number.")
@click.option("--per-page", type=int, default=None, help="Results per page.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
@click.pass_context
def search(
    ctx: click.Context,
    types: Tuple[str, ...],
    must: Tuple[str, ...],
    should: Tuple[str, ...],
    must_not: Tuple[str, ...],
    page: Optional[int],
    per_page: Optional[int],
    as_json: bool
) -> None:
    """Search TYPES with directives such as match:title=python."""
    _run(
        ctx, "search",
        types=types,
        must=must,
        should=should,
        must_not=must_not,
        page=page,
        per_page=per_page,
        as_json=as_json
    )


@cli.command()
@click.argument("type")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--id-field", default="id", show_default=True, help="Column holding document ids.")
@click.pass_context
def index(ctx: click.Context, type: str, path: str, id_field: str) -> None:
    """Index the documents in PATH as TYPE."""
    _run(ctx, "index", type=type, path=path, id_field=id_field)


@cli.command()
@click.argument("type")
@click.argument("id")
@click.pass_context
def delete(ctx: click.Context, type: str, id: str) -> None:
    """Delete document ID of TYPE."""
    _run(ctx, "delete", type=type, id=id)


@cli.command()
@click.pass_context
def ping(ctx: click.Context) -> None:
    """Check the search backend connection."""
    _run(ctx, "ping")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
