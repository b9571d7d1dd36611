"""CLI interface for appbuilder using Typer.

Usage:
    appbuilder --type=debug      # build the tasks whose type is "debug"
    appbuilder --type=release    # build release tasks, CSS cleaned up

The command takes no other arguments. File locations and tool options come
from ``APPBUILDER_*`` environment variables (see ``appbuilder.settings``).

The CLI is structured as:
- app: Typer application with the single build command
- common.py: Output helpers, console reporter, logging setup
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer
from pydantic import ValidationError

from appbuilder import __version__
from appbuilder.application import BuildRunController
from appbuilder.infrastructure.tools import (
    ESLintRunner,
    RollupBundler,
    StyleLintRunner,
    TerserMinifier,
)
from appbuilder.interfaces.cli.common import ConsoleReporter, print_error, setup_logging
from appbuilder.settings import BuildSettings

app = typer.Typer(
    name="appbuilder",
    help="Lint, bundle, minify and post-process a web app from AppBuilder.json",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"appbuilder version {__version__}")
        raise typer.Exit()


def create_controller(settings: BuildSettings, build_type: str | None) -> BuildRunController:
    """Wire the controller to the node tools named in ``settings``."""
    runner = settings.node_runner
    return BuildRunController(
        settings,
        build_type,
        js_linter=ESLintRunner(runner=runner),
        style_linter=StyleLintRunner(runner=runner, config=settings.stylelint_config),
        bundler=RollupBundler(runner=runner),
        minifier=TerserMinifier(runner=runner, ecma=settings.ecma),
        reporter=ConsoleReporter(),
    )


@app.command()
def build(
    build_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Build type; only tasks of this type run (e.g. debug, release)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Run every task of the selected build type, stopping at the first error."""
    try:
        settings = BuildSettings()
    except ValidationError as e:
        print_error(f"Invalid APPBUILDER_* settings: {e}")
        raise typer.Exit(1)

    setup_logging(settings.log_level)
    status = create_controller(settings, build_type).run()
    raise typer.Exit(status)


__all__ = ["app", "create_controller"]
