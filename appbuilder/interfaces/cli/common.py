"""Shared utilities for the appbuilder CLI.

This module provides:
- Formatted output helpers (error, success, info), all on stderr
- The console reporter that prints build progress and banners
- Logging setup for the command line
"""

import logging
import sys
from collections.abc import Sequence
from datetime import datetime

import typer

from appbuilder.application.reporting import BuildReporter, describe_artifact
from appbuilder.domain.build import Artifact, BuildStatus, ProjectMetadata
from appbuilder.domain.build.preamble import format_timestamp

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN), err=True)


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE), err=True)


def print_banner(msg: str, bg: str) -> None:
    """Print a full-width highlighted banner line."""
    typer.echo(typer.style(f" {msg} ", fg=typer.colors.BLACK, bg=bg), err=True)


def setup_logging(level: str) -> None:
    """Send log records to stderr, below the progress lines."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


class ConsoleReporter(BuildReporter):
    """Prints build progress to stderr with typer styles."""

    def start(self, metadata: ProjectMetadata) -> None:
        now = format_timestamp(datetime.now())
        print_banner(
            f"Start build of {metadata.name} - {metadata.version} - {now}",
            typer.colors.BRIGHT_RED,
        )

    def step(self, message: str, level: int = 0) -> None:
        if level:
            typer.echo(f"{'    ' * level}{message}", err=True)
        else:
            typer.echo("", err=True)
            print_info(message)

    def output(self, text: str) -> None:
        if text.strip():
            typer.echo(text.rstrip(), err=True)

    def finish(
        self,
        metadata: ProjectMetadata | None,
        status: BuildStatus,
        elapsed: str,
        artifacts: Sequence[Artifact] = (),
    ) -> None:
        typer.echo("", err=True)
        if status is BuildStatus.OK and metadata is not None:
            for artifact in artifacts:
                typer.echo(f"    {describe_artifact(artifact)}", err=True)
            typer.echo(typer.style(f"Time taken {elapsed} seconds", fg=typer.colors.CYAN), err=True)
            now = format_timestamp(datetime.now())
            print_banner(
                f"{metadata.name} - {metadata.version} - build {metadata.build_number} - {now}",
                typer.colors.GREEN,
            )
        else:
            print_banner(
                f"Build canceled after {elapsed} seconds - errors occurred",
                typer.colors.BRIGHT_RED,
            )
        typer.echo("", err=True)
