"""Output formatting utilities for CLI commands."""

import sys
from typing import NoReturn

import click

from hydration_service.core.exceptions import AppException


def success(message: str) -> None:
    """Print a success message in green."""
    click.secho(f"✓ {message}", fg="green")


def error(message: str) -> None:
    """Print an error message in red."""
    click.secho(f"✗ {message}", fg="red", err=True)


def warning(message: str) -> None:
    """Print a warning message in yellow."""
    click.secho(f"⚠ {message}", fg="yellow")


def info(message: str) -> None:
    """Print an info message in blue."""
    click.secho(f"ℹ {message}", fg="blue")


def header(message: str) -> None:
    """Print a header message in cyan bold."""
    click.secho(f"\n{message}", fg="cyan", bold=True)


def fail(exc: AppException) -> NoReturn:
    """Print an application error and exit with its exit code."""
    error(f"{exc.title}: {exc.detail}")
    sys.exit(exc.exit_code)
