"""Output helpers shared by all commands."""

import json
from typing import Any, Callable, Optional

import click


def output_status(message: str, json_output: bool):
    """Print a progress message; suppressed in JSON mode so stdout stays parseable."""
    if not json_output:
        click.echo(message, err=True)


def output_result(result: Any, json_output: bool, cli_formatter: Optional[Callable[[Any], str]] = None,
                  success_message: Optional[str] = None):
    """Print a command result as JSON or through a CLI formatter."""
    if json_output:
        click.echo(json.dumps(result, indent=2, default=str))
        return

    if success_message:
        click.secho(success_message, fg='green', bold=True)

    if cli_formatter:
        click.echo(cli_formatter(result))
    else:
        click.echo(json.dumps(result, indent=2, default=str))


def output_error(error: Exception, json_output: bool, error_type: str = "Error",
                 helpful_message: Optional[str] = None):
    """Print an error as JSON or as a readable message."""
    if json_output:
        payload = {'error': str(error), 'errorType': error_type}
        if helpful_message:
            payload['help'] = helpful_message
        click.echo(json.dumps(payload, indent=2))
        return

    click.secho(f"✗ {error_type}: {error}", fg='red', bold=True, err=True)
    if helpful_message:
        click.echo(helpful_message, err=True)
