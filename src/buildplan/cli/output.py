"""Output routing for CLI commands.

user_output: human-facing messages, written to stderr.
machine_output: data meant for pipes and scripts, written to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)
