"""CLI entry point for contexthooks."""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from rich.console import Console

from contexthooks.cli.output import print_dropped, print_hooks_table, print_results
from contexthooks.core.config import load_configured_hooks
from contexthooks.hooks.context import format_hook_context
from contexthooks.hooks.manager import HookExecutor
from contexthooks.types.hooks import Hook, HookTrigger

_TRIGGER_CHOICES = [t.value for t in HookTrigger] + ["all"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
def cli(verbose: bool) -> None:
    """contexthooks -- run context hooks for a chat session.

    \b
    Usage:
      contexthooks list
      contexthooks run --trigger per_prompt
      contexthooks run --config agent.json --format context
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_hooks(config_path: str | None, cwd: str | None) -> list[Hook]:
    hooks = load_configured_hooks(cwd=cwd, config_path=config_path)
    if not hooks:
        click.echo("No hooks configured.", err=True)
        raise SystemExit(1)
    return hooks


@cli.command("list")
@click.option("--config", "config_path", default=None, help="Agent or config file with hooks")
@click.option("--cwd", default=None, help="Workspace directory")
def list_cmd(config_path: str | None, cwd: str | None) -> None:
    """List configured hooks."""
    hooks = _load_hooks(config_path, cwd)
    print_hooks_table(hooks, Console())


@cli.command("run")
@click.option("--config", "config_path", default=None, help="Agent or config file with hooks")
@click.option("--cwd", default=None, help="Workspace directory (also the hooks' working dir)")
@click.option(
    "--trigger", "-t",
    type=click.Choice(_TRIGGER_CHOICES),
    default="all",
    help="Only run hooks for this trigger",
)
@click.option("--quiet", "-q", is_flag=True, help="Do not stream hook output while running")
@click.option(
    "--format", "fmt",
    type=click.Choice(["text", "context"]),
    default="text",
    help="Print panels, or the prompt context block",
)
def run_cmd(
    config_path: str | None, cwd: str | None, trigger: str, quiet: bool, fmt: str,
) -> None:
    """Run hooks once and print their output."""
    hooks = _load_hooks(config_path, cwd)
    if trigger != "all":
        hooks = [h for h in hooks if h.trigger is HookTrigger(trigger)]
    if not hooks:
        click.echo(f"No {trigger} hooks configured.", err=True)
        raise SystemExit(1)

    executor = HookExecutor(cwd=cwd)
    sink = None if quiet else sys.stderr
    results = asyncio.run(executor.run_hooks(hooks, sink))

    requested = sum(1 for h in hooks if not h.disabled)
    print_dropped(requested, len(results), Console(stderr=True))

    if fmt == "context":
        for kind in HookTrigger:
            click.echo(format_hook_context(results, kind), nl=False)
    else:
        print_results(results, Console())


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
