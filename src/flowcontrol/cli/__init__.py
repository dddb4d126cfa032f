"""flowcontrol CLI -- run an orchestrator defined in a Python module.

This module is NEVER imported from flowcontrol/__init__.py.
It is only loaded via the ``flowcontrol`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import asyncio
import importlib
import json
import logging
import sys
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install flowcontrol[cli]"
    ) from None

from flowcontrol.events import EventName
from flowcontrol.formatting import (
    build_state_tree,
    format_error,
    get_console,
    pprint_state,
)
from flowcontrol.orchestrator import Orchestrator, attach_logging

if TYPE_CHECKING:
    from flowcontrol.task import Task


def load_orchestrator(target: str) -> Orchestrator:
    """Resolve ``module:attr`` to an Orchestrator.

    ``attr`` may be an Orchestrator instance or a zero-argument callable
    returning one.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise click.BadParameter(
            f"expected 'module:attribute', got {target!r}", param_hint="TARGET"
        )

    if "" not in sys.path:
        sys.path.insert(0, "")
    importlib.invalidate_caches()
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"cannot import module {module_name!r}: {e}", param_hint="TARGET"
        ) from None
    try:
        obj = getattr(module, attr)
    except AttributeError:
        raise click.BadParameter(
            f"module {module_name!r} has no attribute {attr!r}", param_hint="TARGET"
        ) from None

    if not isinstance(obj, Orchestrator) and callable(obj):
        obj = obj()
    if not isinstance(obj, Orchestrator):
        raise click.BadParameter(
            f"{target!r} is not an Orchestrator (got {type(obj).__name__})",
            param_hint="TARGET",
        )
    return obj


@click.group()
def cli() -> None:
    """flowcontrol: run task trees with retries and conditional branching."""


@cli.command()
@click.argument("target")
@click.option("--watch", is_flag=True, help="Print the state tree to stderr whenever a task starts.")
@click.option("--json", "as_json", is_flag=True, help="Print final state as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Log lifecycle events to stderr.")
def run(target: str, watch: bool, as_json: bool, verbose: bool) -> None:
    """Run the orchestrator at TARGET (``module:attribute``)."""
    orchestrator = load_orchestrator(target)

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
        attach_logging(orchestrator)

    if watch:
        # stderr, so --json output on stdout stays parseable
        watch_console = get_console(stderr=True)

        def _print_tree(task: Task) -> None:
            click.echo(f"Task {task.id} started", err=True)
            watch_console.print(build_state_tree(orchestrator.get_serialized_state()))

        orchestrator.on(EventName.TASK_STARTED, _print_tree)

    console = get_console()
    failed = False
    try:
        asyncio.run(orchestrator.run())
    except Exception as e:
        format_error(f"{type(e).__name__}: {e}", console)
        failed = True

    if as_json:
        click.echo(json.dumps(orchestrator.get_serialized_state(), indent=2))
    else:
        pprint_state(orchestrator.get_serialized_state())

    if failed:
        raise SystemExit(1)


def main() -> None:
    cli()
