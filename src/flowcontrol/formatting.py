"""Pretty-print support for serialized task-tree state.

Uses rich library for formatted terminal output. Functions take the plain
dict form produced by ``Orchestrator.get_serialized_state()`` so they can
also render state that was dumped to JSON and loaded back.
"""
from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

_STATE_STYLES: dict[str, tuple[str, str]] = {
    "completed": ("✅", "green"),
    "failed": ("❌", "red"),
    "in_progress": ("…", "yellow"),
    "skipped": ("⏭", "dim"),
    "not_started": ("", "white"),
}


def _ensure_utf8_stdout() -> None:
    """Reconfigure stdout to UTF-8 on Windows to avoid cp1252 encoding errors."""
    import sys
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            pass


def _make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, force_terminal=True, width=100)
    _ensure_utf8_stdout()
    return Console()


def format_node_label(node_id: str, node: dict[str, Any]) -> Text:
    """One tree line: ``<id>: <marker> (<time>ms)``."""
    state = node.get("state", "not_started")
    marker, style = _STATE_STYLES.get(state, ("", "white"))
    label = Text.from_markup(f"[bold]{escape(node_id)}:[/bold]")
    if node.get("type") == "task-group":
        label.stylize("cyan")
    if marker:
        label.append(f" {marker}", style=style)
    if state in ("completed", "failed"):
        label.append(f" ({node.get('time', 0):.0f}ms)", style="dim")
    return label


def _add_children(tree: Tree, children: dict[str, dict[str, Any]]) -> None:
    for node_id, node in children.items():
        branch = tree.add(format_node_label(node_id, node))
        if node.get("type") == "task-group" and node.get("children"):
            _add_children(branch, node["children"])


def build_state_tree(state: dict[str, dict[str, Any]], *, title: str = "flow") -> Tree:
    """Build a rich Tree from serialized state."""
    tree = Tree(Text(title, style="bold"), guide_style="dim")
    _add_children(tree, state)
    return tree


def pprint_state(
    state: dict[str, dict[str, Any]], *, title: str = "flow", file: Any = None
) -> None:
    """Pretty-print serialized state as a tree.

    Args:
        state: Output of ``Orchestrator.get_serialized_state()``.
        title: Root label of the tree.
        file: Optional file-like object for output (used in tests).
    """
    console = _make_console(file)
    if not state:
        console.print("[dim]No task groups.[/dim]")
        return
    console.print(build_state_tree(state, title=title))


def get_console(*, stderr: bool = False) -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    if stderr:
        return Console(stderr=True)
    return _make_console()


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {message}", highlight=False)
