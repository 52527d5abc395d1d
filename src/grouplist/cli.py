"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from typing import List, Optional

import typer
from rich import print
from rich.tree import Tree

from .config import (
    CLI_CHILD_SEPARATOR,
    CLI_CHILD_STYLE,
    CLI_GROUP_SEPARATOR,
    CLI_GROUP_STYLE,
    CLI_ID_STYLE,
    CLI_ROOT_LABEL,
    CONSOLE_HANDLER_NAME,
)
from .errors import CliArgumentError, DomainError, GroupListError, PayloadValidationError
from .model import GroupedListModel
from .utils.logging import ensure_console_logger, get_logger

app = typer.Typer(help="Inspect and display two-level grouped lists")

GROUP_OPTION_HELP = 'Group and its children as "Label=child1,child2". Repeat for more groups.'


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (CliArgumentError, DomainError, PayloadValidationError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except GroupListError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def parse_group_option(value: str) -> tuple[str, list[str]]:
    """Split ``"Label=a,b"`` into ``("Label", ["a", "b"])``.

    A bare ``"Label"`` or ``"Label="`` yields an empty children list.
    """

    label, _, rest = value.partition(CLI_GROUP_SEPARATOR)
    label = label.strip()
    if not label:
        raise CliArgumentError(f"missing group label in {value!r}")
    children = [item.strip() for item in rest.split(CLI_CHILD_SEPARATOR) if item.strip()]
    return label, children


def build_model(groups: Optional[List[str]]) -> GroupedListModel:
    """Build a model from repeated ``--group`` options."""

    return GroupedListModel.from_pairs(parse_group_option(value) for value in groups or [])


def render_tree(model: GroupedListModel, *, show_ids: bool = False) -> Tree:
    """Return a :class:`rich.tree.Tree` mirroring *model*."""

    root = Tree(CLI_ROOT_LABEL)
    group_node: Tree | None = None
    for group_index, child_index, label in model.iter_rows():
        if child_index is None:
            identity = model.group_identity(group_index)
            text = f"[{CLI_GROUP_STYLE}]{label}[/]" if CLI_GROUP_STYLE else label
            if show_ids:
                text += f" [{CLI_ID_STYLE}]#{identity}[/]"
            group_node = root.add(text)
            continue
        identity = model.child_identity(group_index, child_index)
        text = f"[{CLI_CHILD_STYLE}]{label}[/]" if CLI_CHILD_STYLE else label
        if show_ids:
            text += f" [{CLI_ID_STYLE}]#{identity}[/]"
        group_node.add(text)
    return root


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    """Configure console logging for all commands."""

    level = logging.DEBUG if verbose else logging.WARNING
    ensure_console_logger(get_logger(), CONSOLE_HANDLER_NAME, level=level)


@app.command()
@_handle_errors
def show(
    groups: Optional[List[str]] = typer.Option(None, "--group", "-g", help=GROUP_OPTION_HELP),
    ids: bool = typer.Option(False, "--ids", help="Show positional identity tokens."),
) -> None:
    """Print the grouped list as a tree."""

    model = build_model(groups)
    if not model.group_count():
        print("[yellow]No groups given")
        return
    print(render_tree(model, show_ids=ids))


@app.command()
@_handle_errors
def gui(
    groups: Optional[List[str]] = typer.Option(None, "--group", "-g", help=GROUP_OPTION_HELP),
) -> None:
    """Open the grouped list in a Qt tree view."""

    from .gui.main import main as gui_main

    model = build_model(groups)
    raise typer.Exit(gui_main(model, []))


if __name__ == "__main__":  # pragma: no cover
    app()
