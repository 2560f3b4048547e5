"""CLI entry point for revtree.

Invoked as::

    revtree [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m revtree.cli.main

Commands
--------
init          Write the starter catalog to the tree file
show          Display the tree with per-group totals
groups        List the top-level groups
games         List every game with its revenue
add-game      Add a game to a top-level group
add-revenue   Add revenue to a game
check         Report records the parser would drop
export        Dump the tree as JSON or YAML
version       Show version information

The tree file defaults to ``casino.txt`` and can be set with ``--file``
or the ``REVTREE_FILE`` environment variable.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from revtree.storage.files import DEFAULT_FILENAME

if TYPE_CHECKING:
    from revtree.model.nodes import Group

console = Console()
err_console = Console(stderr=True)

# Accept negative numbers as positional arguments.
_NUMERIC_ARGS = {"ignore_unknown_options": True}


def _tree_path(ctx: click.Context) -> Path:
    return Path(ctx.obj["file"])


def _load_or_exit(ctx: click.Context) -> "Group":
    """Load the tree file, printing errors and exiting on failure."""
    from revtree.codec import ParsePolicy, TreeParseError
    from revtree.storage import StorageError, TreeNotFoundError, load_tree

    path = _tree_path(ctx)
    policy = ParsePolicy.STRICT if ctx.obj["strict"] else ParsePolicy.LENIENT
    try:
        return load_tree(path, policy=policy)
    except TreeNotFoundError:
        err_console.print(
            f"[red]Error:[/red] File not found: {path} (run [bold]revtree init[/bold] first)"
        )
        sys.exit(1)
    except StorageError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    except TreeParseError as exc:
        err_console.print(f"[red]Failed to load[/red] {path}: {exc.message}")
        for issue in exc.issues:
            err_console.print(f"  {issue}", markup=False)
        sys.exit(1)


def _save_or_exit(ctx: click.Context, root: "Group") -> None:
    from revtree.storage import TreeWriteError, save_tree

    try:
        path = save_tree(root, _tree_path(ctx))
    except TreeWriteError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    console.print(f"[green]Saved to[/green] {path}")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="revtree")
@click.option(
    "--file",
    "-f",
    "file",
    envvar="REVTREE_FILE",
    default=DEFAULT_FILENAME,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Tree file to read and write",
)
@click.option("--strict", is_flag=True, default=False, help="Fail on malformed records instead of skipping them")
@click.pass_context
def cli(ctx: click.Context, file: str, strict: bool) -> None:
    """Hierarchical game revenue catalog."""
    ctx.ensure_object(dict)
    ctx.obj["file"] = file
    ctx.obj["strict"] = strict


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from revtree import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]revtree[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# init command
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing tree file")
@click.pass_context
def init_command(ctx: click.Context, force: bool) -> None:
    """Write the starter casino catalog to the tree file."""
    from revtree.catalog import sample_catalog

    path = _tree_path(ctx)
    if path.exists() and not force:
        err_console.print(f"[yellow]Exists:[/yellow] {path} (use --force to overwrite)")
        sys.exit(1)
    _save_or_exit(ctx, sample_catalog())


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.pass_context
def show_command(ctx: click.Context) -> None:
    """Display the tree with per-group totals."""
    from revtree.catalog import render_tree

    root = _load_or_exit(ctx)
    for line in render_tree(root):
        console.print(line, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# groups / games commands
# ---------------------------------------------------------------------------


@cli.command(name="groups")
@click.pass_context
def groups_command(ctx: click.Context) -> None:
    """List the top-level groups that games can be added to."""
    from revtree.catalog import list_direct_groups
    from revtree.model import format_revenue

    root = _load_or_exit(ctx)
    groups = root.get_groups()
    if not groups:
        console.print(f"[yellow]No groups under[/yellow] {escape(root.name)}")
        return

    table = Table(title=f"Groups: {escape(root.name)}")
    table.add_column("#", justify="right")
    table.add_column("Group")
    table.add_column("Total", justify="right")
    for (index, name), group in zip(list_direct_groups(root), groups):
        table.add_row(str(index), escape(name), format_revenue(group.total_revenue()))
    console.print(table)


@cli.command(name="games")
@click.pass_context
def games_command(ctx: click.Context) -> None:
    """List every game with its revenue, depth-first."""
    from revtree.catalog import list_all_games
    from revtree.model import format_revenue

    root = _load_or_exit(ctx)
    rows = list_all_games(root)
    if not rows:
        console.print(f"[yellow]No games under[/yellow] {escape(root.name)}")
        return

    table = Table(title=f"Games: {escape(root.name)}")
    table.add_column("#", justify="right")
    table.add_column("Game")
    table.add_column("Revenue", justify="right")
    for index, name, revenue in rows:
        table.add_row(str(index), escape(name), format_revenue(revenue))
    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {format_revenue(root.total_revenue())}")


# ---------------------------------------------------------------------------
# add-game / add-revenue commands
# ---------------------------------------------------------------------------


@cli.command(name="add-game", context_settings=_NUMERIC_ARGS)
@click.argument("group_index", type=int)
@click.argument("name")
@click.argument("revenue", type=float, default=0.0)
@click.pass_context
def add_game_command(ctx: click.Context, group_index: int, name: str, revenue: float) -> None:
    """Add a game to a top-level group.

    GROUP_INDEX is the number shown by ``revtree groups``.
    """
    from revtree.catalog import SelectionError, add_game_to_group, select_group

    root = _load_or_exit(ctx)
    try:
        group = select_group(root, group_index)
        game = add_game_to_group(group, name, revenue)
    except (SelectionError, ValueError) as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    console.print(f"[green]Game added:[/green] {escape(game.name)} -> {escape(group.name)}")
    _save_or_exit(ctx, root)


@cli.command(name="add-revenue", context_settings=_NUMERIC_ARGS)
@click.argument("game_index", type=int)
@click.argument("amount", type=float)
@click.pass_context
def add_revenue_command(ctx: click.Context, game_index: int, amount: float) -> None:
    """Add revenue to a game.

    GAME_INDEX is the number shown by ``revtree games``.  AMOUNT may be
    negative.
    """
    from revtree.catalog import SelectionError, add_revenue_to_game, select_game
    from revtree.model import format_revenue

    root = _load_or_exit(ctx)
    try:
        game = select_game(root, game_index)
    except SelectionError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    new_revenue = add_revenue_to_game(game, amount)
    console.print(f"[green]Revenue added:[/green] {escape(game.name)} now {format_revenue(new_revenue)}")
    _save_or_exit(ctx, root)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.pass_context
def check_command(ctx: click.Context) -> None:
    """Report every record the parser would drop from the tree file."""
    from revtree.codec import TreeParseError, parse_lines

    path = _tree_path(ctx)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)

    try:
        issues = parse_lines(text.splitlines()).issues
    except TreeParseError as exc:
        err_console.print(f"[red]Failed to load[/red] {path}: {exc.message}")
        issues = exc.issues
        if not issues:
            sys.exit(1)

    if not issues:
        console.print(f"[green]OK[/green] {path} — no issues found")
        return

    table = Table(title=f"Check: {path}", show_lines=True)
    table.add_column("Line", justify="right")
    table.add_column("Kind", style="yellow", no_wrap=True)
    table.add_column("Message")
    table.add_column("Text")
    for issue in issues:
        table.add_row(str(issue.line), issue.kind.name, escape(issue.message), escape(repr(issue.text)))
    console.print(table)
    console.print(f"\n[bold]{len(issues)}[/bold] record(s) dropped")
    sys.exit(1)


# ---------------------------------------------------------------------------
# export command
# ---------------------------------------------------------------------------


@cli.command(name="export")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.pass_context
def export_command(ctx: click.Context, output_format: str, output: str | None) -> None:
    """Dump the tree as JSON or YAML."""
    from revtree.export import TreeSerializer

    root = _load_or_exit(ctx)
    serializer = TreeSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(root, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(root)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Tree written to[/green] {output}")
    else:
        console.print(Syntax(text, lang))


if __name__ == "__main__":
    cli()
