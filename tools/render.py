from rich.console import Console
from rich.text import Text

from simulator.statistics import MARKER

HEAD_STYLE = "red"
MARKER_STYLE = "bold bright_blue"


def tape_window(snapshots):
    """Offsets spanning every cell any snapshot has materialized."""
    lo = min(snapshot.left for snapshot in snapshots)
    hi = max(snapshot.right for snapshot in snapshots)
    return range(lo, hi + 1)


def render_snapshot(snapshot, window=None):
    """One tape line; the head cell is red, marker cells bold bright blue."""
    if window is None:
        window = range(snapshot.left, snapshot.right + 1)

    line = Text()
    for position in window:
        symbol = snapshot.symbol_at(position)
        if position == snapshot.head:
            style = HEAD_STYLE
        elif symbol == MARKER:
            style = MARKER_STYLE
        else:
            style = None
        line.append(f"{symbol}", style=style)
        line.append(" ")
    line.rstrip()
    return line


def render_run(stats):
    """Every snapshot of a run, aligned so columns are the same tape cell."""
    if not stats.snapshots:
        return []
    window = tape_window(stats.snapshots)
    return [render_snapshot(snapshot, window) for snapshot in stats.snapshots]


def print_run(stats, console=None, title=None):
    console = console or Console()
    if title:
        console.print(f"[bold]{title}[/bold]")
    for line in render_run(stats):
        console.print(line)
