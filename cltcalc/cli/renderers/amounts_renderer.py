"""Rich renderer for the small calculators (label / amount tables)."""

from typing import Iterable, Optional, Tuple

from rich import box
from rich.console import Console
from rich.table import Table


def render_amounts(
    console: Console,
    title: str,
    rows: Iterable[Tuple[str, str]],
    total: Optional[Tuple[str, str]] = None,
) -> None:
    """Render a two-column table of already formatted values.

    Args:
        console: Rich Console instance
        title: Table title
        rows: (label, formatted value) pairs
        total: Optional (label, formatted value) shown bold as the last row
    """
    table = Table(title=title, box=box.SIMPLE, show_header=False)
    table.add_column("item")
    table.add_column("value", justify="right")

    for label, value in rows:
        table.add_row(label, value)

    if total:
        table.add_section()
        table.add_row(f"[bold]{total[0]}[/bold]", f"[bold]{total[1]}[/bold]")

    console.print(table)
