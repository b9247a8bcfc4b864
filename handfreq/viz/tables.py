"""Terminal display of hand frequency tables."""

from typing import Optional

import numpy as np
from rich.console import Console
from rich.table import Table

from handfreq.game.frequencies import FrequencyTable
from handfreq.game.hand_rank import HandKind


def frequency_table(
    table: FrequencyTable,
    title: str = "Hand Frequencies",
    by_kind: bool = False,
) -> Table:
    """
    Build a rich table of counts and percentages.

    Args:
        table: Counts to display
        title: Table title
        by_kind: Collapse tie-break ranks and show one row per category

    Returns:
        Renderable rich Table
    """
    out = Table(title=title, show_header=True, header_style="bold")
    out.add_column("Hand", style="bold")
    out.add_column("Count", justify="right")
    out.add_column("%", justify="right")

    if by_kind:
        counts = table.kind_counts()
        probs = table.kind_probabilities()
        for kind in reversed(HandKind):
            if counts[kind] == 0:
                continue
            out.add_row(kind.label, str(counts[kind]), f"{probs[kind]*100:.2f}")
    else:
        for category, prob in table.probabilities().items():
            out.add_row(str(category), str(table[category]), f"{prob*100:.2f}")

    out.add_section()
    out.add_row("Total", str(table.total), "100.00" if table.total else "0.00")
    return out


def display_frequencies(
    table: FrequencyTable,
    title: str = "Hand Frequencies",
    by_kind: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print a frequency table to the terminal."""
    console = console or Console()
    console.print(frequency_table(table, title=title, by_kind=by_kind))


def display_comparison(
    tables: dict[str, FrequencyTable],
    title: str = "Hand Categories",
    console: Optional[Console] = None,
) -> None:
    """
    Print per-category percentages for several tables side by side.

    Args:
        tables: Column name -> frequency table
        title: Table title
        console: Console to print to
    """
    console = console or Console()
    if not tables:
        return

    out = Table(title=title, show_header=True, header_style="bold")
    out.add_column("Hand", style="bold")
    for name in tables:
        out.add_column(name, justify="right")

    probs = np.array([t.kind_probabilities() for t in tables.values()])
    for kind in reversed(HandKind):
        if not probs[:, kind].any():
            continue
        out.add_row(kind.label, *(f"{p*100:.2f}" for p in probs[:, kind]))

    console.print(out)
