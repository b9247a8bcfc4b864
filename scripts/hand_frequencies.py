#!/usr/bin/env python3
"""Count best-hand categories over every completion of a hold'em hand."""

import argparse
import sys
from itertools import combinations
from pathlib import Path

from rich.console import Console
from rich.panel import Panel

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handfreq.game import (
    EngineConfig,
    GameState,
    Perspective,
    best_hand_frequencies,
    completion_count,
    missing_cards,
    treys_kind,
)
from handfreq.game.hand_rank import HAND_SIZE, best_hand
from handfreq.viz import display_comparison, display_frequencies


def verify_state(state: GameState, console: Console) -> bool:
    """Cross-check the classifier against treys on every 5-card subset of the known cards."""
    ok = True
    for hand in combinations(state.fixed_cards(Perspective.SELF), HAND_SIZE):
        ours = best_hand(hand).kind
        theirs = treys_kind(hand)
        if ours != theirs:
            ok = False
            cards = " ".join(str(c) for c in hand)
            console.print(f"[red]Mismatch on {cards}: {ours.label} vs treys {theirs.label}[/]")
    return ok


def main():
    parser = argparse.ArgumentParser(
        description="Exact hand category frequencies for a hold'em hand"
    )
    parser.add_argument(
        "--hole",
        required=True,
        help="Hole cards (e.g., 'AsKh')",
    )
    parser.add_argument(
        "-f", "--flop",
        required=True,
        help="Flop cards (e.g., 'Qs7d2c' or 'Qs 7d 2c')",
    )
    parser.add_argument(
        "-t", "--turn",
        help="Turn card (e.g., '9h')",
    )
    parser.add_argument(
        "-r", "--river",
        help="River card (e.g., '3c')",
    )
    parser.add_argument(
        "-p", "--perspective",
        choices=["self", "opponent", "both"],
        default="both",
        help="Whose knowledge to enumerate from (default: both)",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Worker processes for enumeration (default: 1)",
    )
    parser.add_argument(
        "--by-kind",
        action="store_true",
        help="Collapse tie-break ranks into one row per category",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check classification of the known cards against treys",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    try:
        state = GameState.from_string(args.hole, args.flop, args.turn, args.river)
    except ValueError as e:
        console.print(f"[red]{e}[/]")
        return 1

    console.print(Panel(str(state), title=f"[bold]{state.street.name.title()}[/]"))

    if args.verify and not verify_state(state, console):
        return 1

    if args.perspective == "both":
        perspectives = [Perspective.SELF, Perspective.OPPONENT]
    else:
        perspectives = [Perspective.from_string(args.perspective)]

    config = EngineConfig(workers=args.workers)
    tables = {}
    for perspective in perspectives:
        if args.verbose:
            k = missing_cards(state, perspective)
            n = len(state.unused_cards(perspective))
            console.print(
                f"[dim]{perspective.value}: {k} missing card(s) from {n} unused, "
                f"{completion_count(state, perspective)} completions[/]"
            )

        table = best_hand_frequencies(state, perspective, config)
        tables[perspective.value.title()] = table
        display_frequencies(
            table,
            title=f"{perspective.value.title()} perspective",
            by_kind=args.by_kind,
            console=console,
        )

    if len(tables) > 1:
        display_comparison(tables, console=console)

    return 0


if __name__ == "__main__":
    sys.exit(main())
