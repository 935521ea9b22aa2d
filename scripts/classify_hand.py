#!/usr/bin/env python3
"""Classify a starting hand and show its preflop recommendation."""

import argparse
import sys
from pathlib import Path

from rich.console import Console

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerai.errors import PokerError
from pokerai.game.preflop import TOTAL_HANDS, gto_advice
from pokerai.viz import PreflopChart


def main():
    parser = argparse.ArgumentParser(
        description="Preflop category, ranking and action for a starting hand"
    )
    parser.add_argument(
        "-H", "--hero",
        help="Hero's hole cards (e.g., 'AsKh')",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Show the full 13x13 ranking chart",
    )

    args = parser.parse_args()
    console = Console()

    if not args.hero and not args.chart:
        parser.error("give --hero, --chart, or both")

    highlight = None
    if args.hero:
        try:
            advice = gto_advice(args.hero)
        except PokerError as e:
            console.print(f"[red]{e}[/]")
            return 1

        highlight = advice.category
        console.print(f"[bold]Hand:[/] {advice.category}")
        console.print(f"[bold]Rank:[/] #{advice.ranking}/{TOTAL_HANDS}")
        console.print(f"[bold]Action:[/] [yellow]{advice.action}[/]")

    if args.chart:
        console.print()
        PreflopChart(console=console).display_terminal(highlight=highlight)

    return 0


if __name__ == "__main__":
    sys.exit(main())
