#!/usr/bin/env python3
"""Compute hand equity against random opponents."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pokerai.config import SimulationConfig
from pokerai.errors import PokerError
from pokerai.game.cards import parse_cards
from pokerai.game.equity import simulate_equity
from pokerai.game.evaluator import best_five, evaluate_best
from pokerai.game.preflop import gto_advice
from pokerai.logging_config import setup_logging
from pokerai.viz import display_equity


def main():
    console = Console()
    try:
        defaults = SimulationConfig.from_env()
    except PokerError as e:
        console.print(f"[red]{e}[/]")
        return 1

    parser = argparse.ArgumentParser(
        description="Monte Carlo equity of a hold'em hand against random opponents"
    )
    parser.add_argument(
        "-H", "--hero",
        required=True,
        help="Hero's hole cards (e.g., 'AsKh' or 'As Kh')",
    )
    parser.add_argument(
        "-b", "--board",
        default="",
        help="Known board cards, 0, 3, 4 or 5 (e.g., 'Qs7s2h')",
    )
    parser.add_argument(
        "-o", "--opponents",
        type=int,
        default=defaults.opponents,
        help=f"Number of opponents, 1-9 (default: {defaults.opponents})",
    )
    parser.add_argument(
        "-n", "--trials",
        type=int,
        default=defaults.trials,
        help=f"Number of Monte Carlo trials (default: {defaults.trials})",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help=f"Use the quick live trial count ({defaults.live_trials})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=defaults.seed,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=defaults.workers,
        help=f"Worker processes (default: {defaults.workers})",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    trials = defaults.live_trials if args.live else args.trials

    try:
        hero = parse_cards(args.hero)
        board = parse_cards(args.board)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(f"Running {trials:,} trials...", total=None)
            result = simulate_equity(
                hero, board, args.opponents, trials,
                rng=args.seed, workers=args.workers,
            )

        advice = gto_advice(hero)
        made_hand = None
        if board:
            best = best_five(hero + board)
            shown = " ".join(c.pretty for c in best)
            made_hand = f"{evaluate_best(best).name} ({shown})"
    except PokerError as e:
        console.print(f"[red]{e}[/]")
        return 1

    display_equity(
        result, hero, board,
        advice=advice,
        opponents=args.opponents,
        made_hand=made_hand,
        console=console,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
