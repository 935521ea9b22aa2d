#!/usr/bin/env python3
"""Break a hand's equity down by flop texture."""

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
from pokerai.game.equity import EquityCalculator
from pokerai.game.preflop import gto_advice
from pokerai.game.texture import batch_analyze
from pokerai.logging_config import setup_logging
from pokerai.viz import display_texture_batch
from pokerai.viz.results import format_cards


def main():
    console = Console()
    try:
        defaults = SimulationConfig.from_env()
    except PokerError as e:
        console.print(f"[red]{e}[/]")
        return 1

    parser = argparse.ArgumentParser(
        description="Average equity by flop texture (top pair, draws, dry boards)"
    )
    parser.add_argument(
        "-H", "--hero",
        required=True,
        help="Hero's hole cards (e.g., 'AsKh')",
    )
    parser.add_argument(
        "-o", "--opponents",
        type=int,
        default=defaults.opponents,
        help=f"Number of opponents, 1-9 (default: {defaults.opponents})",
    )
    parser.add_argument(
        "--flops",
        type=int,
        default=defaults.flop_samples,
        help=f"Random flops to sample (default: {defaults.flop_samples})",
    )
    parser.add_argument(
        "--trials-per-flop",
        type=int,
        default=defaults.trials_per_flop,
        help=f"Trials per flop (default: {defaults.trials_per_flop})",
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
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = SimulationConfig(
            opponents=args.opponents,
            preflop_trials=defaults.preflop_trials,
            workers=args.workers,
            seed=args.seed,
        ).validate()
        hero = parse_cards(args.hero)
        calculator = EquityCalculator(config)
        advice = gto_advice(hero)

        console.print(f"[bold]Hand:[/] ", format_cards(hero), f" vs {args.opponents} opp")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Analyzing boards...", total=None)
            preflop = calculator.preflop_equity(hero)
            stats = batch_analyze(
                hero, args.opponents, args.flops, args.trials_per_flop,
                rng=calculator.rng, workers=args.workers,
            )
    except PokerError as e:
        console.print(f"[red]{e}[/]")
        return 1

    display_texture_batch(stats, preflop=preflop, advice=advice, console=console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
