"""Preflop chart display."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.style import Style
from rich.text import Text

from pokerai.game.preflop import (
    ACTION_THRESHOLDS, FOLD, UNRANKED, action_for_ranking, ranking_for,
)


# Standard hand matrix layout (13x13)
RANKS = "AKQJT98765432"

# Pre-computed hand matrix positions
# Pairs on diagonal, suited above, offsuit below
HAND_MATRIX = []
for i, r1 in enumerate(RANKS):
    row = []
    for j, r2 in enumerate(RANKS):
        if i == j:
            row.append(f"{r1}{r2}")  # Pair
        elif i < j:
            row.append(f"{r1}{r2}s")  # Suited (above diagonal)
        else:
            row.append(f"{r2}{r1}o")  # Offsuit (below diagonal)
    HAND_MATRIX.append(row)

ACTION_COLORS = {
    "Strong Raise": "green",
    "Open Raise": "yellow",
    "Call": "blue",
    FOLD: "grey30",
}


@dataclass
class ChartCell:
    """One starting hand in the chart."""
    hand: str
    ranking: int
    action: str

    @property
    def style(self) -> Style:
        color = ACTION_COLORS[self.action]
        return Style(bgcolor=color, color="black" if color == "yellow" else "white")


class PreflopChart:
    """
    Display the static preflop ranking as a 13x13 matrix.

    Ranked hands show their rank number; unranked hands are left blank.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.cells: dict[str, ChartCell] = {}

        for row in HAND_MATRIX:
            for hand in row:
                ranking = ranking_for(hand)
                self.cells[hand] = ChartCell(
                    hand=hand,
                    ranking=ranking,
                    action=action_for_ranking(ranking),
                )

    def hands_for_action(self, action: str) -> list[str]:
        """Hands recommended for an action, strongest first."""
        hands = [c for c in self.cells.values() if c.action == action]
        return [c.hand for c in sorted(hands, key=lambda c: c.ranking)]

    def build_table(self, title: str = "Preflop Rankings", highlight: Optional[str] = None) -> Table:
        table = Table(title=title, show_header=True, header_style="bold")

        # Add column headers
        table.add_column("", style="bold")
        for rank in RANKS:
            table.add_column(rank, justify="center")

        for i, rank in enumerate(RANKS):
            row = [rank]
            for j in range(13):
                cell = self.cells[HAND_MATRIX[i][j]]
                label = "" if cell.ranking == UNRANKED else str(cell.ranking)
                style = cell.style
                if cell.hand == highlight:
                    style = style + Style(bold=True, underline=True)
                row.append(Text(label.center(3), style=style))
            table.add_row(*row)

        return table

    def display_terminal(self, title: str = "Preflop Rankings", highlight: Optional[str] = None) -> None:
        """Print the chart, optionally marking one hand."""
        self.console.print(self.build_table(title=title, highlight=highlight))

        # Legend
        self.console.print("\nLegend: ", end="")
        low = 1
        for limit, action in ACTION_THRESHOLDS:
            self.console.print(f"[{ACTION_COLORS[action]}]{action} (#{low}-{limit})[/] ", end="")
            low = limit + 1
        self.console.print(f"[{ACTION_COLORS[FOLD]}]{FOLD}[/]")
