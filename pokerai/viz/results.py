"""Equity and texture result rendering."""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pokerai.game.cards import Card
from pokerai.game.equity import EquityResult
from pokerai.game.preflop import TOTAL_HANDS, GTOAdvice
from pokerai.game.texture import TextureStats


def format_cards(cards: Sequence[Card]) -> Text:
    """Cards with suit symbols, red suits in red."""
    text = Text()
    for i, card in enumerate(cards):
        if i:
            text.append(" ")
        text.append(card.pretty, style="red" if card.is_red else "bold")
    return text


def equity_color(equity: float) -> str:
    if equity >= 60:
        return "green"
    elif equity >= 40:
        return "yellow"
    return "red"


def display_equity(
    result: EquityResult,
    hero: Sequence[Card],
    board: Sequence[Card] = (),
    advice: Optional[GTOAdvice] = None,
    opponents: Optional[int] = None,
    made_hand: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print an equity summary panel."""
    console = console or Console()

    header = Text()
    header.append_text(format_cards(hero))
    if board:
        header.append("  on  ")
        header.append_text(format_cards(board))
    if opponents is not None:
        header.append(f"  vs {opponents} opp", style="dim")

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Equity", justify="center")
    table.add_column("Win", justify="center", style="green")
    table.add_column("Tie", justify="center", style="yellow")
    table.add_column("Lose", justify="center", style="red")
    table.add_row(
        Text(f"{result.equity:.1f}%", style=f"bold {equity_color(result.equity)}"),
        f"{result.win:.1f}%",
        f"{result.tie:.1f}%",
        f"{result.lose:.1f}%",
    )

    lines = [header, table]
    if made_hand:
        lines.append(Text(f"Made hand: {made_hand}", style="cyan"))
    if advice is not None:
        lines.append(Text(
            f"{advice.category}: {advice.action} • Rank #{advice.ranking}/{TOTAL_HANDS}",
            style="yellow",
        ))
    lines.append(Text(f"{result.trials:,} trials", style="dim"))

    body = Table.grid()
    for line in lines:
        body.add_row(line)
    console.print(Panel(body, title="Equity", expand=False))


def display_texture_batch(
    stats: dict[str, TextureStats],
    preflop: Optional[EquityResult] = None,
    advice: Optional[GTOAdvice] = None,
    console: Optional[Console] = None,
) -> None:
    """Print average equity per board texture."""
    console = console or Console()

    if preflop is not None:
        line = Text("Preflop equity: ")
        line.append(f"{preflop.equity:.1f}%", style=f"bold {equity_color(preflop.equity)}")
        if advice is not None:
            line.append(f"   {advice.action} • #{advice.ranking}", style="yellow")
        console.print(line)

    table = Table(title="By Board Texture", show_header=True, header_style="bold")
    table.add_column("Texture")
    table.add_column("Avg Equity", justify="right")
    table.add_column("Flops", justify="right", style="dim")

    for label, s in stats.items():
        table.add_row(
            label,
            Text(f"{s.avg:.1f}%", style=equity_color(s.avg)),
            str(s.count),
        )

    console.print(table)
