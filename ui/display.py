"""Display utilities for the terminal video poker UI."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker.cards import Card, Suit
from poker.payouts import PayoutTable
from poker.session import RoundResult


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_hand(cards: list[Card] | tuple[Card, ...], held: list[int] | None = None) -> str:
    """Render five cards with their 1-based positions underneath."""
    held = held or []
    top = " ".join(render_card(c) for c in cards)
    labels = []
    for i, card in enumerate(cards, start=1):
        # Visible width of "[A♠]"
        width = len(str(card)) + 2
        mark = f"*{i}" if i in held else str(i)
        labels.append(f"[cyan]{mark:^{width}}[/cyan]")
    return f"{top}\n{' '.join(labels)}"


def render_payout_table(payouts: PayoutTable) -> Table:
    """Render the payout table, best hand first."""
    table = Table(title="Payout Table")
    table.add_column("Hand", style="cyan")
    table.add_column("Multiplier", style="green", justify="right")
    for label, multiplier in payouts.rows():
        table.add_row(label, str(multiplier))
    return table


def render_round_result(result: RoundResult) -> Panel:
    """Render the outcome of a round."""
    lines = [render_hand(result.hand, list(result.held)), ""]
    evaluation = result.evaluation

    if result.won:
        label = "Royal Pair" if evaluation.is_royal_pair else str(evaluation.category)
        lines.append(f"[bold]{evaluation.description}[/bold]")
        lines.append(f"[bold green]{label}! x{result.multiplier}[/bold green]")
        lines.append(f"Won: [green]+{result.winnings}[/green]")
    else:
        lines.append(f"[bold]{evaluation.description}[/bold]")
        lines.append("[bold red]Sorry, you lost![/bold red]")
        lines.append(f"Lost: [red]-{result.bet}[/red]")

    lines.append("")
    lines.append(f"Balance: [bold]${result.balance}[/bold]")

    border = "green" if result.won else "red"
    return Panel("\n".join(lines), title="Result", border_style=border)


def render_balance(balance: int) -> str:
    return f"Balance: [bold yellow]${balance}[/bold yellow]"


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
