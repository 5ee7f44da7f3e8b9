"""Terminal jacks-or-better video poker."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config
from poker.cards import Card
from poker.errors import PlayingCardError
from poker.hand_evaluator import HandEvaluator
from poker.payouts import PayoutTable
from poker.session import GameSession, parse_hold_positions
from ui.display import (
    print_divider,
    render_balance,
    render_hand,
    render_payout_table,
    render_round_result,
)

app = typer.Typer(
    name="video-poker",
    help="Single-player jacks-or-better draw poker in the terminal.",
)
console = Console()
logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Configure root logging once at program start."""
    handlers: list[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        handlers.append(file_handler)
    else:
        handlers.append(logging.StreamHandler())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Could not load config: {e}[/red]")
        raise typer.Exit(1)


def _ask(prompt: str) -> str:
    """Read one line; 'q' or EOF ends the game."""
    try:
        raw = console.input(prompt).strip()
    except EOFError:
        raise KeyboardInterrupt
    if raw.lower() in QUIT_WORDS:
        raise KeyboardInterrupt
    return raw


def _ask_yes_no(prompt: str) -> bool:
    while True:
        answer = _ask(f"{prompt} (y or n): ").lower()
        if answer in ("y", "n"):
            return answer == "y"
        console.print("[red]Incorrect input. Please enter y or n.[/red]")


def _ask_bet(session: GameSession) -> None:
    while True:
        raw = _ask(f"Enter bet (1-{session.balance}): ")
        try:
            amount = int(raw)
        except ValueError:
            console.print("[red]Please enter a number.[/red]")
            continue
        try:
            session.place_bet(amount)
            return
        except PlayingCardError as e:
            console.print(f"[red]Please enter a valid bet. {e}[/red]")


def _ask_holds() -> list[int]:
    while True:
        raw = _ask("Enter positions (1-5) of cards to keep (e.g. 1 4 5): ")
        try:
            return parse_hold_positions(raw)
        except PlayingCardError as e:
            console.print(f"[red]{e}[/red]")


def _run_game(session: GameSession) -> None:
    """Play rounds until the player quits or runs out of money."""
    if session.config.game.show_payout_table:
        console.print(render_payout_table(session.payouts))

    while True:
        print_divider(console)
        console.print(render_balance(session.balance))

        _ask_bet(session)
        hand = session.deal()
        console.print(f"\n[bold]Hand:[/bold]\n{render_hand(hand)}\n")

        held = _ask_holds()
        result = session.draw(held)
        console.print(render_round_result(result))

        if session.is_broke:
            console.print("[bold red]We have enjoyed taking all of your money. Bye![/bold red]")
            return

        if not _ask_yes_no("Would you like to play again?"):
            console.print("[bold]Thanks for playing![/bold]")
            return

        if _ask_yes_no("Would you like to see the payout table?"):
            console.print(render_payout_table(session.payouts))


@app.callback()
def main_callback(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write logs to this file"),
) -> None:
    """Single-player jacks-or-better draw poker in the terminal."""
    setup_logging(log_level, log_file)


@app.command()
def play(
    balance: Optional[int] = typer.Option(None, "--balance", "-b", help="Starting balance"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Play video poker interactively."""
    config = _load(config_path)
    if balance is not None:
        if balance <= 0:
            console.print("[red]Starting balance must be positive.[/red]")
            raise typer.Exit(1)
        config.game.starting_balance = balance
    if seed is not None:
        config.game.seed = seed

    try:
        session = GameSession(config)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold blue]Video Poker - Jacks or Better[/bold blue]")
    console.print("=" * 50)
    console.print("[dim]Type 'q' to quit at any time.[/dim]")

    try:
        _run_game(session)
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted.[/yellow]")
        refund = session.cancel_round()
        if refund:
            console.print(f"Unfinished round cancelled, bet of ${refund} returned.")

    logger.info("Session ended after %d rounds with balance %d", session.rounds_played, session.balance)
    console.print(f"Rounds played: {session.rounds_played} | Final balance: [bold]${session.balance}[/bold]")


@app.command()
def payouts(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the payout table."""
    config = _load(config_path)
    console.print(render_payout_table(PayoutTable.from_overrides(config.payouts)))


@app.command()
def evaluate(
    cards: list[str] = typer.Argument(..., help="Five cards, e.g. As Ks Qs Js Ts"),
    bet: int = typer.Option(1, "--bet", min=1, help="Wager used to show the payout"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Classify a five-card hand."""
    config = _load(config_path)
    try:
        hand = [Card.from_string(c) for c in cards]
        result = HandEvaluator.evaluate(hand)
    except PlayingCardError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = PayoutTable.from_overrides(config.payouts)
    multiplier = table.multiplier(result)
    console.print(render_hand(hand))
    console.print(f"[bold]{result.description}[/bold] ({result.category!s})")
    console.print(f"Multiplier: x{multiplier} | Payout on {bet}: {table.payout(result, bet)}")


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show configuration."""
    config = _load(config_path)

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Starting balance", str(config.game.starting_balance))
    table.add_row("Decks", str(config.game.num_decks))
    table.add_row("Seed", str(config.game.seed))
    table.add_row("Show payout table", str(config.game.show_payout_table))
    for name, value in config.payouts.items():
        table.add_row(f"Payout override: {name}", str(value))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
