"""
CLI for playing Connect Four in a terminal.

Usage:
    python -m connect_four.cli.main --help
    python -m connect_four.cli.main play
    python -m connect_four.cli.main play --height 5 --width 6 --p1-color blue
    python -m connect_four.cli.main config
"""

import logging
from typing import Annotated

import typer

from ..core.config import LogLevel, Settings, get_settings
from ..core.errors import InvalidColumnError
from ..core.types import MoveOutcome
from ..game.engine import GameEngine
from .render import TerminalRenderer


app = typer.Typer(
    name="connect-four",
    help="Two-player Connect Four in the terminal.",
    add_completion=False,
)


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=LogLevel(level).value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_settings(
    base: Settings,
    height: int | None = None,
    width: int | None = None,
    p1_color: str | None = None,
    p2_color: str | None = None,
) -> Settings:
    """Apply command-line overrides on top of loaded settings."""
    game = base.game.model_copy(update={
        k: v for k, v in {"height": height, "width": width}.items() if v is not None
    })
    players = base.players.model_copy(update={
        k: v for k, v in {"one_color": p1_color, "two_color": p2_color}.items() if v is not None
    })
    return base.model_copy(update={"game": game, "players": players})


@app.command()
def play(
    height: Annotated[int | None, typer.Option("--height", min=1, help="Board rows")] = None,
    width: Annotated[int | None, typer.Option("--width", min=1, help="Board columns")] = None,
    p1_color: Annotated[str | None, typer.Option("--p1-color", help="Player 1 color")] = None,
    p2_color: Annotated[str | None, typer.Option("--p2-color", help="Player 2 color")] = None,
    log_level: Annotated[
        LogLevel | None,
        typer.Option("--log-level", case_sensitive=False, help="Logging level"),
    ] = None,
):
    """
    Play a hot-seat game between two people at one terminal.

    Enter a column number to drop a piece, 'q' to quit.
    """
    base = get_settings()
    configure_logging(log_level or base.log.level)
    settings = build_settings(base, height, width, p1_color, p2_color)

    engine = GameEngine.from_settings(settings)
    renderer = TerminalRenderer(
        board_source=lambda: engine.state.board if engine.state else None,
        players=engine.players,
        echo=typer.echo,
    )
    renderer.attach(engine.bus)

    engine.new_game()
    _game_loop(engine)


def _game_loop(engine: GameEngine) -> None:
    """Prompt for columns until the game ends or the players quit."""
    max_col = engine.width - 1

    while not engine.is_game_over:
        player = engine.current_player
        try:
            user_input = typer.prompt(f"\nPlayer {player.id.value} ({player.color}), column (0-{max_col})")
        except (KeyboardInterrupt, typer.Abort):
            typer.echo("\nGame quit.")
            return

        if user_input.strip().lower() == "q":
            typer.echo("Game quit.")
            return

        try:
            column = int(user_input)
        except ValueError:
            typer.echo(f"Enter a number 0-{max_col}")
            continue

        try:
            result = engine.select_column(column)
        except InvalidColumnError as e:
            typer.echo(f"Invalid! {e}")
            continue

        if result.outcome is MoveOutcome.IGNORED:
            typer.echo(f"Column {column} is full. Legal moves: {engine.legal_moves()}")


@app.command()
def config():
    """Show the effective settings."""
    settings = get_settings()
    for section, values in settings.model_dump(mode="json").items():
        for key, value in values.items():
            typer.echo(f"{section}.{key} = {value}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
