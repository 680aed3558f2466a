"""Text console for Connect Four: renders the board and reads human columns."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

import typer
from rich.console import Console

from connectfour.agents import HumanAgent, MoveRequest
from connectfour.config import GameConfig
from connectfour.coordinator import TurnCoordinator
from connectfour.engine import WIDTH, Move, legal_columns, render
from connectfour.errors import ConnectFourError

app = typer.Typer()
console = Console()

QUIT_WORDS = {"q", "quit", "exit"}


def format_move_history(moves: Sequence[Move]) -> str:
    parts = []
    for m in moves:
        player = "X" if m.player == 1 else "O"
        parts.append(f"{m.ply}:{player}@{m.col}")
    return " ".join(parts)


def parse_column(raw: str, width: int = WIDTH) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        col = int(raw)
    except ValueError:
        return None

    if 0 <= col < width:
        return col
    if 1 <= col <= width:
        return col - 1
    # Out of range: hand it over as-is so the coordinator rejects and re-prompts.
    return col


async def _prompt(request: MoveRequest) -> Optional[str]:
    legal = legal_columns(request.board)
    mark = "X" if request.player == 1 else "O"
    prompt = f"Player {request.player} ({mark}) to move. Column {legal}: "
    raw = await asyncio.to_thread(console.input, prompt, markup=False)
    if raw.strip().lower() in QUIT_WORDS:
        return None
    return raw


async def _serve_humans(humans: List[HumanAgent]) -> None:
    while True:
        waiters = {asyncio.ensure_future(h.wait_for_request()): h for h in humans}
        done, pending = await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
        request = done.pop().result()

        raw = await _prompt(request)
        if raw is None:
            request.cancel()
            raise typer.Exit()
        col = parse_column(raw)
        if col is None:
            console.print("Enter a column index (0-based or 1-based).")
        elif col not in legal_columns(request.board):
            console.print("Illegal move: column full or out of range.")
        request.resolve(col)


async def play_game(cfg: GameConfig) -> None:
    def show(line: str) -> None:
        session = coordinator.session
        console.print(render(session.board))
        console.print(f"[bold]{line}[/bold]")
        console.print(f"scores: P1 {session.score_for(1):+.1f}  P2 {session.score_for(2):+.1f}")
        console.print("")

    coordinator = TurnCoordinator.from_config(cfg, on_status=show)
    humans = [a for a in coordinator.agents.values() if isinstance(a, HumanAgent)]

    game = asyncio.ensure_future(coordinator.run())
    if humans:
        server = asyncio.ensure_future(_serve_humans(humans))
        done, _ = await asyncio.wait({game, server}, return_when=asyncio.FIRST_COMPLETED)
        if server in done:
            game.cancel()
            server.result()
            return
        server.cancel()

    session = await game
    if session.stalled:
        console.print("[red]game stalled: an agent produced no legal move (see log)[/red]")
    if session.history:
        console.print(f"Moves: {format_move_history(session.history)}")


@app.command()
def play(
    player1: str = typer.Option("human", help="Strategy for player 1: human|ai|random."),
    player2: str = typer.Option("ai", help="Strategy for player 2: human|ai|random."),
    depth: int = typer.Option(5, help="Alpha-beta search depth in plies (1-8)."),
    delay: float = typer.Option(0.5, help="Seconds to pause before a computer move is applied."),
    seed: Optional[int] = typer.Option(None, help="Base random seed for random agents."),
    log_level: str = typer.Option("WARNING", help="Logging level for engine diagnostics."),
) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = GameConfig(player1=player1, player2=player2, depth=depth, move_delay=delay, seed=seed)
    try:
        cfg.validate()
    except (ConnectFourError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    asyncio.run(play_game(cfg))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
