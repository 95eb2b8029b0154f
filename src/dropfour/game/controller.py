from __future__ import annotations

import logging
from typing import Callable, Optional

from dropfour.ai.base import Player
from dropfour.core.board import Board, ColumnFull
from dropfour.core.lines import winner_with_line
from dropfour.game.results import GameAborted, MatchResult
from dropfour.types import Move, Token, RED, YELLOW, color_name, other
from dropfour.ui.effects import ai_thinking
from dropfour.ui.render import render

log = logging.getLogger(__name__)

MoveObserver = Callable[[Board, Token, Move], None]
RejectObserver = Callable[[Board, Token, object, str], None]


def _player_name(player: Player, fallback: str) -> str:
    name = getattr(player, "name", None)
    if not name:
        return fallback
    return str(name)


def _out_of_range(board: Board, move: object) -> Optional[str]:
    if isinstance(move, bool) or not isinstance(move, int):
        return f"Not a column: {move!r}"
    if move < 0 or move >= board.width:
        return f"Column must be between 1 and {board.width}."
    return None


def play_match(
    red: Player,
    yellow: Player,
    *,
    board: Optional[Board] = None,
    on_move: Optional[MoveObserver] = None,
    on_reject: Optional[RejectObserver] = None,
) -> MatchResult:
    """
    Run one game. Red always moves first.

    A move outside the board or into a full column is refused without
    touching the board and the same player is asked again for the same ply.
    Each player gets exactly one of notify_win / notify_lose / notify_draw.
    """
    board = board if board is not None else Board()
    players = {RED: red, YELLOW: yellow}

    red.start(RED)
    yellow.start(YELLOW)
    log.info("match start: %s (R) vs %s (Y)", _player_name(red, "Red"), _player_name(yellow, "Yellow"))

    # A supplied board may already have moves on it; whoever has fewer pieces moves.
    current: Token = RED if board.plies_played() % 2 == 0 else YELLOW
    rejected = 0

    while True:
        w = winner_with_line(board)
        if w is not None:
            token, line = w
            break
        if board.remaining_capacity() == 0:
            token, line = None, []
            break

        player = players[current]
        while True:
            move = player.choose_move(board)
            reason = _out_of_range(board, move)
            if reason is None:
                try:
                    board.place(move, current)
                    break
                except ColumnFull as e:
                    reason = str(e)

            rejected += 1
            log.debug("rejected move %r from %s: %s", move, color_name(current), reason)
            if on_reject is not None:
                on_reject(board, current, move, reason)

        log.debug("%s plays column %d", color_name(current), int(move))
        if on_move is not None:
            on_move(board, current, Move(int(move)))
        current = other(current)

    if token is None:
        red.notify_draw(board)
        yellow.notify_draw(board)
        log.info("match end: draw after %d plies", board.plies_played())
    else:
        players[token].notify_win(board)
        players[other(token)].notify_lose(board)
        log.info("match end: %s wins after %d plies", color_name(token), board.plies_played())

    return MatchResult(
        winner=token,
        board=board,
        plies=board.plies_played(),
        rejected_moves=rejected,
        winning_line=line,
    )


class _ThinkingPlayer:
    """Shows the spinner before delegating to a computer player."""

    def __init__(self, inner: Player) -> None:
        self._inner = inner
        self.name = _player_name(inner, "AI")

    def __getattr__(self, item: str):
        return getattr(self._inner, item)

    def choose_move(self, board: Board) -> Move:
        ai_thinking(self.name)
        return self._inner.choose_move(board)


def run_game(red: Player, yellow: Player, show_thinking: bool = True) -> Optional[MatchResult]:
    """
    Terminal wrapper around play_match: redraws after every ply and shows
    the chosen column plus search stats when the player publishes them.
    Returns None if a player quit.
    """
    players = {RED: red, YELLOW: yellow}
    names = {RED: _player_name(red, "Player R"), YELLOW: _player_name(yellow, "Player Y")}

    def header(status: str, turn: Optional[Token]) -> str:
        head = f"R: {names[RED]} | Y: {names[YELLOW]}"
        if turn is not None:
            head += f" | Turn: {turn}"
        return f"{head}\n{status}" if status else head

    def wrap(player: Player) -> Player:
        if not show_thinking or getattr(player, "interactive", False):
            return player
        return _ThinkingPlayer(player)

    def on_move(board: Board, token: Token, move: Move) -> None:
        player = players[token]
        info = getattr(player, "last_info", None)
        if info and not getattr(player, "interactive", False):
            status = (
                f"{names[token]} chose {info.get('move_col')} | "
                f"d={info.get('depth')} | "
                f"nodes={info.get('nodes')} | "
                f"eval={info.get('eval')} | "
                f"{info.get('time_ms')}ms"
            )
        else:
            status = f"{names[token]} chose {int(move) + 1}"
        render(board, header(f"{status} | Next: Player {other(token)}", other(token)))

    def on_reject(board: Board, token: Token, move: object, reason: str) -> None:
        # Blind pickers (the random player) are re-asked without fuss.
        if getattr(players[token], "interactive", False):
            render(board, header(reason, token))

    board = Board()
    render(board, header("Player R starts.", RED))
    try:
        result = play_match(wrap(red), wrap(yellow), board=board, on_move=on_move, on_reject=on_reject)
    except GameAborted:
        render(board, header("Game quit.", None))
        return None

    if result.winner is None:
        status = "Draw game."
    else:
        status = f"Player {result.winner} ({names[result.winner]}) wins!"
    render(result.board, header(status, None), highlight=result.winning_line)
    return result
