from __future__ import annotations

import logging
import threading
import time
from typing import Iterable, Optional

from othello.engine.board import Board, coord_to_str, str_to_coord
from othello.engine.players import HeuristicPlayer, Player
from othello.engine.session import GameSession, IllegalMoveError, MoveRequest
from othello.engine.turns import GameOver, ToMove
from othello.protocol.constants import NO_VALUE, Command, PlayerMode, Response
from othello.protocol.interface import EngineInterface

logger = logging.getLogger(__name__)

RESULT_WINNERS = {Board.DARK: "DARK", Board.LIGHT: "LIGHT", None: "DRAW"}


class LocalEngine(EngineInterface):
    """In-process engine driving a GameSession through text commands.

    When the side to move is computer controlled the engine itself asks its
    player for a move and applies it after ``think_delay`` seconds. Anything
    that changes the game in the meantime (new game, undo, mode change)
    makes that pending move stale and it is dropped.
    """

    def __init__(
        self,
        think_delay: float = 0.5,
        computer_sides: Iterable[str] = (Board.LIGHT,),
        player: Optional[Player] = None,
    ):
        super().__init__()
        self.think_delay = max(0.0, think_delay)
        self.player = player or HeuristicPlayer()
        self.session = GameSession(set(computer_sides))
        self._lock = threading.RLock()
        self._running = False
        self._worker: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # EngineInterface lifecycle
    # ------------------------------------------------------------------
    def start(self):
        with self._lock:
            self._running = True
            self._emit(Response.READY)
            self._schedule_computer_move()

    def stop(self):
        with self._lock:
            self._running = False
            self.session.cancel_pending()

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until no computer move is pending. Returns False on timeout."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            worker = self._worker
            if worker is None or not worker.is_alive():
                if worker is self._worker:
                    return True
                continue
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return False
            worker.join(remaining)

    # ------------------------------------------------------------------
    # Command handling
    # ------------------------------------------------------------------
    def send_command(self, command: str):
        if not self._running:
            return

        parts = command.split()
        if not parts:
            return

        cmd = parts[0]
        with self._lock:
            if cmd == Command.INIT:
                self.session.restart()
                self._emit(Response.READY)
                self._schedule_computer_move()
            elif cmd == Command.NEWGAME:
                self._handle_newgame()
            elif cmd == Command.PLAY:
                self._handle_play(parts)
            elif cmd == Command.UNDO:
                self._handle_undo(self.session.undo())
            elif cmd == Command.UNDOTURN:
                self._handle_undo(self.session.undo_turn() > 0)
            elif cmd == Command.BOARD:
                self._emit_board_update()
            elif cmd == Command.VALID_MOVES:
                self._emit_valid_moves()
            elif cmd == Command.HINT:
                self._emit_hint()
            elif cmd == Command.PLAYER:
                self._handle_player(parts)
            elif cmd == Command.QUIT:
                self.stop()
            else:
                self._emit(f"{Response.ERROR} Unknown command {cmd}")

    # ------------------------------------------------------------------
    # Shared handlers
    # ------------------------------------------------------------------
    def _handle_newgame(self):
        self.session.restart()
        self._emit(Response.OK)
        self._emit_board_update()
        self._schedule_computer_move()

    def _handle_play(self, parts):
        if len(parts) < 2:
            self._emit(f"{Response.ERROR} Missing coordinate")
            return

        coord = parts[1]
        try:
            r, c = str_to_coord(coord)
        except ValueError:
            self._emit(f"{Response.ERROR} Invalid coordinate format")
            return

        side = self.session.current_side
        if self.session.is_computer(side):
            self._emit(f"{Response.ERROR} Not a human turn")
            return
        try:
            self.session.play(r, c)
        except IllegalMoveError as exc:
            self._emit(f"{Response.ERROR} {exc}")
            return
        self._emit(Response.OK)
        self._after_move(side, coord_to_str(r, c))

    def _handle_undo(self, undone: bool):
        if undone:
            self._emit(Response.OK)
            self._emit_board_update()
            self._schedule_computer_move()
        else:
            self._emit(f"{Response.ERROR} Cannot undo")

    def _handle_player(self, parts):
        if len(parts) < 3 or parts[2] not in (PlayerMode.HUMAN, PlayerMode.COMPUTER):
            self._emit(f"{Response.ERROR} Usage: PLAYER <DARK|LIGHT> <human|computer>")
            return
        try:
            self.session.set_computer_side(parts[1], parts[2] == PlayerMode.COMPUTER)
        except ValueError as exc:
            self._emit(f"{Response.ERROR} {exc}")
            return
        self._emit(Response.OK)
        self._schedule_computer_move()

    def _emit_valid_moves(self):
        moves = self.session.legal_moves()
        moves_str = " ".join(coord_to_str(r, c) for r, c in moves)
        self._emit(f"{Response.VALID_MOVES} {moves_str}".rstrip())

    def _emit_hint(self):
        move = self.session.hint()
        self._emit(f"{Response.HINT} {coord_to_str(*move) if move else NO_VALUE}")

    # ------------------------------------------------------------------
    # Computer turn
    # ------------------------------------------------------------------
    def _schedule_computer_move(self):
        request = self.session.pending_request()
        if request is None:
            return
        self._emit(f"{Response.THINKING} {request.side}")
        worker = threading.Thread(target=self._run_computer_turn, args=(request,), daemon=True)
        self._worker = worker
        worker.start()

    def _run_computer_turn(self, request: MoveRequest):
        time.sleep(self.think_delay)
        if request.generation != self.session.generation:
            logger.debug("Pending move for %s cancelled before thinking", request.side)
            return

        move = self.player.choose_move(request.board, request.side)

        with self._lock:
            if not self._running:
                return
            try:
                state = self.session.submit(request, move)
            except IllegalMoveError as exc:
                self._emit(f"{Response.ERROR} {exc}")
                return
            if state is None:
                return
            self._after_move(request.side, coord_to_str(*move))

    # ------------------------------------------------------------------
    # Board helpers
    # ------------------------------------------------------------------
    def _after_move(self, side: str, move_str: str):
        self._emit(f"{Response.MOVE} {side} {move_str}")
        state = self.session.state
        if isinstance(state, ToMove) and state.passed:
            self._emit(f"{Response.PASS} {state.passed}")
        self._emit_board_update()
        if isinstance(state, GameOver):
            self._emit(f"{Response.RESULT} {RESULT_WINNERS[state.winner]} {state.dark} {state.light}")
            return
        self._schedule_computer_move()

    def _emit_board_update(self):
        side = self.session.current_side or NO_VALUE
        self._emit(f"{Response.BOARD} {side} {self.session.board.to_state_string()}")
