import asyncio
from typing import Iterable

import flet as ft

from othello.engine.board import Board, side_label
from othello.protocol.constants import NO_VALUE, Command, PlayerMode, Response
from othello.protocol.interface import EngineInterface
from othello.ui.components.board import BoardComponent
from othello.ui.components.controls import GameControlsComponent
from othello.ui.components.scoreboard import ScoreboardComponent


class OthelloApp:
    def __init__(self, engine: EngineInterface, computer_sides: Iterable[str] = (Board.LIGHT,)):
        self.engine = engine
        self.board_size = Board.SIZE
        self.engine.set_callback(self.handle_engine_message)
        computer_sides = set(computer_sides)
        self.player_modes = {
            side: PlayerMode.COMPUTER if side in computer_sides else PlayerMode.HUMAN
            for side in (Board.DARK, Board.LIGHT)
        }

        # Components
        self.board_component = BoardComponent(on_click_callback=self.on_board_click)
        self.scoreboard_component = ScoreboardComponent()
        self.controls_component = GameControlsComponent(
            on_new_game=self.on_new_game,
            on_undo=self.on_undo,
            on_hint_toggle=self.on_hint_toggle,
            on_player_mode_change=self.on_player_mode_change,
        )

        # UI State
        self.log_view = ft.ListView(expand=True, spacing=4, padding=0, auto_scroll=True)
        self.current_turn: str | None = Board.DARK
        self.game_started = False
        self.show_hint = False
        self.moves_played = 0
        self.board_wrapper = None
        self.latest_scores = {Board.DARK: 2, Board.LIGHT: 2}
        self._pending_status_message: str | None = None
        self._showing_notice = False
        self._sync_scoreboard_labels()

        # Layout Constants
        self.board_padding = 24
        self._last_viewport = (None, None)
        self._board_area_padding_h = 16.0
        self._board_area_padding_v = 16.0
        self._board_column_spacing = 16.0

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Othello"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.window.width = 1100
        page.window.height = 860
        page.padding = 20

        sidebar = self.controls_component.create_sidebar(self.log_view, self.player_modes)
        board_grid = self.board_component.create_board()
        scoreboard = self.scoreboard_component.create()

        initial_board_size = self.board_size * self.board_component.cell_size + self.board_padding * 2
        self.board_wrapper = ft.Container(
            content=board_grid,
            width=initial_board_size,
            height=initial_board_size,
            padding=self.board_padding,
            alignment=ft.alignment.center,
            border_radius=24,
            gradient=ft.LinearGradient(
                begin=ft.alignment.top_left,
                end=ft.alignment.bottom_right,
                colors=["#0f3d14", "#145a1e"]
            ),
            shadow=ft.BoxShadow(
                blur_radius=25,
                spread_radius=2,
                color="rgba(0,0,0,0.25)",
                offset=ft.Offset(0, 12)
            )
        )

        self.board_area = ft.Container(
            content=ft.Column(
                [
                    scoreboard,
                    ft.Container(content=self.board_wrapper, alignment=ft.alignment.center, expand=True),
                ],
                spacing=self._board_column_spacing,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                expand=True,
            ),
            alignment=ft.alignment.center,
            expand=True,
            padding=ft.padding.symmetric(
                horizontal=self._board_area_padding_h,
                vertical=self._board_area_padding_v,
            ),
            bgcolor="grey200"
        )

        page.add(
            ft.Row(
                [
                    sidebar,
                    ft.VerticalDivider(width=1),
                    self.board_area
                ],
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.STRETCH
            )
        )

        page.update()
        self.adjust_board_size()
        self.board_component.reset()

        self.engine.start()
        self.log("System: Engine started")
        for side, mode in self.player_modes.items():
            self.engine.send_command(f"{Command.PLAYER} {side} {mode}")

        # Auto-start new game
        self.on_new_game(None)

        page.run_task(self._monitor_viewport)

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def on_new_game(self, e):
        self.log("GUI: Starting New Game...")
        self.game_started = True
        self.moves_played = 0
        self._pending_status_message = None
        self.board_component.reset()
        self.controls_component.set_undo_disabled(True)
        self.engine.send_command(Command.NEWGAME)

    def on_undo(self, e):
        self.log("GUI: Undo")
        self.game_started = True
        self.board_component.mark_last_move(None)
        self.engine.send_command(Command.UNDOTURN)

    def on_hint_toggle(self, e):
        self.show_hint = not self.show_hint
        self.controls_component.set_hint_active(self.show_hint)
        if self.show_hint and self._is_human_player(self.current_turn):
            self.engine.send_command(Command.HINT)
        else:
            self.board_component.show_hint(None)

    def on_player_mode_change(self, side: str, mode: str):
        if mode not in (PlayerMode.HUMAN, PlayerMode.COMPUTER):
            return
        if self.player_modes.get(side) == mode:
            return
        self.player_modes[side] = mode
        self._sync_scoreboard_labels()
        self.log(f"Settings: {side_label(side)} played by {self._player_label(side)}")
        self.engine.send_command(f"{Command.PLAYER} {side} {mode}")
        self.engine.send_command(Command.BOARD)

    def on_board_click(self, coord):
        if not self.game_started:
            return

        if not self._is_human_player(self.current_turn):
            self.log("Warning: Not your turn!")
            return

        if not self.board_component.is_valid_move(coord):
            self.log(f"Warning: {coord} is not a legal move. Choose a marked cell.")
            return

        self.log(f"GUI: Clicked {coord}")
        self.board_component.highlight_valid_moves([])
        self.board_component.show_hint(None)
        self.engine.send_command(f"{Command.PLAY} {coord}")

    # ------------------------------------------------------------------
    # Engine messages
    # ------------------------------------------------------------------
    def log(self, message: str):
        self.log_view.controls.append(
            ft.Text(message, font_family="monospace", size=10, selectable=True)
        )
        if self.log_view.page:
            self.log_view.update()

    def handle_engine_message(self, message: str):
        parts = message.split()
        if not parts:
            return
        cmd = parts[0]
        if cmd not in (Response.BOARD, Response.VALID_MOVES, Response.HINT, Response.OK):
            self.log(f"Engine: {message}")

        if cmd == Response.BOARD and len(parts) > 2:
            # BOARD <side or -> <state_string>
            side = parts[1] if parts[1] != NO_VALUE else None
            state_str = parts[2]
            self.current_turn = side
            self.board_component.render_state(state_str)
            self.update_scores_from_state(state_str)
            self._refresh_status()
            self._request_turn_info()

        elif cmd == Response.VALID_MOVES:
            if self._is_human_player(self.current_turn):
                self.board_component.highlight_valid_moves(parts[1:])

        elif cmd == Response.HINT and len(parts) > 1:
            coord = parts[1] if parts[1] != NO_VALUE else None
            self.board_component.show_hint(coord if self.show_hint else None)

        elif cmd == Response.MOVE and len(parts) > 2:
            self.moves_played += 1
            self.board_component.mark_last_move(parts[2])

        elif cmd == Response.PASS and len(parts) > 1:
            passed = parts[1]
            other = Board.LIGHT if passed == Board.DARK else Board.DARK
            self._pending_status_message = (
                f"{side_label(passed)} has no legal move and passes. {side_label(other)} plays again."
            )

        elif cmd == Response.THINKING and len(parts) > 1:
            self.board_component.highlight_valid_moves([])
            self.board_component.show_hint(None)
            self.controls_component.set_undo_disabled(True)
            if not self._showing_notice:
                self.scoreboard_component.set_status(f"{side_label(parts[1])} (Computer) is thinking...")

        elif cmd == Response.RESULT and len(parts) > 3:
            winner, dark, light = parts[1], parts[2], parts[3]
            self.game_started = False
            self.controls_component.set_undo_disabled(self.moves_played == 0)
            if winner == "DRAW":
                self.scoreboard_component.set_status(f"Draw! {dark} - {light}", color="#1b5e20")
            else:
                self.scoreboard_component.set_status(
                    f"{side_label(winner)} wins! {dark} - {light}",
                    color="#b71c1c"
                )

    def update_scores_from_state(self, state_str: str):
        dark = state_str.count("D")
        light = state_str.count("L")
        self.latest_scores = {Board.DARK: dark, Board.LIGHT: light}
        self.scoreboard_component.update_scores(dark, light)

    def _refresh_status(self):
        if self.current_turn is None:
            return
        if self._pending_status_message:
            self.scoreboard_component.set_status(self._pending_status_message, color="#e65100")
            self._pending_status_message = None
            self._showing_notice = True
        else:
            self._showing_notice = False
            self.scoreboard_component.set_status(
                f"{side_label(self.current_turn)} ({self._player_label(self.current_turn)}) to move"
            )

    def _request_turn_info(self):
        if self.current_turn is None or not self._is_human_player(self.current_turn):
            self.board_component.highlight_valid_moves([])
            self.board_component.show_hint(None)
            return
        self.controls_component.set_undo_disabled(self.moves_played == 0)
        self.engine.send_command(Command.VALID_MOVES)
        if self.show_hint:
            self.engine.send_command(Command.HINT)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def adjust_board_size(self, width: float | None = None, height: float | None = None):
        if not getattr(self, "page", None) or not self.board_wrapper:
            return

        if width is None:
            width = getattr(self.page, "window_width", None) or self.page.width
        if height is None:
            height = getattr(self.page, "window_height", None) or self.page.height
        if width is None or height is None:
            return

        if self._last_viewport == (width, height):
            return
        self._last_viewport = (width, height)

        sidebar_container = self.controls_component.container
        sidebar_width = float(sidebar_container.width) if sidebar_container and sidebar_container.width else 0.0
        page_padding = float(getattr(self.page, "padding", 0) or 0)
        safety_margin = 36.0
        available_width = max(
            200.0,
            float(width) - page_padding * 2 - sidebar_width - 1.0 - self._board_area_padding_h * 2 - safety_margin,
        )
        vertical_chrome = (
            page_padding * 2
            + self._board_area_padding_v * 2
            + self._board_column_spacing
            + float(self.scoreboard_component.height)
        )
        available_height = max(200.0, float(height) - vertical_chrome)
        board_pixel = min(available_width, available_height)
        usable_space = max(100.0, board_pixel - 2 * self.board_padding)
        new_cell_size = max(32.0, usable_space / self.board_size)

        if abs(new_cell_size - self.board_component.cell_size) < 0.5 and abs(float(self.board_wrapper.width or 0) - board_pixel) < 0.5:
            return

        self.board_wrapper.width = board_pixel
        self.board_wrapper.height = board_pixel
        self.board_wrapper.update()
        self.board_component.resize_cells(new_cell_size)

    async def _monitor_viewport(self):
        await asyncio.sleep(0.2)
        prev_w, prev_h = self._last_viewport
        while True:
            current_w = getattr(self.page, "window_width", None) or self.page.width
            current_h = getattr(self.page, "window_height", None) or self.page.height
            if current_w and current_h and (current_w != prev_w or current_h != prev_h):
                self.adjust_board_size(current_w, current_h)
                prev_w, prev_h = current_w, current_h
            await asyncio.sleep(0.25)

    # ------------------------------------------------------------------
    # Player helpers
    # ------------------------------------------------------------------
    def _is_human_player(self, side: str | None) -> bool:
        return side is not None and self.player_modes.get(side) == PlayerMode.HUMAN

    def _player_label(self, side: str) -> str:
        return "Human" if self._is_human_player(side) else "Computer"

    def _sync_scoreboard_labels(self):
        self.scoreboard_component.set_player_label(Board.DARK, self._player_label(Board.DARK))
        self.scoreboard_component.set_player_label(Board.LIGHT, self._player_label(Board.LIGHT))
