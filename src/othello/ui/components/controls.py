import flet as ft
from typing import Callable, Dict

from othello.engine.board import Board
from othello.protocol.constants import PlayerMode

class GameControlsComponent:
    def __init__(self,
                 on_new_game: Callable,
                 on_undo: Callable,
                 on_hint_toggle: Callable,
                 on_player_mode_change: Callable[[str, str], None]):
        self.on_new_game = on_new_game
        self.on_undo = on_undo
        self.on_hint_toggle = on_hint_toggle
        self.on_player_mode_change = on_player_mode_change

        self.undo_button: ft.ElevatedButton | None = None
        self.hint_button: ft.ElevatedButton | None = None
        self.player_mode_selectors: Dict[str, ft.Dropdown] = {}
        self.container: ft.Container | None = None

    def create_sidebar(self, log_view: ft.Control, player_modes: Dict[str, str]) -> ft.Container:
        # Log Area
        log_container = ft.Container(
            content=log_view,
            border=ft.border.all(1, "grey400"),
            border_radius=5,
            padding=5,
            expand=True,
            bgcolor="grey100"
        )

        self.undo_button = ft.ElevatedButton("Undo", on_click=self.on_undo, disabled=True, expand=1)
        self.hint_button = ft.ElevatedButton("Show Hint", on_click=self.on_hint_toggle, expand=1)

        def build_selector(side: str, label: str) -> ft.Row:
            dropdown = ft.Dropdown(
                options=[
                    ft.dropdown.Option(PlayerMode.HUMAN, "Human"),
                    ft.dropdown.Option(PlayerMode.COMPUTER, "Computer"),
                ],
                value=player_modes.get(side, PlayerMode.HUMAN),
                on_change=lambda e, side=side: self.on_player_mode_change(side, e.control.value),
                dense=True,
                content_padding=ft.padding.symmetric(horizontal=8, vertical=4),
                border_color="rgba(0,0,0,0.2)",
                border_radius=8,
                width=140,
            )
            self.player_mode_selectors[side] = dropdown
            return ft.Row(
                [
                    ft.Text(label, weight=ft.FontWeight.BOLD),
                    dropdown,
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                spacing=8,
            )

        player_settings = ft.Column(
            [
                build_selector(Board.DARK, "Dark"),
                build_selector(Board.LIGHT, "Light"),
            ],
            spacing=6,
        )

        control_row = ft.Row(
            [self.undo_button, self.hint_button],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            spacing=10
        )

        self.container = ft.Container(
            content=ft.Column(
                [
                    ft.Text("Othello", size=30, weight=ft.FontWeight.BOLD),
                    ft.Divider(),
                    ft.Text("Players", size=20, weight=ft.FontWeight.BOLD),
                    player_settings,
                    ft.ElevatedButton("Start New Game", on_click=self.on_new_game, width=200),
                    ft.Divider(),
                    ft.Text("Controls", size=20, weight=ft.FontWeight.BOLD),
                    control_row,
                    ft.Text(
                        "Flank your opponent's discs to flip them. A side with no legal move passes; "
                        "the game ends when neither side can move.",
                        size=12,
                        color="#555555",
                    ),
                    ft.Divider(),
                    ft.Text("Game Log", size=16, weight=ft.FontWeight.BOLD),
                    log_container
                ],
                spacing=10,
                expand=True,
            ),
            width=300,
            padding=10,
            bgcolor="grey50"
        )
        return self.container

    def set_undo_disabled(self, disabled: bool):
        if self.undo_button:
            self.undo_button.disabled = disabled
            if self.undo_button.page:
                self.undo_button.update()

    def set_hint_active(self, active: bool):
        if self.hint_button:
            self.hint_button.text = "Hide Hint" if active else "Show Hint"
            if self.hint_button.page:
                self.hint_button.update()
