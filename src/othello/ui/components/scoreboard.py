import flet as ft

from othello.engine.board import Board


class ScoreboardComponent:
    def __init__(self, height: float = 82):
        self.height = height
        self.dark_label = "Human"
        self.light_label = "Computer"
        self.dark_score = 2
        self.light_score = 2
        self.dark_name_text = ft.Text(self._name_text(Board.DARK), size=20, weight=ft.FontWeight.BOLD, color="#111111")
        self.light_name_text = ft.Text(self._name_text(Board.LIGHT), size=20, weight=ft.FontWeight.BOLD, color="#111111", text_align=ft.TextAlign.RIGHT)
        self.dark_score_text = ft.Text(str(self.dark_score), size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.light_score_text = ft.Text(str(self.light_score), size=26, weight=ft.FontWeight.BOLD, color="#111111")
        self.status_text = ft.Text("Starting...", size=13, color="#333333", weight=ft.FontWeight.BOLD)
        self.container = None

    def create(self) -> ft.Container:
        header_row = ft.Row(
            [
                ft.Text("DARK", size=11, color="#666666"),
                self.status_text,
                ft.Text("LIGHT", size=11, color="#666666")
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER
        )

        scores_center = ft.Row(
            [self.dark_score_text, self.light_score_text],
            spacing=40,
            alignment=ft.MainAxisAlignment.CENTER,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
        score_row = ft.Row(
            [
                ft.Container(content=self.dark_name_text, alignment=ft.alignment.center_left, expand=1),
                scores_center,
                ft.Container(content=self.light_name_text, alignment=ft.alignment.center_right, expand=1),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        self.container = ft.Container(
            content=ft.Column(
                [header_row, score_row],
                spacing=4,
                alignment=ft.MainAxisAlignment.START,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=14),
            bgcolor="#f9f9f9",
            border_radius=14,
            border=ft.border.all(1, "#e0e0e0"),
            shadow=ft.BoxShadow(
                blur_radius=6,
                color="rgba(0,0,0,0.08)",
                offset=ft.Offset(0, 3)
            ),
            height=self.height,
            alignment=ft.alignment.center
        )
        return self.container

    def update_scores(self, dark: int, light: int):
        self.dark_score = dark
        self.light_score = light
        self.dark_score_text.value = str(self.dark_score)
        self.light_score_text.value = str(self.light_score)
        if self.dark_score_text.page:
            self.dark_score_text.update()
        if self.light_score_text.page:
            self.light_score_text.update()

    def set_player_label(self, side: str, label: str):
        if side == Board.DARK:
            self.dark_label = label or "Dark"
            self.dark_name_text.value = self._name_text(Board.DARK)
            if self.dark_name_text.page:
                self.dark_name_text.update()
        elif side == Board.LIGHT:
            self.light_label = label or "Light"
            self.light_name_text.value = self._name_text(Board.LIGHT)
            if self.light_name_text.page:
                self.light_name_text.update()

    def set_status(self, message: str, color: str = "#333333"):
        self.status_text.value = message
        self.status_text.color = color
        if self.status_text.page:
            self.status_text.update()

    def _name_text(self, side: str) -> str:
        if side == Board.DARK:
            return f"{self.dark_label} ●"
        return f"○ {self.light_label}"
