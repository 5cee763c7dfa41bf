import flet as ft

from othello.engine.board import Board, coord_to_str, create_initial_board

HINT_COLOR = "#ffca28"
LAST_MOVE_COLOR = "#ef5350"


class BoardComponent:
    def __init__(self, on_click_callback, cell_size: float = 60):
        self.board_size = Board.SIZE
        self.on_click = on_click_callback
        self.cell_size = cell_size

        # State
        self.board_cells = {} # Map coord -> Piece Container
        self.cell_containers = {} # Map coord -> Cell Container
        self.cell_base_colors = {}
        self.highlight_markers = {}
        self.board_grid = None
        self._current_valid_moves = []
        self._hint = None
        self._last_move = None

    def create_board(self) -> ft.Column:
        rows = []
        for r in range(self.board_size):
            row_controls = []
            for c in range(self.board_size):
                coord = coord_to_str(r, c)
                piece_size = int(self.cell_size * 0.72)
                base_color = "#1B5E20" if (r + c) % 2 == 0 else "#215732"

                # Disc
                piece = ft.Container(
                    width=piece_size,
                    height=piece_size,
                    border_radius=piece_size / 2,
                    bgcolor=None,
                )

                # Legal move marker
                marker_size = max(12, int(self.cell_size * 0.3))
                marker = ft.Container(
                    width=marker_size,
                    height=marker_size,
                    border_radius=marker_size / 2,
                    bgcolor="rgba(165,214,167,0.85)",
                    opacity=0,
                    animate_opacity=300
                )

                stack = ft.Stack(
                    [piece, marker],
                    alignment=ft.alignment.center
                )

                cell = ft.Container(
                    content=stack,
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor=base_color,
                    border=ft.border.all(1, "black"),
                    on_click=lambda e, coord=coord: self.on_click(coord),
                    alignment=ft.alignment.center,
                    data=coord
                )

                self.board_cells[coord] = piece
                self.cell_containers[coord] = cell
                self.cell_base_colors[coord] = base_color
                self.highlight_markers[coord] = marker
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def update_piece(self, coord: str, side: str | None):
        piece = self.board_cells.get(coord)
        if piece is None:
            return
        if side == Board.DARK:
            piece.bgcolor = "#0f0f0f"
            piece.gradient = ft.RadialGradient(
                radius=1.2,
                colors=["#2f2f2f", "#060606"]
            )
            piece.border = ft.border.all(1, "#4f4f4f")
            piece.shadow = ft.BoxShadow(
                blur_radius=20,
                spread_radius=1,
                color="rgba(0,0,0,0.55)",
                offset=ft.Offset(0, 6)
            )
        elif side == Board.LIGHT:
            piece.bgcolor = "#f4f4f4"
            piece.gradient = ft.RadialGradient(
                radius=1.2,
                colors=["#ffffff", "#d5d5d5"]
            )
            piece.border = ft.border.all(1, "#c5c5c5")
            piece.shadow = ft.BoxShadow(
                blur_radius=16,
                spread_radius=1,
                color="rgba(0,0,0,0.35)",
                offset=ft.Offset(0, 4)
            )
        else:
            piece.bgcolor = None
            piece.gradient = None
            piece.border = None
            piece.shadow = None
        if piece.page:
            piece.update()

    def render_state(self, state_str: str):
        board = Board.from_state_string(state_str)
        for r in range(self.board_size):
            for c in range(self.board_size):
                self.update_piece(coord_to_str(r, c), board.get_piece(r, c))

    def highlight_valid_moves(self, moves: list[str]):
        self._current_valid_moves = list(moves)
        self._refresh_cells()

    def show_hint(self, coord: str | None):
        self._hint = coord
        self._refresh_cells()

    def mark_last_move(self, coord: str | None):
        self._last_move = coord
        self._refresh_cells()

    def is_valid_move(self, coord: str) -> bool:
        return coord in self._current_valid_moves

    def _refresh_cells(self):
        move_set = set(self._current_valid_moves)
        for coord, cell in self.cell_containers.items():
            if coord == self._hint:
                cell.border = ft.border.all(3, HINT_COLOR)
            elif coord == self._last_move:
                cell.border = ft.border.all(2, LAST_MOVE_COLOR)
            else:
                cell.border = ft.border.all(1, "black")
            marker = self.highlight_markers.get(coord)
            if marker:
                marker.opacity = 1 if coord in move_set else 0
        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def resize_cells(self, new_cell_size: float):
        self.cell_size = new_cell_size
        if not self.board_cells:
            return

        piece_size = max(12, int(self.cell_size * 0.72))
        for coord, cell in self.cell_containers.items():
            cell.width = self.cell_size
            cell.height = self.cell_size
            piece = self.board_cells[coord]
            piece.width = piece_size
            piece.height = piece_size
            piece.border_radius = piece_size / 2

            marker = self.highlight_markers.get(coord)
            if marker:
                marker_size = max(12, int(self.cell_size * 0.3))
                marker.width = marker_size
                marker.height = marker_size
                marker.border_radius = marker_size / 2

        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def reset(self):
        self._current_valid_moves = []
        self._hint = None
        self._last_move = None
        self.render_state(create_initial_board().to_state_string())
        self._refresh_cells()
