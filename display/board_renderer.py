"""
Board renderer for TicTacToe.
Draws the game into an OpenCV image and maps mouse pixels back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.config import GameConfig
from logic.game_state import Piece
from logic.win_checker import WinningMove
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws a TicTacToe board.

    Layers, bottom to top:
    - Pieces (crosses and circles)
    - Grid lines
    - Hover highlight
    - Winning line and end message
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the renderer.

        Args:
            game_config: Game configuration (board width).
            config: Display configuration. Uses defaults if not provided.
        """
        self.game_config = game_config or GameConfig()
        self.config = config or DisplayConfig()

        # How each piece gets drawn
        self.piece_drawers = {
            Piece.EMPTY: None,
            Piece.CROSS: self._draw_cross,
            Piece.CIRCLE: self._draw_circle,
        }

    @property
    def size(self) -> int:
        """Width (and height) of the rendered image in pixels."""
        return self.config.TILE_SIZE * self.game_config.BOARD_WIDTH

    def pixel_to_index(self, px: int, py: int) -> Optional[int]:
        """
        Convert a pixel position to a cell index.

        Args:
            px: Pixel X coordinate (0 = left edge of the board).
            py: Pixel Y coordinate (0 = top edge of the board).

        Returns:
            Cell index, or None if the pixel is off the board.
        """
        if px < 0 or py < 0:
            return None

        x = int(px) // self.config.TILE_SIZE
        y = int(py) // self.config.TILE_SIZE
        if not self.game_config.in_bounds(x, y):
            return None
        return self.game_config.cell_to_index(x, y)

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel centre of a cell."""
        x, y = self.game_config.index_to_cell(index)
        tile = self.config.TILE_SIZE
        return x * tile + tile // 2, y * tile + tile // 2

    def render(
        self,
        board: Sequence[Piece],
        hover_index: Optional[int] = None,
        winning_move: Optional[WinningMove] = None,
        end_message: str = ""
    ) -> np.ndarray:
        """
        Draw the whole board.

        Args:
            board: Flat row-major board.
            hover_index: Cell under the mouse, highlighted if given.
            winning_move: Winning run to strike through, if any.
            end_message: Text shown in a banner at the top, if any.

        Returns:
            BGR image of shape (size, size, 3).
        """
        frame = np.zeros((self.size, self.size, 3), dtype=np.uint8)
        frame[:] = self.config.BACKGROUND_COLOR

        for index, piece in enumerate(board):
            drawer = self.piece_drawers[piece]
            if drawer is not None:
                drawer(frame, index)

        self._draw_grid_lines(frame)

        if hover_index is not None:
            self._draw_highlight(frame, hover_index)

        if winning_move is not None:
            self._draw_winning_line(frame, winning_move)

        if end_message:
            self._draw_banner(frame, end_message)

        return frame

    def _cell_box(self, index: int, inset: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Top-left and bottom-right corner of a cell, shrunk by inset."""
        x, y = self.game_config.index_to_cell(index)
        tile = self.config.TILE_SIZE
        top_left = (x * tile + inset, y * tile + inset)
        bottom_right = ((x + 1) * tile - inset, (y + 1) * tile - inset)
        return top_left, bottom_right

    def _draw_cross(self, frame: np.ndarray, index: int):
        (x1, y1), (x2, y2) = self._cell_box(index, self.config.PIECE_MARGIN)
        color = self.config.CROSS_COLOR
        thickness = self.config.PIECE_THICKNESS
        cv2.line(frame, (x1, y1), (x2, y2), color, thickness, cv2.LINE_AA)
        cv2.line(frame, (x1, y2), (x2, y1), color, thickness, cv2.LINE_AA)

    def _draw_circle(self, frame: np.ndarray, index: int):
        radius = self.config.TILE_SIZE // 2 - self.config.PIECE_MARGIN
        cv2.circle(
            frame, self.cell_center(index), radius,
            self.config.CIRCLE_COLOR, self.config.PIECE_THICKNESS, cv2.LINE_AA
        )

    def _draw_grid_lines(self, frame: np.ndarray):
        tile = self.config.TILE_SIZE
        for i in range(1, self.game_config.BOARD_WIDTH):
            cv2.line(frame, (0, i * tile), (self.size, i * tile),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            cv2.line(frame, (i * tile, 0), (i * tile, self.size),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)

    def _draw_highlight(self, frame: np.ndarray, index: int):
        if not (0 <= index < self.game_config.cell_count):
            return
        top_left, bottom_right = self._cell_box(index, self.config.HIGHLIGHT_INSET)
        cv2.rectangle(frame, top_left, bottom_right, self.config.HIGHLIGHT_COLOR, 1)

    def _draw_winning_line(self, frame: np.ndarray, winning_move: WinningMove):
        """Strike through PIECES_TO_WIN cells, from the anchor to the far end."""
        start = self.cell_center(winning_move.anchor_index(self.game_config))
        end_x, end_y = winning_move.end_cell(self.game_config)
        end = self.cell_center(self.game_config.cell_to_index(end_x, end_y))

        # Reach a little past the centres, towards the cell borders
        dx, dy = end[0] - start[0], end[1] - start[1]
        length = max(abs(dx), abs(dy))
        if length:
            reach = self.config.TILE_SIZE // 3
            start = (start[0] - dx * reach // length, start[1] - dy * reach // length)
            end = (end[0] + dx * reach // length, end[1] + dy * reach // length)

        cv2.line(frame, start, end, self.config.WIN_LINE_COLOR,
                 self.config.WIN_LINE_THICKNESS, cv2.LINE_AA)

    def _draw_banner(self, frame: np.ndarray, message: str):
        banner_height = self.config.TILE_SIZE // 2
        cv2.rectangle(frame, (0, 0), (self.size, banner_height), self.config.BANNER_COLOR, -1)

        (text_width, text_height), _ = cv2.getTextSize(
            message, cv2.FONT_HERSHEY_SIMPLEX,
            self.config.FONT_SCALE, self.config.FONT_THICKNESS
        )
        x = max((self.size - text_width) // 2, 0)
        y = (banner_height + text_height) // 2
        cv2.putText(
            frame, message, (x, y),
            cv2.FONT_HERSHEY_SIMPLEX, self.config.FONT_SCALE,
            self.config.TEXT_COLOR, self.config.FONT_THICKNESS
        )
