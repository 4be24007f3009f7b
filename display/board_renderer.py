"""
Board renderer for TicTacToe.
Draws a board snapshot as an image and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from logic.game_state import Board, Mark, index_to_cell, cell_to_index
from logic.win_checker import WinResult

from .config import DisplayConfig


class BoardRenderer:
    """
    Draws the 3x3 board with OpenCV.

    X is drawn as a cross, O as a circle. Cells of the winning line
    are filled with the highlight color.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if None.
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_IMAGE_SIZE
        self.cell_size = self.size // self.config.BOARD_SIZE

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel bounds of a cell.

        Returns:
            (x0, y0, x1, y1), top-left and bottom-right corners.
        """
        row, col = index_to_cell(index)
        x0 = col * self.cell_size
        y0 = row * self.cell_size
        return x0, y0, x0 + self.cell_size, y0 + self.cell_size

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find the cell under a pixel position.

        Args:
            x: Horizontal pixel position in the image.
            y: Vertical pixel position in the image.

        Returns:
            Cell index (0-8), or None if the point is outside the board.
        """
        if not (0 <= x < self.cell_size * 3 and 0 <= y < self.cell_size * 3):
            return None
        return cell_to_index(int(y) // self.cell_size, int(x) // self.cell_size)

    def render(self, board: Board, win_result: Optional[WinResult] = None) -> np.ndarray:
        """
        Create an image of a board.

        Args:
            board: The snapshot to draw.
            win_result: Win check of the board, used to highlight the line.

        Returns:
            BGR image of the board.
        """
        cfg = self.config
        image = np.full((self.size, self.size, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

        # Highlight first, so grid and marks are drawn on top
        if win_result is not None and win_result.line:
            for index in win_result.line:
                x0, y0, x1, y1 = self.cell_bounds(index)
                cv2.rectangle(image, (x0, y0), (x1, y1), cfg.WIN_CELL_COLOR, -1)

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell is not None:
                self._draw_mark(image, index, cell)
            if cfg.SHOW_LABELS:
                x0, y0, _, _ = self.cell_bounds(index)
                cv2.putText(image, str(index), (x0 + 8, y0 + 22),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.6, cfg.LABEL_COLOR, 1)

        return image

    def render_rgb(self, board: Board, win_result: Optional[WinResult] = None) -> np.ndarray:
        """Same as render(), converted to RGB for PIL."""
        return cv2.cvtColor(self.render(board, win_result), cv2.COLOR_BGR2RGB)

    def _draw_grid(self, image: np.ndarray):
        cfg = self.config
        thickness = cfg.GRID_LINE_THICKNESS
        for i in range(1, cfg.BOARD_SIZE):
            pos = i * self.cell_size
            # Vertical
            cv2.line(image, (pos, 0), (pos, self.size), cfg.GRID_COLOR, thickness)
            # Horizontal
            cv2.line(image, (0, pos), (self.size, pos), cfg.GRID_COLOR, thickness)
        # Border
        cv2.rectangle(image, (0, 0), (self.size - 1, self.size - 1), cfg.GRID_COLOR, thickness)

    def _draw_mark(self, image: np.ndarray, index: int, mark: Mark):
        cfg = self.config
        x0, y0, _, _ = self.cell_bounds(index)
        cx = x0 + self.cell_size // 2
        cy = y0 + self.cell_size // 2
        margin = int(self.cell_size * cfg.MARK_MARGIN)
        half = self.cell_size // 2 - margin

        if mark == Mark.X:
            cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                     cfg.X_COLOR, cfg.MARK_THICKNESS)
            cv2.line(image, (cx + half, cy - half), (cx - half, cy + half),
                     cfg.X_COLOR, cfg.MARK_THICKNESS)
        else:
            cv2.circle(image, (cx, cy), half, cfg.O_COLOR, cfg.MARK_THICKNESS)
