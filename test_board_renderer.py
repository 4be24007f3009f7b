"""
Tests for the board renderer.
"""

import numpy as np
import pytest

from display.board_renderer import BoardRenderer
from display.config import DisplayConfig
from logic.game_engine import GameEngine
from logic.game_state import EMPTY_BOARD


@pytest.fixture
def renderer():
    return BoardRenderer(DisplayConfig())


def pixel(image, x, y):
    return tuple(int(v) for v in image[y, x])


def test_render_empty_board(renderer):
    image = renderer.render(EMPTY_BOARD)
    size = DisplayConfig.BOARD_IMAGE_SIZE
    assert image.shape == (size, size, 3)
    assert image.dtype == np.uint8
    # Inside a cell, away from grid lines and labels
    assert pixel(image, 140, 140) == DisplayConfig.BACKGROUND_COLOR
    # Grid line between column 0 and 1
    assert pixel(image, renderer.cell_size, 75) == DisplayConfig.GRID_COLOR


def test_render_highlights_winning_line(renderer):
    engine = GameEngine.from_moves([0, 4, 1, 3, 2])
    image = renderer.render(engine.current_board, engine.win_result)

    for index in (0, 1, 2):
        x0, y0, x1, y1 = renderer.cell_bounds(index)
        assert pixel(image, x1 - 10, y1 - 10) == DisplayConfig.WIN_CELL_COLOR

    # Cell 3 has an O but is not on the line
    x0, y0, x1, y1 = renderer.cell_bounds(3)
    assert pixel(image, x1 - 10, y1 - 10) == DisplayConfig.BACKGROUND_COLOR


def test_render_without_winner_has_no_highlight(renderer):
    engine = GameEngine.from_moves([0, 4, 1])
    image = renderer.render(engine.current_board, engine.win_result)
    assert not np.all(image == DisplayConfig.WIN_CELL_COLOR, axis=-1).any()


def test_render_marks(renderer):
    engine = GameEngine.from_moves([0, 4])
    image = renderer.render(engine.current_board)

    # X: diagonal through the center of cell 0
    assert pixel(image, 75, 75) == DisplayConfig.X_COLOR
    # O: ring around the center of cell 4
    center = renderer.cell_size + renderer.cell_size // 2
    radius = renderer.cell_size // 2 - int(renderer.cell_size * DisplayConfig.MARK_MARGIN)
    assert pixel(image, center + radius, center) == DisplayConfig.O_COLOR
    assert pixel(image, center, center) == DisplayConfig.BACKGROUND_COLOR


def test_render_rgb_swaps_channels(renderer):
    engine = GameEngine.from_moves([0])
    bgr = renderer.render(engine.current_board)
    rgb = renderer.render_rgb(engine.current_board)
    assert pixel(rgb, 75, 75) == pixel(bgr, 75, 75)[::-1]


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, 0),
    (160, 10, 1),
    (449, 0, 2),
    (10, 160, 3),
    (225, 225, 4),
    (449, 449, 8),
    (450, 10, None),
    (-1, 0, None),
    (10, 1000, None),
])
def test_cell_at(renderer, x, y, expected):
    assert renderer.cell_at(x, y) == expected


def test_cell_bounds(renderer):
    assert renderer.cell_bounds(0) == (0, 0, 150, 150)
    assert renderer.cell_bounds(5) == (300, 150, 450, 300)
