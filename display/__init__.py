"""
Display module for TicTacToe.
Draws board snapshots as images for the UI.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
