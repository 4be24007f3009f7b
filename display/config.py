"""
Display configuration for TicTacToe.
Image size and colors used when drawing the board.

Colors are BGR tuples, as used by OpenCV.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== IMAGE SETTINGS ====================
    # Output image is square
    BOARD_IMAGE_SIZE = 450
    BOARD_SIZE = 3

    GRID_LINE_THICKNESS = 3
    MARK_THICKNESS = 8
    # Gap between a mark and the cell border, as a fraction of the cell
    MARK_MARGIN = 0.2

    # ==================== COLORS ====================
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    X_COLOR = (255, 0, 0)        # Blue
    O_COLOR = (0, 0, 255)        # Red
    WIN_CELL_COLOR = (172, 239, 134)  # Light green
    LABEL_COLOR = (100, 100, 100)
    SHOW_LABELS = True

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_BG = '#1a1a2e'
    PANEL_BG = '#16213e'
