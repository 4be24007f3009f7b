"""
Game configuration for TicTacToe.
Status texts, history labels and move handling.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Override per run from the command line (see main.py).
    """

    # ==================== STATUS LINE ====================
    # Shown when a winner exists
    STATUS_WINNER = "Winner: {mark}"
    # Shown otherwise, including on a full board with no line
    STATUS_NEXT_PLAYER = "Next player: {mark}"

    # ==================== HISTORY LABELS ====================
    HISTORY_START_LABEL = "Go to game start"
    HISTORY_MOVE_LABEL = "Go to move #{step}"

    # ==================== MOVE HANDLING ====================
    # False: illegal moves are ignored and apply_move() returns False
    # True: illegal moves raise CellOccupied / GameAlreadyWon
    STRICT_MOVES = False

    # ==================== CONSOLE ====================
    # Drawn for an empty cell in format_board()
    EMPTY_CELL_TEXT = " "
