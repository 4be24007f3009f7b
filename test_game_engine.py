"""
Tests for the game engine: moves, turn order and time travel.
"""

import random
import threading

import pytest

from logic.config import GameConfig
from logic.errors import (
    CellOccupied,
    GameAlreadyWon,
    GameError,
    IndexOutOfRange,
    MoveRejected,
    RejectReason,
)
from logic.game_engine import GameEngine
from logic.game_state import EMPTY_BOARD, Mark, is_legal_board
from logic.win_checker import NO_WINNER, WinResult

X, O = Mark.X, Mark.O

TOP_ROW_WIN = [0, 4, 1, 3, 2]
# X,O,X / X,O,O / O,X,X
FULL_BOARD_NO_WIN = [0, 1, 2, 4, 3, 5, 7, 6, 8]


@pytest.fixture
def engine():
    return GameEngine()


def snapshot_state(engine):
    return engine.history, engine.current_step


# ==================== INITIAL STATE ====================

def test_initial_state(engine):
    assert engine.history == (EMPTY_BOARD,)
    assert engine.current_step == 0
    assert engine.current_board == EMPTY_BOARD
    assert engine.current_player == Mark.X
    assert engine.win_result == NO_WINNER
    assert engine.status == "Next player: X"
    assert engine.history_labels() == ["Go to game start"]
    assert engine.move_count == 0


# ==================== MOVES ====================

def test_move_places_current_mark_and_flips_turn(engine):
    assert engine.apply_move(4) is True
    assert engine.current_board[4] == Mark.X
    assert engine.current_step == 1
    assert engine.current_player == Mark.O
    assert engine.status == "Next player: O"

    assert engine.apply_move(0) is True
    assert engine.current_board[0] == Mark.O
    assert engine.current_player == Mark.X


def test_move_does_not_modify_previous_snapshots(engine):
    engine.apply_move(0)
    first = engine.history[1]
    engine.apply_move(8)
    assert engine.history[0] == EMPTY_BOARD
    assert engine.history[1] == first
    assert engine.history[1][8] is None


def test_top_row_win_scenario():
    engine = GameEngine.from_moves(TOP_ROW_WIN)
    assert engine.win_result == WinResult(winner=Mark.X, line=(0, 1, 2))
    assert engine.status == "Winner: X"
    assert len(engine.history) == 6


def test_occupied_cell_is_ignored(engine):
    engine.apply_move(4)
    before = snapshot_state(engine)

    assert engine.apply_move(4) is False
    assert snapshot_state(engine) == before
    assert engine.current_player == Mark.O


def test_move_after_win_is_ignored():
    engine = GameEngine.from_moves(TOP_ROW_WIN)
    before = snapshot_state(engine)

    assert engine.apply_move(8) is False
    assert snapshot_state(engine) == before
    assert engine.status == "Winner: X"


def test_strict_mode_raises_and_keeps_state():
    engine = GameEngine(strict=True)
    engine.apply_move(4)
    before = snapshot_state(engine)

    with pytest.raises(CellOccupied) as exc_info:
        engine.apply_move(4)
    assert exc_info.value.reason == RejectReason.CELL_OCCUPIED
    assert snapshot_state(engine) == before

    # O takes the top row
    for index in [0, 3, 1, 8, 2]:
        engine.apply_move(index)
    assert engine.win_result == WinResult(winner=Mark.O, line=(0, 1, 2))

    before = snapshot_state(engine)
    with pytest.raises(GameAlreadyWon) as exc_info:
        engine.apply_move(6)
    assert isinstance(exc_info.value, MoveRejected)
    assert exc_info.value.winner == Mark.O
    assert snapshot_state(engine) == before


def test_strict_mode_from_config():
    class StrictConfig(GameConfig):
        STRICT_MOVES = True

    engine = GameEngine(StrictConfig())
    engine.apply_move(0)
    with pytest.raises(CellOccupied):
        engine.apply_move(0)


def test_won_game_is_checked_before_occupied_cell():
    engine = GameEngine.from_moves(TOP_ROW_WIN, strict=True)
    with pytest.raises(GameAlreadyWon):
        engine.apply_move(0)


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 1.0, None, True])
def test_bad_cell_index_raises(engine, index):
    with pytest.raises(IndexOutOfRange):
        engine.apply_move(index)
    assert snapshot_state(engine) == ((EMPTY_BOARD,), 0)


def test_index_out_of_range_is_an_index_error(engine):
    with pytest.raises(IndexError):
        engine.apply_move(9)


def test_validate_move_does_not_apply(engine):
    result = engine.validate_move(4)
    assert result.is_valid
    assert engine.current_board == EMPTY_BOARD

    engine.apply_move(4)
    result = engine.validate_move(4)
    assert not result
    assert result.reason == RejectReason.CELL_OCCUPIED
    assert "occupied" in result.error_message


def test_valid_moves(engine):
    assert engine.valid_moves() == list(range(9))
    engine.apply_move(4)
    assert 4 not in engine.valid_moves()
    won = GameEngine.from_moves(TOP_ROW_WIN)
    assert won.valid_moves() == []


def test_full_board_without_winner():
    engine = GameEngine.from_moves(FULL_BOARD_NO_WIN)
    assert engine.current_board == (
        X, O, X,
        X, O, O,
        O, X, X,
    )
    assert engine.win_result == NO_WINNER
    assert engine.is_board_full
    # No draw message: status still names the next player
    assert engine.status.startswith("Next player: ")
    assert engine.valid_moves() == []
    assert engine.apply_move(0) is False


# ==================== TIME TRAVEL ====================

def test_jump_back_after_win():
    engine = GameEngine.from_moves(TOP_ROW_WIN)
    engine.jump_to(2)

    board = engine.current_board
    assert [i for i, cell in enumerate(board) if cell is not None] == [0, 4]
    assert engine.current_player == Mark.X
    assert engine.win_result == NO_WINNER
    assert engine.status == "Next player: X"
    # History is kept until the next move
    assert len(engine.history) == 6


def test_jump_does_not_modify_history():
    engine = GameEngine.from_moves([0, 4, 1])
    history = engine.history
    engine.jump_to(0)
    assert engine.history == history
    engine.jump_to(3)
    assert engine.current_board == history[3]


def test_move_after_jump_truncates_history():
    engine = GameEngine.from_moves(TOP_ROW_WIN)
    old_history = engine.history

    k = 2
    engine.jump_to(k)
    assert engine.apply_move(8) is True

    assert len(engine.history) == k + 2
    assert engine.history[:k + 1] == old_history[:k + 1]
    assert engine.current_step == k + 1
    assert engine.current_board[8] == Mark.X
    assert old_history[3] not in engine.history
    with pytest.raises(IndexOutOfRange):
        engine.jump_to(4)


def test_rejected_move_after_jump_keeps_future():
    engine = GameEngine.from_moves([0, 4, 1])
    engine.jump_to(1)
    assert engine.apply_move(0) is False
    assert len(engine.history) == 4
    assert engine.current_step == 1


@pytest.mark.parametrize("step", [-1, 3, 10, "1", None, 1.5])
def test_jump_out_of_range(step):
    engine = GameEngine.from_moves([0, 4])
    with pytest.raises(IndexOutOfRange):
        engine.jump_to(step)
    assert engine.current_step == 2


def test_undo_redo():
    engine = GameEngine.from_moves([0, 4])
    assert engine.undo() is True
    assert engine.current_step == 1
    assert engine.undo() is True
    assert engine.undo() is False
    assert engine.current_step == 0

    assert engine.redo() is True
    assert engine.redo() is True
    assert engine.redo() is False
    assert engine.current_step == 2


def test_reset():
    engine = GameEngine.from_moves(TOP_ROW_WIN)
    engine.reset()
    assert engine.history == (EMPTY_BOARD,)
    assert engine.current_step == 0
    assert engine.status == "Next player: X"


def test_history_labels():
    engine = GameEngine.from_moves([0, 4, 1])
    assert engine.history_labels() == [
        "Go to game start",
        "Go to move #1",
        "Go to move #2",
        "Go to move #3",
    ]
    assert engine.history_entries()[2] == (2, "Go to move #2")


# ==================== INVARIANTS ====================

def test_turn_follows_step_parity_in_random_games():
    rng = random.Random(1234)
    for _ in range(200):
        engine = GameEngine()
        for _ in range(rng.randint(1, 20)):
            if rng.random() < 0.25:
                engine.jump_to(rng.randint(0, len(engine.history) - 1))
            else:
                engine.apply_move(rng.randint(0, 8))

            expected = Mark.X if engine.current_step % 2 == 0 else Mark.O
            assert engine.current_player == expected
            assert 0 <= engine.current_step < len(engine.history)
            assert engine.history[0] == EMPTY_BOARD
            for step, board in enumerate(engine.history):
                assert is_legal_board(board)
                assert sum(cell is not None for cell in board) == step


def test_errors_share_a_base_class():
    for error in (CellOccupied(1), GameAlreadyWon(Mark.X), IndexOutOfRange("Cell index", 9, 8)):
        assert isinstance(error, GameError)



def test_concurrent_moves_and_jumps_keep_history_consistent():
    engine = GameEngine()
    errors = []

    def worker(seed):
        rng = random.Random(seed)
        try:
            for _ in range(300):
                if rng.random() < 0.3:
                    try:
                        engine.jump_to(rng.randint(0, len(engine.history) - 1))
                    except IndexOutOfRange:
                        # History was truncated by another thread in between
                        pass
                elif not engine.apply_move(rng.randint(0, 8)) and rng.random() < 0.1:
                    engine.reset()
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    history = engine.history
    assert 0 <= engine.current_step < len(history)
    assert history[0] == EMPTY_BOARD
    for step, board in enumerate(history):
        assert is_legal_board(board)
        assert sum(cell is not None for cell in board) == step
