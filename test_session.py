import pytest

from checkerboard.board import empty_board
from checkerboard.events import EventKind, EventLog
from checkerboard.session import GameSession
from checkerboard.types import Color, Piece, RejectReason

RED = Piece(Color.RED)
BLACK = Piece(Color.BLACK)


def make_session(*placements, advanced=True, turn=Color.RED, freeze_on_win=True):
    """Session whose board holds only the given pieces."""
    session = GameSession(advanced=advanced, freeze_on_win=freeze_on_win, event_log=EventLog(500))
    board = empty_board()
    for r, c, piece in placements:
        board[r][c] = piece
    session.state.board = board
    session.state.turn = turn
    return session


def kinds(session):
    return [e.kind for e in session.log.events()]


# ---------- lifecycle ----------

def test_new_session_starts_with_full_board():
    session = GameSession(advanced=False, event_log=EventLog(50))
    assert session.remaining(Color.RED) == 12
    assert session.remaining(Color.BLACK) == 12
    assert session.turn is Color.RED
    assert session.score == {Color.RED: 0, Color.BLACK: 0}
    assert session.selected is None and session.chain_origin is None
    assert kinds(session) == [EventKind.NEW_GAME]


def test_reset_restores_initial_position_and_keeps_mode():
    session = GameSession(advanced=True, event_log=EventLog(50))
    session.click(5, 2)
    session.click(4, 3)
    assert session.turn is Color.BLACK
    session.reset()
    assert session.turn is Color.RED
    assert session.advanced
    assert session.remaining(Color.RED) == 12 and session.remaining(Color.BLACK) == 12
    assert session.board[4][3] is None and session.board[5][2] == RED


def test_toggle_mode_clears_chain():
    session = make_session()
    session.state.chain_origin = (3, 3)
    assert session.toggle_mode() is False
    assert session.chain_origin is None
    assert session.log.latest().kind is EventKind.MODE_CHANGED
    assert session.toggle_mode() is True


# ---------- selection ----------

def test_select_own_piece():
    session = GameSession(advanced=False, event_log=EventLog(50))
    outcome = session.select(5, 0)
    assert outcome.accepted
    assert session.selected == (5, 0)
    assert session.targets().steps == ((4, 1),)


def test_select_opponent_piece_is_rejected():
    session = GameSession(advanced=False, event_log=EventLog(50))
    outcome = session.click(2, 1)
    assert not outcome.accepted
    assert outcome.reason is RejectReason.ILLEGAL_SELECTION
    assert session.selected is None
    assert session.log.latest().kind is EventKind.REJECTED


def test_select_empty_and_out_of_bounds():
    session = GameSession(advanced=False, event_log=EventLog(50))
    assert session.select(4, 1).reason is RejectReason.NO_PIECE
    assert session.select(8, 0).reason is RejectReason.OUT_OF_BOUNDS
    assert session.click(-1, 3).reason is RejectReason.OUT_OF_BOUNDS
    assert session.attempt_move(3, 9).reason is RejectReason.OUT_OF_BOUNDS


def test_move_without_selection_is_rejected():
    session = GameSession(advanced=False, event_log=EventLog(50))
    outcome = session.click(4, 1)
    assert outcome.reason is RejectReason.NOTHING_SELECTED


# ---------- steps ----------

def test_step_ends_turn():
    session = GameSession(advanced=False, event_log=EventLog(50))
    session.click(5, 0)
    outcome = session.click(4, 1)
    assert outcome.accepted
    assert session.board[5][0] is None and session.board[4][1] == RED
    assert session.turn is Color.BLACK
    assert session.selected is None
    assert kinds(session)[-2:] == [EventKind.MOVED, EventKind.TURN_PASSED]


def test_illegal_target_leaves_state_unchanged():
    session = GameSession(advanced=False, event_log=EventLog(50))
    session.click(5, 0)
    outcome = session.click(3, 2)
    assert outcome.reason is RejectReason.ILLEGAL_MOVE
    assert session.board[5][0] == RED
    assert session.turn is Color.RED
    assert session.selected == (5, 0)


def test_occupied_target_is_illegal():
    session = GameSession(advanced=False, event_log=EventLog(50))
    session.select(6, 1)
    assert session.attempt_move(5, 0).reason is RejectReason.ILLEGAL_MOVE


def test_forced_capture_violation_has_its_own_reason():
    session = make_session((5, 0, RED), (3, 2, RED), (2, 3, BLACK))
    session.click(5, 0)
    outcome = session.click(4, 1)
    assert outcome.reason is RejectReason.FORCED_CAPTURE
    assert "must take it" in outcome.message
    assert session.board[5][0] == RED

    session.click(3, 2)
    outcome = session.click(2, 1)
    assert outcome.reason is RejectReason.FORCED_CAPTURE


def test_simple_mode_step_allowed_when_capture_exists():
    session = make_session((5, 0, RED), (3, 2, RED), (2, 3, BLACK), advanced=False)
    session.click(5, 0)
    assert session.click(4, 1).accepted


# ---------- captures ----------

def test_capture_removes_piece_and_scores():
    session = make_session((3, 2, RED), (2, 3, BLACK), (0, 7, BLACK))
    session.click(3, 2)
    outcome = session.click(1, 4)
    assert outcome.accepted
    assert session.board[2][3] is None
    assert session.board[1][4] == RED
    assert session.score[Color.RED] == 1
    assert session.remaining(Color.BLACK) == 1
    assert session.turn is Color.BLACK
    captured = [e for e in session.log.events() if e.kind is EventKind.CAPTURED][0]
    assert captured.get("middle") == (2, 3)
    assert captured.get("captured") is Color.BLACK


def test_simple_mode_capture_is_optional_and_never_chains():
    session = make_session((5, 1, RED), (4, 2, BLACK), (2, 4, BLACK), advanced=False)
    session.click(5, 1)
    assert session.click(3, 3).accepted
    assert session.turn is Color.BLACK
    assert session.chain_origin is None


def test_multi_jump_chain_keeps_turn():
    session = make_session((5, 1, RED), (4, 2, BLACK), (2, 4, BLACK), (0, 1, BLACK))
    session.click(5, 1)
    outcome = session.click(3, 3)
    assert outcome.accepted
    assert session.turn is Color.RED
    assert session.chain_origin == (3, 3)
    assert session.selected == (3, 3)
    assert EventKind.CHAIN_CONTINUES in kinds(session)

    assert session.click(1, 5).accepted
    assert session.turn is Color.BLACK
    assert session.chain_origin is None
    assert session.score[Color.RED] == 2


def test_chain_locks_other_pieces():
    session = make_session((5, 1, RED), (6, 6, RED), (4, 2, BLACK), (2, 4, BLACK), (0, 1, BLACK))
    session.click(5, 1)
    session.click(3, 3)
    outcome = session.click(6, 6)
    assert outcome.reason is RejectReason.CHAIN_LOCKED
    assert session.selected == (3, 3)
    assert session.click(2, 2).reason is RejectReason.FORCED_CAPTURE


def test_crowning_then_backward_chain():
    session = make_session((2, 1, RED), (1, 2, BLACK), (1, 4, BLACK), (7, 0, BLACK))
    session.click(2, 1)
    session.click(0, 3)
    assert session.board[0][3] == Piece(Color.RED, king=True)
    assert session.turn is Color.RED
    assert session.chain_origin == (0, 3)
    assert session.click(2, 5).accepted
    assert session.turn is Color.BLACK


def test_simple_mode_never_crowns():
    session = make_session((1, 2, RED), (6, 1, BLACK), advanced=False)
    session.click(1, 2)
    session.click(0, 1)
    assert session.board[0][1] == RED


# ---------- game over ----------

def test_game_over_detected_and_frozen():
    session = make_session((3, 2, RED), (2, 3, BLACK))
    session.click(3, 2)
    session.click(1, 4)
    assert session.is_over
    assert session.winner is Color.RED
    assert kinds(session)[-2:] == [EventKind.GAME_OVER, EventKind.TURN_PASSED]
    outcome = session.click(1, 4)
    assert outcome.reason is RejectReason.GAME_OVER


def test_frozen_game_rejects_moves_to_empty_squares():
    session = make_session((3, 2, RED), (2, 3, BLACK))
    session.click(3, 2)
    session.click(1, 4)
    before = session.snapshot()
    outcome = session.attempt_move(0, 5)
    assert not outcome.accepted
    assert outcome.reason is RejectReason.GAME_OVER
    assert session.click(0, 3).reason is RejectReason.GAME_OVER
    assert session.snapshot() == before
    assert session.score[Color.RED] == 1
    assert kinds(session)[-1] is EventKind.REJECTED


def test_game_over_reported_once():
    session = make_session((3, 2, RED), (2, 3, BLACK))
    session.click(3, 2)
    session.click(1, 4)
    assert kinds(session).count(EventKind.GAME_OVER) == 1


def test_unfrozen_game_keeps_accepting_moves():
    session = make_session((3, 2, RED), (2, 3, BLACK), freeze_on_win=False)
    session.click(3, 2)
    session.click(1, 4)
    assert session.winner is Color.RED
    session.state.turn = Color.RED
    assert session.click(1, 4).accepted
    assert session.click(0, 5).accepted
    assert kinds(session).count(EventKind.GAME_OVER) == 1


def test_reset_clears_winner():
    session = make_session((3, 2, RED), (2, 3, BLACK))
    session.click(3, 2)
    session.click(1, 4)
    session.reset()
    assert session.winner is None
    assert session.select(5, 0).accepted


def test_run_self_tests_logs_summary():
    session = GameSession(advanced=False, event_log=EventLog(50))
    results = session.run_self_tests()
    event = session.log.latest()
    assert event.kind is EventKind.SELF_TEST
    assert event.get("total") == len(results)
    assert event.get("passed") == len(results)
    # The live game is untouched
    assert session.remaining(Color.RED) == 12 and session.turn is Color.RED


@pytest.mark.parametrize("advanced", [False, True])
def test_rejections_never_raise(advanced):
    session = GameSession(advanced=advanced, event_log=EventLog(500))
    for r in range(-1, 9):
        for c in range(-1, 9):
            session.click(r, c)
    assert session.remaining(Color.RED) + session.remaining(Color.BLACK) <= 24
