import pytest

from tictactoe.game_logic import Draw, InProgress, Mark, Won
from tictactoe.ui.main_window import TicTacToeWindow


@pytest.fixture
def window(qapp):
    win = TicTacToeWindow()
    yield win
    win.close()
    win.deleteLater()


def click(window, *indices):
    for i in indices:
        window.board_widget.cell_clicked.emit(i)


def test_initial_status(window):
    assert window.windowTitle() == "Tic Tac Toe Classic"
    assert window.message_label.text() == "Next player: X"
    assert window.board_widget.accepts_clicks()


def test_click_updates_status(window):
    click(window, 4)
    assert window.game_logic.board[4] is Mark.X
    assert window.message_label.text() == "Next player: O"


def test_repeat_click_keeps_board(window):
    click(window, 4, 4)
    assert window.game_logic.board.count(None) == 8
    assert window.message_label.text() == "Next player: O"


def test_win_locks_board(window):
    click(window, 0, 3, 1, 4, 2)
    assert window.game_logic.status == Won(Mark.X)
    assert window.message_label.text() == "Winner: X"
    assert not window.board_widget.accepts_clicks()
    click(window, 8)
    assert window.game_logic.board[8] is None


def test_draw_message(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.game_logic.status == Draw()
    assert window.message_label.text() == "Game ended in a draw!"


def test_reset_button(window):
    click(window, 0, 3, 1, 4, 2)
    window.reset_button.click()
    assert window.game_logic.board == (None,) * 9
    assert window.game_logic.status == InProgress(Mark.X)
    assert window.message_label.text() == "Next player: X"
    assert window.board_widget.accepts_clicks()


def test_new_game_action(window):
    click(window, 4)
    window.new_game_action.trigger()
    assert window.game_logic.board == (None,) * 9
