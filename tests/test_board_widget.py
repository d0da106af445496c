import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from tictactoe.game_logic import GameLogic
from tictactoe.ui.board_widget import BoardWidget


def release(widget, x, y):
    pos = QPointF(x, y)
    event = QMouseEvent(QEvent.MouseButtonRelease, pos, pos,
                        Qt.LeftButton, Qt.NoButton, Qt.NoModifier)
    widget.mouseReleaseEvent(event)


@pytest.fixture
def board(qapp):
    widget = BoardWidget(GameLogic())
    widget.resize(300, 300)
    clicked = []
    widget.cell_clicked.connect(clicked.append)
    widget.emitted = clicked
    yield widget
    widget.deleteLater()


@pytest.mark.parametrize("x, y, index", [
    (10, 10, 0), (150, 10, 1), (290, 10, 2),
    (10, 150, 3), (150, 150, 4), (290, 150, 5),
    (10, 290, 6), (150, 290, 7), (299.9, 299.9, 8),
])
def test_cell_at_maps_row_major(board, x, y, index):
    assert board.cell_at(x, y) == index


def test_cell_at_outside_grid(board):
    assert board.cell_at(-1, 10) is None
    assert board.cell_at(300, 10) is None


def test_cell_at_centres_non_square_widget(board):
    board.resize(400, 300)
    # grid spans x 50..350
    assert board.cell_at(40, 150) is None
    assert board.cell_at(60, 150) == 3
    assert board.cell_at(340, 150) == 5


def test_heightForWidth_keeps_square(board):
    assert board.hasHeightForWidth()
    assert board.heightForWidth(123) == 123


def test_click_emits_index(board):
    release(board, 150, 150)
    assert board.emitted == [4]


def test_click_on_filled_cell_is_ignored(board):
    board.game_logic.apply_move(4)
    release(board, 150, 150)
    assert board.emitted == []


def test_click_ignored_when_disabled(board):
    board.set_accept_clicks(False)
    assert not board.accepts_clicks()
    release(board, 10, 10)
    assert board.emitted == []


def test_click_ignored_after_game_over(board):
    for i in (0, 3, 1, 4, 2):
        board.game_logic.apply_move(i)
    release(board, 150, 290)
    assert board.emitted == []


def test_paints_won_board(board):
    for i in (0, 3, 1, 4, 2):
        board.game_logic.apply_move(i)
    image = board.grab()
    assert not image.isNull()
