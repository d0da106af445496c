import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


class Mark(Enum):
    """
    the two player symbols, X always moves first
    """
    X = 'X'
    O = 'O'

    def other(self):
        # opposite mark
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class InProgress:
    next: Mark

@dataclass(frozen=True)
class Won:
    by: Mark

@dataclass(frozen=True)
class Draw:
    pass

GameStatus = Union[InProgress, Won, Draw]

BOARD_CELLS = 9

# row-major indices: rows, columns, diagonals
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def _check_board(board):
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")


def winning_line(board: Sequence[Optional[Mark]]) -> Optional[Tuple[int, int, int]]:
    """
    first line fully held by one mark, or None
    """
    _check_board(board)
    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def evaluate(board: Sequence[Optional[Mark]]) -> GameStatus:
    """
    classify a board snapshot: Won, Draw or InProgress with the mark to move.
    pure, safe to call on any 9-cell board.
    """
    line = winning_line(board)
    if line is not None:
        return Won(board[line[0]])
    if all(cell is not None for cell in board):
        return Draw()
    # X opens, so equal counts means X is up
    x_count = sum(1 for cell in board if cell is Mark.X)
    o_count = sum(1 for cell in board if cell is Mark.O)
    return InProgress(Mark.X if x_count == o_count else Mark.O)


def status_text(status: GameStatus) -> str:
    """
    human readable line for the status label
    """
    if isinstance(status, Won):
        return f"Winner: {status.by}"
    if isinstance(status, Draw):
        return "Game ended in a draw!"
    return f"Next player: {status.next}"


class GameLogic:
    """
    tic-tac-toe rules and state: one board, whose turn, derived status
    """
    board_size = 3                    # fixed 3x3 grid, used for painting

    def __init__(self):
        """
        init empty board, X to move
        """
        self._board = [None] * BOARD_CELLS
        self._turn = Mark.X
        self._status = InProgress(Mark.X)

    @property
    def board(self):
        # read-only snapshot for rendering
        return tuple(self._board)

    @property
    def turn(self):
        return self._turn

    @property
    def status(self):
        return self._status

    @property
    def status_text(self):
        return status_text(self._status)

    @property
    def game_over(self):
        return not isinstance(self._status, InProgress)

    @property
    def winner(self):
        return self._status.by if isinstance(self._status, Won) else None

    @property
    def winning_line(self):
        if not isinstance(self._status, Won):
            return None
        return winning_line(self._board)

    @property
    def move_count(self):
        return sum(1 for cell in self._board if cell is not None)

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        if self._valid_index(index):
            return self._board[index] is None
        return False

    @staticmethod
    def _valid_index(index):
        # bool is an int subclass, never a cell
        return isinstance(index, int) and not isinstance(index, bool) \
               and 0 <= index < BOARD_CELLS

    def apply_move(self, index):
        """
        place current mark at index, flip turn, re-evaluate.
        illegal moves (terminal game, bad index, taken cell) are ignored.
        returns True if the board changed.
        """
        if self.game_over:
            logger.debug("move %r ignored, game over (%s)", index, self.status_text)
            return False
        if not self._valid_index(index):
            logger.debug("move %r ignored, not a cell index", index)
            return False
        if self._board[index] is not None:
            logger.debug("move %r ignored, cell holds %s", index, self._board[index])
            return False

        mark = self._turn
        self._board[index] = mark
        self._turn = mark.other()
        self._status = evaluate(self._board)
        logger.debug("%s played %d", mark, index)
        if self.game_over:
            logger.info("game finished: %s", self.status_text)
        return True

    def reset(self):
        """
        clear board, X to move
        """
        self._board = [None] * BOARD_CELLS
        self._turn = Mark.X
        self._status = InProgress(Mark.X)
        logger.debug("game reset")
