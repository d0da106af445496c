import logging

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRect, QRectF
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..config import BOARD_BACKGROUND, GRID_COLOR, X_COLOR, O_COLOR, WIN_CELL_COLOR
from ..game_logic import Mark

logger = logging.getLogger(__name__)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits row-major cell index on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square grid centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp against float rounding at the far edge
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        return row*size + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight winner
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            size = self.game_logic.board_size
            cell_size = side / size
            # winning cells under everything else
            line = self.game_logic.winning_line
            if line:
                for index in line:
                    r, c = divmod(index, size)
                    painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                            cell_size, cell_size), QColor(WIN_CELL_COLOR))
            # grid lines
            pen = QPen(QColor(GRID_COLOR), 2)
            painter.setPen(pen)
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, mark in enumerate(self.game_logic.board):
                if mark is None: continue
                r, c = divmod(index, size)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if mark is Mark.X:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # if won, draw winner in center
            win = self.game_logic.winner
            if win is not None:
                font = QFont("Arial", max(1, int(side*0.6)), QFont.Bold)
                painter.setFont(font)
                color = QColor(X_COLOR) if win is Mark.X else QColor(O_COLOR)
                color.setAlpha(140)
                painter.setPen(QPen(color, 10, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                rect = QRect(int(offset_x), int(offset_y), int(side), int(side))
                painter.drawText(rect, Qt.AlignCenter, str(win))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        # filled squares are disabled
        if index is None or not self.game_logic.is_cell_empty(index):
            return
        logger.debug("cell %d clicked", index)
        self.cell_clicked.emit(index)  # notify main window
