import logging

from ..config import APP_NAME, BRAND_TEXT, MIN_WINDOW_SIZE
from ..game_logic import GameLogic
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(APP_NAME)
        self.setMinimumSize(*MIN_WINDOW_SIZE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QWidget#header { background-color: #1a1a1a; }
            QLabel#brand { color: #8acaff; font-weight: bold; }
            QLabel#gameTitle { color: #eee; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # brand + title bar
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # navbar look: brand left, game title right
        self.header_widget = QWidget(); self.header_widget.setObjectName("header")
        hl = QHBoxLayout(self.header_widget)
        brand = QLabel(BRAND_TEXT); brand.setObjectName("brand")
        title = QLabel(APP_NAME); title.setObjectName("gameTitle")
        hl.addWidget(brand); hl.addStretch(1); hl.addWidget(title)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset Game"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success:   style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # repaint board + status after any state change
        over = self.game_logic.game_over
        self.board_widget.set_accept_clicks(not over)
        self.board_widget.update()
        self._update_message(self.game_logic.status_text,
                             is_success=over, is_turn=not over)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # illegal clicks leave the game untouched
        if self.game_logic.apply_move(index):
            self._refresh()

    @Slot()
    def reset_game(self):
        # fresh board, X to move
        logger.debug("reset requested")
        self.game_logic.reset()
        self._refresh()
