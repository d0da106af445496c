import argparse
import logging
import os
from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

APP_NAME = "Tic Tac Toe Classic"
BRAND_TEXT = "* KAVIA AI"
DEFAULT_STYLE = "Fusion"
MIN_WINDOW_SIZE = (360, 480)

# -----------------------------------------------------------------------------
# PALETTE COLORS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TOOLTIP_BASE_COLOR = Qt.white
TOOLTIP_TEXT_COLOR = Qt.black
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
BRIGHT_TEXT_COLOR = Qt.red
LINK_COLOR = QColor(42, 130, 218)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)

DISABLED_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)
DISABLED_WINDOW_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_CELL_COLOR = "#3f5a3f"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def env_log_level(environ=None):
    """
    log level from the environment, WARNING if unset or unknown
    """
    environ = os.environ if environ is None else environ
    level = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


@dataclass
class AppConfig:
    """
    runtime settings picked from the command line and environment
    """
    log_level: str = DEFAULT_LOG_LEVEL
    style: str = DEFAULT_STYLE
    dark_palette: bool = True

    @classmethod
    def from_args(cls, argv=None, environ=None):
        parser = argparse.ArgumentParser(prog="tictactoe", description=APP_NAME)
        parser.add_argument(
            "--log-level",
            choices=LOG_LEVELS,
            type=str.upper,
            default=env_log_level(environ),
            help=f"logging verbosity (env {LOG_LEVEL_ENV})"
        )
        parser.add_argument(
            "--style",
            default=DEFAULT_STYLE,
            help="Qt widget style"
        )
        parser.add_argument(
            "--light",
            action="store_true",
            help="keep the platform palette instead of the dark theme"
        )
        args = parser.parse_args(argv)
        return cls(log_level=args.log_level, style=args.style,
                   dark_palette=not args.light)

    def configure_logging(self):
        # root logger, stderr
        logging.basicConfig(level=getattr(logging, self.log_level),
                            format=LOG_FORMAT)
