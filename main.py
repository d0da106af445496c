import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette

from tictactoe.config import (
    APP_NAME, AppConfig,
    WINDOW_COLOR, WINDOW_TEXT_COLOR, BASE_COLOR, ALT_BASE_COLOR,
    TOOLTIP_BASE_COLOR, TOOLTIP_TEXT_COLOR, TEXT_COLOR, BUTTON_COLOR,
    BUTTON_TEXT_COLOR, BRIGHT_TEXT_COLOR, LINK_COLOR, HIGHLIGHT_COLOR,
    HIGHLIGHTED_TEXT_COLOR, PLACEHOLDER_TEXT_COLOR, DISABLED_TEXT_COLOR,
    DISABLED_BUTTON_TEXT_COLOR, DISABLED_WINDOW_TEXT_COLOR,
)
from tictactoe.ui.main_window import TicTacToeWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using predefined constants.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.ToolTipBase, TOOLTIP_BASE_COLOR)
    palette.setColor(QPalette.ToolTipText, TOOLTIP_TEXT_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.BrightText, BRIGHT_TEXT_COLOR)
    palette.setColor(QPalette.Link, LINK_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_WINDOW_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    argv = sys.argv if argv is None else argv
    config = AppConfig.from_args(argv[1:])
    config.configure_logging()

    app = QApplication(argv)
    app.setApplicationName(APP_NAME)
    app.setStyle(config.style)
    logger.info("starting %s (style=%s, dark=%s)", APP_NAME, config.style, config.dark_palette)

    if config.dark_palette:
        apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
