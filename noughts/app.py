import argparse
import logging
import random
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette

from . import config
from .board import Board
from .session import GameSession
from .ui.main_window import GameWindow


def apply_default_palette(app: QApplication):
    """
    Dark window behind the styled panels.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, config.WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, config.WINDOW_TEXT_COLOR)
    app.setPalette(palette)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Noughts and crosses against a random opponent.")
    ap.add_argument("--log-level", default=config.DEFAULT_LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="logging verbosity")
    ap.add_argument("--seed", type=int, default=None,
                    help="seed for the opponent's random moves")
    return ap.parse_known_args(argv)


def main(argv=None):
    # unknown options are handed on to qt
    args, qt_args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s: %(message)s")

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_default_palette(app)

    session = GameSession(Board(random.Random(args.seed)))
    window = GameWindow(session)
    window.show()
    return app.exec()
