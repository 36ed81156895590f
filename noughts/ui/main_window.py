import logging

from ..session import GameSession, Phase, Quit, SelectCell, StartGame
from ..ui.board_widget import BoardWidget
from .. import config

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)


def _button_style():
    # normal / hover / pressed colours for every push button
    return f"""
        QPushButton {{
            background-color: {config.NORMAL_BUTTON.name()};
            color: {config.TEXT_COLOR.name()};
            padding: 10px; margin: 10px; min-width: 100px;
        }}
        QPushButton:hover {{ background-color: {config.HOVERED_BUTTON.name()}; }}
        QPushButton:pressed {{ background-color: {config.PRESSED_BUTTON.name()}; }}
    """


class GameWindow(QMainWindow):
    """
    main window: menu, board and game-over panels over one session
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session if session is not None else GameSession()
        self._setup_ui()
        self._render(self.session.snapshot())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet(
            f"QMainWindow {{ background-color: {config.ROOT_COLOR.name()}; }}"
            f"QWidget#panel {{ background-color: {config.PANEL_COLOR.name()}; }}"
            + _button_style()
        )
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_panel()          # title + play/quit
        self._create_board_panel()         # grid + game over panel
        self.main_layout.addWidget(self.menu_panel)
        self.main_layout.addWidget(self.board_panel)

    def _label(self, text):
        label = QLabel(text)
        f = QFont(config.FONT_FAMILY); f.setPixelSize(config.FONT_SIZE); label.setFont(f)
        label.setStyleSheet(f"color: {config.TEXT_COLOR.name()}; margin: 10px;")
        label.setAlignment(Qt.AlignCenter)
        return label

    def _button(self, text, slot):
        button = QPushButton(text)
        button.clicked.connect(slot)
        return button

    def _create_menu_panel(self):
        '''landing panel'''
        self.menu_panel = QWidget(); self.menu_panel.setObjectName("panel")
        layout = QVBoxLayout(self.menu_panel)
        layout.setAlignment(Qt.AlignCenter)
        self.play_button = self._button("play", self.start_game)
        self.quit_button = self._button("quit", self.quit_game)
        for w in (self._label("noughts and crosses"), self.play_button, self.quit_button):
            layout.addWidget(w, alignment=Qt.AlignCenter)

    def _create_board_panel(self):
        '''board on top, game over controls below'''
        self.board_panel = QWidget(); self.board_panel.setObjectName("panel")
        layout = QVBoxLayout(self.board_panel)
        layout.setAlignment(Qt.AlignCenter)
        self.board_widget = BoardWidget(parent=self)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        layout.addWidget(self._label("board"), alignment=Qt.AlignCenter)
        layout.addWidget(self.board_widget, alignment=Qt.AlignCenter)

        self.game_over_panel = QWidget()
        gl = QVBoxLayout(self.game_over_panel)
        self.play_again_button = self._button("play again", self.start_game)
        self.game_over_quit_button = self._button("quit", self.quit_game)
        for w in (self._label("game over"), self.play_again_button, self.game_over_quit_button):
            gl.addWidget(w, alignment=Qt.AlignCenter)
        layout.addWidget(self.game_over_panel, alignment=Qt.AlignCenter)

    def _render(self, snap):
        # which panels show for each phase
        menu, board, over = {
            Phase.MENU: (True, False, False),
            Phase.PLAYING: (False, True, False),
            Phase.GAME_OVER: (False, True, True),
        }[snap.phase]
        self.menu_panel.setVisible(menu)
        self.board_panel.setVisible(board)
        self.game_over_panel.setVisible(over)
        self.board_widget.set_labels(snap.labels)
        self.board_widget.set_accept_clicks(snap.phase is Phase.PLAYING)

    def dispatch(self, command):
        """
        forward one command to the session and redraw
        """
        snap = self.session.handle(command)
        log.debug("%r -> %s", command, snap.phase.value)
        if snap.quit_requested:
            self.close()
            return snap
        self._render(snap)
        return snap

    @Slot()
    def start_game(self):
        self.dispatch(StartGame())

    @Slot()
    def quit_game(self):
        self.dispatch(Quit())

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.dispatch(SelectCell(index))

    def closeEvent(self, event):
        # closing the window is a quit too; qt exits with the last window
        if not self.session.is_finished:
            self.session.handle(Quit())
        event.accept()
