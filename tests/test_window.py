"""Window glue: panels follow the phase, clicks reach the session."""

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("pytestqt")

from noughts.board import Board, Cell  # noqa: E402
from noughts.session import GameSession, Phase  # noqa: E402
from noughts.ui.main_window import GameWindow  # noqa: E402


@pytest.fixture
def window(qtbot):
    w = GameWindow(GameSession(Board(random.Random(3))))
    qtbot.addWidget(w)
    return w


def test_menu_shown_first(window):
    assert not window.menu_panel.isHidden()
    assert window.board_panel.isHidden()


def test_play_shows_board(window):
    window.start_game()
    assert window.session.phase is Phase.PLAYING
    assert window.menu_panel.isHidden()
    assert not window.board_panel.isHidden()
    assert window.game_over_panel.isHidden()


def test_tile_click_plays_and_redraws(window, qtbot):
    window.start_game()
    with qtbot.waitSignal(window.board_widget.cell_clicked, timeout=1000):
        window.board_widget.cell_clicked.emit(4)
    assert window.session.board.cells[4] is Cell.HUMAN
    labels = window.board_widget.labels()
    assert labels[4] == "O"
    assert labels.count("X") == 1


def test_tile_geometry_round_trips(window):
    bw = window.board_widget
    for i in range(9):
        centre = bw.tile_rect(i).center()
        assert bw.index_at(centre.x(), centre.y()) == i
    assert bw.index_at(0, 0) is None


def test_game_over_panel(window):
    window.start_game()
    b = window.session.board
    for i in (0, 1):
        b.cells[i] = Cell.HUMAN
    for i in (3, 4):
        b.cells[i] = Cell.OPPONENT
    b.move_count = 4
    window.board_widget.cell_clicked.emit(2)
    assert window.session.phase is Phase.GAME_OVER
    assert not window.game_over_panel.isHidden()
    assert not window.board_panel.isHidden()


def test_quit_sets_flag(window):
    window.quit_game()
    assert window.session.is_finished


def test_closing_window_quits(window):
    window.start_game()
    window.close()
    assert window.session.is_finished
    assert window.session.phase is Phase.PLAYING
