import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Cell, MoveResult, is_valid_index

log = logging.getLogger(__name__)


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class StartGame:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class SelectCell:
    index: int


@dataclass(frozen=True)
class Snapshot:
    """what the window needs to draw after a command"""
    phase: Phase
    cells: Tuple[Cell, ...]
    quit_requested: bool = False

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(cell.label for cell in self.cells)


class GameSession:
    """
    menu / playing / game over flow around one board

    the only writer of the board: every ui event comes in through handle()
    and bad or out-of-phase commands are dropped without raising
    """
    def __init__(self, board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.phase = Phase.MENU
        self.quit_requested = False

    @property
    def is_finished(self) -> bool:
        return self.quit_requested

    def snapshot(self) -> Snapshot:
        return Snapshot(self.phase, tuple(self.board.cells), self.quit_requested)

    def handle(self, command) -> Snapshot:
        """
        apply one ui command, return the resulting state
        """
        if self.quit_requested:
            log.debug("session finished, ignoring %r", command)
        elif isinstance(command, Quit):
            self._quit()
        elif isinstance(command, StartGame):
            self._start_game()
        elif isinstance(command, SelectCell):
            self._select_cell(command.index)
        else:
            log.debug("unknown command %r ignored", command)
        return self.snapshot()

    def _start_game(self):
        if self.phase is Phase.PLAYING:
            log.debug("start ignored, game already running")
            return
        self.board.reset()
        self.phase = Phase.PLAYING
        log.info("new game")

    def _select_cell(self, index):
        if self.phase is not Phase.PLAYING:
            log.debug("cell %r ignored in phase %s", index, self.phase.value)
            return
        # malformed index from the ui: drop it instead of tripping the board
        if not is_valid_index(index):
            log.debug("cell %r out of range, ignored", index)
            return
        if not self.board.is_empty(index):
            log.debug("cell %d taken, ignored", index)
            return
        if self.board.play_human_move(index) is MoveResult.GAME_OVER:
            self.phase = Phase.GAME_OVER
            winner = self.board.winner()
            log.info("game over after %d moves: %s", self.board.move_count,
                     winner.label if winner else "draw")

    def _quit(self):
        self.quit_requested = True
        log.info("quit requested")
