import logging
import random
from enum import Enum

log = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags as index triples
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(Enum):
    HUMAN = "human"
    OPPONENT = "opponent"
    EMPTY = "empty"

    @property
    def label(self):
        # human plays noughts, the autoplayer crosses
        return _LABELS[self]


_LABELS = {Cell.HUMAN: "O", Cell.OPPONENT: "X", Cell.EMPTY: ""}


def is_valid_index(index):
    """true for a plain int in [0, 9); bools are not cell numbers"""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT


def piece_label(cell):
    """glyph drawn for a cell"""
    return cell.label


class MoveResult(Enum):
    CONTINUING = "continuing"
    GAME_OVER = "game_over"


class Board:
    """
    noughts and crosses rules and state
    """
    def __init__(self, rng=None):
        """
        empty grid; rng drives the opponent's picks
        """
        self.rng = rng if rng is not None else random.Random()
        self.cells = [Cell.EMPTY] * CELL_COUNT   # row-major
        self.move_count = 0                      # filled cells

    def reset(self):
        """
        clear every cell in place
        """
        self.move_count = 0
        for i in range(CELL_COUNT):
            self.cells[i] = Cell.EMPTY

    def is_empty(self, index):
        """
        true if the cell at index is blank; index must be in [0, 9)
        """
        self._check_index(index)
        return self.cells[index] is Cell.EMPTY

    def empty_cells(self):
        return [i for i in range(CELL_COUNT) if self.cells[i] is Cell.EMPTY]

    def play_human_move(self, index):
        """
        place the human piece, answer with a random opponent piece
        returns: MoveResult.GAME_OVER on a win or a full board,
        MoveResult.CONTINUING otherwise (also for an occupied cell)
        """
        if not self.is_empty(index):
            return MoveResult.CONTINUING
        self._place(index, Cell.HUMAN)
        if self.is_winning(Cell.HUMAN):
            return MoveResult.GAME_OVER
        if self.move_count < CELL_COUNT:
            self._place(self._pick_opponent_move(), Cell.OPPONENT)
            if self.is_winning(Cell.OPPONENT):
                return MoveResult.GAME_OVER
        if self.move_count == CELL_COUNT:
            return MoveResult.GAME_OVER   # draw
        return MoveResult.CONTINUING

    def is_winning(self, player):
        """
        scan rows, cols, diags for three of player
        """
        c = self.cells
        return any(all(c[i] is player for i in line) for line in LINES)

    def winning(self):
        return self.is_winning(Cell.HUMAN) or self.is_winning(Cell.OPPONENT)

    def winner(self):
        for player in (Cell.HUMAN, Cell.OPPONENT):
            if self.is_winning(player):
                return player
        return None

    def labels(self):
        return [cell.label for cell in self.cells]

    def _pick_opponent_move(self):
        # shuffle the free cells, take the first
        moves = self.empty_cells()
        self.rng.shuffle(moves)
        return moves[0]

    def _place(self, index, player):
        self.cells[index] = player
        self.move_count += 1
        log.debug("%s took cell %d (move %d)", player.name.lower(), index, self.move_count)

    @staticmethod
    def _check_index(index):
        # no negative wraparound, no silent out-of-range reads
        if not is_valid_index(index):
            raise IndexError(f"cell index out of range: {index!r}")
