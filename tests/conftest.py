import random

import pytest

from noughts.board import Board, Cell
from noughts.session import GameSession


class HighestFirst:
    """stand-in rng: opponent always takes the highest free cell"""
    def shuffle(self, items):
        items.sort(reverse=True)


def fill(board, humans=(), opponents=()):
    # write pieces straight onto the grid, keeping move_count honest
    for i in humans:
        board.cells[i] = Cell.HUMAN
    for i in opponents:
        board.cells[i] = Cell.OPPONENT
    board.move_count = sum(c is not Cell.EMPTY for c in board.cells)
    return board


@pytest.fixture
def board():
    return Board(random.Random(1234))


@pytest.fixture
def scripted_board():
    return Board(HighestFirst())


@pytest.fixture
def session(board):
    return GameSession(board)


@pytest.fixture
def place():
    return fill
