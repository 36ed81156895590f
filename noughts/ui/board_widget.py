from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QRectF
from PySide6.QtGui import QPainter, QPen, QFont

from .. import config
from ..board import BOARD_SIZE, CELL_COUNT


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the 3x3 board
    """
    cell_clicked = Signal(int)  # emits row-major index on click

    def __init__(self, parent=None):
        super().__init__(parent)
        self._labels = [""] * CELL_COUNT   # glyphs from the last snapshot
        self._accept_clicks = True         # toggle click handling
        side = BOARD_SIZE * (config.TILE_SIZE + 2 * config.TILE_MARGIN) + 2 * config.TILE_MARGIN
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setFixedSize(QSize(side, side))

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_labels(self, labels):
        self._labels = list(labels)
        self.update()

    def labels(self):
        return list(self._labels)

    def tile_rect(self, index):
        """
        on-screen square for a board index
        """
        row, col = divmod(index, BOARD_SIZE)
        step = config.TILE_SIZE + 2 * config.TILE_MARGIN
        x = config.TILE_MARGIN + col * step + config.TILE_MARGIN
        y = config.TILE_MARGIN + row * step + config.TILE_MARGIN
        return QRectF(x, y, config.TILE_SIZE, config.TILE_SIZE)

    def index_at(self, x, y):
        """
        board index under a point, or None between tiles
        """
        for i in range(CELL_COUNT):
            if self.tile_rect(i).contains(x, y):
                return i
        return None

    def paintEvent(self, event):
        """
        draw grid background, checker tiles and glyphs
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.fillRect(self.rect(), config.GRID_COLOR)
            font = QFont(config.FONT_FAMILY, config.PIECE_FONT_SIZE, QFont.Bold)
            font.setPixelSize(config.PIECE_FONT_SIZE)
            painter.setFont(font)
            painter.setPen(QPen(config.TEXT_COLOR))
            for i in range(CELL_COUNT):
                row, col = divmod(i, BOARD_SIZE)
                rect = self.tile_rect(i)
                painter.fillRect(rect, config.TILE_COLORS[(row + col) % 2])
                if self._labels[i]:
                    painter.drawText(rect, Qt.AlignCenter, self._labels[i])
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to a tile and emit
        """
        if not self._accept_clicks or event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
