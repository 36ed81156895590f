from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# WINDOW
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Noughts and Crosses"
DEFAULT_LOG_LEVEL = "WARNING"

# -----------------------------------------------------------------------------
# TEXT
# -----------------------------------------------------------------------------

FONT_FAMILY = "Fira Mono"
FONT_SIZE = 16
PIECE_FONT_SIZE = 4 * FONT_SIZE    # glyphs inside tiles
TEXT_COLOR = QColor(255, 255, 255)

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

TILE_SIZE = 100
TILE_MARGIN = 5
TILE_COLORS = (QColor(128, 0, 0), QColor(0, 0, 0))  # maroon, black checker
GRID_COLOR = QColor(255, 255, 0)
PANEL_COLOR = QColor(64, 64, 64)
ROOT_COLOR = QColor(64, 224, 208)

# -----------------------------------------------------------------------------
# BUTTONS
# -----------------------------------------------------------------------------

NORMAL_BUTTON = QColor.fromRgbF(0.15, 0.15, 0.35)
HOVERED_BUTTON = QColor.fromRgbF(0.25, 0.25, 0.45)
PRESSED_BUTTON = QColor.fromRgbF(0.35, 0.75, 0.55)

# -----------------------------------------------------------------------------
# PALETTE (fusion base under the stylesheet)
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = QColor(255, 255, 255)
