"""
Display configuration for TicTacToe.
Sizes and colours used to draw the board.
"""


class DisplayConfig:
    """
    Configuration class for drawing settings.
    All colours are BGR, as OpenCV expects.
    """

    # ==================== SIZES (pixels) ====================
    TILE_SIZE = 96          # One board cell
    GRID_THICKNESS = 2
    PIECE_THICKNESS = 6
    PIECE_MARGIN = 18       # Gap between a piece and its cell border
    HIGHLIGHT_INSET = 4     # Hover square sits this far inside the cell
    WIN_LINE_THICKNESS = 5

    # ==================== COLOURS (BGR) ====================
    BACKGROUND_COLOR = (0, 0, 0)
    GRID_COLOR = (255, 255, 255)
    CROSS_COLOR = (113, 113, 248)     # Red-ish
    CIRCLE_COLOR = (136, 255, 0)      # Green-ish
    HIGHLIGHT_COLOR = (0, 255, 255)   # Yellow
    WIN_LINE_COLOR = (0, 255, 255)
    BANNER_COLOR = (0, 0, 0)
    TEXT_COLOR = (255, 255, 255)

    # ==================== TEXT ====================
    FONT_SCALE = 0.7
    FONT_THICKNESS = 2

    # ==================== WINDOW ====================
    WINDOW_TITLE = "tic tac toe"
    FRAME_DELAY_MS = 16     # ~60 FPS update loop
