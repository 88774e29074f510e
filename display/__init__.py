"""
Display module for TicTacToe.
Draws the board and maps mouse positions to cells.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
