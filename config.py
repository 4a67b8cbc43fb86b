"""
Configuration constants for the pocket cube solver
"""

import logging

from colorama import Back

from rotation import Side

# Solution pager
PAGE_MOVES_COUNT = 4  # Moves shown per page

# Keys (besides curses.KEY_LEFT / curses.KEY_RIGHT)
KEY_ESCAPE = 27
QUIT_KEYS = (ord('q'), ord('Q'))

# Side to curses color pair mapping (pairs are set up in ui.init_colors)
SIDE_TO_CURSES = {
    Side.B: 1,  # Blue
    Side.U: 2,  # White
    Side.L: 3,  # Orange
    Side.F: 4,  # Green
    Side.R: 5,  # Red
    Side.D: 6,  # Yellow
}

# Side to colorama background, for printed diagrams
# Standard terminals lack orange, so L falls back to magenta
SIDE_TO_BACK = {
    Side.B: Back.BLUE,
    Side.U: Back.WHITE,
    Side.L: Back.MAGENTA,
    Side.F: Back.GREEN,
    Side.R: Back.RED,
    Side.D: Back.YELLOW,
}

# Logging
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING
