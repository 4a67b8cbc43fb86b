"""
UI components - side aliases, cube diagram, solution pager and screen drawing
"""

import curses
from typing import Callable, Dict, List, Optional, Sequence

from colorama import Style

from config import KEY_ESCAPE, PAGE_MOVES_COUNT, QUIT_KEYS, SIDE_TO_BACK, SIDE_TO_CURSES
from cube_state import Cube
from moves import Move
from rotation import Side

AliasResolver = Callable[[Side], str]


class SideAliases:
    """User chosen names for the six sides"""

    def __init__(self, aliases: Dict[str, Side]):
        self.aliases = dict(aliases)

    @classmethod
    def default(cls) -> "SideAliases":
        return cls({side.serialization: side for side in Side})

    def alias(self, side: Side) -> str:
        for a, s in self.aliases.items():
            if s == side:
                return a
        raise AssertionError(f"no alias for side {side.serialization}")

    def optional_side(self, alias: str) -> Optional[Side]:
        return self.aliases.get(alias)

    def __call__(self, side: Side) -> str:
        return self.alias(side)

    def __len__(self) -> int:
        return len(self.aliases)


# Unfolded net, by (row // 2, column // 2):
#       U
#     L F R B
#       D
DIAGRAM_LAYOUT = {
    (0, 1): Side.U,
    (1, 0): Side.L,
    (1, 1): Side.F,
    (1, 2): Side.R,
    (1, 3): Side.B,
    (2, 1): Side.D,
}
DIAGRAM_ROWS = 2 * 3
DIAGRAM_COLUMNS = 2 * 4


def sticker_position(side: Side, i: int, j: int) -> tuple:
    """Corner position of sticker (i, j) of a side as drawn in the net"""
    if side == Side.L:
        return (-1, 1 - 2 * i, -1 + 2 * j)
    if side == Side.R:
        return (1, 1 - 2 * i, 1 - 2 * j)
    if side == Side.D:
        return (-1 + 2 * j, -1, 1 - 2 * i)
    if side == Side.U:
        return (-1 + 2 * j, 1, -1 + 2 * i)
    if side == Side.B:
        return (1 - 2 * j, 1 - 2 * i, -1)
    if side == Side.F:
        return (-1 + 2 * j, 1 - 2 * i, 1)
    raise AssertionError(f"unknown side: {side}")


def diagram_cells(cube: Cube) -> List[List[Optional[Side]]]:
    """Solved side showing in each cell of the net, None off the net"""
    rows = []
    for row_idx in range(DIAGRAM_ROWS):
        row = []
        for column_idx in range(DIAGRAM_COLUMNS):
            side = DIAGRAM_LAYOUT.get((row_idx // 2, column_idx // 2))
            if side is None:
                row.append(None)
            else:
                position = sticker_position(side, row_idx & 1, column_idx & 1)
                row.append(cube.sticker(side, position))
        rows.append(row)
    return rows


def _cell_width(alias_of: AliasResolver) -> int:
    return max(len(alias_of(side)) for side in Side)


def format_diagram(cube: Cube, alias_of: AliasResolver) -> List[str]:
    """Net as plain text lines, one alias per sticker"""
    width = _cell_width(alias_of)
    lines = []
    for row in diagram_cells(cube):
        cells = [(alias_of(s) if s is not None else "").ljust(width) for s in row]
        lines.append(" ".join(cells).rstrip())
    return lines


def colored_diagram(cube: Cube, alias_of: AliasResolver) -> List[str]:
    """Net with colorama backgrounds keyed by the solved side"""
    width = _cell_width(alias_of)
    lines = []
    for row in diagram_cells(cube):
        cells = []
        for s in row:
            if s is None:
                cells.append(" " * width)
            else:
                cells.append(f"{SIDE_TO_BACK[s]}{alias_of(s).ljust(width)}{Style.RESET_ALL}")
        lines.append(" ".join(cells).rstrip())
    return lines


def format_move(move: Move, alias_of: AliasResolver) -> str:
    """e.g. "front 90°" """
    return f"{alias_of(move.side)} {move.degrees}°"


class Pager:
    """Splits a solution into pages of a few moves each"""

    def __init__(self, cube: Cube, solution: Sequence[Move], page_moves_count: int = PAGE_MOVES_COUNT):
        assert page_moves_count > 0
        self.cube = cube
        self.solution = list(solution)
        self.page_moves_count = page_moves_count
        self.page_idx = 0

    @property
    def pages_count(self) -> int:
        return max(1, -(-len(self.solution) // self.page_moves_count))

    @property
    def lo(self) -> int:
        return self.page_moves_count * self.page_idx

    @property
    def hi(self) -> int:
        return min(len(self.solution), self.lo + self.page_moves_count)

    def page_moves(self) -> List[Move]:
        return self.solution[self.lo:self.hi]

    def cube_before(self) -> Cube:
        return self.cube.apply_sequence(self.solution[:self.lo])

    def cube_after(self) -> Cube:
        return self.cube.apply_sequence(self.solution[:self.hi])

    def forward(self) -> bool:
        if self.page_idx < self.pages_count - 1:
            self.page_idx += 1
            return True
        return False

    def back(self) -> bool:
        if self.page_idx > 0:
            self.page_idx -= 1
            return True
        return False

    def progress(self) -> str:
        return f"Progress: {self.page_idx + 1}/{self.pages_count}"


def init_colors():
    """Initialize curses color pairs, one per side"""
    curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(2, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(4, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(5, curses.COLOR_BLACK, curses.COLOR_RED)
    curses.init_pair(6, curses.COLOR_BLACK, curses.COLOR_YELLOW)

    # Try to use 256-color orange
    if curses.COLORS >= 256:
        curses.init_pair(3, curses.COLOR_BLACK, 208)  # Orange
    else:
        curses.init_pair(3, curses.COLOR_BLACK, curses.COLOR_MAGENTA)


def draw_diagram(stdscr, start_row: int, start_col: int, cube: Cube, alias_of: AliasResolver,
                 colors: bool = True):
    """Draw the net with one colored cell per sticker"""
    width = _cell_width(alias_of)
    for row_idx, row in enumerate(diagram_cells(cube)):
        x = start_col
        for s in row:
            if s is not None:
                text = alias_of(s).ljust(width)
                try:
                    if colors:
                        stdscr.addstr(start_row + row_idx, x, text, curses.color_pair(SIDE_TO_CURSES[s]))
                    else:
                        stdscr.addstr(start_row + row_idx, x, text)
                except curses.error:
                    pass
            x += width + 1


def draw_page(stdscr, pager: Pager, alias_of: AliasResolver, colors: bool = True):
    """Draw progress, the cube before and after this page's moves, and the moves"""
    stdscr.clear()
    row = 0
    try:
        stdscr.addstr(row, 2, pager.progress(), curses.A_BOLD)
    except curses.error:
        pass
    row += 3

    draw_diagram(stdscr, row, 2, pager.cube_before(), alias_of, colors)
    row += DIAGRAM_ROWS + 2

    col = 2
    for move in pager.page_moves():
        text = format_move(move, alias_of)
        try:
            stdscr.addstr(row, col, text, curses.A_BOLD)
        except curses.error:
            pass
        col += len(text) + 2
    row += 3

    draw_diagram(stdscr, row, 2, pager.cube_after(), alias_of, colors)
    row += DIAGRAM_ROWS + 3

    lines = [
        "Left key: previous page",
        "Right key: next page",
        "Esc: exit",
    ]
    for i, line in enumerate(lines):
        try:
            stdscr.addstr(row + i, 2, line, curses.A_DIM)
        except curses.error:
            pass

    stdscr.refresh()


def run_main_loop(stdscr, aliases: SideAliases, cube: Cube, solution: Sequence[Move],
                  page_moves_count: int = PAGE_MOVES_COUNT, colors: bool = True):
    """Page through the solution until Esc is pressed"""
    curses.curs_set(0)
    colors = colors and curses.has_colors()
    if colors:
        curses.start_color()
        init_colors()
    stdscr.nodelay(False)
    stdscr.keypad(True)

    pager = Pager(cube, solution, page_moves_count)
    draw_page(stdscr, pager, aliases, colors)

    while True:
        key = stdscr.getch()
        if key == KEY_ESCAPE or key in QUIT_KEYS:
            break
        if key == curses.KEY_RIGHT:
            pager.forward()
        elif key == curses.KEY_LEFT:
            pager.back()
        elif key != curses.KEY_RESIZE:
            continue
        draw_page(stdscr, pager, aliases, colors)


def print_solution(aliases: SideAliases, cube: Cube, solution: Sequence[Move],
                   page_moves_count: int = PAGE_MOVES_COUNT, colors: bool = True):
    """Print every page of the solution to stdout"""
    diagram = colored_diagram if colors else format_diagram
    pager = Pager(cube, solution, page_moves_count)

    print(f"Solution: {len(pager.solution)} moves\n")
    for line in diagram(cube, aliases):
        print(line)

    if not pager.solution:
        return

    while True:
        print(f"\n{pager.progress()}")
        print("  ".join(format_move(m, aliases) for m in pager.page_moves()))
        print("")
        for line in diagram(pager.cube_after(), aliases):
            print(line)
        if not pager.forward():
            break
