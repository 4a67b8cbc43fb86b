#!/usr/bin/env python3
"""
Pocket cube solver
Main entry point
"""

import curses
import logging
import sys

import colorama

from cli import ArgumentReadingError, build_parser, read_arguments
from config import DEFAULT_LOG_LEVEL, LOG_FORMAT
from solver import solve
from ui import print_solution, run_main_loop

logger = logging.getLogger(__name__)


def report_error_and_exit(message: str):
    print(message, file=sys.stderr)
    sys.exit(1)


def run(argv=None):
    """Read the cube from the command line, solve it, show the solution"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else DEFAULT_LOG_LEVEL,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.page_size < 1:
        parser.error("--page-size must be at least 1")

    try:
        cube_input = read_arguments(args.arguments)
    except ArgumentReadingError as error:
        report_error_and_exit(error.message())

    solution = solve(cube_input.initial_cube)
    logger.info("solution has %d moves", len(solution))

    if args.print_only or not solution:
        if args.color:
            colorama.init()
        print_solution(cube_input.aliases, cube_input.initial_cube, solution,
                       page_moves_count=args.page_size, colors=args.color)
        return

    curses.wrapper(run_main_loop, cube_input.aliases, cube_input.initial_cube, solution,
                   args.page_size, args.color)


if __name__ == "__main__":
    run()
