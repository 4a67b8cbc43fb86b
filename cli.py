"""
Command line reading - side aliases and the scrambled cube configuration

Arguments are six alias=side pairs followed by side{a,b,c,d} entries:

    pocket-cube w=up y=down g=front b=back r=right o=left \\
        "up{w,w,g,w}" "front{y,g,g,g}" ...

Each entry lists, in sticker order, the alias of the color now showing on
that side's four stickers. Sides left out keep their solved colors.
"""

import argparse
from typing import Dict, Iterator, List, Optional, Sequence

import permutations
from config import PAGE_MOVES_COUNT
from cube_state import Cube
from rotation import Side, Transform, normal, vector_direction_index
from ui import SideAliases


def _side_list() -> str:
    return ", ".join(side.serialization for side in Side)


class ArgumentReadingError(Exception):
    """Base class for everything wrong with the command line"""

    prefix = "Invalid arguments"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def message(self) -> str:
        return f"{self.prefix}: {self.detail}"


class SideAliasReadingError(ArgumentReadingError):
    prefix = "Invalid alias arguments"


class TooFewAliasesSpecified(SideAliasReadingError):
    def __init__(self, specified_alias_count: int):
        super().__init__(
            f"Only {specified_alias_count} side aliases specified: "
            "6 aliases are required (one for each side)"
        )
        self.specified_alias_count = specified_alias_count


class TooManyEqualsSigns(SideAliasReadingError):
    def __init__(self, argument: str):
        super().__init__(f"Invalid argument: {argument}: more than one equal sign")
        self.argument = argument


class AmbiguousAlias(SideAliasReadingError):
    def __init__(self, alias: str, side: Side):
        super().__init__(f"Ambiguous alias: {alias}: this alias also refers to '{side.serialization}'")
        self.alias = alias
        self.side = side


class InvalidSideSpecifier(SideAliasReadingError):
    def __init__(self, argument: str):
        super().__init__(
            f"Invalid argument: {argument}: invalid side specifier\n"
            f"Valid side specifiers are: {_side_list()}"
        )
        self.argument = argument


class MultipleAliasesForSameSide(SideAliasReadingError):
    def __init__(self, side: Side):
        super().__init__(f"Multiple aliases for the same side: {side.serialization}")
        self.side = side


class SideConfigurationError(ArgumentReadingError):
    prefix = "Invalid cube configuration"


class InvalidSide(SideConfigurationError):
    def __init__(self, argument: str):
        super().__init__(
            f"Expected [side] in side configuration specification: {argument}\n"
            f"Here, [side] may be one of the following: {_side_list()}"
        )
        self.argument = argument


class MissingOpeningCurlyBracket(SideConfigurationError):
    def __init__(self, argument: str):
        super().__init__(f"{argument}: expected '{{' after the side")
        self.argument = argument


class MissingClosingCurlyBracket(SideConfigurationError):
    def __init__(self, argument: str):
        super().__init__(f"{argument}: the fourth alias should be followed by a '}}'")
        self.argument = argument


class InvalidSideAlias(SideConfigurationError):
    def __init__(self, expected_alias: str):
        super().__init__(f"invalid alias: '{expected_alias}'")
        self.expected_alias = expected_alias


class RepeatedSide(SideConfigurationError):
    def __init__(self, side: Side):
        super().__init__(f"side '{side.serialization}' is configured more than once")
        self.side = side


class InvalidCorner(SideConfigurationError):
    def __init__(self, slot: int, sides: Sequence[Side]):
        names = ", ".join(s.serialization for s in sides)
        super().__init__(f"corner {slot} shows colors of sides {names}, which do not meet at a corner")
        self.slot = slot


class DuplicateCorner(SideConfigurationError):
    def __init__(self, corner: int):
        super().__init__(f"corner {corner} appears more than once")
        self.corner = corner


class UnreachableConfiguration(SideConfigurationError):
    def __init__(self, total_twist: int):
        super().__init__(
            f"corner twists add up to {total_twist} (mod 3); "
            "this cube cannot be reached by turning faces"
        )
        self.total_twist = total_twist


def sticker_slot(side_idx: int, entry_idx: int) -> List[int]:
    """Slot coordinate of sticker entry_idx on side side_idx"""
    d0 = side_idx // 2
    d1 = [1, 0, 0][d0]
    d2 = [2, 2, 1][d0]
    index = [0, 0, 0]
    index[d0] = side_idx & 1
    index[d1] = entry_idx & 1
    index[d2] = (entry_idx >> 1) & 1
    return index


class SideConfiguration:
    """For each side, the solved side of the sticker in each of its four places"""

    def __init__(self, configuration: Optional[Dict[Side, Sequence[Side]]] = None):
        self.configuration = {side: [side] * 4 for side in Side}
        if configuration:
            for side, stickers in configuration.items():
                assert len(stickers) == 4
                self.configuration[side] = list(stickers)

    @classmethod
    def from_cube(cls, cube: Cube) -> "SideConfiguration":
        """Read the stickers off a cube"""
        configuration = {}
        for side in Side:
            stickers = []
            for entry_idx in range(4):
                index = sticker_slot(int(side), entry_idx)
                stickers.append(cube.sticker(side, [2 * i - 1 for i in index]))
            configuration[side] = stickers
        return cls(configuration)

    def to_arguments(self, aliases: SideAliases) -> List[str]:
        """Command line that describes this configuration, aliases first"""
        arguments = [f"{aliases.alias(side)}={side.serialization}" for side in Side]
        for side in Side:
            names = ",".join(aliases.alias(s) for s in self.configuration[side])
            arguments.append(f"{side.serialization}{{{names}}}")
        return arguments

    def corner_sides(self) -> Dict[int, List[Side]]:
        corners: Dict[int, List[Side]] = {slot: [] for slot in range(8)}
        for side in Side:
            for entry_idx in range(4):
                index = sticker_slot(int(side), entry_idx)
                corners[index[0] | (index[1] << 1) | (index[2] << 2)].append(
                    self.configuration[side][entry_idx]
                )
        return corners

    def to_cube(self) -> Cube:
        """
        Build the corner transforms.

        A sticker of solved side S showing on side F sets the column of
        S's axis to S's sign times F's normal.
        """
        identity = Transform.identity()
        columns = [[identity.column(j) for j in range(3)] for _ in range(8)]
        for side in Side:
            side_normal = normal(side)
            for entry_idx in range(4):
                index = sticker_slot(int(side), entry_idx)
                slot = index[0] | (index[1] << 1) | (index[2] << 2)
                solved_normal = normal(self.configuration[side][entry_idx])
                column_idx = vector_direction_index(solved_normal)
                sign = solved_normal[column_idx]
                columns[slot][column_idx] = tuple(sign * n for n in side_normal)
        return Cube([Transform.from_columns(c) for c in columns])


def validate_cube(cube: Cube, configuration: Optional[SideConfiguration] = None):
    """Reject cubes that no sequence of turns can reach"""
    if not cube.is_valid():
        slot = next(s for s, t in enumerate(cube.transforms) if not t.is_rotation())
        sides = configuration.corner_sides()[slot] if configuration else []
        raise InvalidCorner(slot, sides)

    positions, orientations = cube.positions_orientations()
    if not permutations.is_permutation(positions):
        seen = set()
        for corner in positions:
            if corner in seen:
                raise DuplicateCorner(corner)
            seen.add(corner)

    total_twist = sum(orientations) % 3
    if total_twist != 0:
        raise UnreachableConfiguration(total_twist)


def read_side_aliases(arguments: Iterator[str]) -> SideAliases:
    aliases: Dict[str, Side] = {}

    while len(aliases) < 6:
        argument = next(arguments, None)
        if argument is None:
            raise TooFewAliasesSpecified(len(aliases))

        pieces = argument.split("=")
        if len(pieces) > 2:
            raise TooManyEqualsSigns(argument)
        alias = pieces[0]
        if alias in aliases:
            raise AmbiguousAlias(alias, aliases[alias])

        side = Side.deserialize(pieces[1] if len(pieces) == 2 else "")
        if side is None:
            raise InvalidSideSpecifier(argument)
        if side in aliases.values():
            raise MultipleAliasesForSameSide(side)

        aliases[alias] = side

    return SideAliases(aliases)


def read_side_configuration(aliases: SideAliases, arguments: Iterator[str]) -> SideConfiguration:
    configuration: Dict[Side, List[Side]] = {}

    for argument in arguments:
        side = next((s for s in Side if argument.startswith(s.serialization)), None)
        if side is None:
            raise InvalidSide(argument)
        if side in configuration:
            raise RepeatedSide(side)

        rest = argument[len(side.serialization):]
        if not rest.startswith("{"):
            raise MissingOpeningCurlyBracket(argument)
        rest = rest[1:]

        stickers = []
        for i in range(4):
            separator = "}" if i == 3 else ","
            separator_idx = rest.find(separator)
            if separator_idx < 0:
                raise MissingClosingCurlyBracket(argument)
            expected_alias = rest[:separator_idx]
            sticker = aliases.optional_side(expected_alias)
            if sticker is None:
                raise InvalidSideAlias(expected_alias)
            stickers.append(sticker)
            rest = rest[separator_idx + 1:]
        if rest:
            raise MissingClosingCurlyBracket(argument)

        configuration[side] = stickers

    return SideConfiguration(configuration)


class Input:
    def __init__(self, aliases: SideAliases, configuration: SideConfiguration, initial_cube: Cube):
        self.aliases = aliases
        self.configuration = configuration
        self.initial_cube = initial_cube


def read_arguments(arguments: Sequence[str], validate: bool = True) -> Input:
    """Turn the positional arguments into aliases and a cube"""
    iterator = iter(arguments)
    aliases = read_side_aliases(iterator)
    configuration = read_side_configuration(aliases, iterator)
    cube = configuration.to_cube()
    if validate:
        validate_cube(cube, configuration)
    return Input(aliases, configuration, cube)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocket-cube",
        description="Solve a scrambled 2x2x2 cube and page through the solution.",
        epilog=f"Sides: {_side_list()}",
    )
    parser.add_argument(
        "arguments", nargs="*",
        help="six alias=side pairs, then side{a,b,c,d} for each scrambled side",
    )
    parser.add_argument("--print", dest="print_only", action="store_true",
                        help="print the solution instead of paging through it")
    parser.add_argument("--no-color", dest="color", action="store_false",
                        help="plain text diagrams")
    parser.add_argument("--page-size", type=int, default=PAGE_MOVES_COUNT,
                        help=f"moves per page (default {PAGE_MOVES_COUNT})")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser
