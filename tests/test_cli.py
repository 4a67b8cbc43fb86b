import pytest

from cli import (
    AmbiguousAlias, ArgumentReadingError, DuplicateCorner, InvalidCorner, InvalidSide,
    InvalidSideAlias, InvalidSideSpecifier, MissingClosingCurlyBracket,
    MissingOpeningCurlyBracket, MultipleAliasesForSameSide, RepeatedSide, SideConfiguration,
    TooFewAliasesSpecified, TooManyEqualsSigns, UnreachableConfiguration, build_parser,
    read_arguments, sticker_slot, validate_cube,
)
from cube_state import SOLVED_CUBE
from moves import Move
from rotation import Side
from solver import solve, twist_moves

COLOR_ALIASES = ["o=left", "r=right", "y=down", "w=up", "b=back", "g=front"]


def test_aliases_only_give_solved_cube():
    cube_input = read_arguments(COLOR_ALIASES)
    assert cube_input.initial_cube == SOLVED_CUBE
    assert cube_input.aliases.alias(Side.U) == "w"
    assert cube_input.aliases.optional_side("g") == Side.F
    assert cube_input.aliases.optional_side("purple") is None


def test_solved_configuration_written_out():
    arguments = COLOR_ALIASES + [
        "left{o,o,o,o}", "right{r,r,r,r}", "down{y,y,y,y}",
        "up{w,w,w,w}", "back{b,b,b,b}", "front{g,g,g,g}",
    ]
    assert read_arguments(arguments).initial_cube == SOLVED_CUBE


def test_sticker_slots_cover_each_side_face():
    for side in Side:
        slots = set()
        for entry_idx in range(4):
            index = sticker_slot(int(side), entry_idx)
            assert index[side.axis] == int(side.positive)
            slots.add(tuple(index))
        assert len(slots) == 4


def test_configuration_round_trip_through_arguments(scrambled_cubes):
    cube_input = read_arguments(COLOR_ALIASES)
    for cube in scrambled_cubes:
        arguments = SideConfiguration.from_cube(cube).to_arguments(cube_input.aliases)
        assert read_arguments(arguments).initial_cube == cube


def test_solve_cube_read_from_arguments():
    cube_input = read_arguments(COLOR_ALIASES)
    scrambled = SOLVED_CUBE.apply_sequence([Move.R1, Move.U1, Move.F2, Move.L3, Move.B1, Move.D2])
    arguments = SideConfiguration.from_cube(scrambled).to_arguments(cube_input.aliases)
    cube = read_arguments(arguments).initial_cube
    assert cube.apply_sequence(solve(cube)).is_solved()


@pytest.mark.parametrize("arguments,error", [
    (["o=left", "r=right"], TooFewAliasesSpecified),
    (["o=left=right"], TooManyEqualsSigns),
    (["o=left", "o=right"], AmbiguousAlias),
    (["o=sideways"], InvalidSideSpecifier),
    (["o"], InvalidSideSpecifier),
    (["o=left", "x=left"], MultipleAliasesForSameSide),
    (COLOR_ALIASES + ["middle{o,o,o,o}"], InvalidSide),
    (COLOR_ALIASES + ["left(o,o,o,o)"], MissingOpeningCurlyBracket),
    (COLOR_ALIASES + ["left{o,o,o,o"], MissingClosingCurlyBracket),
    (COLOR_ALIASES + ["left{o,o,o}"], MissingClosingCurlyBracket),
    (COLOR_ALIASES + ["left{o,o,o,o}x"], MissingClosingCurlyBracket),
    (COLOR_ALIASES + ["left{o,o,p,o}"], InvalidSideAlias),
    (COLOR_ALIASES + ["left{o,o,o,o}", "left{o,o,o,o}"], RepeatedSide),
])
def test_argument_errors(arguments, error):
    with pytest.raises(error) as info:
        read_arguments(arguments)
    assert isinstance(info.value, ArgumentReadingError)
    assert info.value.message()


def test_error_messages_name_the_problem():
    with pytest.raises(TooFewAliasesSpecified) as info:
        read_arguments(["o=left"])
    assert info.value.message() == (
        "Invalid alias arguments: Only 1 side aliases specified: "
        "6 aliases are required (one for each side)"
    )
    with pytest.raises(InvalidSideAlias) as info:
        read_arguments(COLOR_ALIASES + ["up{w,w,q,w}"])
    assert info.value.message() == "Invalid cube configuration: invalid alias: 'q'"


def test_corner_with_two_stickers_on_one_axis_is_rejected():
    # every sticker of the left face shows right, so those corners show two x colors
    with pytest.raises(InvalidCorner):
        read_arguments(COLOR_ALIASES + ["left{r,r,r,r}"])


def test_single_twisted_corner_is_unreachable():
    twisted = SOLVED_CUBE.apply_sequence(twist_moves(0, 7))
    configuration = SideConfiguration.from_cube(twisted)
    # untwist corner 7 alone by copying its stickers from the solved cube
    for side in Side:
        for entry_idx in range(4):
            index = sticker_slot(int(side), entry_idx)
            if index == [1, 1, 1]:
                configuration.configuration[side][entry_idx] = side
    with pytest.raises(UnreachableConfiguration):
        validate_cube(configuration.to_cube(), configuration)


def test_duplicated_corner_is_rejected():
    configuration = SideConfiguration()
    # make slot 7 show the colors of corner 0 (left, down, back), turned so
    # that the stickers still form a real corner
    for side in (Side.R, Side.U, Side.F):
        for entry_idx in range(4):
            if sticker_slot(int(side), entry_idx) == [1, 1, 1]:
                configuration.configuration[side][entry_idx] = {
                    Side.R: Side.D, Side.U: Side.L, Side.F: Side.B,
                }[side]
    with pytest.raises(DuplicateCorner):
        validate_cube(configuration.to_cube(), configuration)


def test_reading_without_validation_keeps_whatever_was_given():
    cube_input = read_arguments(COLOR_ALIASES + ["left{r,r,r,r}"], validate=False)
    assert not cube_input.initial_cube.is_valid()


def test_parser_options():
    args = build_parser().parse_args(["--print", "--page-size", "6", "-v"] + COLOR_ALIASES)
    assert args.print_only
    assert args.page_size == 6
    assert args.verbose
    assert args.color
    assert args.arguments == COLOR_ALIASES


@pytest.mark.parametrize("move", list(Move))
def test_configuration_builds_the_same_corner_transforms(move):
    cube = SOLVED_CUBE.apply_move(move)
    built = SideConfiguration.from_cube(cube).to_cube()
    assert built == cube
    assert all(t.is_rotation() for t in built.transforms)


def test_invalid_corner_names_first_broken_slot():
    configuration = SideConfiguration({Side.L: [Side.R] * 4})
    with pytest.raises(InvalidCorner) as excinfo:
        validate_cube(configuration.to_cube(), configuration)
    assert excinfo.value.slot == 0
