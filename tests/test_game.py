import pytest

from solong.game import Direction, Game, Key, step_message
from solong.mapfile import parse_map

LINE_MAP = "1111111\n1EP0C01\n1111111\n"
SQUARE_MAP = "11111\n1P0C1\n100E1\n11111\n"


def make_game(text):
    return Game(parse_map(text))


def test_step_message_first_step():
    assert step_message(1) == "first step "


def test_step_message_later_steps():
    assert step_message(2) == "2 steps "


def test_move_right_counts_step():
    game = make_game(LINE_MAP)
    assert game.move(Direction.RIGHT) is True
    assert game.player() == (1, 3)
    assert game.steps == 1


def test_move_into_wall_is_refused():
    game = make_game(SQUARE_MAP)
    assert game.move(Direction.UP) is False
    assert game.player() == (1, 1)
    assert game.steps == 0


def test_collecting_removes_item():
    game = make_game(LINE_MAP)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.map.count("C") == 0
    assert game.player() == (1, 4)


def test_exit_blocked_while_items_remain():
    game = make_game(LINE_MAP)
    assert game.can_enter(1, 1) is False
    assert game.move(Direction.LEFT) is False
    assert game.won is False
    assert game.running is True


def test_reaching_exit_after_collecting_wins():
    game = make_game(LINE_MAP)
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.LEFT, Direction.LEFT):
        assert game.move(direction) is True
    assert game.can_enter(1, 1) is True
    game.move(Direction.LEFT)
    assert game.won is True
    assert game.running is False
    assert game.steps == 4


def test_up_and_down_moves():
    game = make_game(SQUARE_MAP)
    game.move(Direction.DOWN)
    assert game.player() == (2, 1)
    game.move(Direction.UP)
    assert game.player() == (1, 1)
    assert game.steps == 2


def test_player_count_stays_one():
    game = make_game(SQUARE_MAP)
    for direction in [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP] * 3:
        game.move(direction)
        assert game.map.count("P") == 1


def test_handle_key_messages():
    game = make_game(LINE_MAP)
    assert game.handle_key(Key.D) == "first step "
    assert game.handle_key(Key.A) == step_message(game.steps)
    assert game.steps == 2


def test_blocked_key_after_first_step_still_reports():
    game = make_game(SQUARE_MAP)
    assert game.handle_key(Key.D) == "first step "
    assert game.handle_key(Key.W) == "first step "
    assert game.steps == 1


def test_blocked_key_later_reports_nothing():
    game = make_game(SQUARE_MAP)
    game.handle_key(Key.D)
    game.handle_key(Key.A)
    assert game.handle_key(Key.W) is None
    assert game.steps == 2


def test_escape_stops_game():
    game = make_game(LINE_MAP)
    assert game.handle_key(65307) is None
    assert game.running is False
    assert game.won is False


def test_unknown_key_is_ignored():
    game = make_game(LINE_MAP)
    assert game.handle_key(42) is None
    assert game.steps == 0
    assert game.running is True


def test_no_moves_after_stop():
    game = make_game(LINE_MAP)
    game.handle_key(Key.ESCAPE)
    assert game.move(Direction.RIGHT) is False
    assert game.player() == (1, 2)


@pytest.mark.parametrize(
    "direction, offset",
    [(Direction.LEFT, (0, -1)), (Direction.UP, (-1, 0)),
     (Direction.DOWN, (1, 0)), (Direction.RIGHT, (0, 1))],
)
def test_direction_offsets(direction, offset):
    assert (direction.row_offset, direction.col_offset) == offset