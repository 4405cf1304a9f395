import random

import pytest

from taskkit.snake_field import APPLE, EMPTY, Direction, Field, neighbour, turn


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.mark.parametrize(
    "current, key, expected",
    [
        (Direction.LEFT, "w", Direction.UP),
        (Direction.DOWN, "w", Direction.DOWN),
        (Direction.UP, "s", Direction.UP),
        (Direction.UP, "a", Direction.LEFT),
        (Direction.RIGHT, "a", Direction.RIGHT),
        (Direction.DOWN, "d", Direction.RIGHT),
        (Direction.LEFT, "d", Direction.LEFT),
        (Direction.UP, "x", Direction.UP),
        (Direction.RIGHT, None, Direction.RIGHT),
    ],
)
def test_turn(current, key, expected):
    assert turn(current, key) is expected


@pytest.mark.parametrize(
    "position, direction, expected",
    [
        ((0, 0), Direction.UP, (2, 0)),
        ((2, 1), Direction.DOWN, (0, 1)),
        ((1, 0), Direction.LEFT, (1, 2)),
        ((0, 2), Direction.RIGHT, (0, 0)),
        ((1, 1), Direction.UP, (0, 1)),
    ],
)
def test_neighbour_wraps(position, direction, expected):
    assert neighbour(position, direction, 3) == expected


def test_generate_invariants():
    field = Field.generate(5, random.Random(7))
    values = [value for row in field.cells for value in row]
    assert values.count(APPLE) == 1
    assert values.count(1) == 1
    assert values.count(EMPTY) == 23


def test_generate_redraws_snake_on_apple():
    field = Field.generate(3, ScriptedRng([4, 4, 7]))
    assert field[(1, 1)] == APPLE
    assert field[(2, 1)] == 1


def test_generate_rejects_tiny_field():
    with pytest.raises(ValueError):
        Field.generate(1)


def test_head():
    field = Field(3, [[0, 1, 2], [0, 3, 0], [-1, 0, 0]])
    assert field.head(3) == (1, 1)
    assert field.head(1) == (0, 1)


def test_head_missing():
    with pytest.raises(LookupError):
        Field(2).head(1)


def test_lengthen_then_step_keeps_order():
    field = Field(3, [[0, 1, 2], [0, -1, 0], [0, 0, 0]])
    length = field.lengthen(2, (1, 1))
    assert length == 3
    field.step()
    assert field.cells == [[0, 1, 2], [0, 3, 0], [0, 0, 0]]


def test_step_empties_tail():
    field = Field(2, [[1, 2], [-1, 0]])
    field.step()
    assert field.cells == [[0, 1], [-1, 0]]


def test_add_apple_uses_empty_cell():
    field = Field(2, [[1, 2], [0, 0]])
    position = field.add_apple(ScriptedRng([1]))
    assert position == (1, 1)
    assert field.cells == [[1, 2], [0, -1]]


def test_add_apple_on_full_field():
    field = Field(2, [[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        field.add_apple(random.Random(0))


def test_cells_must_be_square():
    with pytest.raises(ValueError):
        Field(2, [[0, 0]])