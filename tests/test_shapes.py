import pytest

from homeworkkit.shapes import (
    ANGLE_ERROR,
    SIZE_ERROR,
    cross,
    rectangle,
    run,
    square,
    triangle,
    window,
)


def test_rectangle_dimensions():
    rows = rectangle(5, 3).splitlines()
    assert len(rows) == 3
    assert all(row == "*****" for row in rows)


def test_square_equals_rectangle():
    assert square(4, 90) == rectangle(4, 4)


def test_diamond_is_symmetric():
    rows = square(3, 45).splitlines()
    assert rows == rows[::-1]
    assert len(rows) == 5


def test_triangle_angle_equivalence():
    assert triangle(4, -90) == triangle(4, 270)
    assert triangle(4, 360) == triangle(4, 0)


def test_x_cross_symmetric():
    rows = cross(5, 45).splitlines()
    assert rows == rows[::-1]
    assert all(row == row[::-1] for row in rows)


def test_plus_cross_middle_row_full():
    assert cross(5, 0).splitlines()[2] == "*****"


def test_window_transpose_symmetric():
    rows = window(5).splitlines()
    assert rows == ["".join(col) for col in zip(*rows)]


@pytest.mark.parametrize(
    "call,message",
    [
        (lambda: square(-1, 0), SIZE_ERROR),
        (lambda: square(3, 30), ANGLE_ERROR),
        (lambda: cross(4, 0), SIZE_ERROR),
        (lambda: triangle(3, 45), ANGLE_ERROR),
        (lambda: window(4), SIZE_ERROR),
    ],
)
def test_errors(call, message):
    with pytest.raises(ValueError, match=message):
        call()


def test_run_joins_shapes():
    assert run("2\nd 2 2\np 2 30\n") == rectangle(2, 2) + "\n" + ANGLE_ERROR