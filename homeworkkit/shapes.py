"""ASCII drawings of squares, rectangles, triangles, crosses and windows."""

from __future__ import annotations

import sys

SIZE_ERROR = "Unsupported size to display shape"
ANGLE_ERROR = "Unsupported angle to display shape"


def _lines(rows) -> str:
    return "".join(row + "\n" for row in rows)


def square(size: int, angle: int) -> str:
    """A square, or a diamond when turned by an odd multiple of 45 degrees."""
    if size < 0:
        raise ValueError(SIZE_ERROR)
    if abs(angle) % 45:
        raise ValueError(ANGLE_ERROR)
    if (abs(angle) // 45) % 2 == 0:
        return _lines("*" * size for _ in range(size))
    widths = list(range(size)) + list(range(size - 2, -1, -1))
    return _lines(" " * (size - i - 1) + "*" * (2 * i + 1) for i in widths)


def rectangle(width: int, height: int) -> str:
    """A filled rectangle."""
    if width <= 0 or height <= 0:
        raise ValueError(SIZE_ERROR)
    return _lines("*" * width for _ in range(height))


def triangle(size: int, angle: int) -> str:
    """A right triangle turned by a multiple of 90 degrees."""
    if size < 0:
        raise ValueError(SIZE_ERROR)
    if abs(angle) % 90:
        raise ValueError(ANGLE_ERROR)
    if angle < 0:
        angle += 360 * (abs(angle) // 360 + 1)
    case = (angle // 90) % 4
    rows = range(size)
    if case == 0:
        return _lines("*" * (i + 1) for i in rows)
    if case == 1:
        return _lines("*" * (size - i) for i in rows)
    if case == 2:
        return _lines(" " * i + "*" * (size - i) for i in rows)
    return _lines(" " * (size - i) + "*" * (i + 1) for i in rows)


def cross(size: int, angle: int) -> str:
    """A plus sign, or an X when turned by an odd multiple of 45 degrees."""
    if size < 0 or size % 2 == 0:
        raise ValueError(SIZE_ERROR)
    if abs(angle) % 45:
        raise ValueError(ANGLE_ERROR)
    half = size // 2
    if abs(angle) % 90 == 0:
        arm = [" " * half + "*"] * half
        return _lines(arm + ["*" * size] + arm)
    return _lines(
        "".join("*" if i == j or i + j == size - 1 else " " for j in range(size))
        for i in range(size)
    )


def window(size: int) -> str:
    """A square frame split into four panes."""
    if size % 2 == 0:
        raise ValueError(SIZE_ERROR)
    edges = {0, size - 1, size // 2}
    return _lines(
        "".join("*" if i in edges or j in edges else " " for j in range(size))
        for i in range(size)
    )


def run(text: str) -> str:
    """Process a whole input document and return the program output."""
    tokens = iter(text.split())
    out: list[str] = []
    count = int(next(tokens))
    for index in range(count):
        if index:
            out.append("\n")
        kind = next(tokens, "")[:1]
        last = index == count - 1
        try:
            if kind == "p":
                out.append(square(int(next(tokens)), int(next(tokens))))
            elif kind == "d":
                out.append(rectangle(int(next(tokens)), int(next(tokens))))
            elif kind == "t":
                out.append(triangle(int(next(tokens)), int(next(tokens))))
            elif kind == "c":
                out.append(cross(int(next(tokens)), int(next(tokens))))
            elif kind == "f":
                size = int(next(tokens))
                # the last-shape test here compares against the window size
                last = index == size - 1
                out.append(window(size))
        except ValueError as error:
            out.append(str(error) if last else f"{error}\n")
    return "".join(out)


def main(argv=None) -> int:
    sys.stdout.write(run(sys.stdin.read()))
    return 0