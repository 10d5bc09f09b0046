"""A seven-segment digit drawn on a grid that can be shifted around."""

from __future__ import annotations

import sys

DIGITS = (
    "abcdef",
    "bc",
    "abdeg",
    "abcdg",
    "bcfg",
    "acdfg",
    "acdefg",
    "abc",
    "abcdefg",
    "abcdfg",
)
NOT_A_DIGIT = "The input given is not a digit."
INVALID_COMMAND = "Invalid command."


class SegmentDisplay:
    """A rows x cols grid on which digits of segment length ``length`` appear."""

    def __init__(self, rows: int, cols: int, length: int):
        self.rows = rows
        self.cols = cols
        self.length = length
        self.grid = [[False] * cols for _ in range(rows)]

    def _paint(self, rows: range, cols: range) -> None:
        for r in rows:
            if 0 <= r < self.rows:
                for c in cols:
                    if 0 <= c < self.cols:
                        self.grid[r][c] = True

    def draw_digit(self, digit: int) -> None:
        """Clear the grid and draw ``digit``; raise ValueError if not 0-9."""
        if not 0 <= digit <= 9:
            raise ValueError(NOT_A_DIGIT)
        self.grid = [[False] * self.cols for _ in range(self.rows)]
        n, m, l = self.rows, self.cols, self.length
        h = l // 3
        horizontal = range(h, min(l + h, m - h))
        right = range(m - h, m)
        left = range(0, h)
        upper = range(h, min(h + l, n))
        lower = range(2 * h + l, min(2 * h + 2 * l, n))
        spans = {
            "a": (range(0, h), horizontal),
            "b": (upper, right),
            "c": (lower, right),
            "d": (range(2 * h + 2 * l, min(3 * h + 2 * l, n)), horizontal),
            "e": (lower, left),
            "f": (upper, left),
            "g": (range(h + l, min(2 * h + l, n)), horizontal),
        }
        for segment in DIGITS[digit]:
            self._paint(*spans[segment])

    def shift(self, direction: str, count: int) -> None:
        """Shift the grid cyclically: W up, S down, A left, D right."""
        dr = {"W": -count, "S": count}.get(direction, 0)
        dc = {"A": -count, "D": count}.get(direction, 0)
        if direction not in "WASD" or not direction:
            raise ValueError(INVALID_COMMAND)
        moved = [[False] * self.cols for _ in range(self.rows)]
        for r, row in enumerate(self.grid):
            for c, lit in enumerate(row):
                if lit:
                    moved[(r + dr) % self.rows][(c + dc) % self.cols] = True
        self.grid = moved

    def render(self) -> str:
        """The grid as text: '^ ' for lit cells, two spaces otherwise."""
        body = "".join(
            "".join("^ " if lit else "  " for lit in row) + "\n" for row in self.grid
        )
        return body + "\n"


def run(text: str) -> str:
    """Process a whole input document and return the program output."""
    lines = text.split("\n")
    rows, cols, length = (int(t) for t in lines[0].split()[:3])
    display = SegmentDisplay(rows, cols, length)
    out: list[str] = []
    for line in lines[1:]:
        command = line[:1]
        if command == "Q":
            break
        args = line[1:].split()
        try:
            if command == "F":
                display.draw_digit(int(args[0]))
            elif command == "P":
                out.append(display.render())
            elif command and command in "WASD":
                display.shift(command, int(args[0]))
            else:
                out.append(INVALID_COMMAND + "\n")
        except ValueError as error:
            out.append(f"{error}\n")
    return "".join(out)


def main(argv=None) -> int:
    sys.stdout.write(run(sys.stdin.read()))
    return 0