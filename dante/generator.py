"""Random maze generation by depth-first carving."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

from dante.common import (
    EXIT_ERROR,
    EXIT_OK,
    FREE_CELL,
    WALL,
    is_even,
    parse_number,
    random_between,
)


class MazeGenerator:
    """Builds a maze of ``width`` x ``height`` cells.

    Cells with even coordinates start free and are linked by carving the
    walls between them; a perfect maze keeps a single entry to the exit,
    an imperfect one has about a tenth of its cells' worth of extra walls
    knocked down.
    """

    def __init__(
        self,
        width: int,
        height: int,
        perfect: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("maze dimensions must be at least 1")
        self.width = width
        self.height = height
        self.perfect = perfect
        self._rng = rng if rng is not None else random.Random()
        self._even_board = is_even(width) and is_even(height)
        self._cells: list[str] = []
        self._passed: list[bool] = []
        self._reset()

    def _reset(self) -> None:
        self._cells = [
            self._initial_value(x, y)
            for y in range(self.height)
            for x in range(self.width)
        ]
        self._passed = [False] * (self.width * self.height)

    def _initial_value(self, x: int, y: int) -> str:
        if self._even_board and x > self.width - 3 and y > self.height - 3:
            return FREE_CELL
        if is_even(x) and is_even(y):
            return FREE_CELL
        return WALL

    def _neighbours(self, cell: int) -> tuple[int, int, int, int]:
        """North, south, east and west cells two steps away.

        Horizontal neighbours that fall off the row are reported as cell 0.
        """
        w = self.width
        x = cell % w
        east = cell + 2 if x + 2 < w else 0
        west = cell - 2 if x - 2 >= 0 else 0
        return cell - 2 * w, cell + 2 * w, east, west

    def _is_candidate(self, current: int, target: int) -> bool:
        span = 2 * self.width
        return (
            0 <= target < self.width * self.height
            and current - span <= target <= current + span
            and not self._passed[target]
        )

    def _wall_between(self, current: int, chosen: int) -> int:
        w = self.width
        if chosen == current + 2 * w:
            return chosen - w
        if chosen == current - 2 * w:
            return chosen + w
        if chosen == current + 2:
            return chosen - 1
        if chosen == current - 2:
            return chosen + 1
        return 0

    def _open(self, cell: int) -> None:
        self._cells[cell] = FREE_CELL
        self._passed[cell] = True

    def _step(self, stack: list[int]) -> bool:
        """Carve one passage from the top of ``stack``; True once exhausted."""
        current = stack[-1]
        while True:
            candidates = [
                cell
                for cell in self._neighbours(current)
                if self._is_candidate(current, cell)
            ]
            if candidates:
                break
            stack.pop()
            if len(stack) <= 1:
                return True
            current = stack[-1]
        chosen = candidates[random_between(self._rng, 0, len(candidates) - 1)]
        self._passed[chosen] = True
        stack.append(chosen)
        self._open(self._wall_between(current, chosen))
        return False

    def _break_walls(self) -> None:
        size = self.width * self.height
        remaining = min(int(size * 0.1), self._cells.count(WALL))
        while remaining:
            cell = random_between(self._rng, 0, size - 1)
            if self._cells[cell] == WALL:
                self._open(cell)
                remaining -= 1

    def _single_exit(self) -> None:
        w, h = self.width, self.height
        if w < 2 or h < 2:
            return
        above = (h - 2) * w + (w - 1)
        left = (h - 1) * w + (w - 2)
        if self._cells[above] != FREE_CELL or self._cells[left] != FREE_CELL:
            return
        if random_between(self._rng, 0, 1) == 0:
            self._cells[left] = WALL
        else:
            self._cells[above] = WALL

    def generate(self) -> None:
        """Build a fresh maze, replacing whatever the board held."""
        self._reset()
        stack = [0]
        while not self._step(stack):
            pass
        if self.perfect:
            self._single_exit()
        else:
            self._break_walls()
        self._open(self.width * self.height - 1)

    def render(self) -> str:
        """Return the board as lines of cell symbols, without a final newline."""
        w = self.width
        return "\n".join(
            "".join(self._cells[start:start + w])
            for start in range(0, len(self._cells), w)
        )


def generate_maze(
    width: int,
    height: int,
    perfect: bool = False,
    rng: random.Random | None = None,
) -> str:
    """Generate a maze and return its text form."""
    generator = MazeGenerator(width, height, perfect, rng)
    generator.generate()
    return generator.render()


def main(argv: Sequence[str] | None = None) -> int:
    """Print a maze sized by the arguments ``WIDTH HEIGHT [perfect]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return EXIT_ERROR
    width, height = parse_number(args[0]), parse_number(args[1])
    if width < 1 or height < 1:
        return EXIT_ERROR
    perfect = len(args) == 3 and args[2] == "perfect"
    sys.stdout.write(generate_maze(width, height, perfect) + "\n")
    return EXIT_OK