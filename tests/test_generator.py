import random
from collections import deque

import pytest

from dante.generator import MazeGenerator, generate_maze, main


def _rows(text):
    return text.split("\n")


def _reachable_cells(rows, start):
    height, width = len(rows), len(rows[0])
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < width and 0 <= ny < height and (nx, ny) not in seen and rows[ny][nx] == "*":
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen


@pytest.mark.parametrize(("width", "height"), [(1, 1), (1, 12), (12, 1), (5, 5), (6, 9), (20, 13), (10, 10)])
@pytest.mark.parametrize("perfect", [False, True])
def test_shape_and_symbols(width, height, perfect):
    rows = _rows(generate_maze(width, height, perfect, random.Random(3)))
    assert len(rows) == height
    assert all(len(row) == width for row in rows)
    assert set("".join(rows)) <= {"X", "*"}
    assert rows[0][0] == "*"
    assert rows[-1][-1] == "*"


def test_single_cell_maze():
    assert generate_maze(1, 1, False, random.Random(0)) == "*"


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize(("width", "height"), [(5, 5), (8, 8), (7, 10), (10, 7), (15, 21), (1, 30)])
def test_imperfect_maze_is_solvable(seed, width, height):
    maze = generate_maze(width, height, False, random.Random(seed))
    rows = _rows(maze)
    assert len(rows) == height
    assert rows[-1][-1] == "*"
    assert (width - 1, height - 1) in _reachable_cells(rows, (0, 0))


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("size", [4, 6, 10, 16])
def test_perfect_even_maze_has_one_exit_entry(seed, size):
    rows = _rows(generate_maze(size, size, True, random.Random(seed)))
    neighbours = rows[size - 2][size - 1] + rows[size - 1][size - 2]
    assert sorted(neighbours) == ["*", "X"]
    assert (size - 1, size - 1) in _reachable_cells(rows, (0, 0))


def test_same_seed_same_maze():
    first = generate_maze(21, 17, False, random.Random(42))
    second = generate_maze(21, 17, False, random.Random(42))
    assert first == second


def test_imperfect_has_fewer_walls_than_perfect():
    perfect = generate_maze(31, 31, True, random.Random(7))
    imperfect = generate_maze(31, 31, False, random.Random(7))
    assert imperfect.count("X") < perfect.count("X")


def test_initial_board_parity_layout():
    rows = _rows(MazeGenerator(5, 7).render())
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            assert (cell == "*") == (x % 2 == 0 and y % 2 == 0)


def test_initial_even_board_opens_exit_corner():
    rows = _rows(MazeGenerator(6, 4).render())
    corner = rows[-2][-2:] + rows[-1][-2:]
    assert corner == "****"


def test_generate_twice_rebuilds_board():
    generator = MazeGenerator(11, 11, False, random.Random(5))
    generator.generate()
    first = generator.render()
    generator.generate()
    second = generator.render()
    assert len(_rows(second)) == 11
    assert (10, 10) in _reachable_cells(_rows(first), (0, 0))
    assert (10, 10) in _reachable_cells(_rows(second), (0, 0))


@pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ValueError):
        MazeGenerator(width, height)


def test_main_prints_maze(capsys):
    assert main(["7", "5"]) == 1
    out = capsys.readouterr().out
    assert out.endswith("\n")
    rows = out[:-1].split("\n")
    assert len(rows) == 5
    assert all(len(row) == 7 for row in rows)


def test_main_perfect(capsys):
    assert main(["6", "6", "perfect"]) == 1
    rows = capsys.readouterr().out.rstrip("\n").split("\n")
    assert sorted(rows[4][5] + rows[5][4]) == ["*", "X"]


@pytest.mark.parametrize("argv", [[], ["5"], ["0", "5"], ["5", "-3"], ["abc", "5"]])
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 84
    assert capsys.readouterr().out == ""