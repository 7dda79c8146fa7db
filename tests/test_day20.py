import pytest

from aoc2021.day20 import Image, Solver, enhance, parse_input

ALGORITHM = "..#.#..#####.#.#.#.###.##.....###.##.#..###.####..#####..#....#..#..##..###..######.###...####..#..#####..##..#.#####...##.#.#..#.##..#.#......#.###.######.###.####...#.##.##..#..#..#####.....#.#....###..#.##......#.....#..#..#..##..#...##.######.####.####.#.#...#.......#..#.#.#...####.##.#......#..#...##.#.##..#...##.#.##..###.#......#.#.......#.#.#.####.###.##...#.....####.#..#..#.##.#....##..#.####....##...##..#...#......#.#.......#.......##..####..#...#.#.#...##..#.#..###..#####........#..####......#..#"

EXAMPLE = ALGORITHM + "\n\n#..#.\n#....\n##..#\n..#..\n..###\n"


def test_parse_input():
    algorithm, image = parse_input(EXAMPLE)
    assert len(algorithm) == 512
    assert len(image.grid) == 10


@pytest.mark.parametrize("count, lit", [(1, 24), (2, 35), (50, 3351)])
def test_enhance(count, lit):
    algorithm, image = parse_input(EXAMPLE)
    result = enhance(image, algorithm, count)
    assert len(result.grid) == lit
    assert result.iterations == count


def test_solver():
    solver = Solver(EXAMPLE)
    assert solver.part1() == "35"
    assert solver.part2() == "3351"


def test_str():
    image = Image.from_text("#.\n.#\n")
    assert str(image) == (
        "rows: 0..2, cols: 0..2, iterations; 0, lit pixels: 2 background: false\n"
        "#.\n.#\n"
    )


def test_empty_image_cannot_be_enhanced():
    algorithm, _ = parse_input(EXAMPLE)
    with pytest.raises(ValueError):
        Image.from_text("...\n").enhance(algorithm)


def test_short_algorithm_rejected():
    with pytest.raises(ValueError):
        Image.from_text("#\n").enhance([True, False])