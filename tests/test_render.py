import pytest

from campominado.render import (
    column_header,
    render_solution,
    render_solution_plain,
    render_view,
    row_label,
)


def test_column_header_small():
    assert column_header(3) == "     1  2  3 "


def test_column_header_empty():
    assert column_header(0) == "    "


def test_column_header_two_digit_columns():
    header = column_header(12)
    assert header.endswith(" 9 10 11 12")
    assert header.split() == [str(n) for n in range(1, 13)]


@pytest.mark.parametrize("index", range(30))
def test_row_label_width_and_number(index):
    label = row_label(index)
    assert len(label) == 4
    assert label.startswith(" ")
    assert label.strip() == str(index + 1)


def test_render_view_structure():
    view = [["x", "1", "x"], ["0", "x", "B"], ["x", "x", "x"]]
    text = render_view(view)
    lines = text.split("\n")
    assert text.endswith("\n")
    assert lines[-1] == ""
    assert lines[0] == column_header(3)
    for index, row in enumerate(view):
        line = lines[index + 1]
        assert line.startswith(row_label(index))
        assert line[4:].split() == row
        assert len(line) == 4 + 3 * len(row)


def test_render_solution_rows_have_equal_width():
    grid = [[-1, 1, 0], [1, 1, 0], [0, 0, 0]]
    lines = render_solution(grid).splitlines()
    assert lines[0] == column_header(3)
    widths = {len(line) for line in lines[1:]}
    assert widths == {4 + 3 * 3}
    assert lines[1].startswith(row_label(0) + "-1 ")


def test_render_solution_values_round_trip():
    grid = [[-1, 2, -1, 1], [1, 2, 1, 1], [0, 0, 0, 0], [0, 0, 1, -1]]
    lines = render_solution(grid).splitlines()
    parsed = [[int(tok) for tok in line[4:].split()] for line in lines[1:]]
    assert parsed == grid


def test_render_solution_plain_round_trip():
    grid = [[0, 1, -1], [0, 1, 1], [0, 0, 0]]
    text = render_solution_plain(grid)
    lines = text.splitlines()
    assert len(lines) == 3
    assert [[int(tok) for tok in line.split()] for line in lines] == grid
    assert lines[0].endswith("-1 ")


def test_render_solution_plain_empty():
    assert render_solution_plain([]) == ""