import numpy as np
import pytest

from numlab.datafile import read_table


def _write(tmp_path, text, name="data.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_three_columns_round_trip(tmp_path):
    rows = [(101.0, -1.5, 0.25), (102.5, 3.75, 1e-3), (125.3, 7.0, 2.0)]
    text = "".join(f"{x} \t {y} \t {z}\n" for x, y, z in rows)
    x, y, z = read_table(_write(tmp_path, text), 3)
    assert list(x) == [r[0] for r in rows]
    assert list(y) == [r[1] for r in rows]
    assert list(z) == [r[2] for r in rows]


def test_two_columns_round_trip(tmp_path):
    xs = np.linspace(0.0, 10.0, 7)
    ys = np.cos(xs)
    text = "".join(f"{a!r}\t{b!r}\n" for a, b in zip(xs, ys))
    read_x, read_y = read_table(_write(tmp_path, text), 2)
    np.testing.assert_array_equal(read_x, xs)
    np.testing.assert_array_equal(read_y, ys)


def test_limit_stops_reading(tmp_path):
    text = "1 2\n3 4\n5 6\n7 8\n"
    x, y = read_table(_write(tmp_path, text), 2, limit=2)
    assert list(x) == [1.0, 3.0]
    assert list(y) == [2.0, 4.0]


def test_limit_ignores_data_beyond_it(tmp_path):
    text = "1 2\n3 4\nnot numbers here\n"
    x, y = read_table(_write(tmp_path, text), 2, limit=2)
    assert len(x) == 2 and len(y) == 2


def test_limit_larger_than_file(tmp_path):
    x, y = read_table(_write(tmp_path, "1 2\n3 4\n"), 2, limit=20)
    assert len(x) == 2
    assert list(y) == [2.0, 4.0]


def test_whitespace_layout_is_irrelevant(tmp_path):
    x, y, z = read_table(_write(tmp_path, "1 2\n3\n\n4   5 6"), 3)
    assert list(x) == [1.0, 4.0]
    assert list(y) == [2.0, 5.0]
    assert list(z) == [3.0, 6.0]


def test_empty_file_gives_empty_columns(tmp_path):
    columns = read_table(_write(tmp_path, ""), 3)
    assert len(columns) == 3
    assert all(len(column) == 0 for column in columns)


def test_incomplete_row_raises(tmp_path):
    with pytest.raises(ValueError):
        read_table(_write(tmp_path, "1 2 3\n4 5\n"), 3)


def test_non_number_raises(tmp_path):
    with pytest.raises(ValueError):
        read_table(_write(tmp_path, "1 2 3\n4 five 6\n"), 3)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "absent.txt", 3)


def test_invalid_column_count_raises(tmp_path):
    with pytest.raises(ValueError):
        read_table(_write(tmp_path, "1 2\n"), 0)


def test_negative_limit_raises(tmp_path):
    with pytest.raises(ValueError):
        read_table(_write(tmp_path, "1 2\n"), 2, limit=-1)