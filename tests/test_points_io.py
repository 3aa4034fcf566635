import pytest

from points_io import PointFileError, assignments_frame, load_points, write_assignments


def write(tmp_path, text, name="points.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_points(tmp_path):
    path = write(tmp_path, "0 0\n1 -2\n\n30   40\n")
    assert load_points(path) == ((0, 0), (1, -2), (30, 40))


def test_load_points_wide_line(tmp_path):
    big = 10 ** 15
    path = write(tmp_path, f"{big}{' ' * 500}{-big}\n1 1\n")
    assert load_points(path) == ((big, -big), (1, 1))


def test_load_points_empty_file(tmp_path):
    assert load_points(write(tmp_path, "")) == ()


def test_load_points_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_points(tmp_path / "nope.txt")


@pytest.mark.parametrize("text", [
    "1 2 3\n4 5 6\n",
    "1 x\n2 3\n",
    "1 2\n3\n",
    "1 2\n3 4 5\n",
    "1.5 2\n3 4\n",
])
def test_load_points_rejects_malformed(tmp_path, text):
    with pytest.raises(PointFileError):
        load_points(write(tmp_path, text))


def test_assignments_frame_is_one_indexed():
    df = assignments_frame(((3, 4), (5, 6)), [0, 1])
    assert df.values.tolist() == [[3, 4, 1], [5, 6, 2]]


def test_assignments_frame_length_mismatch():
    with pytest.raises(ValueError):
        assignments_frame(((3, 4),), [0, 1])


def test_write_assignments(tmp_path, capsys):
    out = tmp_path / "output.txt"
    assert write_assignments(((0, 0), (10, -1)), [1, 0], out) == out
    assert out.read_text().splitlines() == ["0 0 2", "10 -1 1"]
    assert "Wrote results to" in capsys.readouterr().out


def test_write_assignments_falls_back_to_stdout(tmp_path, capsys):
    assert write_assignments(((0, 0), (10, -1)), [1, 0], tmp_path) is None
    captured = capsys.readouterr()
    assert "printing to stdout" in captured.err
    assert captured.out.splitlines() == ["0 0 2", "10 -1 1"]


def test_load_points_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "points.txt"
    path.write_bytes(b"0 0\n1 1\n\xff\xfe 2\n5 5\n")
    with pytest.raises(PointFileError):
        load_points(path)


def test_load_points_rejects_values_past_int64(tmp_path):
    path = write(tmp_path, "0 0\n1 1\n10000000000000000000 2\n5 5\n")
    with pytest.raises(PointFileError, match="64-bit signed"):
        load_points(path)
