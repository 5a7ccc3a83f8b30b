import pytest

from fdfview.heightmap import (
    HeightMap,
    MapError,
    count_words,
    get_map_dimensions,
    is_valid_file,
    load_map,
)


def _write(tmp_path, text, name="map.fdf"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "words", [["1", "2", "3"], ["10"], ["-4", "0", "7", "12", "3"]]
)
def test_count_words_matches_joined_words(words):
    assert count_words(" ".join(words) + "\n", " ") == len(words)


def test_count_words_ignores_repeated_delimiters():
    words = ["5", "6"]
    assert count_words("   " + "    ".join(words) + "   ", " ") == len(words)


def test_count_words_empty_and_newline_only():
    assert count_words("", " ") == 0
    assert count_words("\n", " ") == 0


def test_count_words_rejects_long_delimiter():
    with pytest.raises(ValueError):
        count_words("1 2", "  ")


def test_get_map_dimensions_uses_widest_row(tmp_path):
    rows = [["0", "1"], ["2", "3", "4", "5"], ["6"]]
    path = _write(tmp_path, "".join(" ".join(r) + "\n" for r in rows))
    width, height = get_map_dimensions(path)
    assert width == max(len(r) for r in rows)
    assert height == len(rows)


def test_get_map_dimensions_missing_file(tmp_path):
    with pytest.raises(MapError):
        get_map_dimensions(tmp_path / "absent.fdf")


def test_is_valid_file(tmp_path):
    path = _write(tmp_path, "0\n")
    assert is_valid_file(path) is True
    assert is_valid_file(tmp_path / "absent.fdf") is False


def test_allocate_zero_filled():
    height_map = HeightMap.allocate(4, 2)
    assert height_map.width == 4
    assert height_map.height == 2
    assert height_map.z_matrix == [[0, 0, 0, 0], [0, 0, 0, 0]]


def test_allocate_rows_are_independent():
    height_map = HeightMap.allocate(2, 2)
    height_map.z_matrix[0][0] = 9
    assert height_map.z_matrix[1][0] == 0


def test_allocate_rejects_negative():
    with pytest.raises(ValueError):
        HeightMap.allocate(-1, 3)


def test_load_map_round_trip(tmp_path):
    grid = [[0, 0, 0], [0, 10, 0], [-5, 0, 0]]
    path = _write(tmp_path, "".join(" ".join(map(str, r)) + "\n" for r in grid))
    height_map = load_map(path)
    assert height_map.z_matrix == grid
    assert height_map.z_min == -5
    assert height_map.z_max == 10
    assert height_map.z_range == height_map.z_max - height_map.z_min


def test_load_ignores_extra_rows_and_columns(tmp_path):
    path = _write(tmp_path, "1 2 3\n4 5 6\n")
    height_map = HeightMap.allocate(2, 1).load(path)
    assert height_map.z_matrix == [[1, 2]]


def test_short_rows_leave_zeros(tmp_path):
    path = _write(tmp_path, "1 2 3\n4\n")
    height_map = load_map(path)
    assert height_map.z_matrix == [[1, 2, 3], [4, 0, 0]]


def test_load_reads_leading_number_of_each_word(tmp_path):
    path = _write(tmp_path, "3,0xFF -7\n")
    height_map = load_map(path)
    assert height_map.z_matrix == [[3, -7]]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        HeightMap.allocate(1, 1).load(tmp_path / "absent.fdf")


def test_stats_all_negative(tmp_path):
    path = _write(tmp_path, "-3 -9\n-4 -6\n")
    height_map = load_map(path)
    assert height_map.z_min == -9
    assert height_map.z_max == -3


def test_compute_stats_on_empty_map_keeps_defaults():
    height_map = HeightMap.allocate(0, 0)
    height_map.compute_stats()
    assert (height_map.z_min, height_map.z_max, height_map.z_range) == (0, 0, 0)