import pytest

from so_long.mapfile import (
    INVALID_ERROR,
    READ_ERROR,
    MapError,
    first_and_last_is_one,
    is_all_one,
    is_rectangular,
    read_map,
    validate_map,
)

VALID = "11111\n1PCE1\n11111\n"


def _lines(text):
    return text.splitlines(keepends=True)


def test_read_map_round_trip(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(VALID)
    lines = read_map(path)
    assert "".join(lines) == VALID
    assert len(lines) == VALID.count("\n")


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        read_map(tmp_path / "absent.ber")
    assert str(info.value) == READ_ERROR


def test_valid_map_counts_collectables():
    assert validate_map(_lines(VALID)) == 1
    text = "1111111\n1PCCCE1\n1000001\n1111111\n"
    assert validate_map(_lines(text)) == text.count("C")


def test_read_then_validate(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(VALID)
    assert validate_map(read_map(path)) == VALID.count("C")


@pytest.mark.parametrize(
    "text",
    [
        "11111\n10CE1\n11111\n",  # no player
        "111111\n1PPCE1\n111111\n",  # two players
        "111111\n1PCEE1\n111111\n",  # two exits
        "11111\n1P0E1\n11111\n",  # no collectable
        "11111\n1PCE1\n1111\n",  # not rectangular
        "11111\n1PCE1\n11111",  # last row lacks its newline
        "11111\nPC0E1\n11111\n",  # hole in the left wall
        "11111\n1PCE0\n11111\n",  # hole in the right wall
        "11011\n1PCE1\n11111\n",  # hole in the top wall
        "11111\n1PCE1\n10111\n",  # hole in the bottom wall
    ],
)
def test_invalid_maps(text):
    with pytest.raises(MapError) as info:
        validate_map(_lines(text))
    assert str(info.value) == INVALID_ERROR


def test_empty_map_is_invalid():
    with pytest.raises(MapError):
        validate_map([])


def test_is_all_one():
    assert is_all_one("111\n") is True
    assert is_all_one("111") is True
    assert is_all_one("101\n") is False
    assert is_all_one("\n") is True


def test_first_and_last_is_one():
    assert first_and_last_is_one("1001\n") is True
    assert first_and_last_is_one("0001\n") is False
    assert first_and_last_is_one("1000\n") is False
    assert first_and_last_is_one("\n") is False


def test_is_rectangular():
    assert is_rectangular(_lines(VALID)) is True
    assert is_rectangular(["111\n", "11\n"]) is False
    assert is_rectangular([]) is False