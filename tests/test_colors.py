import pytest

from solong.colors import lookup_color, parse_text_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("none", -1),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("WHITE") == lookup_color("white")
    assert lookup_color("None") == -1


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_numbered_first_variant_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("bisque1") == lookup_color("bisque")


def test_parse_hex_color():
    assert parse_text_color("#FF0000") == 0xFF0000
    assert parse_text_color("#ff0000", "ignored") == 0xFF0000


def test_parse_hex_stops_at_non_digit():
    assert parse_text_color("#12zz") == 0x12


def test_parse_hex_without_digits_is_zero():
    assert parse_text_color("#") == 0
    assert parse_text_color("#xyz") == 0


def test_parse_two_word_name():
    assert parse_text_color("ghost", "white") == lookup_color("ghost white")


def test_parse_single_word_name():
    assert parse_text_color("Red") == lookup_color("red")
    assert parse_text_color("None") == -1


def test_parse_unknown_name_is_zero():
    assert parse_text_color("nonexistent") == 0
    assert parse_text_color("white", "nonsense") == 0


def test_parse_matches_lookup_for_single_words():
    for name in ("blue", "gold", "orchid4", "gray50"):
        assert parse_text_color(name) == lookup_color(name)