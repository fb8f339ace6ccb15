import pytest

from solong.colors import lookup_color
from solong.xpm import (
    TRANSPARENT,
    XpmError,
    extract_strings,
    load_xpm,
    load_xpm_text,
    parse_xpm_lines,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
". c #FF0000",
"# c blue",
"  c None",
".# ",
" #."
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_strings():
    text = '/* XPM */\n"ab"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "XPM" not in result
    assert '"ab"' in result


def test_strip_comments_ignores_comments_in_strings():
    text = '"a/*b*/c" "d//e"'
    assert strip_comments(text) == text


def test_strip_line_comment():
    text = '// note\n"x"'
    assert extract_strings(strip_comments(text)) == ["x"]


def test_extract_strings_drops_unterminated():
    assert extract_strings('"a" , "b" "c') == ["a", "b"]


def test_load_sample():
    image = load_xpm_text(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == lookup_color("blue")
    assert image.pixel(2, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(2, 1) == 0xFF0000


def test_rows_have_width():
    image = load_xpm_text(SAMPLE)
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)


def test_pixel_out_of_range():
    image = load_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_two_word_colour_name():
    image = parse_xpm_lines(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_three_chars_per_pixel_first_definition_wins():
    lines = ["2 1 3 3", "aaa c red", "bbb c green", "aaa c blue", "bbbaaa"]
    image = parse_xpm_lines(lines)
    assert image.pixel(0, 0) == lookup_color("green")
    assert image.pixel(1, 0) == lookup_color("red")


def test_one_char_per_pixel_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_undefined_key_and_unknown_colour_give_zero():
    image = parse_xpm_lines(["2 1 1 1", "a c nosuchcolour", "ab"])
    assert image.pixels == ((0, 0),)


@pytest.mark.parametrize("header", ["0 1 1 1", "1 1 1", "x 1 1 1", "1 -2 1 1"])
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm_lines([header, "a c red", "a"])


def test_empty_input():
    with pytest.raises(XpmError):
        parse_xpm_lines([])


def test_colour_line_without_c_key():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a s red", "a"])


def test_colour_line_with_c_but_no_value():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a c", "a"])


def test_missing_pixel_rows():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "a c red", "a"])


def test_load_xpm_file(tmp_path):
    path = tmp_path / "sprite.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == load_xpm_text(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")