import string

import pytest

from finderbot.bitmaps import KEYBOARD, ImageFormat, glyph_for


def test_keyboard_covers_alphabet():
    glyphs = [glyph_for(c) for c in string.ascii_lowercase]
    assert len(glyphs) == len(KEYBOARD) == 26
    assert glyph_for("z") == KEYBOARD[-1]


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_glyph_dimensions(letter):
    glyph = glyph_for(letter)
    assert (glyph.width, glyph.height) == (16, 16)
    assert glyph.length == 32


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_glyph_has_frame(letter):
    glyph = glyph_for(letter)
    assert all(glyph.is_set(x, 0) for x in range(glyph.width))
    assert all(glyph.is_set(x, glyph.height - 1) for x in range(glyph.width))
    assert all(glyph.is_set(0, y) and glyph.is_set(glyph.width - 1, y) for y in range(glyph.height))


def test_glyphs_are_distinct():
    datas = {glyph_for(c).data for c in string.ascii_lowercase}
    assert len(datas) == 26


def test_glyph_order_matches_letters():
    assert [glyph_for(c) for c in string.ascii_lowercase] == list(KEYBOARD)


def test_first_row_fully_set():
    assert glyph_for("a").row_bits(0) == 0xFFFF


def test_row_bits_match_data_bytes():
    glyph = glyph_for("m")
    for row in range(glyph.height):
        expected = (glyph.data[2 * row] << 8) | glyph.data[2 * row + 1]
        assert glyph.row_bits(row) == expected


@pytest.mark.parametrize("char", ["A", "{", "`", "1", " "])
def test_glyph_for_unknown_character(char):
    with pytest.raises(KeyError):
        glyph_for(char)


@pytest.mark.parametrize("text", ["", "ab"])
def test_glyph_for_requires_single_character(text):
    with pytest.raises(ValueError):
        glyph_for(text)


def test_custom_image_pixels():
    image = ImageFormat(8, 2, bytes([0b10000000, 0b00000001]))
    assert image.is_set(0, 0)
    assert not image.is_set(1, 0)
    assert image.is_set(7, 1)
    assert not image.is_set(0, 1)


def test_out_of_range_pixel():
    glyph = glyph_for("b")
    with pytest.raises(IndexError):
        glyph.is_set(16, 0)
    with pytest.raises(IndexError):
        glyph.is_set(0, 16)
    with pytest.raises(IndexError):
        glyph.row_bits(-1)


def test_short_data_rejected():
    with pytest.raises(ValueError):
        ImageFormat(16, 16, bytes(10))