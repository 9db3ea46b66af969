import pytest

from ticklekit.pixelformat import PixelFormatKind, get_pixel_format


def test_rgba8_layout():
    fmt = get_pixel_format(PixelFormatKind.RGBA8)
    assert (fmt.red_shift, fmt.green_shift, fmt.blue_shift, fmt.alpha_shift) == (0, 8, 16, 24)
    assert fmt.bit_depth == 32
    assert fmt.bytes_per_pixel == 4


def test_bgr565_layout():
    fmt = get_pixel_format(PixelFormatKind.BGR565)
    assert (fmt.red_shift, fmt.red_bits) == (11, 5)
    assert (fmt.green_shift, fmt.green_bits) == (5, 6)
    assert fmt.alpha_bits == 0


def test_only_ci8_is_indexed():
    indexed = [k for k in PixelFormatKind if get_pixel_format(k).color_index]
    assert indexed == [PixelFormatKind.CI8]


@pytest.mark.parametrize("kind", list(PixelFormatKind))
def test_every_kind_resolves_and_fits(kind):
    fmt = get_pixel_format(kind)
    assert fmt.kind is kind
    total = fmt.red_bits + fmt.green_bits + fmt.blue_bits + fmt.alpha_bits
    assert total <= fmt.bit_depth or fmt.color_index


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        get_pixel_format("nope")