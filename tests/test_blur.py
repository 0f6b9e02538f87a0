import pytest

from lowlevelkit.blur import (
    BlurPortion,
    Image,
    Kernel,
    Pixel,
    apply_kernel,
    blur_image,
    blur_portion,
)


def _gradient(w, h):
    return Image(w, h, [Pixel((x * 40) % 256, (y * 50) % 256, (x + y) * 10) for y in range(h) for x in range(w)])


def _ones(size):
    return Kernel(size, [[1.0] * size for _ in range(size)])


def test_blank_image_is_black():
    img = Image.blank(2, 3)
    assert img.pixels == [Pixel(0, 0, 0)] * 6


def test_identity_kernel_keeps_image():
    img = _gradient(4, 3)
    identity = Kernel(3, [[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    out = Image.blank(4, 3)
    blur_image(out, img, identity)
    assert out.pixels == img.pixels


def test_uniform_image_stays_uniform():
    img = Image(5, 4, [Pixel(9, 90, 200)] * 20)
    out = Image.blank(5, 4)
    blur_image(out, img, _ones(3))
    assert set(out.pixels) == {Pixel(9, 90, 200)}


def test_border_uses_only_inbounds_neighbours():
    img = Image(2, 1, [Pixel(0, 0, 0), Pixel(10, 20, 30)])
    out = Image.blank(2, 1)
    blur_image(out, img, _ones(3))
    assert out.pixels == [Pixel(5, 10, 15), Pixel(5, 10, 15)]


def test_blur_portion_only_touches_its_rectangle():
    img = _gradient(5, 4)
    kernel = _ones(3)
    full = Image.blank(5, 4)
    blur_image(full, img, kernel)
    part = Image.blank(5, 4)
    blur_portion(BlurPortion(img, part, 1, 1, 2, 2, kernel))
    for y in range(4):
        for x in range(5):
            idx = y * 5 + x
            if 1 <= x < 3 and 1 <= y < 3:
                assert part.pixels[idx] == full.pixels[idx]
            else:
                assert part.pixels[idx] == Pixel(0, 0, 0)


def test_clamped_kernel_limits_components():
    pixels = [Pixel(0, 0, 0)] * 9
    pixels[4] = Pixel(200, 200, 200)
    img = Image(3, 3, pixels)
    sharpen = Kernel(3, [[0, -1, 0], [-1, 5, -1], [0, -1, 0]])
    assert apply_kernel(img, sharpen, 1, 1, clamp=True) == Pixel(255, 255, 255)
    assert apply_kernel(img, sharpen, 1, 0, clamp=True) == Pixel(0, 0, 0)


def test_zero_weight_neighbourhood_raises():
    img = _gradient(3, 3)
    zero = Kernel(3, [[0.0] * 3 for _ in range(3)])
    with pytest.raises(ValueError):
        apply_kernel(img, zero, 1, 1)