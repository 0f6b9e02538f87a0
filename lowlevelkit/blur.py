"""Gaussian-style convolution blur over RGB images."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pixel:
    """An RGB pixel with 8-bit components."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass
class Image:
    """A row-major image of ``w`` by ``h`` pixels."""

    w: int
    h: int
    pixels: list[Pixel] = field(default_factory=list)

    @classmethod
    def blank(cls, w: int, h: int) -> "Image":
        """Return a black image of the given size."""
        return cls(w, h, [Pixel() for _ in range(w * h)])


@dataclass
class Kernel:
    """A square convolution kernel."""

    size: int
    matrix: list[list[float]]


@dataclass
class BlurPortion:
    """A rectangle of ``img`` to blur into ``img_blur``."""

    img: Image
    img_blur: Image
    x: int
    y: int
    w: int
    h: int
    kernel: Kernel


def _to_byte(value: float, clamp: bool) -> int:
    if clamp:
        return int(min(max(value, 0.0), 255.0))
    return int(value) & 0xFF


def apply_kernel(img: Image, kernel: Kernel, px: int, py: int, clamp: bool = True) -> Pixel:
    """Convolve the kernel around ``(px, py)``, using only in-bounds neighbours.

    The weighted sum is normalised by the sum of the weights that were used.
    With ``clamp`` the components are limited to 0..255 before truncation.
    """
    half = kernel.size // 2
    sum_r = sum_g = sum_b = total = 0.0
    for ky in range(-half, half + 1):
        ny = py + ky
        if not 0 <= ny < img.h:
            continue
        row = kernel.matrix[ky + half]
        for kx in range(-half, half + 1):
            nx = px + kx
            if not 0 <= nx < img.w:
                continue
            weight = row[kx + half]
            pixel = img.pixels[ny * img.w + nx]
            sum_r += pixel.r * weight
            sum_g += pixel.g * weight
            sum_b += pixel.b * weight
            total += weight
    if total == 0:
        raise ValueError(f"kernel weights sum to zero around ({px}, {py})")
    return Pixel(
        _to_byte(sum_r / total, clamp),
        _to_byte(sum_g / total, clamp),
        _to_byte(sum_b / total, clamp),
    )


def blur_portion(portion: BlurPortion | None) -> None:
    """Blur one rectangle of the source image into the destination image."""
    if portion is None:
        return
    img = portion.img
    for y in range(portion.y, portion.y + portion.h):
        for x in range(portion.x, portion.x + portion.w):
            portion.img_blur.pixels[y * img.w + x] = apply_kernel(
                img, portion.kernel, x, y, clamp=False
            )


def blur_image(img_blur: Image | None, img: Image | None, kernel: Kernel | None) -> None:
    """Blur the whole of ``img`` into ``img_blur``."""
    if img_blur is None or img is None or kernel is None:
        return
    for y in range(img.h):
        for x in range(img.w):
            img_blur.pixels[y * img.w + x] = apply_kernel(img, kernel, x, y, clamp=True)