"""Drawing of the small tray icon that shows the temperature."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 24
DEGREE_MARK = "o"

RGB = tuple[float, float, float]


class Style(enum.Enum):
    """Colour scheme of the icon."""

    DEFAULT = ""
    DARK = "d"
    LIGHT = "l"


@dataclass(frozen=True)
class Palette:
    """Gradient, text colour and text sizes for one icon."""

    start: RGB
    end: RGB
    foreground: RGB
    font_size: float = 14.0
    degree_size: float = 8.0


def palette_for(style: Style, temp: int) -> Palette:
    """Choose colours and sizes for *temp* degrees in the given style."""
    start: RGB = (0.0, 0.0, 0.0)
    end: RGB = (0.0, 0.0, 0.0)
    if style is Style.DARK:
        start, end, foreground = (0.1, 0.1, 0.1), (0.4, 0.4, 0.4), (0.9, 0.9, 0.9)
    elif style is Style.LIGHT:
        start, end, foreground = (1.0, 1.0, 1.0), (0.7, 0.7, 0.7), (0.1, 0.1, 0.1)
    else:
        if temp < 46:
            start, end = (0.4, 0.9, 0.9), (0.2, 0.7, 0.7)
        elif temp <= 70:
            start, end = (0.4, 0.9, 0.4), (0.4, 0.7, 0.4)
        elif temp <= 80:
            start, end = (0.6, 0.3, 0.1), (0.8, 0.5, 0.1)
        foreground = (0.1, 0.1, 0.1)
    if temp > 80:
        start, end = (0.9, 0.4, 0.4), (0.7, 0.4, 0.4)
    if temp > 99:
        return Palette(start, end, foreground, font_size=10.0, degree_size=6.0)
    return Palette(start, end, foreground)


def _to_byte(rgb: RGB, alpha: int = 255) -> tuple[int, int, int, int]:
    return (*(round(channel * 255) for channel in rgb), alpha)


def _font(size: float):
    for name in ("DejaVuSans.ttf", "Arial.ttf", "LiberationSans-Regular.ttf"):
        try:
            return ImageFont.truetype(name, round(size))
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def _draw_text(draw: ImageDraw.ImageDraw, origin, text, size, fill) -> None:
    """Draw *text* with *origin* on its baseline."""
    font = _font(size)
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text(origin, text, font=font, fill=fill, anchor="ls")
    else:
        x, y = origin
        draw.text((x, y - size), text, font=font, fill=fill)


def _gradient(start: RGB, end: RGB, size: int) -> Image.Image:
    first, last = _to_byte(start), _to_byte(end)
    image = Image.new("RGBA", (size, size))

    def colour(x: int, y: int):
        t = min(max((x + 0.5 + y + 0.5) / (2 * size), 0.0), 1.0)
        return tuple(round(a + (b - a) * t) for a, b in zip(first, last))

    image.putdata([colour(x, y) for y in range(size) for x in range(size)])
    return image


def render_icon(temp: int, style: Style = Style.DEFAULT, path=None) -> Image.Image:
    """Draw the icon for *temp*; save it as PNG to *path* when given."""
    palette = palette_for(style, temp)
    size = ICON_SIZE
    radius = (size / 10.0) / 0.6

    mask = Image.new("L", (size, size), 0)
    ImageDraw.Draw(mask).rounded_rectangle(
        (0, 0, size - 1, size - 1), radius=math.floor(radius), fill=255
    )
    icon = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    icon.paste(_gradient(palette.start, palette.end, size), (0, 0), mask)

    draw = ImageDraw.Draw(icon)
    foreground = _to_byte(palette.foreground)
    _draw_text(draw, (1, 17), str(temp), palette.font_size, foreground)
    _draw_text(draw, (18, 11), DEGREE_MARK, palette.degree_size, foreground)

    if path is not None:
        icon.save(Path(path), format="PNG")
    return icon