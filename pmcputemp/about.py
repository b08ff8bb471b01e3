"""The 'About' picture and window."""

from __future__ import annotations

import gettext
import os

from PIL import Image, ImageDraw, ImageFont

from pmcputemp.cpuinfo import PRG, VER

_ = gettext.translation("pmcputemp", localedir="/usr/share/locale", fallback=True).gettext

WIDTH = 320
HEIGHT = 180
DATE = "2025"
SANS_FONT = "Sans"
CJK_FONT = "wenquanyi micro hei"
_CJK_LANGUAGES = ("zh", "ja", "ko")

_FONT_FILES = {
    SANS_FONT: ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf"),
    CJK_FONT: (
        "wqy-microhei.ttc",
        "wqy-zenhei.ttc",
        "DejaVuSans.ttf",
        "LiberationSans-Regular.ttf",
    ),
}

RGB = tuple[float, float, float]


def lang_font(lang=None) -> str:
    """Return the font family that suits the language in *lang* (or $LANG)."""
    if lang is None:
        lang = os.environ.get("LANG", "")
    return CJK_FONT if lang[:2] in _CJK_LANGUAGES else SANS_FONT


def _font(family: str, size: float):
    for name in _FONT_FILES.get(family, _FONT_FILES[SANS_FONT]):
        try:
            return ImageFont.truetype(name, round(size))
        except OSError:
            continue
    try:
        return ImageFont.load_default(size=size)
    except TypeError:
        return ImageFont.load_default()


def _draw_text(draw: ImageDraw.ImageDraw, origin, text, family, size) -> None:
    """Draw black *text* with *origin* on its baseline."""
    font = _font(family, size)
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text(origin, text, font=font, fill=(0, 0, 0), anchor="ls")
    else:
        x, y = origin
        draw.text((x, y - size), text, font=font, fill=(0, 0, 0))


def _to_bytes(rgb: RGB) -> tuple[int, int, int]:
    return tuple(round(channel * 255) for channel in rgb)


def _gradient(start: RGB, end: RGB, width: int, height: int) -> Image.Image:
    """A linear gradient from the top-left to the bottom-right corner."""
    first, last = _to_bytes(start), _to_bytes(end)
    norm = width * width + height * height

    def colour(x: int, y: int):
        t = ((x + 0.5) * width + (y + 0.5) * height) / norm
        t = min(max(t, 0.0), 1.0)
        return tuple(round(a + (b - a) * t) for a, b in zip(first, last))

    image = Image.new("RGB", (width, height))
    image.putdata([colour(x, y) for y in range(height) for x in range(width)])
    return image


def render_about(supported=True, lang=None) -> Image.Image:
    """Draw the about picture; *supported* False gives the 'does not work' variant."""
    if supported:
        start, end = (0.2, 0.9, 0.9), (0.4, 0.6, 0.6)
        description = _("A simple tray cpu temperature monitor")
    else:
        start, end = (0.6, 0.3, 0.1), (0.8, 0.5, 0.1)
        description = _("unfortunately does not work on your system")
    family = lang_font(lang)
    image = _gradient(start, end, WIDTH, HEIGHT)
    draw = ImageDraw.Draw(image)
    _draw_text(draw, (72, 40), f"{PRG} {VER}", family, 20.0)
    _draw_text(draw, (27, 81), description, family, 13.0)
    _draw_text(draw, (138, 140), DATE, family, 13.0)
    return image


def _about_window(master, supported=True):
    """Open the about picture in a new window belonging to *master*."""
    import tkinter as tk

    from PIL import ImageTk

    window = tk.Toplevel(master)
    window.title(PRG)
    photo = ImageTk.PhotoImage(render_about(supported), master=window)
    label = tk.Label(window, image=photo, borderwidth=0)
    label.image = photo
    label.pack()
    return window


def show_about(supported=True) -> None:
    """Show the about window and wait until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    root.withdraw()
    window = _about_window(root, supported)
    window.protocol("WM_DELETE_WINDOW", root.destroy)
    root.mainloop()